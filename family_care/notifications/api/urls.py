from django.urls import re_path

from .views import NotificationSettingsView
from .views import NotifyParentView

urlpatterns = [
    re_path(r"^settings/?$", NotificationSettingsView.as_view(), name="settings"),
    re_path(r"^notify/parent/?$", NotifyParentView.as_view(), name="notify-parent"),
]
