from django.urls import re_path

from .views import SupportThreadView

urlpatterns = [
    re_path(r"^support/?$", SupportThreadView.as_view(), name="support"),
]
