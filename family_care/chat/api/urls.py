from django.urls import re_path

from .views import ConversationView
from .views import SendMessageView

urlpatterns = [
    re_path(r"^messages/?$", SendMessageView.as_view(), name="message-send"),
    re_path(
        r"^messages/(?P<contact_id>[^/]+)/?$",
        ConversationView.as_view(),
        name="message-history",
    ),
]
