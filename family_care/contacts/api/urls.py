from django.urls import re_path

from .views import AddContactView
from .views import ContactListView

urlpatterns = [
    re_path(r"^contacts/?$", ContactListView.as_view(), name="contact-list"),
    re_path(r"^contacts/add/?$", AddContactView.as_view(), name="contact-add"),
]
