from django.urls import include
from django.urls import path

app_name = "api"
urlpatterns = [
    path("auth/", include("family_care.users.api.urls")),
    path("", include("family_care.contacts.api.urls")),
    path("", include("family_care.chat.api.urls")),
    path("", include("family_care.exercises.api.urls")),
    path("", include("family_care.notifications.api.urls")),
    path("", include("family_care.support.api.urls")),
]
