from django.urls import re_path

from .views import LogoutView
from .views import MeView
from .views import RequestOtpView
from .views import VerifyOtpView

urlpatterns = [
    re_path(r"^request-otp/?$", RequestOtpView.as_view(), name="request-otp"),
    re_path(r"^verify-otp/?$", VerifyOtpView.as_view(), name="verify-otp"),
    re_path(r"^me/?$", MeView.as_view(), name="me"),
    re_path(r"^logout/?$", LogoutView.as_view(), name="logout"),
]
