from django.contrib import admin

from .models import OneTimePassword
from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ["id", "phone", "first_name", "last_name", "role", "is_staff"]
    list_filter = ["role", "is_staff", "is_active"]
    search_fields = ["phone", "first_name", "last_name"]
    exclude = ["password", "groups", "user_permissions"]
    ordering = ["id"]


@admin.register(OneTimePassword)
class OneTimePasswordAdmin(admin.ModelAdmin):
    list_display = ["phone", "expires_at"]
    search_fields = ["phone"]
