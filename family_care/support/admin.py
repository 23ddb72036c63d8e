from django.contrib import admin

from family_care.support import models


@admin.register(models.SupportMessage)
class SupportMessageAdmin(admin.ModelAdmin):
    list_display = ["id", "user", "role", "is_bot", "created_at"]
    search_fields = ["content", "user__phone"]
    list_filter = ["is_bot", "role", "created_at"]
