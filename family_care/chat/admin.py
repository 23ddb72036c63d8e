from django.contrib import admin

from family_care.chat import models


@admin.register(models.Message)
class MessageAdmin(admin.ModelAdmin):
    list_display = ["id", "sender", "recipient", "is_group", "created_at"]
    search_fields = ["content", "sender__phone", "recipient__phone"]
    list_filter = ["is_group", "created_at"]
