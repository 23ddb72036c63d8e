from django.contrib import admin

from family_care.contacts import models


@admin.register(models.Contact)
class ContactAdmin(admin.ModelAdmin):
    list_display = ["id", "user", "contact_user", "created_at"]
    search_fields = ["user__phone", "contact_user__phone"]
    list_filter = ["created_at"]
