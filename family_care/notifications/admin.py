from django.contrib import admin

from family_care.notifications import models


@admin.register(models.NotificationSettings)
class NotificationSettingsAdmin(admin.ModelAdmin):
    list_display = [
        "user",
        "elderly_notify_exercise",
        "elderly_notify_checkup",
        "family_notify_parent_done",
    ]
    list_filter = [
        "elderly_notify_exercise",
        "elderly_notify_checkup",
        "family_notify_parent_done",
    ]
    search_fields = ["user__phone", "user__first_name", "user__last_name"]
