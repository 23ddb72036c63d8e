from django.contrib import admin

from family_care.exercises import models


@admin.register(models.Exercise)
class ExerciseAdmin(admin.ModelAdmin):
    list_display = [
        "id",
        "user",
        "date",
        "exercise_type",
        "duration_min",
        "fatigue_level",
        "difficulty",
    ]
    search_fields = ["exercise_type", "user__phone"]
    list_filter = ["date", "exercise_type"]
