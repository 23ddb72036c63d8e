from rest_framework import serializers

from family_care.exercises.models import Exercise


class ExerciseSerializer(serializers.ModelSerializer):
    """Exercise rows keep their storage column names."""

    user_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Exercise
        fields = (
            "id",
            "user_id",
            "date",
            "exercise_type",
            "duration_min",
            "fatigue_level",
            "difficulty",
            "created_at",
        )
        read_only_fields = fields
