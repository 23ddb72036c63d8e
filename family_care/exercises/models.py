from django.conf import settings
from django.db import models


class Exercise(models.Model):
    """One logged exercise session.

    - ``date`` is the UTC calendar day the session was logged
    - ``duration_min`` is whole minutes, never negative
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="exercises",
    )
    date = models.DateField(db_index=True)
    exercise_type = models.CharField(max_length=100)
    duration_min = models.PositiveIntegerField()
    fatigue_level = models.IntegerField(null=True, blank=True)
    difficulty = models.CharField(max_length=50, null=True, blank=True)  # noqa: DJ001
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-date", "-id"]

    def __str__(self) -> str:  # pragma: no cover - simple repr
        return f"Exercise({self.user_id}@{self.date}: {self.exercise_type})"
