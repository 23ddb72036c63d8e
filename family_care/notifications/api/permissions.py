from rest_framework.permissions import BasePermission

from family_care.users.models import User


class IsFamilyMember(BasePermission):
    """Allow access only to users signed up with the family role."""

    def has_permission(self, request, view):
        u = getattr(request, "user", None)
        if not (u and getattr(u, "is_authenticated", False)):
            return False
        return getattr(u, "role", None) == User.Role.FAMILY
