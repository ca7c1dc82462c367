"""Permission classes shared by storefront APIs."""

from __future__ import annotations

from rest_framework import permissions  # type: ignore


def is_admin(user) -> bool:
    if not user or not user.is_authenticated:
        return False
    if getattr(user, "is_staff", False) or getattr(user, "is_superuser", False):
        return True
    return getattr(user, "role", None) == "admin"


class IsAdmin(permissions.BasePermission):
    """Only administrators."""

    def has_permission(self, request, view) -> bool:  # type: ignore
        return is_admin(request.user)


class IsAdminOrReadOnly(permissions.BasePermission):
    """Anyone may read; writes require an administrator."""

    def has_permission(self, request, view) -> bool:  # type: ignore
        if request.method in permissions.SAFE_METHODS:
            return True
        return is_admin(request.user)


class IsOwnerOrAdmin(permissions.BasePermission):
    """Object-level: the record's ``user`` or an administrator."""

    def has_object_permission(self, request, view, obj) -> bool:  # type: ignore
        user = request.user
        if not user.is_authenticated:
            return False
        if is_admin(user):
            return True
        return getattr(obj, "user_id", None) == user.id
