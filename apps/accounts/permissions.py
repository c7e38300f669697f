"""
Custom permission classes shared across apps.

Members log in only once approved; administrative endpoints additionally
require the ``admin`` role.
"""
from rest_framework.permissions import BasePermission


class IsApprovedMember(BasePermission):
    """Allow access only to authenticated, approved members."""

    message = 'Your account is pending approval.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_approved)


class IsAdminMember(BasePermission):
    """Allow access only to members with the admin role."""

    message = 'Only administrators can perform this action.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_admin)
