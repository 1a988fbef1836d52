"""
Role based permission classes
"""
import hmac

from django.conf import settings
from rest_framework import permissions


def _has_role(user, *roles):
    return bool(user and user.is_authenticated and getattr(user, 'role', None) in roles)


class IsPatient(permissions.BasePermission):
    """Only patients"""

    def has_permission(self, request, view):
        return _has_role(request.user, 'patient')


class IsSystemAdmin(permissions.BasePermission):
    """Only the clinic administrator"""
    def has_permission(self, request, view):
        return _has_role(request.user, 'admin')


class IsFrontDesk(permissions.BasePermission):
    """Receptionist or admin"""

    def has_permission(self, request, view):
        return _has_role(request.user, 'receptionist', 'admin')


class IsQueueOperator(permissions.BasePermission):
    """Staff allowed to manage the waiting queue"""

    def has_permission(self, request, view):
        return _has_role(request.user, 'receptionist', 'admin', 'nurse')


class IsClinicalStaff(permissions.BasePermission):
    """Any staff member: doctor, nurse, receptionist or admin"""

    def has_permission(self, request, view):
        return _has_role(request.user, 'doctor', 'nurse', 'receptionist', 'admin')


class IsOwnerOrFrontDesk(permissions.BasePermission):
    """Reservation owner, receptionist or admin"""

    def has_object_permission(self, request, view, obj):
        if _has_role(request.user, 'receptionist', 'admin'):
            return True
        return getattr(obj, 'patient_id', None) == request.user.id


class HasCronSecret(permissions.BasePermission):
    """
    Scheduled job trigger. Accepts `Authorization: Bearer <CRON_SECRET>`
    or `X-Cron-Secret: <CRON_SECRET>`. Without a configured secret the
    trigger is open only in DEBUG.
    """
    message = 'Invalid cron secret'

    def has_permission(self, request, view):
        secret = getattr(settings, 'CRON_SECRET', '')
        if not secret:
            return bool(settings.DEBUG)

        auth = request.META.get('HTTP_AUTHORIZATION', '')
        bearer = auth[len('Bearer '):] if auth.startswith('Bearer ') else ''
        header = request.META.get('HTTP_X_CRON_SECRET', '')
        return any(
            candidate and hmac.compare_digest(candidate, secret)
            for candidate in (bearer, header)
        )


class IsOwnerOrClinicalStaff(permissions.BasePermission):
    """Reservation owner or any staff member"""

    def has_object_permission(self, request, view, obj):
        if _has_role(request.user, 'doctor', 'nurse', 'receptionist', 'admin'):
            return True
        return getattr(obj, 'patient_id', None) == request.user.id
