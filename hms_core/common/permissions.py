# hms_core/common/permissions.py

from __future__ import annotations

from typing import Set

from rest_framework.permissions import BasePermission

# Group/role names (Django auth Group names)
ROLE_ADMIN = "ADMIN"
ROLE_DOCTOR = "DOCTOR"
ROLE_PATIENT = "PATIENT"

ALL_ROLES = (ROLE_ADMIN, ROLE_DOCTOR, ROLE_PATIENT)

# Marker for actions that need no authenticated identity at all.
PUBLIC = "__public__"


def user_roles(user) -> Set[str]:
    """
    Resolve roles from Django groups. Superuser/staff is treated as ADMIN.
    Unknown group names are ignored.
    """
    roles: Set[str] = set()

    if not user or not getattr(user, "is_authenticated", False):
        return roles

    if getattr(user, "is_superuser", False) or getattr(user, "is_staff", False):
        roles.add(ROLE_ADMIN)

    if hasattr(user, "groups"):
        roles.update(n for n in user.groups.values_list("name", flat=True) if n in ALL_ROLES)

    return roles


class BaseRolePermission(BasePermission):
    """
    Role-based access control keyed by view action.

    - PUBLIC actions pass without authentication.
    - ADMIN passes every non-public action.
    - Unknown actions are denied.
    Ownership (doctor owns appointment, patient owns appointment) is enforced
    in services, which receive the resolved Identity explicitly.
    """
    message = "You do not have permission to perform this action."

    # Override in subclasses: dict of action -> PUBLIC | set of allowed roles
    allowed_roles_per_action: dict = {}
    admin_bypass = True

    def _infer_action(self, request, view) -> str | None:
        action = getattr(view, "action", None)
        if action:
            return action

        kwargs = getattr(view, "kwargs", {}) or {}
        is_detail = "pk" in kwargs or "id" in kwargs
        if request.method.upper() in ("GET", "HEAD", "OPTIONS"):
            return "retrieve" if is_detail else "list"
        return None

    def has_permission(self, request, view) -> bool:
        action = self._infer_action(request, view)
        allowed = self.allowed_roles_per_action.get(action)

        if allowed == PUBLIC:
            return True

        user = request.user
        if not user or not getattr(user, "is_authenticated", False):
            return False

        roles = user_roles(user)
        if self.admin_bypass and ROLE_ADMIN in roles:
            return allowed is not None

        if allowed is None:
            return False

        return bool(roles & set(allowed))


class AppointmentPermission(BaseRolePermission):
    """Permissions for appointment booking and lifecycle actions"""
    allowed_roles_per_action = {
        "list": PUBLIC,
        "retrieve": PUBLIC,
        "create": PUBLIC,
        "update": PUBLIC,
        "archive": PUBLIC,
        "restore": PUBLIC,
        "approve": {ROLE_DOCTOR},
        "reject": {ROLE_DOCTOR},
        "complete": {ROLE_DOCTOR},
        "cancel": {ROLE_PATIENT},
        "mine": {ROLE_DOCTOR, ROLE_PATIENT},
    }


class RecordsPermission(BaseRolePermission):
    """Generic CRUD over profile/reference/record collections"""
    allowed_roles_per_action = {
        "list": PUBLIC,
        "retrieve": PUBLIC,
        "create": PUBLIC,
        "update": PUBLIC,
        "archive": PUBLIC,
        "restore": PUBLIC,
    }


class PaymentPermission(BaseRolePermission):
    allowed_roles_per_action = {
        **RecordsPermission.allowed_roles_per_action,
        "confirm": PUBLIC,
    }


class AdminDashboardPermission(BaseRolePermission):
    allowed_roles_per_action = {
        "retrieve": {ROLE_ADMIN},
        "list": {ROLE_ADMIN},
    }


class DoctorDashboardPermission(BaseRolePermission):
    admin_bypass = False
    allowed_roles_per_action = {
        "retrieve": {ROLE_DOCTOR},
        "list": {ROLE_DOCTOR},
    }
