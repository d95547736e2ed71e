# hms_core/iam/identity.py
from __future__ import annotations

from dataclasses import dataclass

from rest_framework.exceptions import NotAuthenticated

from hms_core.common.permissions import ROLE_ADMIN, ROLE_DOCTOR, ROLE_PATIENT, user_roles

# Highest privilege wins when a user carries several groups.
_ROLE_PRECEDENCE = (ROLE_ADMIN, ROLE_DOCTOR, ROLE_PATIENT)


@dataclass(frozen=True)
class Identity:
    """
    Request-scoped caller identity, passed explicitly into services.
    """
    role: str
    user_id: int
    doctor_id: int | None = None
    patient_id: int | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN

    @property
    def is_doctor(self) -> bool:
        return self.role == ROLE_DOCTOR

    @property
    def is_patient(self) -> bool:
        return self.role == ROLE_PATIENT


def resolve_identity(user) -> Identity | None:
    if not user or not getattr(user, "is_authenticated", False):
        return None

    roles = user_roles(user)
    role = next((r for r in _ROLE_PRECEDENCE if r in roles), None)
    if role is None:
        return None

    doctor = getattr(user, "doctor_profile", None) if role == ROLE_DOCTOR else None
    patient = getattr(user, "patient_profile", None) if role == ROLE_PATIENT else None

    return Identity(
        role=role,
        user_id=user.id,
        doctor_id=getattr(doctor, "id", None),
        patient_id=getattr(patient, "id", None),
    )


def identity_from_request(request) -> Identity | None:
    """
    Prefer the identity attached by the authentication class; fall back to
    resolving from request.user (force_authenticate in tests bypasses auth classes).
    """
    identity = getattr(request, "identity", None)
    if identity is not None:
        return identity
    return resolve_identity(getattr(request, "user", None))


def require_identity(request) -> Identity:
    identity = identity_from_request(request)
    if identity is None:
        raise NotAuthenticated("Authentication credentials were not provided.")
    return identity


def actor_user_id(request) -> int | None:
    user = getattr(request, "user", None)
    if user is not None and getattr(user, "is_authenticated", False):
        return user.id
    return None
