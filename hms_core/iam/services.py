# hms_core/iam/services.py
from __future__ import annotations

import logging
from dataclasses import dataclass

from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.db import transaction
from django.utils import timezone
from rest_framework.exceptions import AuthenticationFailed, ValidationError
from rest_framework_simplejwt.tokens import RefreshToken

from hms_core.common.permissions import ROLE_ADMIN, ROLE_DOCTOR, ROLE_PATIENT
from hms_core.iam.identity import Identity, resolve_identity

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MSG = "Invalid credentials."


@dataclass(frozen=True)
class LoginResult:
    identity: Identity
    user: object
    access: str
    refresh: str


class IdentityService:
    """
    Thin identity provider: resolves credentials to (role, user id) and issues JWTs.
    """

    @staticmethod
    def _find_user(*, username: str | None, email: str | None):
        """
        Lookup order: username -> admin user, else email -> doctor, else email -> patient.
        """
        from hms_core.doctors.models import Doctor
        from hms_core.patients.models import Patient

        User = get_user_model()

        if username:
            user = User.objects.filter(username=username).first()
            if user is not None:
                return user

        if email:
            doctor = Doctor.objects.select_related("user").filter(email__iexact=email, user__isnull=False).first()
            if doctor is not None:
                return doctor.user

            patient = Patient.objects.select_related("user").filter(email__iexact=email, user__isnull=False).first()
            if patient is not None:
                return patient.user

        return None

    @staticmethod
    def login(*, username: str | None, email: str | None, password: str) -> LoginResult:
        user = IdentityService._find_user(username=username, email=email)

        if user is None or not user.is_active or not user.has_usable_password() or not user.check_password(password):
            logger.info("Failed login attempt (username=%s, email=%s)", username or "-", email or "-")
            raise AuthenticationFailed(INVALID_CREDENTIALS_MSG)

        identity = resolve_identity(user)
        if identity is None:
            raise AuthenticationFailed(INVALID_CREDENTIALS_MSG)

        refresh = RefreshToken.for_user(user)
        refresh["role"] = identity.role

        user.last_login = timezone.now()
        user.save(update_fields=["last_login"])
        logger.info("Login ok user_id=%s role=%s", user.id, identity.role)

        return LoginResult(
            identity=identity,
            user=user,
            access=str(refresh.access_token),
            refresh=str(refresh),
        )

    @staticmethod
    @transaction.atomic
    def create_login_user(*, email: str, password: str, role: str):
        """
        Creates the auth user backing a Doctor/Patient profile. Username mirrors the email.
        """
        if role not in (ROLE_ADMIN, ROLE_DOCTOR, ROLE_PATIENT):
            raise ValueError(f"Unknown role: {role}")

        User = get_user_model()
        if User.objects.filter(username__iexact=email).exists():
            raise ValidationError({"email": "A login account with this email already exists."})

        user = User.objects.create_user(username=email.lower(), email=email.lower(), password=password)
        group, _ = Group.objects.get_or_create(name=role)
        user.groups.add(group)
        return user

    @staticmethod
    def set_password(user, password: str) -> None:
        user.set_password(password)
        user.save(update_fields=["password"])
