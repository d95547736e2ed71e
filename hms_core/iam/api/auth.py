# hms_core/iam/api/auth.py

from __future__ import annotations

from datetime import timedelta
from typing import Any

from django.conf import settings
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView

from hms_core.common.api.responses import success
from hms_core.common.permissions import ROLE_ADMIN, ROLE_DOCTOR, ROLE_PATIENT
from hms_core.iam.api.serializers import LoginRequestSerializer
from hms_core.iam.services import IdentityService


def _seconds(value: Any) -> int:
    """
    Convert a JWT lifetime setting into seconds.
    Supports timedelta OR int/float (already seconds).
    """
    if isinstance(value, timedelta):
        return int(value.total_seconds())
    try:
        return int(value)
    except (TypeError, ValueError):
        # 0 means "session cookie"
        return 0


def _set_auth_cookies(response, *, access: str, refresh: str) -> None:
    jwt_cfg = getattr(settings, "SIMPLE_JWT", {}) or {}

    access_name = jwt_cfg.get("AUTH_COOKIE", "hms_access")
    refresh_name = jwt_cfg.get("AUTH_COOKIE_REFRESH", "hms_refresh")

    access_lifetime = _seconds(jwt_cfg.get("ACCESS_TOKEN_LIFETIME", timedelta(minutes=60)))
    refresh_lifetime = _seconds(jwt_cfg.get("REFRESH_TOKEN_LIFETIME", timedelta(days=14)))

    secure = bool(jwt_cfg.get("AUTH_COOKIE_SECURE", False))
    samesite = jwt_cfg.get("AUTH_COOKIE_SAMESITE", "Lax")

    response.set_cookie(
        access_name,
        access,
        max_age=access_lifetime,
        httponly=True,
        secure=secure,
        samesite=samesite,
        path="/",
    )
    response.set_cookie(
        refresh_name,
        refresh,
        max_age=refresh_lifetime,
        httponly=True,
        secure=secure,
        samesite=samesite,
        path="/",
    )


def _clear_auth_cookies(response) -> None:
    jwt_cfg = getattr(settings, "SIMPLE_JWT", {}) or {}
    access_name = jwt_cfg.get("AUTH_COOKIE", "hms_access")
    refresh_name = jwt_cfg.get("AUTH_COOKIE_REFRESH", "hms_refresh")
    response.delete_cookie(access_name, path="/")
    response.delete_cookie(refresh_name, path="/")


def _user_payload(user, identity) -> dict:
    if identity.role == ROLE_ADMIN:
        return {"id": user.id, "username": user.username, "role": ROLE_ADMIN}

    if identity.role == ROLE_DOCTOR:
        doctor = user.doctor_profile
        return {
            "id": doctor.id,
            "doctor_name": doctor.doctor_name,
            "email": doctor.email,
            "role": ROLE_DOCTOR,
            "specialization_id": doctor.specialization_id,
        }

    if identity.role == ROLE_PATIENT:
        patient = user.patient_profile
        return {
            "id": patient.id,
            "full_name": patient.full_name,
            "email": patient.email,
            "role": ROLE_PATIENT,
        }

    return {}


class LoginView(APIView):
    permission_classes = [AllowAny]
    authentication_classes: list = []

    def get_authenticate_header(self, request):
        # Bad credentials answer 401, not the 403 DRF uses without an authenticator.
        return 'Bearer realm="api"'

    @extend_schema(
        request=LoginRequestSerializer,
        responses={200: OpenApiTypes.OBJECT},
        tags=["IAM"],
    )
    def post(self, request):
        ser = LoginRequestSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        result = IdentityService.login(
            username=ser.validated_data.get("username") or None,
            email=ser.validated_data.get("email") or None,
            password=ser.validated_data["password"],
        )

        res = success(message="Login successful.")
        res.data.update(
            {
                "role": result.identity.role,
                "user": _user_payload(result.user, result.identity),
                "token": result.access,
                "refresh": result.refresh,
            }
        )
        _set_auth_cookies(res, access=result.access, refresh=result.refresh)
        return res


class LogoutView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=None,
        responses={200: OpenApiTypes.OBJECT},
        tags=["IAM"],
    )
    def post(self, request):
        res = success(message="Logout successful.")
        _clear_auth_cookies(res)
        return res
