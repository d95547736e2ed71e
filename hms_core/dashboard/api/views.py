# hms_core/dashboard/api/views.py
from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework.exceptions import NotFound
from rest_framework.views import APIView

from hms_core.common.api.responses import success
from hms_core.common.permissions import AdminDashboardPermission, DoctorDashboardPermission
from hms_core.dashboard.selectors import admin_summary, doctor_summary
from hms_core.iam.identity import require_identity


class AdminDashboardView(APIView):
    permission_classes = [AdminDashboardPermission]

    @extend_schema(tags=["Dashboard"], responses={200: OpenApiTypes.OBJECT})
    def get(self, request):
        return success(admin_summary(), message="Admin dashboard data retrieved successfully.")


class DoctorDashboardView(APIView):
    """
    Scoped to the calling doctor; the doctor id comes from the identity, never the query.
    """
    permission_classes = [DoctorDashboardPermission]

    @extend_schema(tags=["Dashboard"], responses={200: OpenApiTypes.OBJECT})
    def get(self, request):
        identity = require_identity(request)
        if identity.doctor_id is None:
            raise NotFound("Doctor profile not found.")
        return success(
            doctor_summary(doctor_id=identity.doctor_id),
            message="Doctor dashboard data retrieved successfully.",
        )
