# hms_core/appointments/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import status

from hms_core.appointments.api.serializers import (
    AppointmentCreateSerializer,
    AppointmentDetailSerializer,
    AppointmentRejectSerializer,
    AppointmentSerializer,
    AppointmentUpdateSerializer,
)
from hms_core.appointments.filters import AppointmentFilter
from hms_core.appointments.models import Appointment
from hms_core.appointments.selectors import appointments_for_identity, appointments_qs, get_appointment
from hms_core.appointments.services import AppointmentService
from hms_core.common.api.pagination import paginate
from hms_core.common.api.responses import success
from hms_core.common.permissions import AppointmentPermission
from hms_core.common.views import ArchivableViewSet
from hms_core.iam.identity import actor_user_id, require_identity


@extend_schema_view(
    archive=extend_schema(tags=["Appointments"]),
    restore=extend_schema(tags=["Appointments"]),
)
class AppointmentViewSet(ArchivableViewSet):
    """
    Appointment booking and lifecycle:
    - list (non-archived by default) / retrieve (any archive state)
    - create (Pending), update details
    - approve / reject / complete (owning doctor or admin)
    - cancel (owning patient or admin)
    - archive / restore
    - mine (caller's own appointments)
    """
    queryset = Appointment.objects.all()
    serializer_class = AppointmentSerializer
    filterset_class = AppointmentFilter
    permission_classes = [AppointmentPermission]
    entity_label = "Appointment"

    def _detail(self, appointment_id: int) -> dict:
        return AppointmentDetailSerializer(get_appointment(appointment_id=appointment_id)).data

    @extend_schema(tags=["Appointments"], responses={200: AppointmentSerializer(many=True)})
    def list(self, request):
        qs = self.filter_queryset(appointments_qs())
        return paginate(
            request,
            qs,
            AppointmentSerializer,
            message="Appointments retrieved successfully.",
            empty_message="No appointments found.",
        )

    @extend_schema(tags=["Appointments"], responses={200: AppointmentDetailSerializer})
    def retrieve(self, request, pk=None):
        return success(self._detail(pk), message="Appointment retrieved successfully.")

    @extend_schema(tags=["Appointments"], request=AppointmentCreateSerializer, responses={201: AppointmentDetailSerializer})
    def create(self, request):
        ser = AppointmentCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        appt = AppointmentService.create(**ser.validated_data, actor_user_id=actor_user_id(request))
        return success(
            self._detail(appt.id),
            message="Appointment created successfully!",
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(tags=["Appointments"], request=AppointmentUpdateSerializer, responses={200: AppointmentDetailSerializer})
    def update(self, request, pk=None):
        ser = AppointmentUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        AppointmentService.update_details(
            appointment_id=pk,
            **ser.validated_data,
            actor_user_id=actor_user_id(request),
        )
        return success(self._detail(pk), message="Appointment updated successfully!")

    @extend_schema(tags=["Appointments"], request=None, responses={200: AppointmentDetailSerializer})
    def approve(self, request, pk=None):
        identity = require_identity(request)
        AppointmentService.approve(appointment_id=pk, identity=identity)
        return success(self._detail(pk), message="Appointment approved successfully.")

    @extend_schema(tags=["Appointments"], request=AppointmentRejectSerializer, responses={200: AppointmentDetailSerializer})
    def reject(self, request, pk=None):
        identity = require_identity(request)
        ser = AppointmentRejectSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        AppointmentService.reject(appointment_id=pk, identity=identity, reason=ser.validated_data["reason"])
        return success(self._detail(pk), message="Appointment rejected successfully.")

    @extend_schema(tags=["Appointments"], request=None, responses={200: AppointmentDetailSerializer})
    def complete(self, request, pk=None):
        identity = require_identity(request)
        AppointmentService.complete(appointment_id=pk, identity=identity)
        return success(self._detail(pk), message="Appointment marked as completed.")

    @extend_schema(tags=["Appointments"], request=None, responses={200: AppointmentDetailSerializer})
    def cancel(self, request, pk=None):
        identity = require_identity(request)
        AppointmentService.cancel(appointment_id=pk, identity=identity)
        return success(self._detail(pk), message="Appointment cancelled successfully.")

    @extend_schema(tags=["Appointments"], responses={200: AppointmentSerializer(many=True)})
    def mine(self, request):
        identity = require_identity(request)
        qs = appointments_for_identity(identity=identity)
        return paginate(
            request,
            qs,
            AppointmentSerializer,
            message="Appointments retrieved successfully.",
            empty_message="No appointments found.",
        )
