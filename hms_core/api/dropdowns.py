# hms_core/api/dropdowns.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import viewsets
from rest_framework.permissions import AllowAny

from hms_core.appointments.api.serializers import AppointmentOptionSerializer
from hms_core.appointments.selectors import appointment_options
from hms_core.common.api.responses import success
from hms_core.doctors.api.serializers import DoctorOptionSerializer
from hms_core.doctors.selectors import doctor_options
from hms_core.patients.api.serializers import PatientOptionSerializer
from hms_core.patients.selectors import patient_options
from hms_core.specializations.api.serializers import SpecializationOptionSerializer
from hms_core.specializations.selectors import get_specialization, specialization_options


class DropdownViewSet(viewsets.ViewSet):
    """
    Unpaginated id + display-name lists of non-archived rows for form selects.
    """
    permission_classes = [AllowAny]

    @extend_schema(tags=["Dropdowns"], responses={200: PatientOptionSerializer(many=True)})
    def patients(self, request):
        return success(PatientOptionSerializer(patient_options(), many=True).data, message="Patients loaded.")

    @extend_schema(tags=["Dropdowns"], responses={200: DoctorOptionSerializer(many=True)})
    def doctors(self, request):
        return success(DoctorOptionSerializer(doctor_options(), many=True).data, message="Doctors loaded.")

    @extend_schema(tags=["Dropdowns"], responses={200: SpecializationOptionSerializer(many=True)})
    def specializations(self, request):
        return success(
            SpecializationOptionSerializer(specialization_options(), many=True).data,
            message="Specializations loaded.",
        )

    @extend_schema(tags=["Dropdowns"], responses={200: AppointmentOptionSerializer(many=True)})
    def appointments(self, request):
        return success(
            AppointmentOptionSerializer(appointment_options(), many=True).data,
            message="Appointments loaded.",
        )

    @extend_schema(tags=["Dropdowns"], responses={200: DoctorOptionSerializer(many=True)})
    def doctors_by_specialization(self, request, pk=None):
        spec = get_specialization(specialization_id=pk)
        return success(
            DoctorOptionSerializer(doctor_options(specialization_id=spec.id), many=True).data,
            message="Doctors loaded.",
        )
