# hms_core/appointments/api/serializers.py
from __future__ import annotations

import re
from datetime import datetime

from django.core.exceptions import ObjectDoesNotExist
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema_field
from rest_framework import serializers

from hms_core.appointments.models import Appointment

_HHMM_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


@extend_schema_field(OpenApiTypes.STR)
class StrictTimeField(serializers.Field):
    """
    24-hour HH:MM in, HH:MM out.
    """
    default_error_messages = {
        "invalid": "Time must be in 24-hour HH:MM format.",
    }

    def to_internal_value(self, data):
        value = str(data).strip()
        if not _HHMM_RE.match(value):
            self.fail("invalid")
        return datetime.strptime(value, "%H:%M").time()

    def to_representation(self, value):
        return value.strftime("%H:%M")


class AppointmentPatientSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    full_name = serializers.CharField()


class AppointmentDoctorSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    doctor_name = serializers.CharField()
    specialization = serializers.CharField(source="specialization.name")


class AppointmentSerializer(serializers.ModelSerializer):
    patient = AppointmentPatientSerializer(read_only=True)
    doctor = AppointmentDoctorSerializer(read_only=True)
    appointment_time = StrictTimeField(read_only=True)

    class Meta:
        model = Appointment
        fields = [
            "id",
            "appointment_no",
            "patient",
            "doctor",
            "appointment_date",
            "appointment_time",
            "reason_for_visit",
            "notes",
            "status",
            "is_paid",
            "is_archived",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class AppointmentPaymentSummarySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    payment_method = serializers.CharField()
    payment_status = serializers.CharField()
    payment_date = serializers.DateTimeField(allow_null=True)
    is_archived = serializers.BooleanField()


class AppointmentRecordSummarySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    diagnosis = serializers.CharField()
    record_date = serializers.DateField()
    is_archived = serializers.BooleanField()


class AppointmentDetailSerializer(AppointmentSerializer):
    payments = AppointmentPaymentSummarySerializer(many=True, read_only=True)
    medical_record = serializers.SerializerMethodField()

    class Meta(AppointmentSerializer.Meta):
        fields = AppointmentSerializer.Meta.fields + ["payments", "medical_record"]
        read_only_fields = fields

    def get_medical_record(self, obj) -> dict | None:
        try:
            record = obj.medical_record
        except ObjectDoesNotExist:
            return None
        return AppointmentRecordSummarySerializer(record).data


class AppointmentCreateSerializer(serializers.Serializer):
    patient_id = serializers.IntegerField()
    doctor_id = serializers.IntegerField()
    appointment_date = serializers.DateField()
    appointment_time = StrictTimeField()
    reason_for_visit = serializers.CharField(max_length=255)
    notes = serializers.CharField(max_length=500, required=False, allow_blank=True, default="")


class AppointmentUpdateSerializer(serializers.Serializer):
    appointment_date = serializers.DateField()
    appointment_time = StrictTimeField()
    reason_for_visit = serializers.CharField(max_length=255)
    notes = serializers.CharField(required=False, allow_blank=True, default="")


class AppointmentRejectSerializer(serializers.Serializer):
    reason = serializers.CharField(required=False, allow_blank=True, default="")


class AppointmentOptionSerializer(serializers.ModelSerializer):
    appointment_time = StrictTimeField(read_only=True)

    class Meta:
        model = Appointment
        fields = ["id", "appointment_no", "appointment_date", "appointment_time", "status"]
        read_only_fields = fields
