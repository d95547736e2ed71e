# hms_core/medical_records/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from hms_core.medical_records.models import MedicalRecord


class MedicalRecordSerializer(serializers.ModelSerializer):
    appointment_no = serializers.CharField(source="appointment.appointment_no", read_only=True)
    patient_name = serializers.CharField(source="patient.full_name", read_only=True)
    doctor_name = serializers.CharField(source="doctor.doctor_name", read_only=True)

    class Meta:
        model = MedicalRecord
        fields = [
            "id",
            "appointment",
            "appointment_no",
            "patient",
            "patient_name",
            "doctor",
            "doctor_name",
            "blood_pressure",
            "temperature",
            "heart_rate",
            "weight",
            "chief_complaint",
            "diagnosis",
            "treatment",
            "treatment_plan",
            "prescription",
            "notes",
            "follow_up_required",
            "record_date",
            "is_archived",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class _ClinicalFieldsSerializer(serializers.Serializer):
    blood_pressure = serializers.CharField(max_length=50, required=False, allow_blank=True)
    temperature = serializers.CharField(max_length=50, required=False, allow_blank=True)
    heart_rate = serializers.CharField(max_length=50, required=False, allow_blank=True)
    weight = serializers.CharField(max_length=50, required=False, allow_blank=True)
    chief_complaint = serializers.CharField(required=False, allow_blank=True)
    treatment = serializers.CharField(required=False, allow_blank=True)
    treatment_plan = serializers.CharField(required=False, allow_blank=True)
    prescription = serializers.CharField(required=False, allow_blank=True)
    notes = serializers.CharField(required=False, allow_blank=True)
    follow_up_required = serializers.BooleanField(required=False)


class MedicalRecordCreateSerializer(_ClinicalFieldsSerializer):
    appointment_id = serializers.IntegerField()
    patient_id = serializers.IntegerField()
    doctor_id = serializers.IntegerField()
    diagnosis = serializers.CharField()
    record_date = serializers.DateField()


class MedicalRecordUpdateSerializer(_ClinicalFieldsSerializer):
    diagnosis = serializers.CharField(required=False)
    record_date = serializers.DateField(required=False)
