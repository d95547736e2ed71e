# hms_core/doctors/api/serializers.py
from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers

from hms_core.common.media import image_url
from hms_core.doctors.models import Doctor


class DoctorSpecializationSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()


class DoctorSerializer(serializers.ModelSerializer):
    specialization = DoctorSpecializationSerializer(read_only=True)
    available_days = serializers.SerializerMethodField()
    image_url = serializers.SerializerMethodField()

    class Meta:
        model = Doctor
        fields = [
            "id",
            "doctor_name",
            "email",
            "qualifications",
            "years_of_experience",
            "consultation_fee",
            "specialization",
            "available_days",
            "image_path",
            "image_url",
            "is_archived",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_available_days(self, obj) -> list[str]:
        return obj.available_day_names

    def get_image_url(self, obj) -> str:
        return image_url(obj.image_path)


class DoctorWriteSerializer(serializers.Serializer):
    doctor_name = serializers.CharField(max_length=255)
    specialization_id = serializers.IntegerField()
    qualifications = serializers.CharField(max_length=255)
    years_of_experience = serializers.IntegerField(min_value=0)
    consultation_fee = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0.00"))
    available_days = serializers.ListField(
        child=serializers.CharField(max_length=50),
        allow_empty=False,
    )
    email = serializers.EmailField(max_length=255, required=False, allow_blank=True)
    password = serializers.CharField(required=False, allow_blank=True, write_only=True, min_length=6)
    image_path = serializers.CharField(required=False, allow_blank=True, max_length=512)


class DoctorOptionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Doctor
        fields = ["id", "doctor_name"]
        read_only_fields = fields
