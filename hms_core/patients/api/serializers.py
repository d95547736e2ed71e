# hms_core/patients/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from hms_core.common.media import image_url
from hms_core.patients.models import Gender, Patient


class PatientSerializer(serializers.ModelSerializer):
    image_url = serializers.SerializerMethodField()

    class Meta:
        model = Patient
        fields = [
            "id",
            "full_name",
            "age",
            "gender",
            "email",
            "phone_number",
            "address",
            "medical_history",
            "current_symptoms",
            "image_path",
            "image_url",
            "is_archived",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_image_url(self, obj) -> str:
        return image_url(obj.image_path)


class PatientWriteSerializer(serializers.Serializer):
    full_name = serializers.CharField(max_length=255)
    age = serializers.IntegerField(min_value=0)
    gender = serializers.ChoiceField(choices=Gender.choices)
    email = serializers.EmailField(max_length=255, required=False, allow_blank=True)
    phone_number = serializers.CharField(max_length=20)
    address = serializers.CharField(max_length=255, required=False, allow_blank=True)
    medical_history = serializers.CharField(required=False, allow_blank=True)
    current_symptoms = serializers.CharField()
    password = serializers.CharField(required=False, allow_blank=True, write_only=True, min_length=6)
    image_path = serializers.CharField(required=False, allow_blank=True, max_length=512)


class PatientOptionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Patient
        fields = ["id", "full_name"]
        read_only_fields = fields
