# hms_core/specializations/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from hms_core.specializations.models import Specialization


class SpecializationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Specialization
        fields = [
            "id",
            "name",
            "description",
            "common_conditions",
            "is_archived",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class SpecializationWriteSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    common_conditions = serializers.ListField(
        child=serializers.CharField(max_length=255),
        allow_empty=False,
    )


class SpecializationOptionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Specialization
        fields = ["id", "name"]
        read_only_fields = fields
