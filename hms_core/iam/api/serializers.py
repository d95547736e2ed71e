from __future__ import annotations

from rest_framework import serializers


class LoginRequestSerializer(serializers.Serializer):
    username = serializers.CharField(required=False, allow_blank=True)
    email = serializers.EmailField(required=False, allow_blank=True)
    password = serializers.CharField(write_only=True)

    def validate(self, attrs):
        if not attrs.get("username") and not attrs.get("email"):
            raise serializers.ValidationError({"username": "Provide a username or an email."})
        return attrs


class IdentitySerializer(serializers.Serializer):
    role = serializers.CharField()
    user_id = serializers.IntegerField()
    doctor_id = serializers.IntegerField(allow_null=True)
    patient_id = serializers.IntegerField(allow_null=True)
