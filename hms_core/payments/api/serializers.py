# hms_core/payments/api/serializers.py
from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers

from hms_core.payments.models import Payment, PaymentMethod, PaymentStatus


class PaymentSerializer(serializers.ModelSerializer):
    patient_name = serializers.CharField(source="patient.full_name", read_only=True)
    appointment_no = serializers.CharField(source="appointment.appointment_no", read_only=True, default=None)
    appointment_date = serializers.DateField(source="appointment.appointment_date", read_only=True, default=None)

    class Meta:
        model = Payment
        fields = [
            "id",
            "patient",
            "patient_name",
            "appointment",
            "appointment_no",
            "appointment_date",
            "amount",
            "payment_method",
            "payment_status",
            "reference",
            "transaction_date",
            "payment_date",
            "is_archived",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class PaymentWriteSerializer(serializers.Serializer):
    patient_id = serializers.IntegerField()
    appointment_id = serializers.IntegerField(required=False, allow_null=True, default=None)
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal("0.01"))
    payment_method = serializers.ChoiceField(choices=PaymentMethod.choices)
    payment_status = serializers.ChoiceField(choices=PaymentStatus.choices, default=PaymentStatus.PENDING)
    reference = serializers.CharField(max_length=128, required=False, allow_blank=True, default="")
    transaction_date = serializers.DateTimeField(required=False, allow_null=True, default=None)
