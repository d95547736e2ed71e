# hms_core/payments/filters.py
from __future__ import annotations

import django_filters
from django.db.models import CharField
from django.db.models.functions import Cast

from hms_core.common.filters import ArchivableFilterSet
from hms_core.payments.models import Payment, PaymentMethod, PaymentStatus


class PaymentFilter(ArchivableFilterSet):
    payment_status = django_filters.ChoiceFilter(choices=PaymentStatus.choices)
    payment_method = django_filters.ChoiceFilter(choices=PaymentMethod.choices)
    patient = django_filters.NumberFilter(field_name="patient_id")
    appointment = django_filters.NumberFilter(field_name="appointment_id")

    # search: patient name, appointment date, amount, status
    search_fields = ("patient__full_name", "appointment_date_text", "amount_text", "payment_status")

    class Meta:
        model = Payment
        fields = ["archived", "search", "payment_status", "payment_method", "patient", "appointment"]

    def search_queryset(self, queryset):
        return queryset.annotate(
            appointment_date_text=Cast("appointment__appointment_date", output_field=CharField()),
            amount_text=Cast("amount", output_field=CharField()),
        )
