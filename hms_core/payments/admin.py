from __future__ import annotations

from django.contrib import admin

from hms_core.payments.models import Payment


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "patient",
        "appointment",
        "amount",
        "payment_method",
        "payment_status",
        "transaction_date",
        "payment_date",
        "is_archived",
    )
    list_filter = ("payment_status", "payment_method", "is_archived")
    search_fields = ("patient__full_name", "reference", "appointment__appointment_no")
    raw_id_fields = ("patient", "appointment")
    ordering = ("-transaction_date",)
