# hms_core/payments/selectors.py
from __future__ import annotations

from django.db.models import QuerySet
from rest_framework.exceptions import NotFound

from hms_core.payments.models import Payment


def payments_qs() -> QuerySet[Payment]:
    return (
        Payment.objects.select_related("patient", "appointment")
        .order_by("-transaction_date", "-id")
    )


def get_payment(*, payment_id: int) -> Payment:
    payment = payments_qs().filter(id=payment_id).first()
    if payment is None:
        raise NotFound("Payment record not found.")
    return payment
