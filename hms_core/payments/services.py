# hms_core/payments/services.py
from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal

from django.db import transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound, ValidationError

from hms_core.appointments.models import Appointment
from hms_core.appointments.services import AppointmentService
from hms_core.audit.services import AuditService
from hms_core.common.api.exceptions import ConflictError
from hms_core.patients.models import Patient
from hms_core.payments.models import Payment, PaymentMethod, PaymentStatus

logger = logging.getLogger(__name__)


def _validate_links(*, patient_id: int, appointment_id: int | None) -> None:
    errors = {}
    if not Patient.objects.filter(id=patient_id).exists():
        errors["patient_id"] = "Patient does not exist."
    if appointment_id is not None:
        appt = Appointment.objects.filter(id=appointment_id).only("id", "patient_id").first()
        if appt is None:
            errors["appointment_id"] = "Appointment does not exist."
        elif appt.patient_id != patient_id:
            errors["appointment_id"] = "Appointment belongs to a different patient."
    if errors:
        raise ValidationError(errors)


class PaymentService:
    @staticmethod
    def _on_paid(payment: Payment, actor_user_id: int | None) -> None:
        payment.payment_date = payment.payment_date or timezone.now()
        if payment.appointment_id:
            AppointmentService.mark_paid(appointment_id=payment.appointment_id, actor_user_id=actor_user_id)

    @staticmethod
    def _release_paid(appointment_id: int, actor_user_id: int | None) -> None:
        # The flag stays on while any active Paid payment still covers the appointment.
        still_paid = (
            Payment.objects.active()
            .filter(appointment_id=appointment_id, payment_status=PaymentStatus.PAID)
            .exists()
        )
        if not still_paid:
            AppointmentService.clear_paid(appointment_id=appointment_id, actor_user_id=actor_user_id)

    @staticmethod
    @transaction.atomic
    def record(
        *,
        patient_id: int,
        amount: Decimal,
        appointment_id: int | None = None,
        payment_method: str = PaymentMethod.CASH,
        payment_status: str = PaymentStatus.PENDING,
        reference: str = "",
        transaction_date: datetime | None = None,
        actor_user_id: int | None = None,
    ) -> Payment:
        if amount <= 0:
            raise ValidationError({"amount": "Amount must be > 0."})
        _validate_links(patient_id=patient_id, appointment_id=appointment_id)

        payment = Payment(
            patient_id=patient_id,
            appointment_id=appointment_id,
            amount=amount,
            payment_method=payment_method,
            payment_status=payment_status,
            reference=reference or "",
            transaction_date=transaction_date or timezone.now(),
        )
        if payment.payment_status == PaymentStatus.PAID:
            PaymentService._on_paid(payment, actor_user_id)
        payment.save()

        AuditService.log(
            event_code="payment.recorded",
            entity_type="Payment",
            entity_id=payment.id,
            actor_user_id=actor_user_id,
            metadata={"amount": str(payment.amount), "status": payment.payment_status},
        )
        return payment

    @staticmethod
    @transaction.atomic
    def update(
        *,
        payment_id: int,
        patient_id: int,
        amount: Decimal,
        appointment_id: int | None = None,
        payment_method: str = PaymentMethod.CASH,
        payment_status: str = PaymentStatus.PENDING,
        reference: str = "",
        transaction_date: datetime | None = None,
        actor_user_id: int | None = None,
    ) -> Payment:
        payment = Payment.objects.select_for_update().filter(id=payment_id, is_archived=False).first()
        if payment is None:
            raise NotFound("Payment record not found.")
        if amount <= 0:
            raise ValidationError({"amount": "Amount must be > 0."})
        _validate_links(patient_id=patient_id, appointment_id=appointment_id)

        previous_status = payment.payment_status
        previous_appointment_id = payment.appointment_id
        payment.patient_id = patient_id
        payment.appointment_id = appointment_id
        payment.amount = amount
        payment.payment_method = payment_method
        payment.payment_status = payment_status
        payment.reference = reference or ""
        if transaction_date is not None:
            payment.transaction_date = transaction_date

        was_paid = previous_status == PaymentStatus.PAID
        is_paid = payment.payment_status == PaymentStatus.PAID
        moved = previous_appointment_id != payment.appointment_id

        if is_paid and (not was_paid or moved):
            PaymentService._on_paid(payment, actor_user_id)
        payment.save()

        if was_paid and previous_appointment_id and (moved or not is_paid):
            PaymentService._release_paid(previous_appointment_id, actor_user_id)

        AuditService.log(
            event_code="payment.updated",
            entity_type="Payment",
            entity_id=payment.id,
            actor_user_id=actor_user_id,
            metadata={"previous_status": previous_status, "status": payment.payment_status},
        )
        return payment

    @staticmethod
    @transaction.atomic
    def confirm(*, payment_id: int, actor_user_id: int | None = None) -> Payment:
        """
        Guarded Pending -> Paid. Archived or already-Paid payments are rejected with 409.
        """
        payment = Payment.objects.select_for_update().filter(id=payment_id).first()
        if payment is None:
            raise NotFound("Payment record not found.")
        if payment.is_archived:
            raise ConflictError("Cannot confirm an archived payment.")
        if payment.payment_status == PaymentStatus.PAID:
            raise ConflictError("This payment has already been confirmed as Paid.")

        previous_status = payment.payment_status
        payment.payment_status = PaymentStatus.PAID
        payment.payment_date = timezone.now()
        PaymentService._on_paid(payment, actor_user_id)
        payment.save(update_fields=["payment_status", "payment_date", "updated_at"])

        AuditService.log(
            event_code="payment.confirmed",
            entity_type="Payment",
            entity_id=payment.id,
            actor_user_id=actor_user_id,
            metadata={"previous_status": previous_status, "amount": str(payment.amount)},
        )
        logger.info("Payment %s confirmed (appointment=%s)", payment.id, payment.appointment_id)
        return payment
