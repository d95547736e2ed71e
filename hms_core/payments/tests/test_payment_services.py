# hms_core/payments/tests/test_payment_services.py
from datetime import timedelta
from decimal import Decimal

import pytest
from rest_framework.exceptions import ValidationError

from hms_core.common.api.exceptions import ConflictError
from hms_core.payments.models import PaymentMethod, PaymentStatus
from hms_core.payments.services import PaymentService

pytestmark = pytest.mark.django_db


def test_confirm_marks_paid_and_flags_appointment(make_appointment, patient):
    appt = make_appointment()
    payment = PaymentService.record(
        patient_id=patient.id,
        appointment_id=appt.id,
        amount=Decimal("500.00"),
        payment_method=PaymentMethod.CARD,
    )
    assert payment.payment_status == PaymentStatus.PENDING
    assert payment.payment_date is None

    payment = PaymentService.confirm(payment_id=payment.id)
    assert payment.payment_status == PaymentStatus.PAID
    assert payment.payment_date is not None

    appt.refresh_from_db()
    assert appt.is_paid is True


def test_confirm_twice_is_conflict(patient):
    payment = PaymentService.record(patient_id=patient.id, amount=Decimal("10.00"))
    PaymentService.confirm(payment_id=payment.id)

    with pytest.raises(ConflictError):
        PaymentService.confirm(payment_id=payment.id)


def test_confirm_archived_is_conflict(patient):
    from hms_core.common.archive import ArchiveService
    from hms_core.payments.models import Payment

    payment = PaymentService.record(patient_id=patient.id, amount=Decimal("10.00"))
    ArchiveService.archive(model=Payment, pk=payment.id, actor_user_id=None)

    with pytest.raises(ConflictError):
        PaymentService.confirm(payment_id=payment.id)


def test_appointment_must_belong_to_patient(make_appointment, other_patient):
    appt = make_appointment()
    with pytest.raises(ValidationError) as exc:
        PaymentService.record(patient_id=other_patient.id, appointment_id=appt.id, amount=Decimal("1.00"))
    assert "appointment_id" in exc.value.detail


def test_amount_must_be_positive(patient):
    with pytest.raises(ValidationError):
        PaymentService.record(patient_id=patient.id, amount=Decimal("0.00"))


def test_recording_as_paid_stamps_date_and_flags_appointment(make_appointment, patient):
    appt = make_appointment()
    payment = PaymentService.record(
        patient_id=patient.id,
        appointment_id=appt.id,
        amount=Decimal("80.00"),
        payment_status=PaymentStatus.PAID,
    )
    assert payment.payment_date is not None
    appt.refresh_from_db()
    assert appt.is_paid is True


def _paid_payment(patient, appt, amount="60.00"):
    return PaymentService.record(
        patient_id=patient.id,
        appointment_id=appt.id,
        amount=Decimal(amount),
        payment_status=PaymentStatus.PAID,
    )


def _update(payment, **changes):
    fields = {
        "payment_id": payment.id,
        "patient_id": payment.patient_id,
        "appointment_id": payment.appointment_id,
        "amount": payment.amount,
        "payment_method": payment.payment_method,
        "payment_status": payment.payment_status,
    }
    fields.update(changes)
    return PaymentService.update(**fields)


def test_moving_paid_payment_moves_the_paid_flag(make_appointment, patient, visit_date):
    first = make_appointment()
    second = make_appointment(on=visit_date + timedelta(days=1))
    payment = _paid_payment(patient, first)

    _update(payment, appointment_id=second.id)

    first.refresh_from_db()
    second.refresh_from_db()
    assert first.is_paid is False
    assert second.is_paid is True


def test_unpaying_clears_flag_only_when_nothing_else_paid(make_appointment, patient):
    appt = make_appointment()
    refunded = _paid_payment(patient, appt)
    kept = _paid_payment(patient, appt, amount="20.00")

    _update(refunded, payment_status=PaymentStatus.REFUNDED)
    appt.refresh_from_db()
    assert appt.is_paid is True

    _update(kept, payment_status=PaymentStatus.FAILED)
    appt.refresh_from_db()
    assert appt.is_paid is False
