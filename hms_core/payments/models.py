# hms_core/payments/models.py
from decimal import Decimal

from django.db import models
from django.utils import timezone

from hms_core.appointments.models import Appointment
from hms_core.common.models import ArchivableModel
from hms_core.patients.models import Patient


class PaymentMethod(models.TextChoices):
    CASH = "Cash", "Cash"
    CARD = "Card", "Card"
    ONLINE = "Online", "Online"
    INSURANCE = "Insurance", "Insurance"


class PaymentStatus(models.TextChoices):
    PENDING = "Pending", "Pending"
    PAID = "Paid", "Paid"
    FAILED = "Failed", "Failed"
    REFUNDED = "Refunded", "Refunded"


class Payment(ArchivableModel):
    """
    Manually recorded payment. No gateway: status is set by staff.
    """
    patient = models.ForeignKey(Patient, on_delete=models.PROTECT, related_name="payments")
    appointment = models.ForeignKey(
        Appointment,
        on_delete=models.PROTECT,
        related_name="payments",
        null=True,
        blank=True,
    )

    amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    payment_method = models.CharField(max_length=16, choices=PaymentMethod.choices, default=PaymentMethod.CASH)
    payment_status = models.CharField(
        max_length=16,
        choices=PaymentStatus.choices,
        default=PaymentStatus.PENDING,
        db_index=True,
    )
    reference = models.CharField(max_length=128, blank=True, default="")

    transaction_date = models.DateTimeField(default=timezone.now, db_index=True)
    payment_date = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "payments_payment"
        indexes = [
            models.Index(fields=["payment_status", "is_archived"]),
            models.Index(fields=["patient", "transaction_date"]),
        ]

    def __str__(self) -> str:
        return f"Payment({self.amount} {self.payment_status})"
