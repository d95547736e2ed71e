# hms_core/audit/models.py
from django.conf import settings
from django.db import models


class AuditEvent(models.Model):
    """
    Immutable audit record. One row per mutation of an appointment,
    payment, medical record or profile.
    """
    event_code = models.CharField(max_length=128, db_index=True)  # e.g. "appointment.approved"
    entity_type = models.CharField(max_length=128, db_index=True)  # e.g. "Appointment"
    entity_id = models.BigIntegerField(db_index=True)

    actor_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        related_name="audit_events",
        null=True,
        blank=True,
    )

    occurred_at = models.DateTimeField(auto_now_add=True, db_index=True)
    metadata = models.JSONField(default=dict, blank=True)

    class Meta:
        db_table = "audit_audit_event"
        ordering = ("-occurred_at", "-id")
        indexes = [
            models.Index(fields=["entity_type", "entity_id"]),
            models.Index(fields=["event_code", "occurred_at"]),
        ]

    def __str__(self) -> str:
        return f"{self.event_code} {self.entity_type}#{self.entity_id}"
