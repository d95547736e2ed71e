# hms_core/audit/services.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from django.db import transaction

from hms_core.audit.models import AuditEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuditRecord:
    event_code: str
    entity_type: str
    entity_id: int
    actor_user_id: int | None
    metadata: dict[str, Any] = field(default_factory=dict)


class AuditService:
    """
    Append-only trail of clinic mutations: bookings, status changes,
    payments, record edits, archive/restore.

    Every row is also emitted on the `hms_core.audit` logger so the trail
    shows up in the process log even when nobody queries the table.
    """

    @staticmethod
    @transaction.atomic
    def log(
        *,
        event_code: str,
        entity_type: str,
        entity_id: int,
        actor_user_id: int | None,
        metadata: dict[str, Any] | None = None,
    ) -> AuditRecord:
        record = AuditRecord(
            event_code=event_code,
            entity_type=entity_type,
            entity_id=entity_id,
            actor_user_id=actor_user_id,
            metadata=metadata or {},
        )
        AuditEvent.objects.create(
            event_code=record.event_code,
            entity_type=record.entity_type,
            entity_id=record.entity_id,
            actor_user_id=record.actor_user_id,
            metadata=record.metadata,
        )
        logger.info("audit %s %s#%s actor=%s", event_code, entity_type, entity_id, actor_user_id or "-")
        return record

    @staticmethod
    def history(*, entity_type: str, entity_id: int) -> list[str]:
        """Event codes for one entity, oldest first."""
        return list(
            AuditEvent.objects.filter(entity_type=entity_type, entity_id=entity_id)
            .order_by("occurred_at", "id")
            .values_list("event_code", flat=True)
        )
