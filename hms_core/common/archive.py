# hms_core/common/archive.py
from __future__ import annotations

from dataclasses import dataclass

from django.db import transaction
from rest_framework.exceptions import NotFound

from hms_core.audit.services import AuditService
from hms_core.common.db import conflict_on_integrity


@dataclass(frozen=True)
class RestoreResult:
    instance: object
    restored: bool


class ArchiveService:
    """
    Soft delete / restore shared by every archivable entity.
    """

    @staticmethod
    def _get_locked(model, pk: int, label: str):
        obj = model.objects.select_for_update().filter(pk=pk).first()
        if obj is None:
            raise NotFound(f"{label} not found.")
        return obj

    @staticmethod
    @transaction.atomic
    def archive(*, model, pk: int, actor_user_id: int | None, label: str | None = None):
        label = label or model.__name__
        obj = ArchiveService._get_locked(model, pk, label)

        if not obj.is_archived:
            obj.is_archived = True
            obj.save(update_fields=["is_archived", "updated_at"])

        AuditService.log(
            event_code=f"{model._meta.model_name}.archived",
            entity_type=model.__name__,
            entity_id=obj.pk,
            actor_user_id=actor_user_id,
        )
        return obj

    @staticmethod
    @transaction.atomic
    def restore(*, model, pk: int, actor_user_id: int | None, label: str | None = None) -> RestoreResult:
        """
        Clears the archive flag. Restoring an active row is a no-op (restored=False).
        Raises ConflictError if the restored row would break a uniqueness rule.
        """
        label = label or model.__name__
        obj = ArchiveService._get_locked(model, pk, label)

        if not obj.is_archived:
            return RestoreResult(instance=obj, restored=False)

        obj.is_archived = False
        with conflict_on_integrity(f"{label} cannot be restored: it conflicts with an active record."):
            obj.save(update_fields=["is_archived", "updated_at"])

        AuditService.log(
            event_code=f"{model._meta.model_name}.restored",
            entity_type=model.__name__,
            entity_id=obj.pk,
            actor_user_id=actor_user_id,
        )
        return RestoreResult(instance=obj, restored=True)
