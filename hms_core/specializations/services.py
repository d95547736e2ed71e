# hms_core/specializations/services.py
from __future__ import annotations

from django.db import transaction
from rest_framework.exceptions import NotFound

from hms_core.audit.services import AuditService
from hms_core.common.db import conflict_on_integrity
from hms_core.specializations.models import Specialization

DUPLICATE_NAME_MSG = "A specialization with this name already exists."


def _clean_conditions(conditions) -> list[str]:
    seen: list[str] = []
    for c in conditions or []:
        c = str(c).strip()
        if c and c not in seen:
            seen.append(c)
    return seen


class SpecializationService:
    @staticmethod
    @transaction.atomic
    def create(*, name: str, description: str = "", common_conditions=None, actor_user_id: int | None = None) -> Specialization:
        with conflict_on_integrity(DUPLICATE_NAME_MSG):
            spec = Specialization.objects.create(
                name=name.strip(),
                description=description or "",
                common_conditions=_clean_conditions(common_conditions),
            )

        AuditService.log(
            event_code="specialization.created",
            entity_type="Specialization",
            entity_id=spec.id,
            actor_user_id=actor_user_id,
            metadata={"name": spec.name},
        )
        return spec

    @staticmethod
    @transaction.atomic
    def update(
        *,
        specialization_id: int,
        name: str,
        description: str = "",
        common_conditions=None,
        actor_user_id: int | None = None,
    ) -> Specialization:
        spec = Specialization.objects.select_for_update().filter(id=specialization_id, is_archived=False).first()
        if spec is None:
            raise NotFound("Specialization not found.")

        spec.name = name.strip()
        spec.description = description or ""
        spec.common_conditions = _clean_conditions(common_conditions)
        with conflict_on_integrity(DUPLICATE_NAME_MSG):
            spec.save(update_fields=["name", "description", "common_conditions", "updated_at"])

        AuditService.log(
            event_code="specialization.updated",
            entity_type="Specialization",
            entity_id=spec.id,
            actor_user_id=actor_user_id,
        )
        return spec
