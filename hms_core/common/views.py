# hms_core/common/views.py
from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework import viewsets

from hms_core.common.api.responses import success
from hms_core.common.archive import ArchiveService
from hms_core.iam.identity import actor_user_id


class ArchivableViewSet(viewsets.GenericViewSet):
    """
    Base ViewSet for soft-deletable collections.

    Subclasses set `queryset` (the model) and `entity_label` ("Doctor").
    Archive and restore go through ArchiveService so every entity shares
    the same audit trail and conflict handling.
    """
    entity_label = "Record"

    def _model(self):
        return self.queryset.model

    @extend_schema(request=None, responses={200: OpenApiTypes.OBJECT})
    def archive(self, request, pk=None):
        ArchiveService.archive(
            model=self._model(),
            pk=pk,
            actor_user_id=actor_user_id(request),
            label=self.entity_label,
        )
        return success(message=f"{self.entity_label} archived successfully.")

    @extend_schema(request=None, responses={200: OpenApiTypes.OBJECT})
    def restore(self, request, pk=None):
        result = ArchiveService.restore(
            model=self._model(),
            pk=pk,
            actor_user_id=actor_user_id(request),
            label=self.entity_label,
        )
        if not result.restored:
            return success(message=f"{self.entity_label} is already active.")
        return success(message=f"{self.entity_label} restored successfully.")
