# hms_core/common/models.py
from __future__ import annotations

from django.db import models


class TimeStampedModel(models.Model):
    """
    Standard timestamps for all entities.
    """
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class ArchivableQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_archived=False)

    def archived(self):
        return self.filter(is_archived=True)


class ArchivableModel(TimeStampedModel):
    """
    Soft delete: rows are archived instead of removed.
    Default listings hide archived rows; detail lookups decide per entity.
    """
    is_archived = models.BooleanField(default=False, db_index=True)

    objects = ArchivableQuerySet.as_manager()

    class Meta:
        abstract = True
