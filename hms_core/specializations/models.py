# hms_core/specializations/models.py
from django.db import models

from hms_core.common.models import ArchivableModel


class Specialization(ArchivableModel):
    name = models.CharField(max_length=255, unique=True)
    description = models.TextField(blank=True, default="")
    # Ordered list of condition strings.
    common_conditions = models.JSONField(default=list, blank=True)

    class Meta:
        db_table = "specializations_specialization"
        ordering = ("name",)

    def __str__(self) -> str:
        return self.name
