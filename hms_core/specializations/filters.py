from __future__ import annotations

from hms_core.common.filters import ArchivableFilterSet
from hms_core.specializations.models import Specialization


class SpecializationFilter(ArchivableFilterSet):
    search_fields = ("name", "description")

    class Meta:
        model = Specialization
        fields = ["archived", "search"]
