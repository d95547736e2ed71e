from __future__ import annotations

import django_filters

from hms_core.common.filters import ArchivableFilterSet
from hms_core.doctors.models import Doctor


class DoctorFilter(ArchivableFilterSet):
    specialization = django_filters.NumberFilter(field_name="specialization_id")

    search_fields = ("doctor_name", "email", "qualifications", "specialization__name")

    class Meta:
        model = Doctor
        fields = ["archived", "search", "specialization"]
