from __future__ import annotations

import django_filters

from hms_core.common.filters import ArchivableFilterSet
from hms_core.patients.models import Gender, Patient


class PatientFilter(ArchivableFilterSet):
    gender = django_filters.ChoiceFilter(choices=Gender.choices)

    search_fields = ("full_name", "email", "phone_number", "address")

    class Meta:
        model = Patient
        fields = ["archived", "search", "gender"]
