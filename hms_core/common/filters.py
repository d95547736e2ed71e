# hms_core/common/filters.py
from __future__ import annotations

from functools import reduce
from operator import or_

import django_filters
from django.db.models import Q


class ArchivableFilterSet(django_filters.FilterSet):
    """
    Base list filter:
      - archived=false by default (archived=true lists archived rows only)
      - search: case-insensitive substring over `search_fields`
    """
    archived = django_filters.BooleanFilter(field_name="is_archived")
    search = django_filters.CharFilter(method="filter_search")

    search_fields: tuple[str, ...] = ()

    def __init__(self, data=None, *args, **kwargs):
        if data is not None:
            data = data.copy()
            # Only an explicit true/1 lists archived rows; anything else stays on the active set.
            raw = str(data.get("archived") or "").strip().lower()
            data["archived"] = "true" if raw in ("true", "1") else "false"
        super().__init__(data, *args, **kwargs)

    def search_queryset(self, queryset):
        return queryset

    def filter_search(self, queryset, name, value):
        value = (value or "").strip()
        if not value or not self.search_fields:
            return queryset

        queryset = self.search_queryset(queryset)
        q = reduce(or_, (Q(**{f"{f}__icontains": value}) for f in self.search_fields))
        return queryset.filter(q)
