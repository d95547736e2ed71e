from __future__ import annotations

from django.conf import settings
from django.core.paginator import Page
from rest_framework.exceptions import NotFound
from rest_framework.pagination import PageNumberPagination

from hms_core.common.api.responses import success


class DefaultPagination(PageNumberPagination):
    page_size = getattr(settings, "HMS_DEFAULT_PER_PAGE", 10)
    page_size_query_param = "per_page"
    max_page_size = getattr(settings, "HMS_MAX_PER_PAGE", 100)

    def paginate_queryset(self, queryset, request, view=None):
        """
        Same as DRF, except a page past the end is an empty page rather than a 404.
        """
        try:
            return super().paginate_queryset(queryset, request, view=view)
        except NotFound as exc:
            page_size = self.get_page_size(request)
            paginator = self.django_paginator_class(queryset, page_size)
            try:
                number = int(self.get_page_number(request, paginator))
            except (TypeError, ValueError):
                raise exc from None
            if number <= paginator.num_pages:
                raise
            self.request = request
            self.page = Page([], number, paginator)
            return []

    def get_pagination_block(self) -> dict:
        page = self.page
        return {
            "current_page": page.number,
            "per_page": page.paginator.per_page,
            "total": page.paginator.count,
            "last_page": page.paginator.num_pages,
            "has_more_pages": page.has_next(),
        }

    def get_paginated_response(self, data, *, message: str = ""):
        return success(data, message=message, pagination=self.get_pagination_block())


def paginate(
    request,
    queryset,
    serializer_class,
    *,
    message: str = "",
    empty_message: str | None = None,
    paginator: DefaultPagination | None = None,
    context: dict | None = None,
):
    """
    Shared pagination helper to enforce a stable contract:
      {isSuccess, message, data: [...], pagination: {current_page, per_page, total, last_page, has_more_pages}}
    """
    p = paginator or DefaultPagination()
    ctx = {"request": request, **(context or {})}
    page = p.paginate_queryset(queryset, request)
    if page is not None:
        ser = serializer_class(page, many=True, context=ctx)
        msg = empty_message if (empty_message and not page) else message
        return p.get_paginated_response(ser.data, message=msg)

    # If pagination is disabled for some reason, fall back to a non-paginated list.
    ser = serializer_class(queryset, many=True, context=ctx)
    return success(ser.data, message=message)
