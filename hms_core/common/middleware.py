from __future__ import annotations

import logging
import re
import time

from django.utils.deprecation import MiddlewareMixin

from hms_core.common.api.exceptions import ensure_request_id

logger = logging.getLogger(__name__)

_REQUEST_ID_RE = re.compile(r"^[A-Za-z0-9\-_.]{8,64}$")


class RequestContextMiddleware(MiddlewareMixin):
    """
    Attaches request.request_id and logs one line per API request.

    Behavior:
      - Accepts a well-formed incoming X-Request-Id, otherwise generates one.
      - Echoes the id back in the X-Request-Id response header.
      - Logs method, path, status and duration for /api/ paths.
      - Docs/schema/admin endpoints are not logged.
    """

    REQUEST_ID_META_KEY = "HTTP_X_REQUEST_ID"
    RESPONSE_HEADER = "X-Request-Id"

    LOGGED_PREFIXES = ("/api/",)
    QUIET_PREFIXES = ("/api/docs/", "/api/schema/", "/admin/")

    def _should_log(self, path: str) -> bool:
        if any(path.startswith(p) for p in self.QUIET_PREFIXES):
            return False
        return any(path.startswith(p) for p in self.LOGGED_PREFIXES)

    def process_request(self, request):
        incoming = request.META.get(self.REQUEST_ID_META_KEY, "")
        if incoming and _REQUEST_ID_RE.match(incoming):
            request.request_id = incoming
        else:
            ensure_request_id(request)
        request._started_at = time.monotonic()
        return None

    def process_response(self, request, response):
        rid = ensure_request_id(request)
        response[self.RESPONSE_HEADER] = rid

        path = getattr(request, "path", "") or ""
        if self._should_log(path):
            started = getattr(request, "_started_at", None)
            elapsed_ms = (time.monotonic() - started) * 1000 if started is not None else 0.0
            level = logging.WARNING if response.status_code >= 500 else logging.INFO
            logger.log(
                level,
                "%s %s -> %s (%.1fms) request_id=%s",
                request.method,
                path,
                response.status_code,
                elapsed_ms,
                rid,
            )
        return response
