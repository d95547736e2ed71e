# hms_core/common/api/responses.py
from __future__ import annotations

from typing import Any

from rest_framework import status as http_status
from rest_framework.response import Response


def success(
    data: Any = None,
    *,
    message: str = "",
    status: int = http_status.HTTP_200_OK,
    pagination: dict | None = None,
) -> Response:
    """
    Success envelope: {isSuccess, message, data?, pagination?}
    """
    body: dict[str, Any] = {"isSuccess": True, "message": message}
    if data is not None:
        body["data"] = data
    if pagination is not None:
        body["pagination"] = pagination
    return Response(body, status=status)
