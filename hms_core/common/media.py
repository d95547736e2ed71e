# hms_core/common/media.py
from __future__ import annotations

from django.conf import settings


def image_url(path: str | None) -> str:
    """
    Public URL for a stored image path, or the placeholder when none is set.
    """
    if not path:
        return getattr(settings, "HMS_DEFAULT_IMAGE_URL", "")
    if path.startswith(("http://", "https://", "/")):
        return path
    return f"{settings.MEDIA_URL.rstrip('/')}/{path.lstrip('/')}"
