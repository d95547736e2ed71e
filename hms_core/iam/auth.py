# hms_core/iam/auth.py
from __future__ import annotations

from django.conf import settings
from rest_framework_simplejwt.authentication import JWTAuthentication

from hms_core.iam.identity import resolve_identity


class CookieOrHeaderJWTAuthentication(JWTAuthentication):
    """
    simplejwt access tokens from the Authorization header, falling back to the
    hms_access cookie set by /api/login. A successful match also stores the
    resolved Identity on request.identity.
    """

    def _cookie_token(self, request) -> str | None:
        name = settings.SIMPLE_JWT.get("AUTH_COOKIE", "hms_access")
        return request.COOKIES.get(name) or None

    def authenticate(self, request):
        if self.get_header(request) is not None:
            result = super().authenticate(request)
        else:
            raw = self._cookie_token(request)
            if raw is None:
                return None
            token = self.get_validated_token(raw)
            result = (self.get_user(token), token)

        if result is None:
            return None

        user, token = result
        request.identity = resolve_identity(user)
        return user, token
