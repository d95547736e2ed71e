from drf_spectacular.extensions import OpenApiAuthenticationExtension


class HmsJWTScheme(OpenApiAuthenticationExtension):
    target_class = "hms_core.iam.auth.CookieOrHeaderJWTAuthentication"
    name = "hmsJWT"

    def get_security_definition(self, auto_schema):
        return {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
            "description": (
                "Access token from /api/login. Send it as `Authorization: Bearer <token>`; "
                "browsers get it automatically from the hms_access cookie."
            ),
        }
