# hms_core/iam/api/me.py

from __future__ import annotations

from dataclasses import asdict

from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from hms_core.common.api.responses import success
from hms_core.iam.api.serializers import IdentitySerializer
from hms_core.iam.identity import require_identity


class MeView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: IdentitySerializer}, tags=["IAM"])
    def get(self, request):
        """
        Returns the identity the request was authenticated as.
        """
        identity = require_identity(request)
        return success(
            IdentitySerializer(asdict(identity)).data,
            message="Identity resolved.",
        )
