# hms_core/specializations/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import status

from hms_core.common.api.pagination import paginate
from hms_core.common.api.responses import success
from hms_core.common.permissions import RecordsPermission
from hms_core.common.views import ArchivableViewSet
from hms_core.iam.identity import actor_user_id
from hms_core.specializations.api.serializers import SpecializationSerializer, SpecializationWriteSerializer
from hms_core.specializations.filters import SpecializationFilter
from hms_core.specializations.models import Specialization
from hms_core.specializations.selectors import get_specialization, specializations_qs
from hms_core.specializations.services import SpecializationService


@extend_schema_view(
    archive=extend_schema(tags=["Specializations"]),
    restore=extend_schema(tags=["Specializations"]),
)
class SpecializationViewSet(ArchivableViewSet):
    queryset = Specialization.objects.all()
    serializer_class = SpecializationSerializer
    filterset_class = SpecializationFilter
    permission_classes = [RecordsPermission]
    entity_label = "Specialization"

    @extend_schema(tags=["Specializations"], responses={200: SpecializationSerializer(many=True)})
    def list(self, request):
        qs = self.filter_queryset(specializations_qs())
        return paginate(
            request,
            qs,
            SpecializationSerializer,
            message="Specializations retrieved successfully.",
            empty_message="No specializations found.",
        )

    @extend_schema(tags=["Specializations"], responses={200: SpecializationSerializer})
    def retrieve(self, request, pk=None):
        spec = get_specialization(specialization_id=pk)
        return success(SpecializationSerializer(spec).data, message="Specialization retrieved successfully.")

    @extend_schema(tags=["Specializations"], request=SpecializationWriteSerializer, responses={201: SpecializationSerializer})
    def create(self, request):
        ser = SpecializationWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        spec = SpecializationService.create(**ser.validated_data, actor_user_id=actor_user_id(request))
        return success(
            SpecializationSerializer(spec).data,
            message="Specialization created successfully!",
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(tags=["Specializations"], request=SpecializationWriteSerializer, responses={200: SpecializationSerializer})
    def update(self, request, pk=None):
        ser = SpecializationWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        spec = SpecializationService.update(
            specialization_id=pk,
            **ser.validated_data,
            actor_user_id=actor_user_id(request),
        )
        return success(SpecializationSerializer(spec).data, message="Specialization updated successfully.")
