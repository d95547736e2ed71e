# hms_core/medical_records/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import status

from hms_core.common.api.pagination import paginate
from hms_core.common.api.responses import success
from hms_core.common.permissions import RecordsPermission
from hms_core.common.views import ArchivableViewSet
from hms_core.iam.identity import actor_user_id
from hms_core.medical_records.api.serializers import (
    MedicalRecordCreateSerializer,
    MedicalRecordSerializer,
    MedicalRecordUpdateSerializer,
)
from hms_core.medical_records.filters import MedicalRecordFilter
from hms_core.medical_records.models import MedicalRecord
from hms_core.medical_records.selectors import get_medical_record, medical_records_qs
from hms_core.medical_records.services import MedicalRecordService


@extend_schema_view(
    archive=extend_schema(tags=["Medical Records"]),
    restore=extend_schema(tags=["Medical Records"]),
)
class MedicalRecordViewSet(ArchivableViewSet):
    queryset = MedicalRecord.objects.all()
    serializer_class = MedicalRecordSerializer
    filterset_class = MedicalRecordFilter
    permission_classes = [RecordsPermission]
    entity_label = "Medical record"

    @extend_schema(tags=["Medical Records"], responses={200: MedicalRecordSerializer(many=True)})
    def list(self, request):
        qs = self.filter_queryset(medical_records_qs())
        return paginate(
            request,
            qs,
            MedicalRecordSerializer,
            message="Medical records retrieved successfully.",
            empty_message="No medical records found.",
        )

    @extend_schema(tags=["Medical Records"], responses={200: MedicalRecordSerializer})
    def retrieve(self, request, pk=None):
        record = get_medical_record(record_id=pk)
        return success(MedicalRecordSerializer(record).data, message="Medical record retrieved successfully.")

    @extend_schema(tags=["Medical Records"], request=MedicalRecordCreateSerializer, responses={201: MedicalRecordSerializer})
    def create(self, request):
        ser = MedicalRecordCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        record = MedicalRecordService.create(**ser.validated_data, actor_user_id=actor_user_id(request))
        return success(
            MedicalRecordSerializer(get_medical_record(record_id=record.id)).data,
            message="Medical record created successfully!",
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(tags=["Medical Records"], request=MedicalRecordUpdateSerializer, responses={200: MedicalRecordSerializer})
    def update(self, request, pk=None):
        ser = MedicalRecordUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        MedicalRecordService.update(record_id=pk, **ser.validated_data, actor_user_id=actor_user_id(request))
        return success(
            MedicalRecordSerializer(get_medical_record(record_id=pk)).data,
            message="Medical record updated successfully.",
        )
