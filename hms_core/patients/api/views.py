# hms_core/patients/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import status

from hms_core.common.api.pagination import paginate
from hms_core.common.api.responses import success
from hms_core.common.permissions import RecordsPermission
from hms_core.common.views import ArchivableViewSet
from hms_core.iam.identity import actor_user_id
from hms_core.patients.api.serializers import PatientSerializer, PatientWriteSerializer
from hms_core.patients.filters import PatientFilter
from hms_core.patients.models import Patient
from hms_core.patients.selectors import get_patient, patients_qs
from hms_core.patients.services import PatientService


@extend_schema_view(
    archive=extend_schema(tags=["Patients"]),
    restore=extend_schema(tags=["Patients"]),
)
class PatientViewSet(ArchivableViewSet):
    queryset = Patient.objects.all()
    serializer_class = PatientSerializer
    filterset_class = PatientFilter
    permission_classes = [RecordsPermission]
    entity_label = "Patient"

    @extend_schema(tags=["Patients"], responses={200: PatientSerializer(many=True)})
    def list(self, request):
        qs = self.filter_queryset(patients_qs())
        return paginate(
            request,
            qs,
            PatientSerializer,
            message="Patients retrieved successfully.",
            empty_message="No patients found.",
        )

    @extend_schema(tags=["Patients"], responses={200: PatientSerializer})
    def retrieve(self, request, pk=None):
        patient = get_patient(patient_id=pk)
        return success(PatientSerializer(patient).data, message="Patient retrieved successfully.")

    @extend_schema(tags=["Patients"], request=PatientWriteSerializer, responses={201: PatientSerializer})
    def create(self, request):
        ser = PatientWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        patient = PatientService.register(**ser.validated_data, actor_user_id=actor_user_id(request))
        return success(
            PatientSerializer(patient).data,
            message="Patient registered successfully!",
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(tags=["Patients"], request=PatientWriteSerializer, responses={200: PatientSerializer})
    def update(self, request, pk=None):
        ser = PatientWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        patient = PatientService.update(patient_id=pk, **ser.validated_data, actor_user_id=actor_user_id(request))
        return success(PatientSerializer(patient).data, message="Patient updated successfully!")
