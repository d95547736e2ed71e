# hms_core/doctors/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import status

from hms_core.common.api.pagination import paginate
from hms_core.common.api.responses import success
from hms_core.common.permissions import RecordsPermission
from hms_core.common.views import ArchivableViewSet
from hms_core.doctors.api.serializers import DoctorSerializer, DoctorWriteSerializer
from hms_core.doctors.filters import DoctorFilter
from hms_core.doctors.models import Doctor
from hms_core.doctors.selectors import doctors_qs, get_doctor
from hms_core.doctors.services import DoctorService
from hms_core.iam.identity import actor_user_id


@extend_schema_view(
    archive=extend_schema(tags=["Doctors"]),
    restore=extend_schema(tags=["Doctors"]),
)
class DoctorViewSet(ArchivableViewSet):
    queryset = Doctor.objects.all()
    serializer_class = DoctorSerializer
    filterset_class = DoctorFilter
    permission_classes = [RecordsPermission]
    entity_label = "Doctor"

    @extend_schema(tags=["Doctors"], responses={200: DoctorSerializer(many=True)})
    def list(self, request):
        qs = self.filter_queryset(doctors_qs())
        return paginate(
            request,
            qs,
            DoctorSerializer,
            message="Doctors retrieved successfully.",
            empty_message="No doctors found.",
        )

    @extend_schema(tags=["Doctors"], responses={200: DoctorSerializer})
    def retrieve(self, request, pk=None):
        doctor = get_doctor(doctor_id=pk)
        return success(DoctorSerializer(doctor).data, message="Doctor retrieved successfully.")

    @extend_schema(tags=["Doctors"], request=DoctorWriteSerializer, responses={201: DoctorSerializer})
    def create(self, request):
        ser = DoctorWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        doctor = DoctorService.create(**ser.validated_data, actor_user_id=actor_user_id(request))
        return success(
            DoctorSerializer(get_doctor(doctor_id=doctor.id)).data,
            message="Doctor created successfully!",
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(tags=["Doctors"], request=DoctorWriteSerializer, responses={200: DoctorSerializer})
    def update(self, request, pk=None):
        ser = DoctorWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        DoctorService.update(doctor_id=pk, **ser.validated_data, actor_user_id=actor_user_id(request))
        return success(DoctorSerializer(get_doctor(doctor_id=pk)).data, message="Doctor updated successfully.")
