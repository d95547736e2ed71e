# hms_core/payments/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import status

from hms_core.common.api.pagination import paginate
from hms_core.common.api.responses import success
from hms_core.common.permissions import PaymentPermission
from hms_core.common.views import ArchivableViewSet
from hms_core.iam.identity import actor_user_id
from hms_core.payments.api.serializers import PaymentSerializer, PaymentWriteSerializer
from hms_core.payments.filters import PaymentFilter
from hms_core.payments.models import Payment
from hms_core.payments.selectors import get_payment, payments_qs
from hms_core.payments.services import PaymentService


@extend_schema_view(
    archive=extend_schema(tags=["Payments"]),
    restore=extend_schema(tags=["Payments"]),
)
class PaymentViewSet(ArchivableViewSet):
    queryset = Payment.objects.all()
    serializer_class = PaymentSerializer
    filterset_class = PaymentFilter
    permission_classes = [PaymentPermission]
    entity_label = "Payment"

    @extend_schema(tags=["Payments"], responses={200: PaymentSerializer(many=True)})
    def list(self, request):
        qs = self.filter_queryset(payments_qs())
        return paginate(
            request,
            qs,
            PaymentSerializer,
            message="Payments retrieved successfully.",
            empty_message="No payments found.",
        )

    @extend_schema(tags=["Payments"], responses={200: PaymentSerializer})
    def retrieve(self, request, pk=None):
        payment = get_payment(payment_id=pk)
        return success(PaymentSerializer(payment).data, message="Payment retrieved successfully.")

    @extend_schema(tags=["Payments"], request=PaymentWriteSerializer, responses={201: PaymentSerializer})
    def create(self, request):
        ser = PaymentWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        payment = PaymentService.record(**ser.validated_data, actor_user_id=actor_user_id(request))
        return success(
            PaymentSerializer(get_payment(payment_id=payment.id)).data,
            message="Payment recorded successfully!",
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(tags=["Payments"], request=PaymentWriteSerializer, responses={200: PaymentSerializer})
    def update(self, request, pk=None):
        ser = PaymentWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        PaymentService.update(payment_id=pk, **ser.validated_data, actor_user_id=actor_user_id(request))
        return success(PaymentSerializer(get_payment(payment_id=pk)).data, message="Payment updated successfully.")

    @extend_schema(tags=["Payments"], request=None, responses={200: PaymentSerializer})
    def confirm(self, request, pk=None):
        PaymentService.confirm(payment_id=pk, actor_user_id=actor_user_id(request))
        return success(PaymentSerializer(get_payment(payment_id=pk)).data, message="Payment confirmed successfully.")
