"""
Views for suppliers and purchases.
"""

from rest_framework import filters, generics

from apps.core.exceptions import InvalidRequest
from apps.core.mixins import EnvelopeMixin
from apps.core.permissions import CatalogPermission, IsShopStaff
from apps.core.responses import created_response

from .models import Purchase, Supplier
from .serializers import (
    PurchaseCreateSerializer,
    PurchaseListSerializer,
    PurchaseSerializer,
    SupplierSerializer,
)
from .services import PurchaseLineRequest, PurchaseRequest, create_purchase


class SupplierListCreateView(EnvelopeMixin, generics.ListCreateAPIView):
    serializer_class = SupplierSerializer
    permission_classes = [CatalogPermission]
    queryset = Supplier.objects.all()
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ["name", "contact_person", "phone", "ntn"]
    ordering = ["name"]
    success_messages = {"POST": "Supplier created successfully"}


class SupplierDetailView(EnvelopeMixin, generics.RetrieveUpdateDestroyAPIView):
    serializer_class = SupplierSerializer
    permission_classes = [CatalogPermission]
    queryset = Supplier.objects.all()


class PurchaseListCreateView(EnvelopeMixin, generics.ListCreateAPIView):
    """
    Purchase history and purchase recording.

    Filters: ``branch``, ``supplier``, ``start_date``, ``end_date``.
    """

    serializer_class = PurchaseListSerializer
    permission_classes = [CatalogPermission]

    def get_queryset(self):
        queryset = Purchase.objects.select_related("supplier", "branch")
        params = self.request.query_params

        if params.get("branch"):
            queryset = queryset.filter(branch_id=params["branch"])
        if params.get("supplier"):
            queryset = queryset.filter(supplier_id=params["supplier"])
        if params.get("start_date"):
            queryset = queryset.filter(purchase_date__gte=params["start_date"])
        if params.get("end_date"):
            queryset = queryset.filter(purchase_date__lte=params["end_date"])

        return queryset

    def create(self, request, *args, **kwargs):
        serializer = PurchaseCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        branch_id = data.get("branch_id") or request.user.branch_id
        if branch_id is None:
            raise InvalidRequest("Branch is required")

        purchase = create_purchase(
            PurchaseRequest(
                branch_id=branch_id,
                supplier_id=data["supplier_id"],
                invoice_number=data["invoice_number"],
                purchase_date=data["purchase_date"],
                items=[PurchaseLineRequest(**item) for item in data["items"]],
                payment_method=data["payment_method"],
                created_by_id=request.user.pk,
                discount_amount=data["discount_amount"],
                paid_amount=data["paid_amount"],
                notes=data.get("notes", ""),
            )
        )
        return created_response(PurchaseSerializer(purchase).data, "Purchase recorded successfully")


class PurchaseDetailView(EnvelopeMixin, generics.RetrieveAPIView):
    serializer_class = PurchaseSerializer
    permission_classes = [IsShopStaff]
    queryset = Purchase.objects.select_related("supplier", "branch").prefetch_related(
        "items__product"
    )
