"""
Views for sales app.

- POS checkout
- Sale history and detail
- Receipt data and PDF receipts
"""

from django.http import HttpResponse

from rest_framework import generics
from rest_framework.decorators import api_view, permission_classes

from apps.core.exceptions import InvalidRequest
from apps.core.mixins import EnvelopeMixin
from apps.core.permissions import CounterPermission, IsShopStaff
from apps.core.responses import created_response, success_response
from apps.core.utils import get_or_404

from .models import Sale
from .receipt_service import ReceiptService
from .serializers import SaleCreateSerializer, SaleDetailSerializer, SaleListSerializer
from .services import SaleLineRequest, SaleRequest, create_sale


class SaleListCreateView(EnvelopeMixin, generics.ListCreateAPIView):
    """
    Sale history and POS checkout.

    Filters: ``branch``, ``customer``, ``payment_method``, ``start_date``,
    ``end_date``. The cashier's own branch takes precedence over the branch in
    the request body.
    """

    serializer_class = SaleListSerializer
    permission_classes = [CounterPermission]

    def get_queryset(self):
        queryset = Sale.objects.select_related("branch", "customer", "created_by")
        params = self.request.query_params

        if params.get("branch"):
            queryset = queryset.filter(branch_id=params["branch"])
        if params.get("customer"):
            queryset = queryset.filter(customer_id=params["customer"])
        if params.get("payment_method"):
            queryset = queryset.filter(payment_method=params["payment_method"])
        if params.get("start_date"):
            queryset = queryset.filter(sale_date__date__gte=params["start_date"])
        if params.get("end_date"):
            queryset = queryset.filter(sale_date__date__lte=params["end_date"])

        return queryset

    def create(self, request, *args, **kwargs):
        serializer = SaleCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        branch_id = request.user.branch_id or data.get("branch_id")
        if branch_id is None:
            raise InvalidRequest("Branch is required")

        sale = create_sale(
            SaleRequest(
                branch_id=branch_id,
                invoice_number=data["invoice_number"],
                items=[SaleLineRequest(**item) for item in data["items"]],
                payment_method=data["payment_method"],
                created_by_id=request.user.pk,
                customer_id=data.get("customer_id"),
                customer_name=data.get("customer_name", ""),
                payment_details=data.get("payment_details"),
                is_credit_sale=data["is_credit_sale"],
                fbr_invoice_number=data.get("fbr_invoice_number"),
            )
        )
        return created_response(SaleDetailSerializer(sale).data, "Sale completed successfully")


class SaleDetailView(EnvelopeMixin, generics.RetrieveAPIView):
    serializer_class = SaleDetailSerializer
    permission_classes = [IsShopStaff]
    queryset = Sale.objects.select_related("branch", "customer", "created_by").prefetch_related(
        "items__product"
    )


@api_view(["GET"])
@permission_classes([IsShopStaff])
def sale_receipt(request, pk):
    """Receipt data for client-side printing."""
    sale = get_or_404(Sale, pk)
    return success_response(ReceiptService.receipt_data(sale))


@api_view(["GET"])
@permission_classes([IsShopStaff])
def sale_receipt_pdf(request, pk):
    """
    PDF receipt download.

    ``?layout=thermal`` renders the 80mm layout; the default is A4.
    """
    sale = get_or_404(Sale, pk)
    format_type = "thermal" if request.query_params.get("layout") == "thermal" else "standard"
    pdf_bytes = ReceiptService.generate_pdf(sale, format_type)

    response = HttpResponse(pdf_bytes, content_type="application/pdf")
    response["Content-Disposition"] = f'inline; filename="receipt_{sale.invoice_number}.pdf"'
    return response
