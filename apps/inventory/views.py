"""
Views for the product catalog and stock adjustments.
"""

from rest_framework import filters, generics
from rest_framework.decorators import api_view, permission_classes

from apps.core.mixins import EnvelopeMixin
from apps.core.permissions import CanManageInventory, CatalogPermission, IsShopStaff
from apps.core.responses import created_response, success_response
from apps.core.utils import get_or_404

from .models import Brand, Category, Product, StockAdjustment
from .serializers import (
    BrandSerializer,
    CategorySerializer,
    ProductListSerializer,
    ProductSerializer,
    StockAdjustmentCreateSerializer,
    StockAdjustmentSerializer,
)
from .services import create_stock_adjustment, low_stock_products, search_products


# Categories and brands


class CategoryListCreateView(EnvelopeMixin, generics.ListCreateAPIView):
    serializer_class = CategorySerializer
    permission_classes = [CatalogPermission]
    queryset = Category.objects.all()
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ["name", "name_ur"]
    ordering = ["name"]
    success_messages = {"POST": "Category created successfully"}


class CategoryDetailView(EnvelopeMixin, generics.RetrieveUpdateDestroyAPIView):
    serializer_class = CategorySerializer
    permission_classes = [CatalogPermission]
    queryset = Category.objects.all()


class BrandListCreateView(EnvelopeMixin, generics.ListCreateAPIView):
    serializer_class = BrandSerializer
    permission_classes = [CatalogPermission]
    queryset = Brand.objects.all()
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ["name", "name_ur"]
    ordering = ["name"]
    success_messages = {"POST": "Brand created successfully"}


class BrandDetailView(EnvelopeMixin, generics.RetrieveUpdateDestroyAPIView):
    serializer_class = BrandSerializer
    permission_classes = [CatalogPermission]
    queryset = Brand.objects.all()


# Products


class ProductListCreateView(EnvelopeMixin, generics.ListCreateAPIView):
    """
    Product list with search and filters, and product creation.

    Filters: ``status``, ``category``, ``brand``; search over code, barcode
    and names.
    """

    permission_classes = [CatalogPermission]
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ["code", "barcode", "name", "name_ur"]
    ordering_fields = ["code", "name", "selling_price", "stock_quantity", "created_at"]
    ordering = ["name"]
    success_messages = {"POST": "Product created successfully"}

    def get_serializer_class(self):
        if self.request.method == "POST":
            return ProductSerializer
        return ProductListSerializer

    def get_queryset(self):
        queryset = Product.objects.select_related("brand", "category")

        status_filter = self.request.query_params.get("status")
        if status_filter:
            queryset = queryset.filter(status=status_filter)

        category = self.request.query_params.get("category")
        if category:
            queryset = queryset.filter(category_id=category)

        brand = self.request.query_params.get("brand")
        if brand:
            queryset = queryset.filter(brand_id=brand)

        return queryset


class ProductDetailView(EnvelopeMixin, generics.RetrieveUpdateDestroyAPIView):
    serializer_class = ProductSerializer
    permission_classes = [CatalogPermission]
    queryset = Product.objects.select_related("brand", "category")
    success_messages = {
        "PUT": "Product updated successfully",
        "PATCH": "Product updated successfully",
    }


@api_view(["GET"])
@permission_classes([IsShopStaff])
def product_search(request):
    """POS lookup: active products matching ``?q=`` by code, barcode or name."""
    term = request.query_params.get("q", "")
    try:
        limit = min(int(request.query_params.get("limit", 20)), 100)
    except ValueError:
        limit = 20
    products = search_products(term, limit=limit)
    return success_response(ProductListSerializer(products, many=True).data)


@api_view(["PATCH", "POST"])
@permission_classes([CanManageInventory])
def product_toggle_status(request, pk):
    """Flip a product between active and inactive."""
    product = get_or_404(Product, pk)
    product.toggle_status()
    return success_response(
        ProductSerializer(product).data, f"Product is now {product.get_status_display().lower()}"
    )


@api_view(["GET"])
@permission_classes([IsShopStaff])
def low_stock_list(request):
    """Active products at or below their minimum stock level."""
    products = low_stock_products().select_related("brand", "category")
    return success_response(ProductListSerializer(products, many=True).data)


# Stock adjustments


class StockAdjustmentListCreateView(EnvelopeMixin, generics.ListCreateAPIView):
    """
    Adjustment history and new adjustments.

    Filters: ``branch``, ``product``, ``reason``, ``start_date``, ``end_date``.
    """

    permission_classes = [CatalogPermission]
    serializer_class = StockAdjustmentSerializer

    def get_queryset(self):
        queryset = StockAdjustment.objects.select_related("product", "adjusted_by", "branch")
        params = self.request.query_params

        if params.get("branch"):
            queryset = queryset.filter(branch_id=params["branch"])
        if params.get("product"):
            queryset = queryset.filter(product_id=params["product"])
        if params.get("reason"):
            queryset = queryset.filter(reason=params["reason"])
        if params.get("start_date"):
            queryset = queryset.filter(created_at__date__gte=params["start_date"])
        if params.get("end_date"):
            queryset = queryset.filter(created_at__date__lte=params["end_date"])

        return queryset.order_by("-created_at")

    def create(self, request, *args, **kwargs):
        serializer = StockAdjustmentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        branch_id = data.get("branch_id") or request.user.branch_id
        adjustment = create_stock_adjustment(
            product_id=data["product_id"],
            quantity_change=data["quantity_change"],
            reason=data["reason"],
            adjusted_by_id=request.user.pk,
            branch_id=branch_id,
            notes=data.get("notes", ""),
        )
        return created_response(
            StockAdjustmentSerializer(adjustment).data, "Stock adjusted successfully"
        )


class StockAdjustmentDetailView(EnvelopeMixin, generics.RetrieveAPIView):
    serializer_class = StockAdjustmentSerializer
    permission_classes = [IsShopStaff]
    queryset = StockAdjustment.objects.select_related("product", "adjusted_by", "branch")
