"""
Serializers for inventory models.
"""

from rest_framework import serializers

from apps.core.serializers import UniqueConflictMixin, blank_to_none

from .models import Brand, Category, Product, StockAdjustment


class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ["id", "name", "name_ur", "created_at", "updated_at"]
        read_only_fields = ["id", "created_at", "updated_at"]


class BrandSerializer(serializers.ModelSerializer):
    class Meta:
        model = Brand
        fields = ["id", "name", "name_ur", "created_at", "updated_at"]
        read_only_fields = ["id", "created_at", "updated_at"]


class ProductSerializer(UniqueConflictMixin, serializers.ModelSerializer):
    """
    Product create and detail.

    ``stock_quantity`` may be set once as opening stock; afterwards it only
    changes through sales, purchases and stock adjustments.
    """

    unique_conflict_fields = ("code",)

    brand_name = serializers.CharField(source="brand.name", read_only=True, default=None)
    category_name = serializers.CharField(source="category.name", read_only=True, default=None)
    is_low_stock = serializers.BooleanField(read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "code",
            "barcode",
            "name",
            "name_ur",
            "brand",
            "brand_name",
            "category",
            "category_name",
            "model_compatibility",
            "purchase_price",
            "selling_price",
            "wholesale_price",
            "gst_percent",
            "stock_quantity",
            "min_stock_level",
            "is_low_stock",
            "images",
            "status",
            "notes",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]
        extra_kwargs = {"code": {"validators": []}}

    def validate_barcode(self, value):
        return blank_to_none(value)

    def validate_gst_percent(self, value):
        if value is not None and not 0 <= value <= 100:
            raise serializers.ValidationError("GST percent must be between 0 and 100.")
        return value

    def validate_images(self, value):
        if not isinstance(value, list) or not all(isinstance(url, str) for url in value):
            raise serializers.ValidationError("Images must be a list of URLs.")
        return value

    def update(self, instance, validated_data):
        validated_data.pop("stock_quantity", None)
        return super().update(instance, validated_data)


class ProductListSerializer(serializers.ModelSerializer):
    """Compact product row for lists and POS search."""

    brand_name = serializers.CharField(source="brand.name", read_only=True, default=None)
    category_name = serializers.CharField(source="category.name", read_only=True, default=None)

    class Meta:
        model = Product
        fields = [
            "id",
            "code",
            "barcode",
            "name",
            "name_ur",
            "brand_name",
            "category_name",
            "selling_price",
            "wholesale_price",
            "gst_percent",
            "stock_quantity",
            "min_stock_level",
            "status",
        ]


class StockAdjustmentSerializer(serializers.ModelSerializer):
    product_code = serializers.CharField(source="product.code", read_only=True)
    product_name = serializers.CharField(source="product.name", read_only=True)
    adjusted_by_username = serializers.CharField(source="adjusted_by.username", read_only=True)

    class Meta:
        model = StockAdjustment
        fields = [
            "id",
            "branch",
            "product",
            "product_code",
            "product_name",
            "quantity_change",
            "reason",
            "notes",
            "adjusted_by",
            "adjusted_by_username",
            "created_at",
        ]


class StockAdjustmentCreateSerializer(serializers.Serializer):
    """
    Input for a stock adjustment.

    ``reason`` is a plain string here so unknown reasons reach the service and
    are reported as an invalid reason.
    """

    product_id = serializers.UUIDField()
    branch_id = serializers.UUIDField(required=False, allow_null=True)
    quantity_change = serializers.IntegerField()
    reason = serializers.CharField(max_length=20)
    notes = serializers.CharField(required=False, allow_blank=True, default="")

    def validate_quantity_change(self, value):
        if value == 0:
            raise serializers.ValidationError("Quantity change cannot be zero.")
        return value
