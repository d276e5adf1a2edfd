"""
Serializers for suppliers and purchases.
"""

from decimal import Decimal

from rest_framework import serializers

from apps.core.models import PaymentMethod
from apps.core.serializers import UniqueConflictMixin, blank_to_none

from .models import Purchase, PurchaseItem, Supplier


class SupplierSerializer(UniqueConflictMixin, serializers.ModelSerializer):
    unique_conflict_fields = ("phone",)

    class Meta:
        model = Supplier
        fields = [
            "id",
            "name",
            "contact_person",
            "phone",
            "cnic",
            "ntn",
            "address",
            "notes",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]
        extra_kwargs = {"phone": {"validators": []}}

    def validate_phone(self, value):
        return blank_to_none(value)


class PurchaseItemSerializer(serializers.ModelSerializer):
    product_code = serializers.CharField(source="product.code", read_only=True)
    product_name = serializers.CharField(source="product.name", read_only=True)

    class Meta:
        model = PurchaseItem
        fields = [
            "id",
            "product",
            "product_code",
            "product_name",
            "quantity",
            "unit_price",
            "gst_percent",
            "line_total",
        ]


class PurchaseSerializer(serializers.ModelSerializer):
    """Purchase detail with line items."""

    supplier_name = serializers.CharField(source="supplier.name", read_only=True)
    branch_name = serializers.CharField(source="branch.name", read_only=True)
    items = PurchaseItemSerializer(many=True, read_only=True)

    class Meta:
        model = Purchase
        fields = [
            "id",
            "branch",
            "branch_name",
            "supplier",
            "supplier_name",
            "invoice_number",
            "purchase_date",
            "subtotal",
            "gst_amount",
            "total_amount",
            "discount_amount",
            "paid_amount",
            "due_amount",
            "payment_method",
            "notes",
            "created_by",
            "created_at",
            "items",
        ]


class PurchaseListSerializer(PurchaseSerializer):
    items = None

    class Meta(PurchaseSerializer.Meta):
        fields = [name for name in PurchaseSerializer.Meta.fields if name != "items"]


class PurchaseItemCreateSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    quantity = serializers.DecimalField(
        max_digits=12, decimal_places=3, min_value=Decimal("0.001")
    )
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal("0"))
    gst_percent = serializers.DecimalField(
        max_digits=5,
        decimal_places=2,
        min_value=Decimal("0"),
        max_value=Decimal("100"),
        required=False,
        allow_null=True,
    )


class PurchaseCreateSerializer(serializers.Serializer):
    """Input for recording a purchase."""

    branch_id = serializers.UUIDField(required=False, allow_null=True)
    supplier_id = serializers.UUIDField()
    invoice_number = serializers.CharField(max_length=100)
    purchase_date = serializers.DateField()
    items = PurchaseItemCreateSerializer(many=True, allow_empty=False)
    discount_amount = serializers.DecimalField(
        max_digits=14, decimal_places=2, min_value=Decimal("0"), default=Decimal("0")
    )
    paid_amount = serializers.DecimalField(
        max_digits=14, decimal_places=2, min_value=Decimal("0"), default=Decimal("0")
    )
    payment_method = serializers.ChoiceField(choices=PaymentMethod.for_purchases())
    notes = serializers.CharField(required=False, allow_blank=True, default="")
