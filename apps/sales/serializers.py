"""
Serializers for sales app.

- Sale and sale item read serializers
- Checkout input validation for the POS
"""

from decimal import Decimal

from rest_framework import serializers

from apps.core.models import PaymentMethod

from .models import Sale, SaleItem


class SaleItemSerializer(serializers.ModelSerializer):
    product_code = serializers.CharField(source="product.code", read_only=True)
    product_name = serializers.CharField(source="product.name", read_only=True)
    product_name_ur = serializers.CharField(source="product.name_ur", read_only=True)

    class Meta:
        model = SaleItem
        fields = [
            "id",
            "product",
            "product_code",
            "product_name",
            "product_name_ur",
            "quantity",
            "unit_price",
            "discount_per_item",
            "gst_percent",
            "line_total",
        ]


class SaleListSerializer(serializers.ModelSerializer):
    """Sale header without line items."""

    branch_name = serializers.CharField(source="branch.name", read_only=True)
    customer_display = serializers.CharField(source="get_customer_display", read_only=True)
    created_by_username = serializers.CharField(source="created_by.username", read_only=True)
    balance_due = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)

    class Meta:
        model = Sale
        fields = [
            "id",
            "invoice_number",
            "fbr_invoice_number",
            "branch",
            "branch_name",
            "customer",
            "customer_name",
            "customer_display",
            "created_by",
            "created_by_username",
            "sale_date",
            "subtotal",
            "discount_amount",
            "gst_amount",
            "total_amount",
            "paid_amount",
            "balance_due",
            "payment_method",
            "payment_details",
            "is_credit_sale",
        ]


class SaleDetailSerializer(SaleListSerializer):
    items = SaleItemSerializer(many=True, read_only=True)

    class Meta(SaleListSerializer.Meta):
        fields = SaleListSerializer.Meta.fields + ["items"]


class SaleItemCreateSerializer(serializers.Serializer):
    """One checkout line."""

    product_id = serializers.UUIDField()
    quantity = serializers.DecimalField(
        max_digits=12, decimal_places=3, min_value=Decimal("0.001")
    )
    unit_price = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal("0.01")
    )
    discount_per_item = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal("0"), default=Decimal("0")
    )
    gst_percent = serializers.DecimalField(
        max_digits=5,
        decimal_places=2,
        min_value=Decimal("0"),
        max_value=Decimal("100"),
        required=False,
        allow_null=True,
    )

    def validate(self, attrs):
        if attrs["discount_per_item"] > attrs["unit_price"]:
            raise serializers.ValidationError(
                {"discount_per_item": "Discount cannot exceed the unit price."}
            )
        return attrs


class SaleCreateSerializer(serializers.Serializer):
    """
    Checkout input.

    ``is_credit_sale`` defaults to true when the payment method is credit.
    """

    branch_id = serializers.UUIDField(required=False, allow_null=True)
    customer_id = serializers.UUIDField(required=False, allow_null=True)
    customer_name = serializers.CharField(
        max_length=255, required=False, allow_blank=True, default=""
    )
    invoice_number = serializers.CharField(max_length=50)
    fbr_invoice_number = serializers.IntegerField(required=False, allow_null=True, min_value=1)
    items = SaleItemCreateSerializer(many=True, allow_empty=False)
    payment_method = serializers.ChoiceField(choices=PaymentMethod.for_sales())
    payment_details = serializers.JSONField(required=False, allow_null=True, default=None)
    is_credit_sale = serializers.BooleanField(required=False, allow_null=True, default=None)

    def validate(self, attrs):
        if attrs.get("is_credit_sale") is None:
            attrs["is_credit_sale"] = attrs["payment_method"] == PaymentMethod.CREDIT
        if attrs["payment_method"] == PaymentMethod.MIXED and not attrs.get("payment_details"):
            raise serializers.ValidationError(
                {"payment_details": "Mixed payments need a payment breakdown."}
            )
        return attrs
