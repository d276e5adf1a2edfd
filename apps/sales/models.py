"""
Sales models for the retail shop.

A sale is a POS checkout: a header with totals and payment information, and
one line per product sold. Sales are immutable once committed; stock errors
are corrected through stock adjustments.
"""

import uuid
from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone

from apps.core.models import Branch, PaymentMethod, User
from apps.crm.models import Customer
from apps.inventory.models import Product


class Sale(models.Model):
    """
    Sale model for tracking point-of-sale transactions.

    ``total_amount = subtotal - discount_amount + gst_amount``. Credit sales
    start with ``paid_amount`` of zero; all others are paid in full.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the sale",
    )

    invoice_number = models.CharField(
        max_length=50,
        help_text="Invoice number printed on the receipt",
    )

    fbr_invoice_number = models.BigIntegerField(
        null=True,
        blank=True,
        help_text="Invoice number issued by the FBR POS integration",
    )

    # Relationships
    branch = models.ForeignKey(
        Branch,
        on_delete=models.PROTECT,
        related_name="sales",
        help_text="Branch where the sale was made",
    )

    customer = models.ForeignKey(
        Customer,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="sales",
        help_text="Customer who made the purchase (optional for walk-in sales)",
    )

    customer_name = models.CharField(
        max_length=255,
        blank=True,
        help_text="Name printed on the receipt for walk-in customers",
    )

    created_by = models.ForeignKey(
        User,
        on_delete=models.PROTECT,
        related_name="sales",
        help_text="Cashier who processed the sale",
    )

    sale_date = models.DateTimeField(default=timezone.now, help_text="When the sale was made")

    # Financial details
    subtotal = models.DecimalField(max_digits=14, decimal_places=2)

    discount_amount = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=Decimal("0.00"),
    )

    gst_amount = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=Decimal("0.00"),
    )

    total_amount = models.DecimalField(max_digits=14, decimal_places=2)

    paid_amount = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=Decimal("0.00"),
    )

    # Payment information
    payment_method = models.CharField(max_length=20, choices=PaymentMethod.choices)

    payment_details = models.JSONField(
        null=True,
        blank=True,
        help_text="Breakdown for mixed payments (e.g., {'cash': 500, 'card': 851})",
    )

    is_credit_sale = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "sales"
        ordering = ["-sale_date"]
        verbose_name = "Sale"
        verbose_name_plural = "Sales"
        indexes = [
            models.Index(fields=["-sale_date"], name="sale_date_idx"),
            models.Index(fields=["branch", "-sale_date"], name="sale_branch_date_idx"),
            models.Index(fields=["customer", "-sale_date"], name="sale_cust_date_idx"),
            models.Index(fields=["payment_method"], name="sale_payment_idx"),
            models.Index(fields=["invoice_number"], name="sale_invoice_idx"),
        ]

    def __str__(self):
        return f"{self.invoice_number} - {self.total_amount}"

    @property
    def balance_due(self):
        """Amount still unpaid."""
        return self.total_amount - self.paid_amount

    def get_customer_display(self):
        """Name to print for the customer."""
        if self.customer_id:
            return self.customer.name
        return self.customer_name or "Walk-in Customer"


class SaleItem(models.Model):
    """
    One product line on a sale.

    ``line_total`` is the discounted subtotal plus GST for the line.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the sale item",
    )

    sale = models.ForeignKey(
        Sale,
        on_delete=models.CASCADE,
        related_name="items",
        help_text="Sale that this item belongs to",
    )

    product = models.ForeignKey(
        Product,
        on_delete=models.PROTECT,
        related_name="sale_items",
        help_text="Product that was sold",
    )

    quantity = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        validators=[MinValueValidator(Decimal("0.001"))],
        help_text="Quantity sold",
    )

    unit_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Unit price at time of sale (may differ from current catalog price)",
    )

    discount_per_item = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
    )

    gst_percent = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0")), MaxValueValidator(Decimal("100"))],
    )

    line_total = models.DecimalField(max_digits=14, decimal_places=2)

    class Meta:
        db_table = "sale_items"
        verbose_name = "Sale Item"
        verbose_name_plural = "Sale Items"
        indexes = [
            models.Index(fields=["sale"], name="saleitem_sale_idx"),
            models.Index(fields=["product"], name="saleitem_product_idx"),
        ]

    def __str__(self):
        return f"{self.product.name} x {self.quantity}"
