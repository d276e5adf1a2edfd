"""
Procurement models for suppliers and purchases.

A purchase records goods bought from a supplier; saving one increases the
stock of every product on it.
"""

import uuid
from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from apps.core.models import Branch, PaymentMethod, User
from apps.inventory.models import Product


class Supplier(models.Model):
    """
    Supplier model for managing vendor relationships.

    Phone numbers are unique when present.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, help_text="Supplier company name")
    contact_person = models.CharField(
        max_length=255, blank=True, help_text="Primary contact person name"
    )
    phone = models.CharField(
        max_length=20, null=True, blank=True, unique=True, help_text="Primary phone number"
    )
    cnic = models.CharField(max_length=20, blank=True, help_text="Owner CNIC")
    ntn = models.CharField(max_length=50, blank=True, help_text="National Tax Number")
    address = models.TextField(blank=True, help_text="Complete address")
    notes = models.TextField(blank=True, help_text="Internal notes about supplier")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "procurement_suppliers"
        indexes = [
            models.Index(fields=["name"], name="supplier_name_idx"),
        ]
        ordering = ["name"]

    def __str__(self):
        return f"{self.name}"

    def get_total_purchases(self):
        """Get total number of purchases from this supplier."""
        return self.purchases.count()

    def get_total_due(self):
        """Get the outstanding amount owed to this supplier."""
        return self.purchases.aggregate(total=models.Sum("due_amount"))["total"] or Decimal("0.00")


class Purchase(models.Model):
    """
    Goods received from a supplier.

    Totals are computed once at creation; the record is immutable afterwards.
    ``due_amount`` may be negative when the supplier was overpaid.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    branch = models.ForeignKey(
        Branch,
        on_delete=models.PROTECT,
        related_name="purchases",
        help_text="Branch receiving the goods",
    )
    supplier = models.ForeignKey(
        Supplier,
        on_delete=models.PROTECT,
        related_name="purchases",
    )
    invoice_number = models.CharField(max_length=100, help_text="Supplier invoice number")
    purchase_date = models.DateField(help_text="Date on the supplier invoice")

    # Financial Information
    subtotal = models.DecimalField(max_digits=14, decimal_places=2)
    gst_amount = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0.00"))
    total_amount = models.DecimalField(max_digits=14, decimal_places=2)
    discount_amount = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    paid_amount = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    due_amount = models.DecimalField(max_digits=14, decimal_places=2)

    payment_method = models.CharField(max_length=20, choices=PaymentMethod.choices)
    notes = models.TextField(blank=True)

    created_by = models.ForeignKey(User, on_delete=models.PROTECT, related_name="created_purchases")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "procurement_purchases"
        indexes = [
            models.Index(fields=["branch", "purchase_date"], name="purchase_branch_date_idx"),
            models.Index(fields=["supplier", "purchase_date"], name="purchase_supplier_date_idx"),
            models.Index(fields=["invoice_number"], name="purchase_invoice_idx"),
        ]
        ordering = ["-purchase_date", "-created_at"]

    def __str__(self):
        return f"{self.invoice_number} - {self.supplier.name}"

    def is_fully_paid(self):
        """Check if nothing remains due."""
        return self.due_amount <= 0


class PurchaseItem(models.Model):
    """Line items for purchases."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    purchase = models.ForeignKey(
        Purchase,
        on_delete=models.CASCADE,
        related_name="items",
        help_text="Purchase this item belongs to",
    )
    product = models.ForeignKey(Product, on_delete=models.PROTECT, related_name="purchase_items")

    quantity = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        validators=[MinValueValidator(Decimal("0.001"))],
        help_text="Quantity received",
    )
    unit_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Cost per unit before GST",
    )
    gst_percent = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0")), MaxValueValidator(Decimal("100"))],
    )
    line_total = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        help_text="Quantity x unit price plus GST",
    )

    class Meta:
        db_table = "procurement_purchase_items"
        indexes = [
            models.Index(fields=["purchase"], name="purchase_item_purchase_idx"),
            models.Index(fields=["product"], name="purchase_item_product_idx"),
        ]

    def __str__(self):
        return f"{self.product.code} x {self.quantity}"
