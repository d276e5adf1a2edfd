"""
Inventory models for the retail shop.

- Categories and brands that organize the catalog
- Products with prices, GST rate and a single shop-wide stock level
- Stock adjustments: manual corrections with a reason code
"""

import uuid
from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from apps.core.models import Branch, User


class Category(models.Model):
    """Product category (e.g., Screen Protectors, Chargers)."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the category",
    )

    name = models.CharField(max_length=100, help_text="Category name")

    name_ur = models.CharField(max_length=100, blank=True, help_text="Category name in Urdu")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "inventory_categories"
        ordering = ["name"]
        verbose_name = "Category"
        verbose_name_plural = "Categories"

    def __str__(self):
        return self.name


class Brand(models.Model):
    """Product brand or manufacturer."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the brand",
    )

    name = models.CharField(max_length=100, help_text="Brand name")

    name_ur = models.CharField(max_length=100, blank=True, help_text="Brand name in Urdu")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "inventory_brands"
        ordering = ["name"]
        verbose_name = "Brand"
        verbose_name_plural = "Brands"

    def __str__(self):
        return self.name


class Product(models.Model):
    """
    A sellable catalog item.

    ``stock_quantity`` is only changed by sales, purchases and stock
    adjustments, never by editing the product. A null stock level counts as
    zero.
    """

    class Status(models.TextChoices):
        ACTIVE = "active", "Active"
        INACTIVE = "inactive", "Inactive"

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the product",
    )

    code = models.CharField(
        max_length=100,
        unique=True,
        help_text="Shop product code, unique across the catalog",
    )

    barcode = models.CharField(
        max_length=100,
        null=True,
        blank=True,
        help_text="Barcode for quick scanning",
    )

    name = models.CharField(max_length=255, help_text="Product name")

    name_ur = models.CharField(max_length=255, blank=True, help_text="Product name in Urdu")

    brand = models.ForeignKey(
        Brand,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="products",
    )

    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="products",
    )

    model_compatibility = models.TextField(
        blank=True,
        help_text="Device models this product fits",
    )

    # Pricing
    purchase_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Cost price (what we pay the supplier)",
    )

    selling_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Retail selling price",
    )

    wholesale_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal("0.00"))],
    )

    gst_percent = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        null=True,
        blank=True,
        default=settings.DEFAULT_GST_PERCENT,
        help_text="Product GST rate; the shop default applies when empty",
    )

    # Inventory tracking
    stock_quantity = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        null=True,
        blank=True,
        default=Decimal("0"),
        help_text="Current quantity in stock",
    )

    min_stock_level = models.IntegerField(
        default=settings.DEFAULT_MIN_STOCK_LEVEL,
        validators=[MinValueValidator(0)],
        help_text="Minimum quantity threshold for low stock alerts",
    )

    images = models.JSONField(default=list, blank=True, help_text="List of image URLs")

    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.ACTIVE,
    )

    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "inventory_products"
        ordering = ["name"]
        verbose_name = "Product"
        verbose_name_plural = "Products"
        indexes = [
            models.Index(fields=["barcode"], name="product_barcode_idx"),
            models.Index(fields=["status"], name="product_status_idx"),
            models.Index(fields=["category"], name="product_category_idx"),
            models.Index(fields=["brand"], name="product_brand_idx"),
            models.Index(fields=["stock_quantity", "min_stock_level"], name="product_low_stock_idx"),
        ]

    def __str__(self):
        return f"{self.code} - {self.name}"

    @property
    def current_stock(self):
        """Stock level with null treated as zero."""
        return self.stock_quantity if self.stock_quantity is not None else Decimal("0")

    def is_active(self):
        """Check if product is available for sale."""
        return self.status == self.Status.ACTIVE

    def is_low_stock(self):
        """Check if stock is at or below the minimum level."""
        return self.current_stock <= self.min_stock_level

    def has_stock_for(self, quantity):
        """Check if the current stock covers the requested quantity."""
        return self.current_stock >= Decimal(quantity)

    def toggle_status(self):
        """Flip between active and inactive."""
        self.status = self.Status.INACTIVE if self.is_active() else self.Status.ACTIVE
        self.save(update_fields=["status", "updated_at"])


class StockAdjustment(models.Model):
    """
    Manual stock correction.

    Records a signed whole-unit change with a reason. Adjustments have no
    floor: stock may go negative through this path.
    """

    class Reason(models.TextChoices):
        DAMAGE = "damage", "Damage"
        LOST = "lost", "Lost"
        FOUND = "found", "Found"
        CORRECTION = "correction", "Correction"
        SAMPLE = "sample", "Sample"
        GIFT = "gift", "Gift"

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the adjustment",
    )

    branch = models.ForeignKey(
        Branch,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="stock_adjustments",
    )

    product = models.ForeignKey(
        Product,
        on_delete=models.PROTECT,
        related_name="stock_adjustments",
    )

    quantity_change = models.IntegerField(help_text="Signed change applied to stock")

    reason = models.CharField(max_length=20, choices=Reason.choices)

    notes = models.TextField(blank=True)

    adjusted_by = models.ForeignKey(
        User,
        on_delete=models.PROTECT,
        related_name="stock_adjustments",
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "inventory_stock_adjustments"
        ordering = ["-created_at"]
        verbose_name = "Stock Adjustment"
        verbose_name_plural = "Stock Adjustments"
        indexes = [
            models.Index(fields=["product", "created_at"], name="adj_product_date_idx"),
            models.Index(fields=["branch", "created_at"], name="adj_branch_date_idx"),
            models.Index(fields=["reason"], name="adj_reason_idx"),
        ]

    def __str__(self):
        return f"{self.product.code} {self.quantity_change:+d} ({self.reason})"
