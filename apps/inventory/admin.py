"""
Admin configuration for inventory models.
"""

from django.contrib import admin

from .models import Brand, Category, Product, StockAdjustment


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ["name", "name_ur", "created_at"]
    search_fields = ["name", "name_ur"]


@admin.register(Brand)
class BrandAdmin(admin.ModelAdmin):
    list_display = ["name", "name_ur", "created_at"]
    search_fields = ["name", "name_ur"]


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Product."""

    list_display = [
        "code",
        "name",
        "brand",
        "category",
        "selling_price",
        "stock_quantity",
        "min_stock_level",
        "status",
    ]
    list_filter = ["status", "category", "brand"]
    search_fields = ["code", "barcode", "name", "name_ur"]
    readonly_fields = ["id", "stock_quantity", "created_at", "updated_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "code", "barcode", "name", "name_ur", "brand", "category"),
            },
        ),
        (
            "Pricing",
            {
                "fields": ("purchase_price", "selling_price", "wholesale_price", "gst_percent"),
            },
        ),
        (
            "Stock",
            {
                "fields": ("stock_quantity", "min_stock_level", "status"),
            },
        ),
        (
            "Additional Information",
            {
                "fields": ("model_compatibility", "images", "notes"),
                "classes": ("collapse",),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )


@admin.register(StockAdjustment)
class StockAdjustmentAdmin(admin.ModelAdmin):
    """Stock adjustments are an audit trail and cannot be edited."""

    list_display = ["created_at", "product", "quantity_change", "reason", "branch", "adjusted_by"]
    list_filter = ["reason", "branch", "created_at"]
    search_fields = ["product__code", "product__name", "notes"]

    def has_change_permission(self, request, obj=None):
        return False
