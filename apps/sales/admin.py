"""
Django admin configuration for sales models.
"""

from django.contrib import admin

from .models import Sale, SaleItem


class SaleItemInline(admin.TabularInline):
    model = SaleItem
    extra = 0
    readonly_fields = [
        "product",
        "quantity",
        "unit_price",
        "discount_per_item",
        "gst_percent",
        "line_total",
    ]
    can_delete = False


@admin.register(Sale)
class SaleAdmin(admin.ModelAdmin):
    """Sales are read-only here; stock is only changed through the POS."""

    list_display = [
        "invoice_number",
        "branch",
        "customer",
        "sale_date",
        "payment_method",
        "total_amount",
        "paid_amount",
        "is_credit_sale",
    ]
    list_filter = ["branch", "payment_method", "is_credit_sale", "sale_date"]
    search_fields = ["invoice_number", "customer_name", "customer__name", "customer__phone"]
    date_hierarchy = "sale_date"
    inlines = [SaleItemInline]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
