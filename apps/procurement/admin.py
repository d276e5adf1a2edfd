"""
Admin configuration for procurement models.
"""

from django.contrib import admin

from .models import Purchase, PurchaseItem, Supplier


@admin.register(Supplier)
class SupplierAdmin(admin.ModelAdmin):
    """Admin interface for Supplier model."""

    list_display = ["name", "contact_person", "phone", "ntn", "created_at"]
    search_fields = ["name", "contact_person", "phone", "cnic", "ntn"]
    readonly_fields = ["id", "created_at", "updated_at"]


class PurchaseItemInline(admin.TabularInline):
    model = PurchaseItem
    extra = 0
    readonly_fields = ["product", "quantity", "unit_price", "gst_percent", "line_total"]
    can_delete = False


@admin.register(Purchase)
class PurchaseAdmin(admin.ModelAdmin):
    """Purchases are read-only here; stock is only changed through the API."""

    list_display = [
        "invoice_number",
        "supplier",
        "branch",
        "purchase_date",
        "total_amount",
        "paid_amount",
        "due_amount",
    ]
    list_filter = ["branch", "payment_method", "purchase_date"]
    search_fields = ["invoice_number", "supplier__name"]
    inlines = [PurchaseItemInline]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
