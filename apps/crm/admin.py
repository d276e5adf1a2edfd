from django.contrib import admin

from .models import Customer


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    """Admin interface for Customer model."""

    list_display = [
        "name",
        "phone",
        "cnic",
        "credit_limit",
        "current_credit_balance",
        "loyalty_points",
        "created_at",
    ]
    search_fields = ["name", "phone", "cnic"]
    readonly_fields = ["id", "created_at", "updated_at"]
