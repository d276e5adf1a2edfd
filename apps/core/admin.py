"""
Django admin configuration for core models.
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import Branch, ShopProfile, User


@admin.register(Branch)
class BranchAdmin(admin.ModelAdmin):
    list_display = ["name", "phone", "is_active", "created_at"]
    list_filter = ["is_active"]
    search_fields = ["name", "name_ur", "address"]
    readonly_fields = ["id", "created_at", "updated_at"]


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin interface for shop staff with role and branch."""

    list_display = ["username", "email", "role", "branch", "is_active", "date_joined"]
    list_filter = ["role", "branch", "is_active", "is_staff"]
    search_fields = ["username", "email", "first_name", "last_name", "phone"]

    fieldsets = BaseUserAdmin.fieldsets + (
        (
            "Shop",
            {
                "fields": ("role", "branch", "phone"),
            },
        ),
    )
    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        (
            "Shop",
            {
                "fields": ("role", "branch"),
            },
        ),
    )


@admin.register(ShopProfile)
class ShopProfileAdmin(admin.ModelAdmin):
    list_display = ["shop_name", "owner_name", "ntn", "strn", "updated_at"]

    def has_add_permission(self, request):
        return not ShopProfile.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False
