"""
Serializers for CRM models.
"""

from rest_framework import serializers

from apps.core.serializers import UniqueConflictMixin, blank_to_none

from .models import Customer


class CustomerSerializer(UniqueConflictMixin, serializers.ModelSerializer):
    """Customer create, update and detail; duplicate phones are a conflict."""

    unique_conflict_fields = ("phone",)

    class Meta:
        model = Customer
        fields = [
            "id",
            "name",
            "phone",
            "cnic",
            "address",
            "credit_limit",
            "current_credit_balance",
            "loyalty_points",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "current_credit_balance", "created_at", "updated_at"]
        extra_kwargs = {"phone": {"validators": []}}

    def validate_phone(self, value):
        return blank_to_none(value)
