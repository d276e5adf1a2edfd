"""
CRM models for customer management.
"""

import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models


class Customer(models.Model):
    """
    A shop customer.

    Walk-in sales need no customer record; registered customers carry a
    credit limit and balance for credit sales, and loyalty points.
    Phone numbers are unique when present.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the customer",
    )

    name = models.CharField(max_length=255, help_text="Customer name")

    phone = models.CharField(
        max_length=20,
        null=True,
        blank=True,
        unique=True,
        help_text="Customer phone number",
    )

    cnic = models.CharField(max_length=20, blank=True, help_text="National identity card number")

    address = models.TextField(blank=True)

    credit_limit = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Maximum outstanding credit allowed",
    )

    current_credit_balance = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text="Amount the customer currently owes",
    )

    loyalty_points = models.IntegerField(
        default=0,
        validators=[MinValueValidator(0)],
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "crm_customers"
        ordering = ["name"]
        verbose_name = "Customer"
        verbose_name_plural = "Customers"
        indexes = [
            models.Index(fields=["name"], name="customer_name_idx"),
        ]

    def __str__(self):
        if self.phone:
            return f"{self.name} ({self.phone})"
        return self.name

    def available_credit(self):
        """Credit still available under the limit."""
        return self.credit_limit - self.current_credit_balance
