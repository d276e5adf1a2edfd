"""
Expense models: shop running costs recorded per branch and category.
"""

import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from apps.core.models import Branch, User


class ExpenseCategory(models.Model):
    """Expense category (e.g., Rent, Utilities, Wages)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, help_text="Category name")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "expense_categories"
        ordering = ["name"]
        verbose_name = "Expense Category"
        verbose_name_plural = "Expense Categories"

    def __str__(self):
        return self.name


class Expense(models.Model):
    """A business expense paid by a branch."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    branch = models.ForeignKey(Branch, on_delete=models.PROTECT, related_name="expenses")
    category = models.ForeignKey(
        ExpenseCategory, on_delete=models.PROTECT, related_name="expenses"
    )
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
        help_text="Expense amount",
    )
    description = models.CharField(max_length=255, blank=True, help_text="Expense description")
    expense_date = models.DateField(default=timezone.localdate)
    paid_to = models.CharField(max_length=255, blank=True, help_text="Payee")
    created_at = models.DateTimeField(auto_now_add=True)
    created_by = models.ForeignKey(User, on_delete=models.PROTECT, related_name="expenses")

    class Meta:
        db_table = "expenses"
        ordering = ["-expense_date", "-created_at"]
        indexes = [
            models.Index(fields=["branch", "expense_date"], name="expense_branch_date_idx"),
            models.Index(fields=["category", "expense_date"], name="expense_category_date_idx"),
        ]

    def __str__(self):
        return f"{self.category.name}: {self.description} - {self.amount}"
