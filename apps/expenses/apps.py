"""
Expenses app configuration.
"""

from django.apps import AppConfig


class ExpensesConfig(AppConfig):
    """Configuration for the expenses app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.expenses"
    verbose_name = "Expenses"
