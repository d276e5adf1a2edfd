"""
Reporting services for the shop.

Read-only aggregations over sales, purchases, expenses and stock. Every
function returns a list of plain dicts so the same rows feed the JSON API and
the CSV/XLSX exports.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional

from django.db.models import (
    BooleanField,
    Case,
    Count,
    DecimalField,
    ExpressionWrapper,
    F,
    Sum,
    Value,
    When,
)
from django.db.models.functions import Coalesce, TruncDate

from apps.expenses.models import Expense
from apps.inventory.models import Product
from apps.inventory.services import with_current_stock
from apps.procurement.models import Purchase
from apps.sales.models import Sale

logger = logging.getLogger(__name__)

MONEY = DecimalField(max_digits=14, decimal_places=2)
QUANTITY = DecimalField(max_digits=12, decimal_places=3)


@dataclass(frozen=True)
class ReportFilters:
    """Optional filters shared by all reports."""

    branch_id: Any = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    category_id: Any = None
    supplier_id: Any = None


def _money_sum(field):
    return Coalesce(Sum(field), Value(Decimal("0.00")), output_field=MONEY)


def _filter_period(queryset, filters: ReportFilters, date_lookup: str):
    if filters.branch_id:
        queryset = queryset.filter(branch_id=filters.branch_id)
    if filters.start_date:
        queryset = queryset.filter(**{f"{date_lookup}__gte": filters.start_date})
    if filters.end_date:
        queryset = queryset.filter(**{f"{date_lookup}__lte": filters.end_date})
    return queryset


def _sales(filters: ReportFilters):
    return _filter_period(Sale.objects.all(), filters, "sale_date__date")


def sales_by_branch_and_payment_method(filters: ReportFilters) -> List[Dict[str, Any]]:
    """Sale count, total and paid amount per branch and payment method."""
    rows = (
        _sales(filters)
        .values("branch_id", "branch__name", "payment_method")
        .annotate(
            count=Count("id"),
            total=_money_sum("total_amount"),
            paid=_money_sum("paid_amount"),
        )
        .order_by("branch__name", "payment_method")
    )
    return [
        {
            "branch_id": str(row["branch_id"]),
            "branch": row["branch__name"],
            "payment_method": row["payment_method"],
            "count": row["count"],
            "total": row["total"],
            "paid": row["paid"],
        }
        for row in rows
    ]


def daily_sales_summary(filters: ReportFilters) -> List[Dict[str, Any]]:
    """Sales per calendar day and branch."""
    rows = (
        _sales(filters)
        .annotate(day=TruncDate("sale_date"))
        .values("day", "branch__name")
        .annotate(
            count=Count("id"),
            subtotal=_money_sum("subtotal"),
            discount=_money_sum("discount_amount"),
            gst=_money_sum("gst_amount"),
            total=_money_sum("total_amount"),
        )
        .order_by("day", "branch__name")
    )
    return [
        {
            "date": row["day"].isoformat() if row["day"] else None,
            "branch": row["branch__name"],
            "count": row["count"],
            "subtotal": row["subtotal"],
            "discount": row["discount"],
            "gst": row["gst"],
            "total": row["total"],
        }
        for row in rows
    ]


def _purchases(filters: ReportFilters):
    queryset = _filter_period(Purchase.objects.all(), filters, "purchase_date")
    if filters.supplier_id:
        queryset = queryset.filter(supplier_id=filters.supplier_id)
    return queryset


def _purchase_totals(queryset):
    return queryset.annotate(
        count=Count("id"),
        total=_money_sum("total_amount"),
        paid=_money_sum("paid_amount"),
        due=_money_sum("due_amount"),
    )


def purchases_by_supplier(filters: ReportFilters) -> List[Dict[str, Any]]:
    rows = _purchase_totals(
        _purchases(filters).values("supplier_id", "supplier__name")
    ).order_by("supplier__name")
    return [
        {
            "supplier_id": str(row["supplier_id"]),
            "supplier": row["supplier__name"],
            "count": row["count"],
            "total": row["total"],
            "paid": row["paid"],
            "due": row["due"],
        }
        for row in rows
    ]


def purchases_by_branch(filters: ReportFilters) -> List[Dict[str, Any]]:
    rows = _purchase_totals(_purchases(filters).values("branch_id", "branch__name")).order_by(
        "branch__name"
    )
    return [
        {
            "branch_id": str(row["branch_id"]),
            "branch": row["branch__name"],
            "count": row["count"],
            "total": row["total"],
            "paid": row["paid"],
            "due": row["due"],
        }
        for row in rows
    ]


def _expenses(filters: ReportFilters):
    queryset = _filter_period(Expense.objects.all(), filters, "expense_date")
    if filters.category_id:
        queryset = queryset.filter(category_id=filters.category_id)
    return queryset


def expenses_by_category(filters: ReportFilters) -> List[Dict[str, Any]]:
    rows = (
        _expenses(filters)
        .values("category_id", "category__name")
        .annotate(count=Count("id"), total=_money_sum("amount"))
        .order_by("category__name")
    )
    return [
        {
            "category_id": str(row["category_id"]),
            "category": row["category__name"],
            "count": row["count"],
            "total": row["total"],
        }
        for row in rows
    ]


def expenses_by_branch(filters: ReportFilters) -> List[Dict[str, Any]]:
    rows = (
        _expenses(filters)
        .values("branch_id", "branch__name")
        .annotate(count=Count("id"), total=_money_sum("amount"))
        .order_by("branch__name")
    )
    return [
        {
            "branch_id": str(row["branch_id"]),
            "branch": row["branch__name"],
            "count": row["count"],
            "total": row["total"],
        }
        for row in rows
    ]


def _active_products(filters: ReportFilters):
    queryset = with_current_stock(
        Product.objects.filter(status=Product.Status.ACTIVE).select_related("category", "brand")
    )
    if filters.category_id:
        queryset = queryset.filter(category_id=filters.category_id)
    return queryset


def stock_level_report(
    filters: ReportFilters, threshold: Optional[int] = None
) -> List[Dict[str, Any]]:
    """
    Stock on hand for every active product.

    A product is flagged low when its stock is at or below ``threshold`` if
    one is given, otherwise at or below its own minimum stock level.
    """
    limit = Value(threshold) if threshold is not None else F("min_stock_level")
    rows = (
        _active_products(filters)
        .annotate(
            low=Case(
                When(current__lte=limit, then=Value(True)),
                default=Value(False),
                output_field=BooleanField(),
            )
        )
        .order_by("code")
    )
    return [
        {
            "product_id": str(product.pk),
            "code": product.code,
            "name": product.name,
            "category": product.category.name if product.category else "",
            "brand": product.brand.name if product.brand else "",
            "stock_quantity": product.current,
            "min_stock_level": product.min_stock_level,
            "is_low_stock": product.low,
        }
        for product in rows
    ]


def low_stock_alerts(filters: ReportFilters) -> List[Dict[str, Any]]:
    """Active products at or below their minimum level, largest shortfall first."""
    rows = (
        _active_products(filters)
        .filter(current__lte=F("min_stock_level"))
        .annotate(
            shortfall=ExpressionWrapper(F("min_stock_level") - F("current"), output_field=QUANTITY)
        )
        .order_by("-shortfall", "code")
    )
    return [
        {
            "product_id": str(product.pk),
            "code": product.code,
            "name": product.name,
            "stock_quantity": product.current,
            "min_stock_level": product.min_stock_level,
            "shortfall": product.shortfall,
        }
        for product in rows
    ]
