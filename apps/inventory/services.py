"""
Inventory services: stock adjustments and catalog lookups.

This module provides the manual stock-adjustment operation and the product
queries used by the POS screen (search, low stock).
"""

import logging
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.db.models import DecimalField, F, Q, QuerySet, Value
from django.db.models.functions import Coalesce

from apps.core.exceptions import InvalidReason, InvalidRequest
from apps.core.models import Branch
from apps.core.utils import get_or_404

from .models import Product, StockAdjustment
from .stock import StockMovement
from .unit_of_work import UnitOfWork

User = get_user_model()
logger = logging.getLogger(__name__)


def create_stock_adjustment(
    product_id,
    quantity_change: int,
    reason: str,
    adjusted_by_id,
    branch_id=None,
    notes: str = "",
) -> StockAdjustment:
    """
    Record a manual stock correction and apply it.

    Args:
        product_id: Product to adjust
        quantity_change: Signed non-zero whole number added to stock
        reason: One of StockAdjustment.Reason values
        adjusted_by_id: User making the adjustment
        branch_id: Optional branch the adjustment happened at
        notes: Free-text notes

    Returns:
        Created StockAdjustment instance

    Raises:
        ResourceNotFound: If the product, branch or user does not exist
        InvalidReason: If ``reason`` is not a known reason code
        InvalidRequest: If ``quantity_change`` is zero
    """
    product = get_or_404(Product, product_id)

    if reason not in StockAdjustment.Reason.values:
        logger.warning(f"Rejected stock adjustment for {product.code}: invalid reason {reason!r}")
        raise InvalidReason(reason, StockAdjustment.Reason.values)

    if int(quantity_change) == 0:
        raise InvalidRequest("Quantity change cannot be zero")

    branch = get_or_404(Branch, branch_id) if branch_id is not None else None
    user = get_or_404(User, adjusted_by_id, "User")

    adjustment = StockAdjustment(
        branch=branch,
        product=product,
        quantity_change=int(quantity_change),
        reason=reason,
        notes=notes or "",
        adjusted_by=user,
    )
    movement = StockMovement(product.pk, Decimal(int(quantity_change)), "adjustment")
    UnitOfWork(adjustment, movements=[movement], allow_negative_stock=True).commit()

    logger.info(
        f"Stock adjustment {adjustment.pk}: {product.code} {int(quantity_change):+d} "
        f"({reason}) by {user.username}"
    )
    return adjustment


def search_products(term: str, limit: int = 20) -> QuerySet:
    """Active products whose code, barcode or name contains ``term``."""
    term = (term or "").strip()
    queryset = Product.objects.filter(status=Product.Status.ACTIVE).select_related(
        "brand", "category"
    )
    if term:
        queryset = queryset.filter(
            Q(name__icontains=term)
            | Q(name_ur__icontains=term)
            | Q(code__icontains=term)
            | Q(barcode__icontains=term)
        )
    return queryset[:limit]


def with_current_stock(queryset: QuerySet) -> QuerySet:
    """Annotate ``current`` as the stock level with null counted as zero."""
    return queryset.annotate(
        current=Coalesce(
            F("stock_quantity"),
            Value(Decimal("0")),
            output_field=DecimalField(max_digits=12, decimal_places=3),
        )
    )


def low_stock_products() -> QuerySet:
    """Active products at or below their minimum stock level."""
    queryset = with_current_stock(Product.objects.filter(status=Product.Status.ACTIVE))
    return queryset.filter(current__lte=F("min_stock_level")).order_by("current", "name")
