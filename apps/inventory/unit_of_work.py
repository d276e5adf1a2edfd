"""
Atomic persistence of a stock-changing transaction.

A ``UnitOfWork`` holds a header record, its line items and the stock
movements they cause. ``commit()`` writes all of them inside one
``transaction.atomic()`` block; any failure rolls back everything.
"""

import logging
from decimal import Decimal

from django.db import transaction
from django.db.models import DecimalField, F, Value
from django.db.models.functions import Coalesce
from django.utils import timezone

from apps.core.exceptions import InsufficientStock
from apps.inventory.models import Product
from apps.inventory.stock import apply_movements, net_movements

logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Header + lines + stock deltas committed together.

    Args:
        header: Unsaved header instance (Sale, Purchase, StockAdjustment)
        lines: Unsaved line instances; each gets ``parent_field`` set to the header
        movements: StockMovement list to apply
        parent_field: Name of the line's foreign key to the header
        allow_negative_stock: When False, stock may not drop below zero
    """

    def __init__(
        self,
        header,
        lines=(),
        movements=(),
        parent_field=None,
        allow_negative_stock=True,
    ):
        self.header = header
        self.lines = list(lines)
        self.movements = list(movements)
        self.parent_field = parent_field
        self.allow_negative_stock = allow_negative_stock
        self.events = []

    @transaction.atomic
    def commit(self):
        """
        Persist the header, lines and stock changes.

        Returns:
            list of StockEvent describing each stock change

        Raises:
            InsufficientStock: If a guarded decrement finds too little stock
            ResourceNotFound: If a movement names a missing product
        """
        product_ids = list(net_movements(self.movements))
        rows = (
            Product.objects.select_for_update()
            .filter(pk__in=product_ids)
            .values_list("pk", "stock_quantity", "code")
        )
        levels = {}
        codes = {}
        for pk, stock, code in rows:
            levels[pk] = stock
            codes[pk] = code

        _, self.events = apply_movements(
            levels,
            self.movements,
            allow_negative=self.allow_negative_stock,
            labels=codes,
        )

        self.header.save()
        if self.lines:
            for line in self.lines:
                setattr(line, self.parent_field, self.header)
            type(self.lines[0]).objects.bulk_create(self.lines)

        for product_id, delta in net_movements(self.movements).items():
            self._write_stock(product_id, delta, codes.get(product_id, product_id))

        logger.debug(
            "Committed %s %s with %d lines and %d stock movements",
            type(self.header).__name__,
            self.header.pk,
            len(self.lines),
            len(self.movements),
        )
        return self.events

    def _write_stock(self, product_id, delta, code):
        """Apply ``delta`` with a conditional update; null stock counts as zero."""
        queryset = Product.objects.filter(pk=product_id)
        if not self.allow_negative_stock and delta < 0:
            queryset = queryset.filter(stock_quantity__gte=-delta)

        current = Coalesce(
            F("stock_quantity"),
            Value(Decimal("0")),
            output_field=DecimalField(max_digits=12, decimal_places=3),
        )
        updated = queryset.update(stock_quantity=current + delta, updated_at=timezone.now())
        if updated == 0:
            raise InsufficientStock(code, requested=-delta)
