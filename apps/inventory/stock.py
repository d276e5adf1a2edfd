"""
Stock ledger arithmetic.

``apply_movements`` is a pure function: it takes current stock levels and a
list of signed movements and returns the new levels with one event per
movement. It never touches the database; ``UnitOfWork`` persists the result.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Hashable, Iterable, List, Mapping, Optional, Tuple

from apps.core.exceptions import InsufficientStock, ResourceNotFound

ZERO = Decimal("0")


@dataclass(frozen=True)
class StockMovement:
    """A signed change to one product's stock."""

    product_id: Hashable
    quantity: Decimal
    source: str = ""


@dataclass(frozen=True)
class StockEvent:
    """Result of applying one movement."""

    product_id: Hashable
    before: Decimal
    after: Decimal
    movement: StockMovement


def apply_movements(
    levels: Mapping[Hashable, Optional[Decimal]],
    movements: Iterable[StockMovement],
    allow_negative: bool = True,
    labels: Optional[Mapping[Hashable, str]] = None,
) -> Tuple[Dict[Hashable, Decimal], List[StockEvent]]:
    """
    Apply ``movements`` to ``levels``.

    Null levels count as zero and movements on the same product accumulate.
    With ``allow_negative=False`` a movement that would leave a product below
    zero raises ``InsufficientStock``; ``labels`` maps product ids to the
    codes used in that message.
    """
    labels = labels or {}
    new_levels = {pid: (level if level is not None else ZERO) for pid, level in levels.items()}
    events = []
    for movement in movements:
        if movement.product_id not in new_levels:
            raise ResourceNotFound("Product", movement.product_id)
        before = new_levels[movement.product_id]
        after = before + Decimal(movement.quantity)
        if after < ZERO and not allow_negative:
            raise InsufficientStock(
                labels.get(movement.product_id, movement.product_id),
                available=before,
                requested=-Decimal(movement.quantity),
            )
        new_levels[movement.product_id] = after
        events.append(StockEvent(movement.product_id, before, after, movement))
    return new_levels, events


def net_movements(movements: Iterable[StockMovement]) -> Dict[Hashable, Decimal]:
    """Sum movements per product, keeping first-seen order."""
    totals: Dict[Hashable, Decimal] = {}
    for movement in movements:
        totals[movement.product_id] = totals.get(movement.product_id, ZERO) + Decimal(
            movement.quantity
        )
    return totals
