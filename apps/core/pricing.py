"""
Line and invoice arithmetic for sales and purchases.

All amounts are ``Decimal``. Each line component is rounded half-up to the
cent before totals are formed, so stored values read back exactly.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from django.conf import settings

CENT = Decimal("0.01")
ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_money(value) -> Decimal:
    """Round to two decimal places, half-up."""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def effective_gst_percent(explicit=None, product_rate=None) -> Decimal:
    """
    Pick the GST rate for a line.

    An explicit rate wins (zero included), then the product's own rate, then
    ``settings.DEFAULT_GST_PERCENT``.
    """
    if explicit is not None:
        return Decimal(explicit)
    if product_rate is not None:
        return Decimal(product_rate)
    return Decimal(settings.DEFAULT_GST_PERCENT)


@dataclass(frozen=True)
class LineAmounts:
    subtotal: Decimal
    discount: Decimal
    gst: Decimal
    total: Decimal


def compute_line(unit_price, quantity, gst_percent, discount_per_item=ZERO) -> LineAmounts:
    """
    Price one line.

    ``discount_per_item`` is applied per unit and GST is charged on the
    discounted amount.
    """
    unit_price = Decimal(unit_price)
    quantity = Decimal(quantity)
    subtotal = to_money(unit_price * quantity)
    discount = to_money(Decimal(discount_per_item or ZERO) * quantity)
    gst = to_money((subtotal - discount) * Decimal(gst_percent) / HUNDRED)
    return LineAmounts(subtotal=subtotal, discount=discount, gst=gst, total=subtotal - discount + gst)


def summarize(lines) -> LineAmounts:
    """Sum priced lines into invoice totals."""
    subtotal = sum((line.subtotal for line in lines), ZERO)
    discount = sum((line.discount for line in lines), ZERO)
    gst = sum((line.gst for line in lines), ZERO)
    return LineAmounts(subtotal=subtotal, discount=discount, gst=gst, total=subtotal - discount + gst)
