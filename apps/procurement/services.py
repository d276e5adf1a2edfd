"""
Purchase service: record goods received from a supplier and add them to stock.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, List, Optional

from django.contrib.auth import get_user_model

from apps.core.exceptions import InvalidRequest
from apps.core.models import Branch, PaymentMethod
from apps.core.pricing import compute_line, effective_gst_percent, summarize, to_money
from apps.core.utils import get_or_404
from apps.inventory.models import Product
from apps.inventory.stock import StockMovement
from apps.inventory.unit_of_work import UnitOfWork

from .models import Purchase, PurchaseItem, Supplier

User = get_user_model()
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PurchaseLineRequest:
    product_id: Any
    quantity: Decimal
    unit_price: Decimal
    gst_percent: Optional[Decimal] = None


@dataclass(frozen=True)
class PurchaseRequest:
    branch_id: Any
    supplier_id: Any
    invoice_number: str
    purchase_date: date
    items: List[PurchaseLineRequest]
    payment_method: str
    created_by_id: Any
    discount_amount: Decimal = Decimal("0")
    paid_amount: Decimal = Decimal("0")
    notes: str = ""


def create_purchase(request: PurchaseRequest) -> Purchase:
    """
    Create a purchase with its line items and increase stock.

    ``due_amount = total_amount - discount_amount - paid_amount`` and may be
    negative. Stock is incremented with null counted as zero.

    Raises:
        InvalidRequest: If there are no items or the payment method is unknown
        ResourceNotFound: If a product, the branch, the supplier or the user is missing
    """
    if not request.items:
        raise InvalidRequest("A purchase needs at least one item")
    if request.payment_method not in PaymentMethod.for_purchases():
        raise InvalidRequest(f"Invalid payment method: {request.payment_method}")

    priced = []
    purchase_items = []
    movements = []
    for line in request.items:
        product = get_or_404(Product, line.product_id)
        rate = effective_gst_percent(line.gst_percent, product.gst_percent)
        amounts = compute_line(line.unit_price, line.quantity, rate)
        priced.append(amounts)
        purchase_items.append(
            PurchaseItem(
                product=product,
                quantity=Decimal(line.quantity),
                unit_price=Decimal(line.unit_price),
                gst_percent=rate,
                line_total=amounts.total,
            )
        )
        movements.append(StockMovement(product.pk, Decimal(line.quantity), "purchase"))

    totals = summarize(priced)
    discount_amount = to_money(request.discount_amount or 0)
    paid_amount = to_money(request.paid_amount or 0)

    branch = get_or_404(Branch, request.branch_id)
    supplier = get_or_404(Supplier, request.supplier_id)
    user = get_or_404(User, request.created_by_id, "User")

    purchase = Purchase(
        branch=branch,
        supplier=supplier,
        invoice_number=request.invoice_number,
        purchase_date=request.purchase_date,
        subtotal=totals.subtotal,
        gst_amount=totals.gst,
        total_amount=totals.total,
        discount_amount=discount_amount,
        paid_amount=paid_amount,
        due_amount=totals.total - discount_amount - paid_amount,
        payment_method=request.payment_method,
        notes=request.notes or "",
        created_by=user,
    )

    UnitOfWork(
        purchase,
        lines=purchase_items,
        movements=movements,
        parent_field="purchase",
        allow_negative_stock=True,
    ).commit()

    logger.info(
        f"Purchase {purchase.invoice_number} ({purchase.pk}) from {supplier.name} committed: "
        f"{len(purchase_items)} items, total {purchase.total_amount}, due {purchase.due_amount}"
    )
    return purchase
