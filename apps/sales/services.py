"""
POS checkout service.

``create_sale`` prices every line, checks stock, validates references and
then commits the sale, its items and the stock decrements as one unit of
work. Nothing is written when any step fails.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, List, Optional

from django.contrib.auth import get_user_model

from apps.core.exceptions import InsufficientStock, InvalidRequest
from apps.core.models import Branch, PaymentMethod
from apps.core.pricing import compute_line, effective_gst_percent, summarize
from apps.core.utils import get_or_404
from apps.crm.models import Customer
from apps.inventory.models import Product
from apps.inventory.stock import StockMovement
from apps.inventory.unit_of_work import UnitOfWork

from .models import Sale, SaleItem

User = get_user_model()
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaleLineRequest:
    product_id: Any
    quantity: Decimal
    unit_price: Decimal
    discount_per_item: Decimal = Decimal("0")
    gst_percent: Optional[Decimal] = None


@dataclass(frozen=True)
class SaleRequest:
    branch_id: Any
    invoice_number: str
    items: List[SaleLineRequest]
    payment_method: str
    created_by_id: Any
    customer_id: Any = None
    customer_name: str = ""
    payment_details: Optional[dict] = None
    is_credit_sale: bool = False
    fbr_invoice_number: Optional[int] = None


def create_sale(request: SaleRequest) -> Sale:
    """
    Create a sale with its line items and decrement stock.

    Args:
        request: Validated sale input

    Returns:
        The committed Sale

    Raises:
        InvalidRequest: If there are no items or the payment method is unknown
        ResourceNotFound: If a product, the branch, the user or the customer is missing
        InsufficientStock: If any line asks for more than is on hand
    """
    if not request.items:
        raise InvalidRequest("A sale needs at least one item")
    if request.payment_method not in PaymentMethod.for_sales():
        raise InvalidRequest(f"Invalid payment method: {request.payment_method}")

    products = {}
    for line in request.items:
        product = products.get(line.product_id) or get_or_404(Product, line.product_id)
        if not product.has_stock_for(line.quantity):
            logger.warning(
                f"Sale {request.invoice_number} rejected: {product.code} has "
                f"{product.current_stock}, requested {line.quantity}"
            )
            raise InsufficientStock(
                product.code, available=product.current_stock, requested=line.quantity
            )
        products[line.product_id] = product

    priced = []
    sale_items = []
    movements = []
    for line in request.items:
        product = products[line.product_id]
        rate = effective_gst_percent(line.gst_percent, product.gst_percent)
        amounts = compute_line(line.unit_price, line.quantity, rate, line.discount_per_item)
        priced.append(amounts)
        sale_items.append(
            SaleItem(
                product=product,
                quantity=Decimal(line.quantity),
                unit_price=Decimal(line.unit_price),
                discount_per_item=Decimal(line.discount_per_item or 0),
                gst_percent=rate,
                line_total=amounts.total,
            )
        )
        movements.append(StockMovement(product.pk, -Decimal(line.quantity), "sale"))

    totals = summarize(priced)
    paid_amount = Decimal("0.00") if request.is_credit_sale else totals.total

    branch = get_or_404(Branch, request.branch_id)
    user = get_or_404(User, request.created_by_id, "User")
    customer = None
    if request.customer_id is not None:
        customer = get_or_404(Customer, request.customer_id)

    sale = Sale(
        invoice_number=request.invoice_number,
        fbr_invoice_number=request.fbr_invoice_number,
        branch=branch,
        customer=customer,
        customer_name=request.customer_name or "",
        created_by=user,
        subtotal=totals.subtotal,
        discount_amount=totals.discount,
        gst_amount=totals.gst,
        total_amount=totals.total,
        paid_amount=paid_amount,
        payment_method=request.payment_method,
        payment_details=request.payment_details,
        is_credit_sale=request.is_credit_sale,
    )

    UnitOfWork(
        sale,
        lines=sale_items,
        movements=movements,
        parent_field="sale",
        allow_negative_stock=False,
    ).commit()

    logger.info(
        f"Sale {sale.invoice_number} ({sale.pk}) committed at {branch.name}: "
        f"{len(sale_items)} items, total {sale.total_amount}, paid {sale.paid_amount}"
    )
    return sale
