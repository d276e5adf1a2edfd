"""
Tests for atomic persistence of stock-changing transactions.
"""

from decimal import Decimal

import pytest

from apps.core.exceptions import InsufficientStock, ResourceNotFound
from apps.inventory.models import StockAdjustment
from apps.inventory.stock import StockMovement
from apps.inventory.unit_of_work import UnitOfWork
from apps.sales.models import Sale, SaleItem


def _sale(branch, user, total="100.00"):
    return Sale(
        invoice_number="INV-UOW",
        branch=branch,
        created_by=user,
        subtotal=Decimal(total),
        total_amount=Decimal(total),
        paid_amount=Decimal(total),
        payment_method="cash",
    )


@pytest.mark.django_db
class TestUnitOfWork:
    def test_commits_header_lines_and_stock(self, branch, cashier_user, product):
        sale = _sale(branch, cashier_user)
        line = SaleItem(
            product=product,
            quantity=Decimal("1"),
            unit_price=Decimal("100.00"),
            gst_percent=Decimal("0"),
            line_total=Decimal("100.00"),
        )

        events = UnitOfWork(
            sale,
            lines=[line],
            movements=[StockMovement(product.pk, Decimal("-1"), "sale")],
            parent_field="sale",
            allow_negative_stock=False,
        ).commit()

        assert Sale.objects.filter(pk=sale.pk).exists()
        assert SaleItem.objects.get().sale_id == sale.pk
        assert events[0].before == Decimal("10")
        assert events[0].after == Decimal("9")
        product.refresh_from_db()
        assert product.stock_quantity == Decimal("9")

    def test_guarded_failure_saves_nothing(self, branch, cashier_user, product):
        sale = _sale(branch, cashier_user)

        with pytest.raises(InsufficientStock):
            UnitOfWork(
                sale,
                movements=[StockMovement(product.pk, Decimal("-11"), "sale")],
                allow_negative_stock=False,
            ).commit()

        assert Sale.objects.count() == 0
        product.refresh_from_db()
        assert product.stock_quantity == Decimal("10")

    def test_missing_product_saves_nothing(self, cashier_user):
        adjustment = StockAdjustment(quantity_change=1, reason="found", adjusted_by=cashier_user)

        with pytest.raises(ResourceNotFound):
            UnitOfWork(
                adjustment,
                movements=[StockMovement("00000000-0000-0000-0000-000000000000", Decimal("1"))],
            ).commit()

        assert StockAdjustment.objects.count() == 0

    def test_header_without_movements(self, branch, cashier_user):
        sale = _sale(branch, cashier_user)

        events = UnitOfWork(sale).commit()

        assert events == []
        assert Sale.objects.filter(pk=sale.pk).exists()
