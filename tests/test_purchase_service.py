"""
Tests for the purchase service.
"""

from datetime import date
from decimal import Decimal

import pytest

from apps.core.exceptions import InvalidRequest, ResourceNotFound
from apps.procurement.models import Purchase
from apps.procurement.services import PurchaseLineRequest, PurchaseRequest, create_purchase


def _purchase_request(branch, supplier, user, items, **kwargs):
    defaults = {
        "branch_id": branch.pk,
        "supplier_id": supplier.pk,
        "invoice_number": "HCT-5531",
        "purchase_date": date(2024, 3, 1),
        "items": items,
        "payment_method": "cash",
        "created_by_id": user.pk,
    }
    defaults.update(kwargs)
    return PurchaseRequest(**defaults)


@pytest.mark.django_db
class TestCreatePurchase:
    """Test purchase creation."""

    def test_increments_stock_and_computes_due(
        self, branch, supplier, stock_keeper_user, product
    ):
        purchase = create_purchase(
            _purchase_request(
                branch,
                supplier,
                stock_keeper_user,
                [PurchaseLineRequest(product.pk, Decimal("20"), Decimal("50.00"), Decimal("0"))],
                discount_amount=Decimal("100.00"),
                paid_amount=Decimal("500.00"),
            )
        )

        assert purchase.subtotal == Decimal("1000.00")
        assert purchase.gst_amount == Decimal("0.00")
        assert purchase.total_amount == Decimal("1000.00")
        assert purchase.due_amount == Decimal("400.00")
        assert purchase.items.count() == 1

        product.refresh_from_db()
        assert product.stock_quantity == Decimal("30")

    def test_line_gst_uses_product_rate(self, branch, supplier, stock_keeper_user, product):
        purchase = create_purchase(
            _purchase_request(
                branch,
                supplier,
                stock_keeper_user,
                [PurchaseLineRequest(product.pk, Decimal("2"), Decimal("100.00"))],
            )
        )

        assert purchase.gst_amount == Decimal("34.00")
        assert purchase.total_amount == Decimal("234.00")
        assert purchase.due_amount == Decimal("234.00")

    def test_overpayment_leaves_negative_due(self, branch, supplier, stock_keeper_user, product):
        purchase = create_purchase(
            _purchase_request(
                branch,
                supplier,
                stock_keeper_user,
                [PurchaseLineRequest(product.pk, Decimal("1"), Decimal("100.00"), Decimal("0"))],
                paid_amount=Decimal("150.00"),
            )
        )

        assert purchase.due_amount == Decimal("-50.00")
        assert purchase.is_fully_paid()

    def test_null_stock_counts_as_zero(self, branch, supplier, stock_keeper_user, make_product):
        fresh = make_product(stock_quantity=None)

        create_purchase(
            _purchase_request(
                branch,
                supplier,
                stock_keeper_user,
                [PurchaseLineRequest(fresh.pk, Decimal("4"), Decimal("10.00"))],
            )
        )

        fresh.refresh_from_db()
        assert fresh.stock_quantity == Decimal("4")

    def test_repeated_product_lines_add_up(self, branch, supplier, stock_keeper_user, product):
        create_purchase(
            _purchase_request(
                branch,
                supplier,
                stock_keeper_user,
                [
                    PurchaseLineRequest(product.pk, Decimal("3"), Decimal("10.00")),
                    PurchaseLineRequest(product.pk, Decimal("2"), Decimal("10.00")),
                ],
            )
        )

        product.refresh_from_db()
        assert product.stock_quantity == Decimal("15")

    def test_unknown_supplier_writes_nothing(self, branch, supplier, stock_keeper_user, product):
        supplier_id = supplier.pk
        supplier.delete()

        with pytest.raises(ResourceNotFound):
            create_purchase(
                _purchase_request(
                    branch,
                    supplier,
                    stock_keeper_user,
                    [PurchaseLineRequest(product.pk, Decimal("1"), Decimal("10.00"))],
                    supplier_id=supplier_id,
                )
            )

        assert Purchase.objects.count() == 0
        product.refresh_from_db()
        assert product.stock_quantity == Decimal("10")

    def test_rejects_sale_only_payment_method(
        self, branch, supplier, stock_keeper_user, product
    ):
        with pytest.raises(InvalidRequest):
            create_purchase(
                _purchase_request(
                    branch,
                    supplier,
                    stock_keeper_user,
                    [PurchaseLineRequest(product.pk, Decimal("1"), Decimal("10.00"))],
                    payment_method="card",
                )
            )


@pytest.mark.django_db
class TestStoredPurchaseTotals:
    def test_reread_matches_fractional_totals(
        self, branch, supplier, stock_keeper_user, product, make_product
    ):
        wire = make_product(code="WIRE-ROLL", stock_quantity=None)
        created = create_purchase(
            _purchase_request(
                branch,
                supplier,
                stock_keeper_user,
                [
                    PurchaseLineRequest(product.pk, Decimal("2.5"), Decimal("33.33")),
                    PurchaseLineRequest(wire.pk, Decimal("0.75"), Decimal("12.35"), Decimal("0")),
                ],
                discount_amount=Decimal("1.50"),
                paid_amount=Decimal("50.00"),
            )
        )

        stored = Purchase.objects.get(pk=created.pk)

        assert stored.subtotal == created.subtotal == Decimal("92.59")
        assert stored.gst_amount == created.gst_amount == Decimal("14.17")
        assert stored.total_amount == created.total_amount == Decimal("106.76")
        assert stored.due_amount == created.due_amount == Decimal("55.26")
        line_totals = sorted(item.line_total for item in stored.items.all())
        assert line_totals == [Decimal("9.26"), Decimal("97.50")]

        product.refresh_from_db()
        wire.refresh_from_db()
        assert product.stock_quantity == Decimal("12.5")
        assert wire.stock_quantity == Decimal("0.75")
