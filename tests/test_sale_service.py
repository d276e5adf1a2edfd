"""
Tests for the POS checkout service.

Covers totals, stock decrements, GST fallback and the all-or-nothing
behaviour when any line fails.
"""

from decimal import Decimal

import pytest

from apps.core.exceptions import InsufficientStock, InvalidRequest, ResourceNotFound
from apps.sales.models import Sale, SaleItem
from apps.sales.services import SaleLineRequest, SaleRequest, create_sale


def _sale_request(branch, user, items, **kwargs):
    defaults = {
        "branch_id": branch.pk,
        "invoice_number": "INV-0001",
        "items": items,
        "payment_method": "cash",
        "created_by_id": user.pk,
    }
    defaults.update(kwargs)
    return SaleRequest(**defaults)


@pytest.mark.django_db
class TestCreateSale:
    """Test sale creation."""

    def test_computes_totals_and_decrements_stock(self, branch, cashier_user, product):
        sale = create_sale(
            _sale_request(
                branch,
                cashier_user,
                [SaleLineRequest(product.pk, Decimal("3"), Decimal("100.00"))],
            )
        )

        assert sale.subtotal == Decimal("300.00")
        assert sale.gst_amount == Decimal("51.00")
        assert sale.total_amount == Decimal("351.00")
        assert sale.paid_amount == Decimal("351.00")
        assert sale.is_credit_sale is False

        item = sale.items.get()
        assert item.gst_percent == Decimal("17")
        assert item.line_total == Decimal("351.00")

        product.refresh_from_db()
        assert product.stock_quantity == Decimal("7")

    def test_discount_per_item(self, branch, cashier_user, product):
        sale = create_sale(
            _sale_request(
                branch,
                cashier_user,
                [
                    SaleLineRequest(
                        product.pk,
                        Decimal("2"),
                        Decimal("100.00"),
                        discount_per_item=Decimal("10.00"),
                        gst_percent=Decimal("0"),
                    )
                ],
            )
        )

        assert sale.discount_amount == Decimal("20.00")
        assert sale.gst_amount == Decimal("0.00")
        assert sale.total_amount == Decimal("180.00")

    def test_insufficient_stock_writes_nothing(self, branch, cashier_user, product):
        with pytest.raises(InsufficientStock) as excinfo:
            create_sale(
                _sale_request(
                    branch,
                    cashier_user,
                    [SaleLineRequest(product.pk, Decimal("11"), Decimal("100.00"))],
                )
            )

        assert "SP-IP15" in str(excinfo.value.detail)
        assert Sale.objects.count() == 0
        assert SaleItem.objects.count() == 0
        product.refresh_from_db()
        assert product.stock_quantity == Decimal("10")

    def test_one_failing_line_rolls_back_every_line(
        self, branch, cashier_user, make_product, product
    ):
        scarce = make_product(stock_quantity=Decimal("1"))

        with pytest.raises(InsufficientStock):
            create_sale(
                _sale_request(
                    branch,
                    cashier_user,
                    [
                        SaleLineRequest(product.pk, Decimal("2"), Decimal("100.00")),
                        SaleLineRequest(scarce.pk, Decimal("2"), Decimal("100.00")),
                    ],
                )
            )

        product.refresh_from_db()
        assert product.stock_quantity == Decimal("10")
        assert Sale.objects.count() == 0

    def test_same_product_on_two_lines_is_checked_in_total(self, branch, cashier_user, product):
        with pytest.raises(InsufficientStock):
            create_sale(
                _sale_request(
                    branch,
                    cashier_user,
                    [
                        SaleLineRequest(product.pk, Decimal("6"), Decimal("100.00")),
                        SaleLineRequest(product.pk, Decimal("6"), Decimal("100.00")),
                    ],
                )
            )

        product.refresh_from_db()
        assert product.stock_quantity == Decimal("10")
        assert Sale.objects.count() == 0

    def test_null_stock_counts_as_zero(self, branch, cashier_user, make_product):
        empty = make_product(stock_quantity=None)

        with pytest.raises(InsufficientStock):
            create_sale(
                _sale_request(
                    branch,
                    cashier_user,
                    [SaleLineRequest(empty.pk, Decimal("1"), Decimal("100.00"))],
                )
            )

    def test_credit_sale_is_unpaid(self, branch, cashier_user, product, customer):
        sale = create_sale(
            _sale_request(
                branch,
                cashier_user,
                [SaleLineRequest(product.pk, Decimal("1"), Decimal("100.00"))],
                payment_method="credit",
                is_credit_sale=True,
                customer_id=customer.pk,
            )
        )

        assert sale.paid_amount == Decimal("0.00")
        assert sale.balance_due == Decimal("117.00")
        assert sale.get_customer_display() == "Ali Raza"

    def test_gst_falls_back_to_shop_default(self, settings, branch, cashier_user, make_product):
        settings.DEFAULT_GST_PERCENT = Decimal("18")
        untaxed = make_product(gst_percent=None)

        sale = create_sale(
            _sale_request(
                branch,
                cashier_user,
                [SaleLineRequest(untaxed.pk, Decimal("1"), Decimal("100.00"))],
            )
        )

        assert sale.gst_amount == Decimal("18.00")
        assert sale.items.get().gst_percent == Decimal("18")

    def test_unknown_customer_writes_nothing(self, branch, cashier_user, product):
        with pytest.raises(ResourceNotFound):
            create_sale(
                _sale_request(
                    branch,
                    cashier_user,
                    [SaleLineRequest(product.pk, Decimal("1"), Decimal("100.00"))],
                    customer_id="00000000-0000-0000-0000-000000000000",
                )
            )

        product.refresh_from_db()
        assert product.stock_quantity == Decimal("10")
        assert Sale.objects.count() == 0

    def test_unknown_product_is_not_found(self, branch, cashier_user):
        with pytest.raises(ResourceNotFound):
            create_sale(
                _sale_request(
                    branch,
                    cashier_user,
                    [
                        SaleLineRequest(
                            "00000000-0000-0000-0000-000000000000", Decimal("1"), Decimal("1")
                        )
                    ],
                )
            )

    def test_rejects_empty_sale(self, branch, cashier_user):
        with pytest.raises(InvalidRequest):
            create_sale(_sale_request(branch, cashier_user, []))

    def test_rejects_purchase_only_payment_method(self, branch, cashier_user, product):
        with pytest.raises(InvalidRequest):
            create_sale(
                _sale_request(
                    branch,
                    cashier_user,
                    [SaleLineRequest(product.pk, Decimal("1"), Decimal("100.00"))],
                    payment_method="cheque",
                )
            )


@pytest.mark.django_db
class TestStoredSaleTotals:
    def test_reread_matches_fractional_totals(self, branch, cashier_user, product, make_product):
        loose = make_product(code="LOOSE-CABLE", stock_quantity=Decimal("10"))
        created = create_sale(
            _sale_request(
                branch,
                cashier_user,
                [
                    SaleLineRequest(
                        product.pk,
                        Decimal("1.333"),
                        Decimal("99.99"),
                        discount_per_item=Decimal("3.33"),
                    ),
                    SaleLineRequest(
                        loose.pk, Decimal("2.5"), Decimal("19.99"), gst_percent=Decimal("0")
                    ),
                ],
            )
        )

        stored = Sale.objects.get(pk=created.pk)

        assert stored.subtotal == created.subtotal == Decimal("183.27")
        assert stored.discount_amount == created.discount_amount == Decimal("4.44")
        assert stored.gst_amount == created.gst_amount == Decimal("21.90")
        assert stored.total_amount == created.total_amount == Decimal("200.73")
        assert stored.total_amount == stored.subtotal - stored.discount_amount + stored.gst_amount
        line_totals = sorted(item.line_total for item in stored.items.all())
        assert line_totals == [Decimal("49.98"), Decimal("150.75")]
        assert sum(line_totals) == stored.total_amount

        product.refresh_from_db()
        loose.refresh_from_db()
        assert product.stock_quantity == Decimal("8.667")
        assert loose.stock_quantity == Decimal("7.5")
