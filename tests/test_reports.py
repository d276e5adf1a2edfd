"""
Tests for report aggregations and exports.
"""

import io
from datetime import date
from decimal import Decimal

import openpyxl
import pytest

from apps.expenses.models import Expense, ExpenseCategory
from apps.inventory.models import Category
from apps.procurement.services import PurchaseLineRequest, PurchaseRequest, create_purchase
from apps.reporting import services
from apps.reporting.exports import export_to_csv
from apps.sales.services import SaleLineRequest, SaleRequest, create_sale


def _money(value):
    return Decimal(str(value))


@pytest.fixture
def activity(branch, other_branch, cashier_user, stock_keeper_user, supplier, product):
    """Two cash sales and one credit sale, one purchase and two expenses."""
    for number, (sale_branch, method) in enumerate(
        [(branch, "cash"), (branch, "cash"), (other_branch, "credit")], start=1
    ):
        create_sale(
            SaleRequest(
                branch_id=sale_branch.pk,
                invoice_number=f"INV-{number}",
                items=[SaleLineRequest(product.pk, Decimal("1"), Decimal("100.00"))],
                payment_method=method,
                created_by_id=cashier_user.pk,
                is_credit_sale=method == "credit",
            )
        )
    create_purchase(
        PurchaseRequest(
            branch_id=branch.pk,
            supplier_id=supplier.pk,
            invoice_number="HCT-1",
            purchase_date=date(2024, 3, 1),
            items=[PurchaseLineRequest(product.pk, Decimal("10"), Decimal("50.00"), Decimal("0"))],
            payment_method="cash",
            created_by_id=stock_keeper_user.pk,
            paid_amount=Decimal("200.00"),
        )
    )
    rent = ExpenseCategory.objects.create(name="Rent")
    for amount in ("1000.00", "500.00"):
        Expense.objects.create(
            branch=branch,
            category=rent,
            amount=Decimal(amount),
            expense_date=date(2024, 3, 5),
            created_by=cashier_user,
        )


@pytest.mark.django_db
class TestReportServices:
    def test_sales_by_branch_and_payment_method(self, activity, branch):
        rows = services.sales_by_branch_and_payment_method(services.ReportFilters())

        assert [(row["branch"], row["payment_method"], row["count"]) for row in rows] == [
            ("Main Branch", "cash", 2),
            ("Saddar Branch", "credit", 1),
        ]
        assert rows[0]["total"] == Decimal("234.00")
        assert rows[1]["paid"] == Decimal("0.00")

    def test_branch_filter(self, activity, branch):
        rows = services.sales_by_branch_and_payment_method(
            services.ReportFilters(branch_id=branch.pk)
        )
        assert len(rows) == 1

    def test_daily_summary(self, activity):
        rows = services.daily_sales_summary(services.ReportFilters())

        assert sum(row["count"] for row in rows) == 3
        assert sum(row["total"] for row in rows) == Decimal("351.00")

    def test_purchases_by_supplier(self, activity):
        rows = services.purchases_by_supplier(services.ReportFilters())

        assert rows == [
            {
                "supplier_id": rows[0]["supplier_id"],
                "supplier": "Hafeez Centre Traders",
                "count": 1,
                "total": Decimal("500.00"),
                "paid": Decimal("200.00"),
                "due": Decimal("300.00"),
            }
        ]

    def test_purchase_date_range_excludes(self, activity):
        rows = services.purchases_by_branch(
            services.ReportFilters(start_date=date(2024, 4, 1))
        )
        assert rows == []

    def test_expenses_by_category(self, activity):
        rows = services.expenses_by_category(services.ReportFilters())

        assert rows[0]["category"] == "Rent"
        assert rows[0]["count"] == 2
        assert rows[0]["total"] == Decimal("1500.00")

    def test_stock_levels_and_alerts(self, make_product):
        phones = Category.objects.create(name="Phones")
        make_product(code="A", stock_quantity=Decimal("2"), min_stock_level=5, category=phones)
        make_product(code="B", stock_quantity=Decimal("8"), min_stock_level=5)
        make_product(code="C", stock_quantity=None, min_stock_level=3)

        levels = services.stock_level_report(services.ReportFilters())
        flags = {row["code"]: row["is_low_stock"] for row in levels}
        assert flags == {"A": True, "B": False, "C": True}

        with_threshold = services.stock_level_report(services.ReportFilters(), threshold=10)
        assert all(row["is_low_stock"] for row in with_threshold)

        alerts = services.low_stock_alerts(services.ReportFilters())
        assert [(row["code"], row["shortfall"]) for row in alerts] == [
            ("A", Decimal("3")),
            ("C", Decimal("3")),
        ]

        only_phones = services.stock_level_report(services.ReportFilters(category_id=phones.pk))
        assert [row["code"] for row in only_phones] == ["A"]


@pytest.mark.django_db
class TestReportAPI:
    def test_sales_report_envelope(self, activity, client_for):
        response = client_for("manager").get("/api/reports/sales/")

        assert response.status_code == 200
        data = response.json()["data"]
        assert set(data) == {"by_branch_payment_method", "daily"}
        assert _money(data["by_branch_payment_method"][0]["total"]) == Decimal("234.00")

    def test_expenses_report(self, activity, client_for):
        response = client_for("admin").get("/api/reports/expenses/")

        data = response.json()["data"]
        assert _money(data["by_branch"][0]["total"]) == Decimal("1500.00")

    def test_xlsx_export_has_sheet_per_section(self, activity, client_for):
        response = client_for("manager").get("/api/reports/purchases/", {"export": "xlsx"})

        assert response.status_code == 200
        assert response["Content-Type"].startswith(
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        )
        workbook = openpyxl.load_workbook(io.BytesIO(response.content))
        assert workbook.sheetnames == ["by_supplier", "by_branch"]
        sheet = workbook["by_supplier"]
        assert sheet["B1"].value == "supplier"
        assert sheet["B2"].value == "Hafeez Centre Traders"

    def test_csv_export_of_one_section(self, client_for, make_product):
        make_product(code="LOW", stock_quantity=Decimal("1"), min_stock_level=5)
        response = client_for("manager").get(
            "/api/reports/stock/", {"export": "csv", "section": "low_stock"}
        )

        assert response.status_code == 200
        assert response["Content-Type"].startswith("text/csv")
        lines = response.content.decode().splitlines()
        assert lines[0].startswith("product_id,code,name")
        assert ",LOW," in lines[1]

    def test_unknown_section_is_rejected(self, client_for):
        response = client_for("manager").get(
            "/api/reports/stock/", {"export": "csv", "section": "nope"}
        )

        assert response.status_code == 400

    def test_invalid_date_is_rejected(self, client_for):
        response = client_for("manager").get("/api/reports/sales/", {"start_date": "03/01/2024"})

        assert response.status_code == 400
        assert "start_date" in response.json()["error"]

    def test_threshold_must_be_a_number(self, client_for):
        response = client_for("manager").get("/api/reports/stock/", {"threshold": "many"})

        assert response.status_code == 400


class TestExports:
    def test_empty_section_is_empty_csv(self):
        assert export_to_csv([]) == ""

    def test_csv_writes_header_and_rows(self):
        text = export_to_csv([{"a": 1, "b": Decimal("2.50")}, {"a": 3, "b": Decimal("0")}])
        assert text.splitlines() == ["a,b", "1,2.50", "3,0"]
