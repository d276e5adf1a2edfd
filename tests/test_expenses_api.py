"""
Tests for expense categories and expenses.
"""

from decimal import Decimal

import pytest

from apps.expenses.models import Expense, ExpenseCategory


@pytest.fixture
def rent(db):
    return ExpenseCategory.objects.create(name="Rent")


@pytest.mark.django_db
class TestExpenseCategoryAPI:
    url = "/api/expense-categories/"

    def test_admin_creates_category(self, client_for):
        response = client_for("admin").post(self.url, {"name": "Utilities"}, format="json")

        assert response.status_code == 201
        assert ExpenseCategory.objects.filter(name="Utilities").exists()

    def test_manager_cannot_create_category(self, client_for):
        response = client_for("manager").post(self.url, {"name": "Utilities"}, format="json")

        assert response.status_code == 403

    def test_category_in_use_cannot_be_deleted(self, client_for, branch, cashier_user, rent):
        Expense.objects.create(
            branch=branch, category=rent, amount=Decimal("1000.00"), created_by=cashier_user
        )

        response = client_for("admin").delete(f"{self.url}{rent.pk}/")

        assert response.status_code == 409
        assert ExpenseCategory.objects.filter(pk=rent.pk).exists()


@pytest.mark.django_db
class TestExpenseAPI:
    url = "/api/expenses/"

    def test_cashier_records_expense(self, client_for, branch, rent):
        client = client_for("cashier")

        response = client.post(
            self.url,
            {
                "category": str(rent.pk),
                "amount": "25000.00",
                "description": "March rent",
                "expense_date": "2024-03-05",
                "paid_to": "Landlord",
            },
            format="json",
        )

        assert response.status_code == 201
        assert response.json()["message"] == "Expense recorded successfully"
        expense = Expense.objects.get()
        assert expense.branch == branch
        assert expense.created_by == client.user
        assert expense.amount == Decimal("25000.00")

    def test_amount_must_be_positive(self, client_for, rent):
        response = client_for("cashier").post(
            self.url, {"category": str(rent.pk), "amount": "0"}, format="json"
        )

        assert response.status_code == 400
        assert "amount" in response.json()["data"]["errors"]

    def test_unknown_category_is_rejected(self, client_for):
        response = client_for("cashier").post(
            self.url,
            {"category": "00000000-0000-0000-0000-000000000000", "amount": "10.00"},
            format="json",
        )

        assert response.status_code == 400
        assert "category" in response.json()["data"]["errors"]

    def test_stock_keeper_cannot_record_expense(self, client_for, rent):
        response = client_for("stock_keeper").post(
            self.url, {"category": str(rent.pk), "amount": "10.00"}, format="json"
        )

        assert response.status_code == 403

    def test_filters_by_date_range(self, client_for, branch, cashier_user, rent):
        for day in ("2024-02-28", "2024-03-10", "2024-04-01"):
            Expense.objects.create(
                branch=branch,
                category=rent,
                amount=Decimal("100.00"),
                expense_date=day,
                created_by=cashier_user,
            )
        client = client_for("manager")

        response = client.get(self.url, {"start_date": "2024-03-01", "end_date": "2024-03-31"})

        results = response.json()["data"]["results"]
        assert [row["expense_date"] for row in results] == ["2024-03-10"]
