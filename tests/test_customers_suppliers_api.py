"""
Tests for customers, suppliers and purchases through the API.
"""

from decimal import Decimal

import pytest

from apps.crm.models import Customer
from apps.procurement.models import Purchase, Supplier


@pytest.mark.django_db
class TestCustomerAPI:
    url = "/api/customers/"

    def test_cashier_creates_customer(self, client_for):
        client = client_for("cashier")

        response = client.post(
            self.url, {"name": "Sana Khan", "phone": "03211234567"}, format="json"
        )

        assert response.status_code == 201
        assert response.json()["message"] == "Customer created successfully"
        assert Customer.objects.get().name == "Sana Khan"

    def test_duplicate_phone_is_conflict(self, client_for, customer):
        client = client_for("cashier")

        response = client.post(
            self.url, {"name": "Someone Else", "phone": customer.phone}, format="json"
        )

        assert response.status_code == 409
        assert Customer.objects.count() == 1

    def test_blank_phones_do_not_conflict(self, client_for):
        client = client_for("cashier")

        first = client.post(self.url, {"name": "Walk In A", "phone": ""}, format="json")
        second = client.post(self.url, {"name": "Walk In B", "phone": ""}, format="json")

        assert first.status_code == 201
        assert second.status_code == 201
        assert Customer.objects.filter(phone__isnull=True).count() == 2

    def test_search(self, client_for, customer):
        Customer.objects.create(name="Bilal Ahmed")
        client = client_for("stock_keeper")

        response = client.get(self.url, {"search": "ali"})

        results = response.json()["data"]["results"]
        assert [row["name"] for row in results] == ["Ali Raza"]

    def test_stock_keeper_cannot_create(self, client_for):
        client = client_for("stock_keeper")

        response = client.post(self.url, {"name": "Nope"}, format="json")

        assert response.status_code == 403


@pytest.mark.django_db
class TestSupplierAPI:
    url = "/api/suppliers/"

    def test_create_supplier(self, client_for):
        client = client_for("stock_keeper")

        response = client.post(
            self.url,
            {"name": "Shah Alam Wholesale", "phone": "04237654321", "ntn": "1234567-8"},
            format="json",
        )

        assert response.status_code == 201
        assert Supplier.objects.get().ntn == "1234567-8"

    def test_duplicate_phone_is_conflict(self, client_for, supplier):
        client = client_for("manager")

        response = client.post(
            self.url, {"name": "Other Traders", "phone": supplier.phone}, format="json"
        )

        assert response.status_code == 409


@pytest.mark.django_db
class TestPurchaseAPI:
    url = "/api/purchases/"

    def _payload(self, supplier, product, **overrides):
        payload = {
            "supplier_id": str(supplier.pk),
            "invoice_number": "HCT-77",
            "purchase_date": "2024-03-01",
            "payment_method": "bank_transfer",
            "paid_amount": "1000.00",
            "items": [
                {
                    "product_id": str(product.pk),
                    "quantity": "20",
                    "unit_price": "50.00",
                    "gst_percent": "0",
                }
            ],
        }
        payload.update(overrides)
        return payload

    def test_record_purchase(self, client_for, branch, supplier, product):
        client = client_for("stock_keeper")

        response = client.post(self.url, self._payload(supplier, product), format="json")

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["total_amount"] == "1000.00"
        assert data["due_amount"] == "0.00"
        assert data["branch"] == str(branch.pk)
        assert len(data["items"]) == 1
        product.refresh_from_db()
        assert product.stock_quantity == Decimal("30")

    def test_cashier_cannot_record_purchase(self, client_for, supplier, product):
        client = client_for("cashier")

        response = client.post(self.url, self._payload(supplier, product), format="json")

        assert response.status_code == 403
        assert Purchase.objects.count() == 0

    def test_card_is_not_a_purchase_payment_method(self, client_for, supplier, product):
        client = client_for("manager")

        response = client.post(
            self.url, self._payload(supplier, product, payment_method="card"), format="json"
        )

        assert response.status_code == 400
        assert "payment_method" in response.json()["data"]["errors"]

    def test_unknown_supplier_is_not_found(self, client_for, product):
        client = client_for("manager")
        payload = {
            "supplier_id": "00000000-0000-0000-0000-000000000000",
            "invoice_number": "X-1",
            "purchase_date": "2024-03-01",
            "payment_method": "cash",
            "items": [{"product_id": str(product.pk), "quantity": "1", "unit_price": "5.00"}],
        }

        response = client.post(self.url, payload, format="json")

        assert response.status_code == 404
        product.refresh_from_db()
        assert product.stock_quantity == Decimal("10")

    def test_list_has_no_items(self, client_for, supplier, product):
        client = client_for("stock_keeper")
        client.post(self.url, self._payload(supplier, product), format="json")

        response = client.get(self.url, {"supplier": str(supplier.pk)})

        results = response.json()["data"]["results"]
        assert len(results) == 1
        assert "items" not in results[0]
