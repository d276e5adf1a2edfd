"""
Tests for the POS sales API and receipts.
"""

from decimal import Decimal

import pytest

from apps.core.models import ShopProfile, User
from apps.sales.models import Sale


def _sale_payload(product, **overrides):
    payload = {
        "invoice_number": "INV-1001",
        "payment_method": "cash",
        "items": [{"product_id": str(product.pk), "quantity": "3", "unit_price": "100.00"}],
    }
    payload.update(overrides)
    return payload


@pytest.mark.django_db
class TestCreateSaleAPI:
    url = "/api/sales/"

    def test_cashier_rings_up_sale(self, client_for, branch, product):
        client = client_for("cashier")

        response = client.post(self.url, _sale_payload(product), format="json")

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Sale completed successfully"
        data = body["data"]
        assert data["subtotal"] == "300.00"
        assert data["gst_amount"] == "51.00"
        assert data["total_amount"] == "351.00"
        assert data["paid_amount"] == "351.00"
        assert data["branch"] == str(branch.pk)
        assert data["customer_display"] == "Walk-in Customer"
        assert len(data["items"]) == 1
        assert data["items"][0]["product_code"] == "SP-IP15"

        product.refresh_from_db()
        assert product.stock_quantity == Decimal("7")

    def test_user_branch_takes_precedence(self, client_for, branch, other_branch, product):
        client = client_for("cashier")

        response = client.post(
            self.url, _sale_payload(product, branch_id=str(other_branch.pk)), format="json"
        )

        assert response.status_code == 201
        assert Sale.objects.get().branch == branch

    def test_branch_from_body_when_user_has_none(self, client_for, other_branch, product):
        client = client_for("admin")
        User.objects.filter(pk=client.user.pk).update(branch=None)
        client.user.branch = None

        response = client.post(
            self.url, _sale_payload(product, branch_id=str(other_branch.pk)), format="json"
        )

        assert response.status_code == 201
        assert Sale.objects.get().branch == other_branch

    def test_branch_is_required(self, client_for, product):
        client = client_for("admin")
        User.objects.filter(pk=client.user.pk).update(branch=None)
        client.user.branch = None

        response = client.post(self.url, _sale_payload(product), format="json")

        assert response.status_code == 400
        assert response.json()["error"] == "Branch is required"

    def test_credit_payment_defaults_to_credit_sale(self, client_for, product, customer):
        client = client_for("cashier")

        response = client.post(
            self.url,
            _sale_payload(product, payment_method="credit", customer_id=str(customer.pk)),
            format="json",
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["is_credit_sale"] is True
        assert data["paid_amount"] == "0.00"
        assert data["balance_due"] == "351.00"

    def test_insufficient_stock(self, client_for, product):
        client = client_for("cashier")
        payload = _sale_payload(product)
        payload["items"][0]["quantity"] = "11"

        response = client.post(self.url, payload, format="json")

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Insufficient stock for product SP-IP15"
        assert body["code"] == "insufficient_stock"
        assert Sale.objects.count() == 0

    def test_empty_items_is_validation_error(self, client_for, product):
        client = client_for("cashier")

        response = client.post(self.url, _sale_payload(product, items=[]), format="json")

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation failed"
        assert "items" in body["data"]["errors"]

    def test_unknown_product_is_not_found(self, client_for, product):
        client = client_for("cashier")
        payload = _sale_payload(product)
        payload["items"][0]["product_id"] = "00000000-0000-0000-0000-000000000000"

        response = client.post(self.url, payload, format="json")

        assert response.status_code == 404

    def test_mixed_payment_needs_breakdown(self, client_for, product):
        client = client_for("cashier")

        response = client.post(
            self.url, _sale_payload(product, payment_method="mixed"), format="json"
        )

        assert response.status_code == 400
        assert "payment_details" in response.json()["data"]["errors"]

    def test_stock_keeper_cannot_sell(self, client_for, product):
        client = client_for("stock_keeper")

        response = client.post(self.url, _sale_payload(product), format="json")

        assert response.status_code == 403
        product.refresh_from_db()
        assert product.stock_quantity == Decimal("10")

    def test_unauthenticated_is_unauthorized(self, api_client, product):
        response = api_client.post(self.url, _sale_payload(product), format="json")

        assert response.status_code == 401


@pytest.mark.django_db
class TestSaleHistoryAndReceipts:
    def _create(self, client, product, **overrides):
        response = client.post("/api/sales/", _sale_payload(product, **overrides), format="json")
        assert response.status_code == 201
        return response.json()["data"]

    def test_list_filters_by_payment_method(self, client_for, product):
        client = client_for("cashier")
        self._create(client, product, invoice_number="INV-1")
        self._create(client, product, invoice_number="INV-2", payment_method="card")

        response = client.get("/api/sales/", {"payment_method": "card"})

        assert response.status_code == 200
        results = response.json()["data"]["results"]
        assert [row["invoice_number"] for row in results] == ["INV-2"]
        assert "items" not in results[0]

    def test_detail_includes_items(self, client_for, product):
        client = client_for("cashier")
        sale = self._create(client, product)

        response = client.get(f"/api/sales/{sale['id']}/")

        assert response.status_code == 200
        assert len(response.json()["data"]["items"]) == 1

    def test_receipt_data(self, client_for, product):
        profile = ShopProfile.load()
        profile.shop_name = "Mobile Point"
        profile.save()
        client = client_for("cashier")
        sale = self._create(client, product)

        response = client.get(f"/api/sales/{sale['id']}/receipt/")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["shop_profile"]["shop_name"] == "Mobile Point"
        assert data["branch"]["name"] == "Main Branch"
        assert data["cashier"]["username"] == "cashier"
        assert data["customer"] is None
        assert data["items"][0]["product_name"] == "iPhone 15 Screen Protector"

    @pytest.mark.parametrize("query", ["", "?layout=thermal"])
    def test_receipt_pdf(self, client_for, product, query):
        client = client_for("cashier")
        sale = self._create(client, product, fbr_invoice_number=123456789)

        response = client.get(f"/api/sales/{sale['id']}/receipt/pdf/{query}")

        assert response.status_code == 200
        assert response["Content-Type"] == "application/pdf"
        assert response.content.startswith(b"%PDF")

    def test_receipt_for_unknown_sale(self, client_for):
        client = client_for("cashier")

        response = client.get("/api/sales/00000000-0000-0000-0000-000000000000/receipt/")

        assert response.status_code == 404
