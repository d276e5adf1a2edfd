"""
Tests for the API failure envelope produced by the exception handler.
"""

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError
from django.db.models import ProtectedError, RestrictedError

import pytest

from apps.core.exceptions import shop_exception_handler


@pytest.mark.django_db
class TestExceptionHandler:
    def _handle(self, exc):
        return shop_exception_handler(exc, {"view": None})

    def test_protected_delete_is_conflict(self):
        response = self._handle(ProtectedError("referenced through protected foreign keys", set()))

        assert response.status_code == 409
        assert response.data["success"] is False
        assert response.data["code"] == "conflict"

    def test_restricted_delete_is_conflict(self):
        response = self._handle(RestrictedError("referenced through restricted foreign keys", set()))

        assert response.status_code == 409

    def test_unique_violation_is_conflict(self):
        response = self._handle(IntegrityError("UNIQUE constraint failed: inventory_product.code"))

        assert response.status_code == 409

    def test_foreign_key_violation_is_invalid_reference(self):
        response = self._handle(IntegrityError("FOREIGN KEY constraint failed"))

        assert response.status_code == 400
        assert response.data["code"] == "invalid_reference"

    def test_django_validation_error_is_bad_request(self):
        response = self._handle(DjangoValidationError(["“xyz” is not a valid UUID."]))

        assert response.status_code == 400
        assert response.data["error"] == "“xyz” is not a valid UUID."
        assert response.data["code"] == "bad_request"

    def test_unexpected_error_is_server_error(self):
        response = self._handle(RuntimeError("boom"))

        assert response.status_code == 500
        assert response.data == {
            "success": False,
            "error": "An unexpected error occurred",
            "message": "An unexpected error occurred",
        }


@pytest.mark.django_db
class TestMalformedFilters:
    @pytest.mark.parametrize(
        "role,url,params",
        [
            ("cashier", "/api/sales/", {"branch": "not-a-uuid"}),
            ("cashier", "/api/sales/", {"customer": "xyz"}),
            ("cashier", "/api/sales/", {"start_date": "bogus"}),
            ("stock_keeper", "/api/purchases/", {"supplier": "xyz"}),
            ("stock_keeper", "/api/purchases/", {"end_date": "31/12/2024"}),
            ("stock_keeper", "/api/stock-adjustments/", {"product": "xyz"}),
            ("cashier", "/api/products/", {"category": "xyz"}),
            ("cashier", "/api/expenses/", {"branch": "xyz"}),
            ("admin", "/api/users/", {"branch": "xyz"}),
            ("manager", "/api/reports/sales/", {"branch": "xyz"}),
            ("manager", "/api/reports/purchases/", {"supplier": "xyz"}),
        ],
    )
    def test_malformed_filter_is_bad_request(self, client_for, role, url, params):
        response = client_for(role).get(url, params)

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"]

    def test_well_formed_unknown_id_filters_to_nothing(self, client_for, product):
        response = client_for("cashier").get(
            "/api/sales/", {"branch": "00000000-0000-0000-0000-000000000000"}
        )

        assert response.status_code == 200
        assert response.json()["data"]["results"] == []
