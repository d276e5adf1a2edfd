"""
Pytest configuration and fixtures for the retail shop manager.
"""

import itertools
from decimal import Decimal

import pytest

from apps.core.models import Branch, User
from apps.crm.models import Customer
from apps.inventory.models import Product
from apps.procurement.models import Supplier


@pytest.fixture
def api_client():
    """
    Fixture for Django REST framework API client.
    """
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def branch(db):
    return Branch.objects.create(name="Main Branch", address="12 Mall Road, Lahore")


@pytest.fixture
def other_branch(db):
    return Branch.objects.create(name="Saddar Branch")


def _create_user(username, role, branch, **extra):
    return User.objects.create_user(
        username=username,
        email=f"{username}@example.com",
        password="testpass123",
        role=role,
        branch=branch,
        **extra,
    )


@pytest.fixture
def admin_user(branch):
    return _create_user("admin", User.Role.ADMIN, branch)


@pytest.fixture
def manager_user(branch):
    return _create_user("manager", User.Role.MANAGER, branch)


@pytest.fixture
def cashier_user(branch):
    return _create_user("cashier", User.Role.CASHIER, branch)


@pytest.fixture
def stock_keeper_user(branch):
    return _create_user("stockkeeper", User.Role.STOCK_KEEPER, branch)


@pytest.fixture
def client_for(request):
    """
    Build an API client authenticated as the user for ``role``.

    Usage:
        client = client_for("cashier")
    """
    from rest_framework.test import APIClient

    def _client(role):
        user = request.getfixturevalue(f"{role}_user")
        client = APIClient()
        client.force_authenticate(user=user)
        client.user = user
        return client

    return _client


@pytest.fixture
def make_product(db):
    """Factory for products; every call gets a fresh code."""
    counter = itertools.count(1)

    def _make(**kwargs):
        number = next(counter)
        defaults = {
            "code": f"P-{number:03d}",
            "name": f"Product {number}",
            "purchase_price": Decimal("60.00"),
            "selling_price": Decimal("100.00"),
            "gst_percent": Decimal("17"),
            "stock_quantity": Decimal("10"),
            "min_stock_level": 5,
        }
        defaults.update(kwargs)
        return Product.objects.create(**defaults)

    return _make


@pytest.fixture
def product(make_product):
    return make_product(code="SP-IP15", name="iPhone 15 Screen Protector")


@pytest.fixture
def customer(db):
    return Customer.objects.create(
        name="Ali Raza", phone="03001234567", credit_limit=Decimal("5000.00")
    )


@pytest.fixture
def supplier(db):
    return Supplier.objects.create(name="Hafeez Centre Traders", phone="04235761234")
