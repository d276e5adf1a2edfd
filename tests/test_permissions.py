"""
Tests for role-based permissions.
"""

import pytest
from rest_framework.test import APIRequestFactory

from apps.core.models import User
from apps.core.permissions import (
    AdminWritePermission,
    CanManageInventory,
    CanProcessSales,
    CatalogPermission,
    IsAdmin,
    IsAdminOrManager,
    IsShopStaff,
)


def _request(method, user):
    factory = APIRequestFactory()
    request = getattr(factory, method)("/")
    request.user = user
    return request


@pytest.mark.django_db
class TestPermissionClasses:
    @pytest.mark.parametrize(
        "permission, allowed",
        [
            (IsAdmin, {"admin"}),
            (IsAdminOrManager, {"admin", "manager"}),
            (CanProcessSales, {"admin", "manager", "cashier"}),
            (CanManageInventory, {"admin", "manager", "stock_keeper"}),
            (IsShopStaff, {"admin", "manager", "cashier", "stock_keeper"}),
        ],
    )
    def test_role_matrix(self, permission, allowed):
        for role in User.Role.values:
            user = User(username=role, role=role, is_active=True)
            assert permission().has_permission(_request("post", user), None) is (role in allowed)

    def test_has_role(self):
        keeper = User(username="k", role=User.Role.STOCK_KEEPER)

        assert keeper.has_role(User.Role.ADMIN, User.Role.STOCK_KEEPER) is True
        assert keeper.has_role(User.Role.CASHIER) is False
        assert keeper.has_role() is False

    def test_inactive_user_is_denied(self):
        user = User(username="gone", role=User.Role.ADMIN, is_active=False)
        assert IsShopStaff().has_permission(_request("get", user), None) is False

    def test_read_only_or_allows_reads_for_everyone(self):
        cashier = User(username="c", role=User.Role.CASHIER, is_active=True)

        assert CatalogPermission().has_permission(_request("get", cashier), None) is True
        assert CatalogPermission().has_permission(_request("post", cashier), None) is False
        assert AdminWritePermission().has_permission(_request("get", cashier), None) is True
        assert AdminWritePermission().has_permission(_request("delete", cashier), None) is False


@pytest.mark.django_db
class TestEndpointRoles:
    @pytest.mark.parametrize(
        "role, expected",
        [("admin", 200), ("manager", 200), ("cashier", 403), ("stock_keeper", 403)],
    )
    def test_reports_need_admin_or_manager(self, client_for, role, expected):
        response = client_for(role).get("/api/reports/sales/")
        assert response.status_code == expected

    @pytest.mark.parametrize("role, expected", [("admin", 200), ("manager", 403)])
    def test_user_management_is_admin_only(self, client_for, role, expected):
        response = client_for(role).get("/api/users/")
        assert response.status_code == expected

    def test_manager_creates_branch_cashier_cannot(self, client_for):
        created = client_for("manager").post("/api/branches/", {"name": "DHA"}, format="json")
        denied = client_for("cashier").post("/api/branches/", {"name": "Gulberg"}, format="json")

        assert created.status_code == 201
        assert denied.status_code == 403

    def test_shop_profile_read_by_all_written_by_managers(self, client_for):
        read = client_for("cashier").get("/api/shop-profile/")
        denied = client_for("cashier").patch(
            "/api/shop-profile/", {"shop_name": "X"}, format="json"
        )
        updated = client_for("manager").patch(
            "/api/shop-profile/", {"shop_name": "Mobile Point"}, format="json"
        )

        assert read.status_code == 200
        assert denied.status_code == 403
        assert updated.status_code == 200
        assert updated.json()["data"]["shop_name"] == "Mobile Point"

    def test_admin_cannot_delete_self(self, client_for):
        client = client_for("admin")

        response = client.delete(f"/api/users/{client.user.pk}/")

        assert response.status_code == 400
        assert User.objects.filter(pk=client.user.pk).exists()
