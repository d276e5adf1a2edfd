"""
Role-based permission classes for the shop API.

Every endpoint runs behind one of these; they require an authenticated,
active user and check the user's role.
"""

from rest_framework import permissions

from apps.core.models import User

Role = User.Role


class HasShopRole(permissions.BasePermission):
    """
    Allow active users whose role is in ``allowed_roles``.

    Subclasses set ``allowed_roles``. An empty tuple means any role.
    """

    allowed_roles = ()
    message = "You do not have permission to perform this action."

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated and user.is_active):
            return False
        if not self.allowed_roles:
            return True
        return user.has_role(*self.allowed_roles)


class IsShopStaff(HasShopRole):
    """Any active user, whatever the role."""


class IsAdmin(HasShopRole):
    allowed_roles = (Role.ADMIN,)
    message = "Only administrators can perform this action."


class IsAdminOrManager(HasShopRole):
    allowed_roles = (Role.ADMIN, Role.MANAGER)
    message = "Only administrators and managers can perform this action."


class CanProcessSales(HasShopRole):
    allowed_roles = (Role.ADMIN, Role.MANAGER, Role.CASHIER)
    message = "Your role cannot process sales."


class CanManageInventory(HasShopRole):
    allowed_roles = (Role.ADMIN, Role.MANAGER, Role.STOCK_KEEPER)
    message = "Your role cannot change inventory."


class ReadOnlyOr(HasShopRole):
    """
    Any active user may read; writes need one of ``allowed_roles``.

    Use ``ReadOnlyOr.roles(...)`` to build a concrete class.
    """

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated and user.is_active):
            return False
        if request.method in permissions.SAFE_METHODS:
            return True
        return user.has_role(*self.allowed_roles)

    @classmethod
    def roles(cls, *roles):
        return type(f"ReadOnlyOr_{'_'.join(roles)}", (cls,), {"allowed_roles": tuple(roles)})


CatalogPermission = ReadOnlyOr.roles(Role.ADMIN, Role.MANAGER, Role.STOCK_KEEPER)
CounterPermission = ReadOnlyOr.roles(Role.ADMIN, Role.MANAGER, Role.CASHIER)
BranchPermission = ReadOnlyOr.roles(Role.ADMIN, Role.MANAGER)
AdminWritePermission = ReadOnlyOr.roles(Role.ADMIN)
