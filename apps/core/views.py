"""
Views for authentication, users, branches and the shop profile.
"""

import logging

from django.contrib.auth import authenticate, login, logout

from rest_framework import exceptions, filters, generics, permissions
from rest_framework.decorators import api_view, permission_classes
from rest_framework_simplejwt.tokens import RefreshToken

from .mixins import EnvelopeMixin
from .models import Branch, ShopProfile, User
from .permissions import BranchPermission, IsAdmin, IsAdminOrManager, IsShopStaff
from .responses import created_response, success_response
from .serializers import (
    BranchSerializer,
    LoginSerializer,
    RegisterSerializer,
    ShopProfileSerializer,
    UserSerializer,
)

logger = logging.getLogger(__name__)


# Authentication


@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def login_view(request):
    """
    Log a user in.

    Starts a Django session and returns a JWT access/refresh pair so both
    browser and API clients can continue. Inactive users cannot log in.
    """
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = authenticate(
        request=request,
        username=serializer.validated_data["username"],
        password=serializer.validated_data["password"],
    )
    if user is None:
        logger.warning(f"Failed login for {serializer.validated_data['username']!r}")
        raise exceptions.AuthenticationFailed("Invalid username or password")

    login(request, user)
    refresh = RefreshToken.for_user(user)
    logger.info(f"User {user.username} logged in")

    return success_response(
        {
            "user": UserSerializer(user).data,
            "access": str(refresh.access_token),
            "refresh": str(refresh),
        },
        "Login successful",
    )


@api_view(["POST"])
@permission_classes([permissions.IsAuthenticated])
def logout_view(request):
    """End the session."""
    username = request.user.username
    logout(request)
    logger.info(f"User {username} logged out")
    return success_response(None, "Logged out successfully")


@api_view(["GET"])
@permission_classes([IsShopStaff])
def me_view(request):
    """Return the authenticated user."""
    return success_response(UserSerializer(request.user).data)


@api_view(["POST"])
@permission_classes([IsAdmin])
def register_view(request):
    """Create a user account (administrators only)."""
    serializer = RegisterSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    user = serializer.save()
    logger.info(f"User {user.username} ({user.role}) registered by {request.user.username}")
    return created_response(UserSerializer(user).data, "User created successfully")


# Users


class UserListCreateView(EnvelopeMixin, generics.ListCreateAPIView):
    """List and create users (administrators only)."""

    serializer_class = UserSerializer
    permission_classes = [IsAdmin]
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ["username", "first_name", "last_name", "phone"]
    ordering_fields = ["username", "role", "date_joined"]
    ordering = ["username"]
    success_messages = {"POST": "User created successfully"}

    def get_queryset(self):
        queryset = User.objects.select_related("branch")
        role = self.request.query_params.get("role")
        if role:
            queryset = queryset.filter(role=role)
        branch = self.request.query_params.get("branch")
        if branch:
            queryset = queryset.filter(branch_id=branch)
        return queryset


class UserDetailView(EnvelopeMixin, generics.RetrieveUpdateDestroyAPIView):
    serializer_class = UserSerializer
    permission_classes = [IsAdmin]
    queryset = User.objects.select_related("branch")
    success_messages = {"PUT": "User updated successfully", "PATCH": "User updated successfully"}

    def perform_destroy(self, instance):
        if instance.pk == self.request.user.pk:
            raise exceptions.ValidationError("You cannot delete your own account.")
        instance.delete()


# Branches


class BranchListCreateView(EnvelopeMixin, generics.ListCreateAPIView):
    serializer_class = BranchSerializer
    permission_classes = [BranchPermission]
    queryset = Branch.objects.all()
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ["name", "name_ur", "phone"]
    ordering = ["name"]
    success_messages = {"POST": "Branch created successfully"}


class BranchDetailView(EnvelopeMixin, generics.RetrieveUpdateDestroyAPIView):
    serializer_class = BranchSerializer
    permission_classes = [BranchPermission]
    queryset = Branch.objects.all()


# Shop profile


@api_view(["GET", "PUT", "PATCH"])
@permission_classes([IsShopStaff])
def shop_profile_view(request):
    """
    Read or update the shop profile.

    Any staff member may read it; only administrators and managers may change it.
    """
    profile = ShopProfile.load()
    if request.method == "GET":
        return success_response(ShopProfileSerializer(profile).data)

    if not IsAdminOrManager().has_permission(request, None):
        raise exceptions.PermissionDenied(IsAdminOrManager.message)

    serializer = ShopProfileSerializer(
        profile, data=request.data, partial=request.method == "PATCH"
    )
    serializer.is_valid(raise_exception=True)
    serializer.save()
    return success_response(serializer.data, "Shop profile updated successfully")
