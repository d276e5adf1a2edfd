"""
URL configuration for core app.
"""

from django.urls import path

from rest_framework_simplejwt.views import TokenRefreshView

from . import views

app_name = "core"

urlpatterns = [
    # Authentication
    path("auth/login/", views.login_view, name="login"),
    path("auth/logout/", views.logout_view, name="logout"),
    path("auth/me/", views.me_view, name="me"),
    path("auth/register/", views.register_view, name="register"),
    path("auth/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
    # Users
    path("users/", views.UserListCreateView.as_view(), name="user_list"),
    path("users/<int:pk>/", views.UserDetailView.as_view(), name="user_detail"),
    # Branches
    path("branches/", views.BranchListCreateView.as_view(), name="branch_list"),
    path("branches/<uuid:pk>/", views.BranchDetailView.as_view(), name="branch_detail"),
    # Shop profile
    path("shop-profile/", views.shop_profile_view, name="shop_profile"),
]
