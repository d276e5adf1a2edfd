"""
URL configuration for inventory app.
"""

from django.urls import path

from . import views

app_name = "inventory"

urlpatterns = [
    # Categories and brands
    path("categories/", views.CategoryListCreateView.as_view(), name="category_list"),
    path("categories/<uuid:pk>/", views.CategoryDetailView.as_view(), name="category_detail"),
    path("brands/", views.BrandListCreateView.as_view(), name="brand_list"),
    path("brands/<uuid:pk>/", views.BrandDetailView.as_view(), name="brand_detail"),
    # Products
    path("products/", views.ProductListCreateView.as_view(), name="product_list"),
    path("products/search/", views.product_search, name="product_search"),
    path("products/low-stock/", views.low_stock_list, name="product_low_stock"),
    path("products/<uuid:pk>/", views.ProductDetailView.as_view(), name="product_detail"),
    path(
        "products/<uuid:pk>/toggle-status/",
        views.product_toggle_status,
        name="product_toggle_status",
    ),
    # Stock adjustments
    path(
        "stock-adjustments/",
        views.StockAdjustmentListCreateView.as_view(),
        name="stock_adjustment_list",
    ),
    path(
        "stock-adjustments/<uuid:pk>/",
        views.StockAdjustmentDetailView.as_view(),
        name="stock_adjustment_detail",
    ),
]
