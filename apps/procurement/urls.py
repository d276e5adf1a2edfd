"""
URL configuration for procurement app.
"""

from django.urls import path

from . import views

app_name = "procurement"

urlpatterns = [
    path("suppliers/", views.SupplierListCreateView.as_view(), name="supplier_list"),
    path("suppliers/<uuid:pk>/", views.SupplierDetailView.as_view(), name="supplier_detail"),
    path("purchases/", views.PurchaseListCreateView.as_view(), name="purchase_list"),
    path("purchases/<uuid:pk>/", views.PurchaseDetailView.as_view(), name="purchase_detail"),
]
