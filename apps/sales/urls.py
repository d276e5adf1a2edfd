"""
URL configuration for sales app.
"""

from django.urls import path

from . import views

app_name = "sales"

urlpatterns = [
    path("sales/", views.SaleListCreateView.as_view(), name="sale_list"),
    path("sales/<uuid:pk>/", views.SaleDetailView.as_view(), name="sale_detail"),
    path("sales/<uuid:pk>/receipt/", views.sale_receipt, name="sale_receipt"),
    path("sales/<uuid:pk>/receipt/pdf/", views.sale_receipt_pdf, name="sale_receipt_pdf"),
]
