"""
URL configuration for reporting app.
"""

from django.urls import path

from . import views

app_name = "reporting"

urlpatterns = [
    path("reports/sales/", views.sales_report, name="sales_report"),
    path("reports/purchases/", views.purchases_report, name="purchases_report"),
    path("reports/expenses/", views.expenses_report, name="expenses_report"),
    path("reports/stock/", views.stock_report, name="stock_report"),
]
