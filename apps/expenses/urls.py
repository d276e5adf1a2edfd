"""
URL configuration for expenses app.
"""

from django.urls import path

from . import views

app_name = "expenses"

urlpatterns = [
    path(
        "expense-categories/",
        views.ExpenseCategoryListCreateView.as_view(),
        name="expense_category_list",
    ),
    path(
        "expense-categories/<uuid:pk>/",
        views.ExpenseCategoryDetailView.as_view(),
        name="expense_category_detail",
    ),
    path("expenses/", views.ExpenseListCreateView.as_view(), name="expense_list"),
    path("expenses/<uuid:pk>/", views.ExpenseDetailView.as_view(), name="expense_detail"),
]
