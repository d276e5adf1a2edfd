from django.contrib import admin

from .models import Expense, ExpenseCategory


@admin.register(ExpenseCategory)
class ExpenseCategoryAdmin(admin.ModelAdmin):
    list_display = ["name", "created_at"]
    search_fields = ["name"]


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    list_display = ["expense_date", "branch", "category", "amount", "paid_to", "created_by"]
    list_filter = ["branch", "category", "expense_date"]
    search_fields = ["description", "paid_to"]
