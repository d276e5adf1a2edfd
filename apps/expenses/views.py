"""
Views for expense tracking.
"""

import logging

from rest_framework import generics

from apps.core.exceptions import InvalidRequest
from apps.core.mixins import EnvelopeMixin
from apps.core.permissions import AdminWritePermission, CounterPermission

from .models import Expense, ExpenseCategory
from .serializers import ExpenseCategorySerializer, ExpenseSerializer

logger = logging.getLogger(__name__)


class ExpenseCategoryListCreateView(EnvelopeMixin, generics.ListCreateAPIView):
    serializer_class = ExpenseCategorySerializer
    permission_classes = [AdminWritePermission]
    queryset = ExpenseCategory.objects.all()
    success_messages = {"POST": "Expense category created successfully"}


class ExpenseCategoryDetailView(EnvelopeMixin, generics.RetrieveUpdateDestroyAPIView):
    serializer_class = ExpenseCategorySerializer
    permission_classes = [AdminWritePermission]
    queryset = ExpenseCategory.objects.all()


class ExpenseListCreateView(EnvelopeMixin, generics.ListCreateAPIView):
    """
    Expense list and creation.

    Filters: ``branch``, ``category``, ``start_date``, ``end_date``. A new
    expense defaults to the user's branch.
    """

    serializer_class = ExpenseSerializer
    permission_classes = [CounterPermission]
    success_messages = {"POST": "Expense recorded successfully"}

    def get_queryset(self):
        queryset = Expense.objects.select_related("branch", "category", "created_by")
        params = self.request.query_params

        if params.get("branch"):
            queryset = queryset.filter(branch_id=params["branch"])
        if params.get("category"):
            queryset = queryset.filter(category_id=params["category"])
        if params.get("start_date"):
            queryset = queryset.filter(expense_date__gte=params["start_date"])
        if params.get("end_date"):
            queryset = queryset.filter(expense_date__lte=params["end_date"])

        return queryset

    def perform_create(self, serializer):
        branch = serializer.validated_data.get("branch") or self.request.user.branch
        if branch is None:
            raise InvalidRequest("Branch is required")
        expense = serializer.save(branch=branch, created_by=self.request.user)
        logger.info(
            f"Expense {expense.pk} recorded: {expense.amount} ({expense.category.name}) "
            f"at {branch.name} by {self.request.user.username}"
        )


class ExpenseDetailView(EnvelopeMixin, generics.RetrieveUpdateDestroyAPIView):
    serializer_class = ExpenseSerializer
    permission_classes = [CounterPermission]
    queryset = Expense.objects.select_related("branch", "category", "created_by")
