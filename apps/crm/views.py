"""
Views for customer management.
"""

from rest_framework import filters, generics

from apps.core.mixins import EnvelopeMixin
from apps.core.permissions import CounterPermission

from .models import Customer
from .serializers import CustomerSerializer


class CustomerListCreateView(EnvelopeMixin, generics.ListCreateAPIView):
    """
    API endpoint for customer list with search, and customer creation.
    """

    serializer_class = CustomerSerializer
    permission_classes = [CounterPermission]
    queryset = Customer.objects.all()
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ["name", "phone", "cnic"]
    ordering_fields = ["name", "loyalty_points", "current_credit_balance", "created_at"]
    ordering = ["name"]
    success_messages = {"POST": "Customer created successfully"}


class CustomerDetailView(EnvelopeMixin, generics.RetrieveUpdateDestroyAPIView):
    serializer_class = CustomerSerializer
    permission_classes = [CounterPermission]
    queryset = Customer.objects.all()
    success_messages = {
        "PUT": "Customer updated successfully",
        "PATCH": "Customer updated successfully",
    }
