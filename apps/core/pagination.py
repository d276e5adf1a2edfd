"""
Pagination for list endpoints.

Lists accept ``?limit=`` and ``?offset=``; without a limit at most
``settings.API_LIST_LIMIT`` rows are returned.
"""

from django.conf import settings

from rest_framework.pagination import LimitOffsetPagination


class ShopPagination(LimitOffsetPagination):
    default_limit = settings.API_LIST_LIMIT
    max_limit = 1000
