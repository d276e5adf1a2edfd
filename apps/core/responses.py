"""
Success envelope shared by every API endpoint.
"""

from rest_framework import status
from rest_framework.response import Response


def success_response(data=None, message=None, status_code=status.HTTP_200_OK):
    """Wrap ``data`` in ``{"success": true, "data": ..., "message": ...}``."""
    return Response({"success": True, "data": data, "message": message}, status=status_code)


def created_response(data=None, message="Created successfully"):
    return success_response(data, message, status.HTTP_201_CREATED)
