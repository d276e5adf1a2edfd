"""
Mixins for API views.

This module provides the response envelope for generic DRF views so list,
detail, create, update and delete endpoints all answer with
``{"success": true, "data": ..., "message": ...}``.
"""

from rest_framework import status
from rest_framework.response import Response


class EnvelopeMixin:
    """
    Wrap successful DRF responses in the success envelope.

    Usage:
        class ProductListCreateView(EnvelopeMixin, generics.ListCreateAPIView):
            success_messages = {"POST": "Product created successfully"}
    """

    success_messages = {}

    def finalize_response(self, request, response, *args, **kwargs):
        """Envelope 2xx Response objects that are not enveloped yet."""
        if isinstance(response, Response) and response.status_code < 400:
            already_wrapped = isinstance(response.data, dict) and "success" in response.data
            if not already_wrapped:
                message = self.success_messages.get(request.method)
                if response.status_code == status.HTTP_204_NO_CONTENT:
                    response.status_code = status.HTTP_200_OK
                    message = message or "Deleted successfully"
                response.data = {"success": True, "data": response.data, "message": message}
        return super().finalize_response(request, response, *args, **kwargs)
