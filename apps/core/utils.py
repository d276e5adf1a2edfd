"""
Small helpers shared by the service modules.
"""

from typing import Optional

from django.core.exceptions import ValidationError

from apps.core.exceptions import ResourceNotFound


def get_or_404(model, pk, label: Optional[str] = None):
    """Fetch ``model`` by primary key or raise ResourceNotFound."""
    try:
        return model.objects.get(pk=pk)
    except (model.DoesNotExist, ValidationError, ValueError, TypeError):
        raise ResourceNotFound(label or model._meta.verbose_name.title(), pk)
