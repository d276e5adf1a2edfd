"""
URL configuration for the retail shop manager.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("apps.core.urls")),
    path("api/", include("apps.inventory.urls")),
    path("api/", include("apps.crm.urls")),
    path("api/", include("apps.procurement.urls")),
    path("api/", include("apps.sales.urls")),
    path("api/", include("apps.expenses.urls")),
    path("api/", include("apps.reporting.urls")),
    path("", include("django_prometheus.urls")),  # Prometheus metrics endpoint at /metrics
]
