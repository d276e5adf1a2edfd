"""
Report endpoints.

Each report returns its sections inside the success envelope, or a file when
``?export=csv`` (one section, chosen with ``?section=``) or ``?export=xlsx``
(every section) is given.
"""

from django.http import HttpResponse
from django.utils import timezone
from django.utils.dateparse import parse_date

from rest_framework.decorators import api_view, permission_classes

from apps.core.exceptions import InvalidRequest
from apps.core.permissions import IsAdminOrManager
from apps.core.responses import success_response

from . import services
from .exports import export_to_csv, export_to_excel

XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _parse_date_param(params, name):
    raw = params.get(name)
    if not raw:
        return None
    value = parse_date(raw)
    if value is None:
        raise InvalidRequest(f"Invalid {name}: expected YYYY-MM-DD")
    return value


def _filters_from_request(request):
    params = request.query_params
    start_date = _parse_date_param(params, "start_date")
    end_date = _parse_date_param(params, "end_date")
    if start_date and end_date and start_date > end_date:
        raise InvalidRequest("start_date must not be after end_date")
    return services.ReportFilters(
        branch_id=params.get("branch") or None,
        start_date=start_date,
        end_date=end_date,
        category_id=params.get("category") or None,
        supplier_id=params.get("supplier") or None,
    )


def _report_response(request, report_name, sections):
    export = request.query_params.get("export")
    if not export:
        return success_response(sections)

    stamp = timezone.localdate().isoformat()
    if export == "xlsx":
        response = HttpResponse(export_to_excel(sections, report_name), content_type=XLSX_CONTENT_TYPE)
        response["Content-Disposition"] = f'attachment; filename="{report_name}_{stamp}.xlsx"'
        return response

    if export == "csv":
        section = request.query_params.get("section") or next(iter(sections))
        if section not in sections:
            raise InvalidRequest(
                f"Unknown section {section!r}. Must be one of: {', '.join(sections)}"
            )
        response = HttpResponse(export_to_csv(sections[section]), content_type="text/csv")
        response["Content-Disposition"] = (
            f'attachment; filename="{report_name}_{section}_{stamp}.csv"'
        )
        return response

    raise InvalidRequest(f"Unsupported export format: {export}")


@api_view(["GET"])
@permission_classes([IsAdminOrManager])
def sales_report(request):
    filters = _filters_from_request(request)
    sections = {
        "by_branch_payment_method": services.sales_by_branch_and_payment_method(filters),
        "daily": services.daily_sales_summary(filters),
    }
    return _report_response(request, "sales", sections)


@api_view(["GET"])
@permission_classes([IsAdminOrManager])
def purchases_report(request):
    filters = _filters_from_request(request)
    sections = {
        "by_supplier": services.purchases_by_supplier(filters),
        "by_branch": services.purchases_by_branch(filters),
    }
    return _report_response(request, "purchases", sections)


@api_view(["GET"])
@permission_classes([IsAdminOrManager])
def expenses_report(request):
    filters = _filters_from_request(request)
    sections = {
        "by_category": services.expenses_by_category(filters),
        "by_branch": services.expenses_by_branch(filters),
    }
    return _report_response(request, "expenses", sections)


@api_view(["GET"])
@permission_classes([IsAdminOrManager])
def stock_report(request):
    """Stock levels; ``?threshold=N`` overrides each product's minimum level."""
    filters = _filters_from_request(request)
    threshold = request.query_params.get("threshold")
    if threshold not in (None, ""):
        try:
            threshold = int(threshold)
        except ValueError:
            raise InvalidRequest("threshold must be a whole number")
    else:
        threshold = None
    sections = {
        "levels": services.stock_level_report(filters, threshold),
        "low_stock": services.low_stock_alerts(filters),
    }
    return _report_response(request, "stock", sections)
