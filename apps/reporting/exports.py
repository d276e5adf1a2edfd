"""
CSV and Excel export of report sections.

A report is a mapping of section name to a list of row dicts.
"""

import io
from decimal import Decimal
from typing import Any, Dict, List

import openpyxl
from import_export import resources
from import_export.formats.base_formats import CSV
from openpyxl.styles import Font, PatternFill
from tablib import Dataset

HEADER_FILL = PatternFill(start_color="CCCCCC", end_color="CCCCCC", fill_type="solid")
MAX_SHEET_TITLE = 31


class ReportRowsResource(resources.Resource):
    """Export resource over plain report rows instead of a queryset."""

    def __init__(self, rows: List[Dict[str, Any]], **kwargs):
        super().__init__(**kwargs)
        self.rows = rows
        if rows:
            for key in rows[0].keys():
                self.fields[key] = resources.Field(column_name=key)

    def get_queryset(self):
        return []

    def export(self, queryset=None, *args, **kwargs):
        if not self.rows:
            return Dataset()
        headers = list(self.rows[0].keys())
        dataset = Dataset(headers=headers)
        for row in self.rows:
            dataset.append([row.get(header, "") for header in headers])
        return dataset


def _cell_value(value):
    if isinstance(value, Decimal):
        return float(value)
    return value


def export_to_csv(rows: List[Dict[str, Any]]) -> str:
    """Render one section as CSV text; an empty section yields an empty string."""
    if not rows:
        return ""
    dataset = ReportRowsResource(rows).export()
    return CSV().export_data(dataset)


def export_to_excel(sections: Dict[str, List[Dict[str, Any]]], report_name: str = "") -> bytes:
    """
    Render every section to its own worksheet.

    Args:
        sections: Section name to rows
        report_name: Written to the document properties

    Returns:
        The .xlsx file contents
    """
    workbook = openpyxl.Workbook()
    workbook.remove(workbook.active)
    if report_name:
        workbook.properties.title = report_name

    for name, rows in sections.items():
        worksheet = workbook.create_sheet(title=name[:MAX_SHEET_TITLE])
        if not rows:
            continue
        headers = list(rows[0].keys())
        for col, header in enumerate(headers, 1):
            cell = worksheet.cell(row=1, column=col, value=header)
            cell.font = Font(bold=True)
            cell.fill = HEADER_FILL
        for row_idx, row in enumerate(rows, 2):
            for col_idx, header in enumerate(headers, 1):
                worksheet.cell(row=row_idx, column=col_idx, value=_cell_value(row.get(header)))
        _adjust_columns(worksheet)

    if not workbook.worksheets:
        workbook.create_sheet(title="Report")

    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def _adjust_columns(worksheet):
    for column in worksheet.columns:
        width = max(len(str(cell.value)) if cell.value is not None else 0 for cell in column)
        worksheet.column_dimensions[column[0].column_letter].width = min(width + 2, 50)
