"""
Receipt generation service for the POS.

- Receipt data (sale, items, customer, branch, shop profile, cashier) for
  client-side printing
- PDF receipts in standard (A4) and thermal (80mm) layouts with ReportLab
- QR code of the FBR invoice number when the sale has one
"""

import io
import logging
from typing import Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch, mm
from reportlab.platypus import Image, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle
from reportlab.platypus.flowables import HRFlowable

import qrcode

from apps.core.models import ShopProfile
from apps.core.serializers import BranchSerializer, ShopProfileSerializer
from apps.crm.serializers import CustomerSerializer

from .models import Sale

logger = logging.getLogger(__name__)


def build_receipt_data(sale: Sale) -> dict:
    """
    Collect everything a printed receipt needs.

    Returns:
        dict with ``sale``, ``items``, ``customer``, ``branch``,
        ``shop_profile`` and ``cashier``
    """
    from .serializers import SaleItemSerializer, SaleListSerializer

    items = sale.items.select_related("product")
    cashier = sale.created_by
    return {
        "sale": SaleListSerializer(sale).data,
        "items": SaleItemSerializer(items, many=True).data,
        "customer": CustomerSerializer(sale.customer).data if sale.customer_id else None,
        "customer_name": sale.get_customer_display(),
        "branch": BranchSerializer(sale.branch).data,
        "shop_profile": ShopProfileSerializer(ShopProfile.load()).data,
        "cashier": {
            "id": cashier.pk,
            "username": cashier.username,
            "name": cashier.get_full_name() or cashier.username,
        },
    }


class ReceiptGenerator:
    """
    PDF receipt generator for a sale.

    Supports a standard A4 layout and an 80mm thermal layout.
    """

    THERMAL_WIDTH = 80 * mm
    THERMAL_MARGIN = 5 * mm
    STANDARD_MARGIN = 20 * mm

    def __init__(self, sale: Sale):
        self.sale = sale
        self.profile = ShopProfile.load()
        self.styles = getSampleStyleSheet()
        self._create_custom_styles()

    def _create_custom_styles(self):
        """Create paragraph styles for both layouts."""
        self.shop_name_style = ParagraphStyle(
            "ShopName",
            parent=self.styles["Heading1"],
            fontSize=18,
            spaceAfter=6,
            alignment=1,
            fontName="Helvetica-Bold",
        )
        self.thermal_shop_style = ParagraphStyle(
            "ThermalShop",
            parent=self.shop_name_style,
            fontSize=13,
            spaceAfter=4,
        )
        self.body_style = ParagraphStyle(
            "ReceiptBody",
            parent=self.styles["Normal"],
            fontSize=10,
            spaceAfter=4,
        )
        self.thermal_body_style = ParagraphStyle(
            "ThermalBody",
            parent=self.body_style,
            fontSize=7,
            spaceAfter=2,
        )
        self.total_style = ParagraphStyle(
            "ReceiptTotal",
            parent=self.styles["Normal"],
            fontSize=12,
            alignment=2,
            fontName="Helvetica-Bold",
        )

    def generate_pdf(self, format_type: str = "standard") -> bytes:
        """
        Render the receipt.

        Args:
            format_type: 'standard' for A4, 'thermal' for 80mm paper

        Returns:
            PDF bytes
        """
        thermal = format_type == "thermal"
        buffer = io.BytesIO()
        if thermal:
            doc = SimpleDocTemplate(
                buffer,
                pagesize=(self.THERMAL_WIDTH, 11 * inch),
                rightMargin=self.THERMAL_MARGIN,
                leftMargin=self.THERMAL_MARGIN,
                topMargin=self.THERMAL_MARGIN,
                bottomMargin=self.THERMAL_MARGIN,
            )
        else:
            doc = SimpleDocTemplate(
                buffer,
                pagesize=A4,
                rightMargin=self.STANDARD_MARGIN,
                leftMargin=self.STANDARD_MARGIN,
                topMargin=self.STANDARD_MARGIN,
                bottomMargin=self.STANDARD_MARGIN,
            )

        story = []
        story.extend(self._build_shop_header(thermal))
        story.extend(self._build_sale_info(thermal))
        story.extend(self._build_items_table(thermal))
        story.extend(self._build_totals(thermal))
        story.extend(self._build_footer(thermal))
        doc.build(story)

        pdf_bytes = buffer.getvalue()
        buffer.close()
        return pdf_bytes

    def _body(self, thermal):
        return self.thermal_body_style if thermal else self.body_style

    def _build_shop_header(self, thermal):
        name_style = self.thermal_shop_style if thermal else self.shop_name_style
        elements = [Paragraph(escape(self.profile.shop_name), name_style)]
        lines = [
            self.sale.branch.name,
            self.sale.branch.address or self.profile.address,
            " / ".join(p for p in (self.profile.phone1, self.profile.phone2) if p),
        ]
        if self.profile.ntn:
            lines.append(f"NTN: {self.profile.ntn}")
        if self.profile.strn:
            lines.append(f"STRN: {self.profile.strn}")
        for line in lines:
            if line:
                elements.append(
                    Paragraph(f"<para align='center'>{escape(line)}</para>", self._body(thermal))
                )
        elements.append(HRFlowable(width="100%", thickness=1, color=colors.black))
        elements.append(Spacer(1, 8 if thermal else 12))
        return elements

    def _build_sale_info(self, thermal):
        sale = self.sale
        info = [
            f"Invoice #: {sale.invoice_number}",
            f"Date: {sale.sale_date.strftime('%Y-%m-%d %H:%M')}",
            f"Cashier: {sale.created_by.get_full_name() or sale.created_by.username}",
            f"Customer: {sale.get_customer_display()}",
        ]
        if sale.fbr_invoice_number:
            info.append(f"FBR Invoice #: {sale.fbr_invoice_number}")
        elements = [Paragraph(escape(line), self._body(thermal)) for line in info]
        elements.append(Spacer(1, 8 if thermal else 12))
        return elements

    def _build_items_table(self, thermal):
        if thermal:
            data = [["Item", "Qty", "Price", "Total"]]
            col_widths = [32 * mm, 10 * mm, 14 * mm, 14 * mm]
            font_size = 7
        else:
            data = [["Item", "Code", "Qty", "Unit Price", "Discount", "GST %", "Total"]]
            col_widths = [53 * mm, 22 * mm, 14 * mm, 22 * mm, 20 * mm, 14 * mm, 24 * mm]
            font_size = 9

        for item in self.sale.items.select_related("product"):
            quantity = f"{item.quantity.normalize():f}"
            if thermal:
                data.append(
                    [item.product.name[:20], quantity, f"{item.unit_price:.2f}", f"{item.line_total:.2f}"]
                )
            else:
                data.append(
                    [
                        item.product.name,
                        item.product.code,
                        quantity,
                        f"{item.unit_price:.2f}",
                        f"{item.discount_per_item:.2f}" if item.discount_per_item else "-",
                        f"{item.gst_percent:.2f}",
                        f"{item.line_total:.2f}",
                    ]
                )

        table = Table(data, colWidths=col_widths)
        table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), font_size),
                    ("LINEBELOW", (0, 0), (-1, 0), 1, colors.black),
                    ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
                    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                ]
            )
        )
        return [table, Spacer(1, 8 if thermal else 12)]

    def _build_totals(self, thermal):
        sale = self.sale
        body = self._body(thermal)
        lines = [
            f"Subtotal: {sale.subtotal:.2f}",
            f"Discount: {sale.discount_amount:.2f}",
            f"GST: {sale.gst_amount:.2f}",
        ]
        elements = [Paragraph(f"<para align='right'>{line}</para>", body) for line in lines]
        elements.append(HRFlowable(width="100%", thickness=2, color=colors.black))
        elements.append(Paragraph(f"TOTAL: {sale.total_amount:.2f}", self.total_style))
        elements.append(
            Paragraph(
                f"<para align='right'>Paid ({sale.get_payment_method_display()}): "
                f"{sale.paid_amount:.2f}</para>",
                body,
            )
        )
        if sale.balance_due > 0:
            elements.append(
                Paragraph(f"<para align='right'>Balance due: {sale.balance_due:.2f}</para>", body)
            )
        elements.append(Spacer(1, 8 if thermal else 12))
        return elements

    def _build_footer(self, thermal):
        elements = [
            HRFlowable(width="100%", thickness=1, color=colors.black),
            Paragraph("<para align='center'>Thank you for shopping with us!</para>", self._body(thermal)),
        ]
        qr_image = self._fbr_qr_code()
        if qr_image is not None:
            elements.append(qr_image)
        return elements

    def _fbr_qr_code(self) -> Optional[Image]:
        """QR code of the FBR invoice number, if the sale has one."""
        if not self.sale.fbr_invoice_number:
            return None

        qr = qrcode.QRCode(
            version=1,
            error_correction=qrcode.constants.ERROR_CORRECT_L,
            box_size=3,
            border=2,
        )
        qr.add_data(str(self.sale.fbr_invoice_number))
        qr.make(fit=True)

        buffer = io.BytesIO()
        qr.make_image(fill_color="black", back_color="white").save(buffer, format="PNG")
        buffer.seek(0)

        image = Image(buffer, width=1 * inch, height=1 * inch)
        image.hAlign = "CENTER"
        return image


class ReceiptService:
    """High-level entry points for receipts."""

    @staticmethod
    def receipt_data(sale: Sale) -> dict:
        return build_receipt_data(sale)

    @staticmethod
    def generate_pdf(sale: Sale, format_type: str = "standard") -> bytes:
        pdf_bytes = ReceiptGenerator(sale).generate_pdf(format_type)
        logger.debug(f"Rendered {format_type} receipt for sale {sale.invoice_number}")
        return pdf_bytes
