from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.enums import TA_CENTER
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from io import BytesIO
from xml.sax.saxutils import escape
from datetime import datetime
from typing import Dict, List, Optional
import logging

from .. import config
from ..exceptions import ExportError
from .explication import ExplicationRow, build_explication_rows, ROW_ROOM, ROW_SUBTOTAL
from .house_plan import HousePlan
from .room_allocation import LivingFormat
from .room_labels import get_document_labels

logger = logging.getLogger(__name__)

CUSTOM_FONT_NAME = 'PlannerSans'


class ExplicationPDFGenerator:
    """Render the room explication of a house plan as a PDF table"""

    def __init__(self, font_path: Optional[str] = None):
        self.page_width = A4[0]
        self.page_height = A4[1]
        self.margin = 15 * mm
        self.font_name, self.bold_font_name = self._register_font(font_path)

    def generate(self, plan: HousePlan, project_data: Optional[Dict] = None, language: str = 'ru') -> BytesIO:
        """Generate the explication document"""
        project_data = project_data or {}
        labels = get_document_labels(language)

        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=self.margin,
            leftMargin=self.margin,
            topMargin=self.margin,
            bottomMargin=self.margin
        )

        story = []
        styles = getSampleStyleSheet()

        title_style = ParagraphStyle(
            'ExplicationTitle',
            parent=styles['Heading1'],
            fontName=self.bold_font_name,
            fontSize=18,
            textColor=colors.HexColor('#ff5f1f'),
            spaceAfter=12,
            alignment=TA_CENTER
        )
        body_style = ParagraphStyle('ExplicationBody', parent=styles['Normal'], fontName=self.font_name)

        story.append(Paragraph(labels['explication'], title_style))

        # Project details
        project_details = [
            ['Project:', project_data.get('name') or '---'],
            ['Date:', datetime.now().strftime('%d.%m.%Y')],
            ['Format:', LivingFormat(plan.format).value.upper()],
            [f"{labels['total']}:", f"{plan.total_area:.1f} m²"],
        ]
        if project_data.get('client'):
            project_details.insert(1, ['Client:', project_data['client']])

        details_table = Table(project_details, colWidths=[50 * mm, 120 * mm])
        details_table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (0, -1), colors.HexColor('#f3f4f6')),
            ('FONTNAME', (0, 0), (0, -1), self.bold_font_name),
            ('FONTNAME', (1, 0), (1, -1), self.font_name),
            ('FONTSIZE', (0, 0), (-1, -1), 10),
            ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),
            ('LEFTPADDING', (0, 0), (-1, -1), 6),
            ('TOPPADDING', (0, 0), (-1, -1), 4),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 4),
        ]))
        story.append(details_table)
        story.append(Spacer(1, 8 * mm))

        rows = build_explication_rows(plan, labels['subtotal'], labels['total'])
        story.append(self._room_schedule(rows, labels))

        comments = [f"{labels['floor']} {f.floor_number}: {f.comment}" for f in plan.floors if f.comment]
        if comments:
            story.append(Spacer(1, 6 * mm))
            for comment in comments:
                story.append(Paragraph(escape(comment), body_style))

        try:
            doc.build(story)
        except Exception as e:
            logger.error(f"Explication PDF build failed: {str(e)}", exc_info=True)
            raise ExportError("Could not build explication PDF", {'reason': str(e)}) from e

        buffer.seek(0)
        return buffer

    def _room_schedule(self, rows: List[ExplicationRow], labels: Dict[str, str]) -> Table:
        """Room table grouped by floor, with subtotals and a grand total"""
        schedule = [['#', labels['room'], labels['area']]]
        style = [
            ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#1e293b')),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
            ('FONTNAME', (0, 0), (-1, 0), self.bold_font_name),
            ('FONTNAME', (0, 1), (-1, -1), self.font_name),
            ('FONTSIZE', (0, 0), (-1, -1), 9),
            ('ALIGN', (2, 0), (2, -1), 'RIGHT'),
            ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),
        ]

        current_floor = None
        for row in rows:
            if row.kind == ROW_ROOM and row.floor_number != current_floor:
                current_floor = row.floor_number
                schedule.append(['', f"{labels['floor']} {current_floor}", ''])
                style.append(('BACKGROUND', (0, len(schedule) - 1), (-1, len(schedule) - 1), colors.HexColor('#f1f5f9')))
                style.append(('FONTNAME', (0, len(schedule) - 1), (-1, len(schedule) - 1), self.bold_font_name))

            if row.kind == ROW_ROOM:
                schedule.append([f"{row.floor_number}.{row.position}", row.name, f"{row.area:.1f}"])
            else:
                schedule.append(['', row.name, f"{row.area:.1f}"])
                color = '#dbeafe' if row.kind == ROW_SUBTOTAL else '#fed7aa'
                style.append(('BACKGROUND', (0, len(schedule) - 1), (-1, len(schedule) - 1), colors.HexColor(color)))
                style.append(('FONTNAME', (0, len(schedule) - 1), (-1, len(schedule) - 1), self.bold_font_name))

        table = Table(schedule, colWidths=[15 * mm, 120 * mm, 35 * mm], repeatRows=1)
        table.setStyle(TableStyle(style))
        return table

    def _register_font(self, font_path: Optional[str]):
        """Register a TTF for non-Latin room names, falling back to Helvetica"""
        if not font_path:
            return 'Helvetica', 'Helvetica-Bold'
        try:
            pdfmetrics.registerFont(TTFont(CUSTOM_FONT_NAME, font_path))
        except Exception as e:
            raise ExportError("Could not load PDF font", {'font_path': font_path, 'reason': str(e)}) from e
        return CUSTOM_FONT_NAME, CUSTOM_FONT_NAME


def generate_explication_pdf(plan: HousePlan, project_data: Optional[Dict] = None, language: str = 'ru') -> BytesIO:
    """Main entry point for PDF generation"""
    generator = ExplicationPDFGenerator(config.PDF_FONT_PATH)
    return generator.generate(plan, project_data, language)
