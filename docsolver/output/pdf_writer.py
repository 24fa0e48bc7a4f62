"""
PDF Writer - renders paginated rows with ReportLab.

Uses the canvas API directly: one canvas page per Page, rows drawn at the
same vertical positions the paginator reserved for them, page numbers in
the footer.

Fonts are chosen before pagination (assemble_document), so rows are
measured in the same font they are drawn with.
"""

import dataclasses
import io
import logging
from pathlib import Path
from typing import List, Optional

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from .pagination import LayoutMetrics, Page, PaginatedDocument, paginate

logger = logging.getLogger(__name__)

CUSTOM_FONT_NAME = "DocSolverFont"

# Built-in PDF fonts are drawn with WinAnsi encoding
BUILTIN_FONT_ENCODING = "cp1252"


def register_font(font_path: Optional[str]) -> Optional[str]:
    """Register a TrueType font; returns its name, or None to keep the built-in fonts"""
    if not font_path:
        return None
    if not Path(font_path).exists():
        logger.warning(f"Font not found: {font_path}; using built-in fonts")
        return None
    pdfmetrics.registerFont(TTFont(CUSTOM_FONT_NAME, font_path))
    return CUSTOM_FONT_NAME


def with_font(metrics: LayoutMetrics, font_path: Optional[str]) -> LayoutMetrics:
    """Metrics drawing body and title in the TrueType font at font_path, if usable"""
    custom_font = register_font(font_path)
    if custom_font is None:
        return metrics
    return dataclasses.replace(metrics, font_name=custom_font, title_font_name=custom_font)


def unencodable_chars(text: str) -> List[str]:
    """Distinct characters the built-in fonts cannot draw, in order of appearance"""
    missing = []
    for char in dict.fromkeys(text):
        try:
            char.encode(BUILTIN_FONT_ENCODING)
        except UnicodeEncodeError:
            missing.append(char)
    return missing


def render_pdf(
    pages: List[Page],
    metrics: LayoutMetrics,
    title: Optional[str] = None,
) -> bytes:
    """
    Draw pages onto a PDF.

    Args:
        pages: Output of paginate()
        metrics: Same metrics used for pagination (fonts included)
        title: Document metadata title

    Returns:
        PDF file content
    """
    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=(metrics.page_width, metrics.page_height))
    c.setTitle(title or "Solution")
    c.setAuthor("DocSolver")

    total = len(pages)
    for page in pages:
        y = metrics.top_y

        if page.title_lines:
            c.setFont(metrics.title_font_name, metrics.title_font_size)
            for row in page.title_lines:
                c.drawString(metrics.margin_left, y - metrics.title_font_size, row)
                y -= metrics.title_line_height
            y -= metrics.line_height

        c.setFont(metrics.font_name, metrics.font_size)
        for line in page.lines:
            c.drawString(metrics.margin_left, y - metrics.font_size, line)
            y -= metrics.line_height

        # Footer page number
        c.setFont(metrics.font_name, 9)
        c.drawCentredString(
            metrics.page_width / 2,
            metrics.margin_bottom / 2,
            f"Page {page.number} of {total}",
        )
        c.showPage()

    c.save()
    return buffer.getvalue()


def assemble_document(
    answer_text: str,
    metrics: LayoutMetrics,
    title: Optional[str] = None,
    source_text: Optional[str] = None,
    font_path: Optional[str] = None,
) -> PaginatedDocument:
    """
    Build the solution document.

    With source_text the extracted question text is printed first, followed
    by the solution. font_path selects a TrueType font for non-Latin text.
    """
    if source_text:
        body = f"QUESTIONS\n\n{source_text}\n\nSOLUTION\n\n{answer_text}"
    else:
        body = answer_text

    metrics = with_font(metrics, font_path)
    if metrics.font_name != CUSTOM_FONT_NAME:
        missing = unencodable_chars(f"{title or ''}{body}")
        if missing:
            logger.warning(
                f"{len(missing)} distinct character(s) cannot be drawn with "
                f"{metrics.font_name} (e.g. {''.join(missing[:5])!r}); "
                f"set FONT_PATH to a TrueType font that covers them"
            )

    return PaginatedDocument(title=title, pages=paginate(title, body, metrics), metrics=metrics)


def render_document(document: PaginatedDocument) -> bytes:
    """render_pdf() for an assembled document"""
    return render_pdf(document.pages, document.metrics, title=document.title)
