"""
Output Module - turns answer text into deliverable artifacts.

- ChunkedText / chunk_text: message-sized slices for chat channels
- paginate / assemble_document: fixed-size page layout
- render_pdf / render_document: ReportLab PDF output
"""

from .chunking import ChunkedText, chunk_text
from .pagination import (
    LayoutMetrics,
    Page,
    PaginatedDocument,
    Paginator,
    fit_to_width,
    layout_rows,
    paginate,
    title_rows,
    wrap_line,
)
from .pdf_writer import assemble_document, render_document, render_pdf, unencodable_chars

__all__ = [
    "ChunkedText",
    "chunk_text",
    "LayoutMetrics",
    "Page",
    "PaginatedDocument",
    "Paginator",
    "fit_to_width",
    "layout_rows",
    "paginate",
    "title_rows",
    "wrap_line",
    "assemble_document",
    "render_document",
    "render_pdf",
    "unencodable_chars",
]
