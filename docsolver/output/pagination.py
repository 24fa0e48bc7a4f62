"""
Pagination - lays answer text out on fixed-size pages.

Coordinates follow PDF conventions: points, origin bottom-left. The vertical
cursor starts under the top margin and moves down one line step per row; a
row that would cross the bottom margin starts a new page.

Rows are fitted horizontally by measured glyph width, so no row is wider
than page_width - margin_left - margin_right in the font it is drawn with.
wrap_columns is an additional upper bound on characters per row.

    metrics = LayoutMetrics.from_settings(settings)
    pages = paginate("Solved worksheet.pdf", answer_text, metrics)
"""

import textwrap
from dataclasses import dataclass, field
from typing import List, Optional

from reportlab.pdfbase.pdfmetrics import stringWidth

from config.constants import (
    FONT_NAME,
    FONT_SIZE,
    LINE_SPACING,
    PAGE_HEIGHT,
    PAGE_MARGIN,
    PAGE_WIDTH,
    TITLE_FONT_NAME,
    TITLE_FONT_SIZE,
    TITLE_MAX_LINES,
    WRAP_COLUMNS,
)
from config.settings import Settings


@dataclass(frozen=True)
class LayoutMetrics:
    """Fixed page geometry and typography"""
    page_width: float = PAGE_WIDTH
    page_height: float = PAGE_HEIGHT
    margin_top: float = PAGE_MARGIN
    margin_bottom: float = PAGE_MARGIN
    margin_left: float = PAGE_MARGIN
    margin_right: float = PAGE_MARGIN
    font_name: str = FONT_NAME
    font_size: float = FONT_SIZE
    line_spacing: float = LINE_SPACING
    title_font_name: str = TITLE_FONT_NAME
    title_font_size: float = TITLE_FONT_SIZE
    wrap_columns: int = WRAP_COLUMNS

    def __post_init__(self):
        if self.wrap_columns < 1:
            raise ValueError("wrap_columns must be >= 1")
        if self.printable_width < max(self.font_size, self.title_font_size):
            raise ValueError(
                f"Page too narrow: printable width {self.printable_width}pt "
                f"< font size {max(self.font_size, self.title_font_size)}pt"
            )
        if self.printable_height < self.line_height:
            raise ValueError(
                f"Page too small: printable height {self.printable_height}pt "
                f"< line height {self.line_height}pt"
            )
        if self.printable_height < self.title_block_height(TITLE_MAX_LINES) + self.line_height:
            raise ValueError("Page too small to hold the title and one line")

    @classmethod
    def from_settings(cls, settings: Settings) -> "LayoutMetrics":
        return cls(
            page_width=settings.page_width,
            page_height=settings.page_height,
            margin_top=settings.margin_top,
            margin_bottom=settings.margin_bottom,
            margin_left=settings.margin_left,
            margin_right=settings.margin_right,
            font_name=settings.font_name,
            font_size=settings.font_size,
            line_spacing=settings.line_spacing,
            title_font_name=settings.title_font_name,
            title_font_size=settings.title_font_size,
            wrap_columns=settings.wrap_columns,
        )

    @property
    def line_height(self) -> float:
        return self.font_size + self.line_spacing

    @property
    def title_line_height(self) -> float:
        return self.title_font_size + self.line_spacing

    def title_block_height(self, rows: int) -> float:
        # title rows plus one blank body line underneath
        return rows * self.title_line_height + self.line_height

    @property
    def title_height(self) -> float:
        return self.title_block_height(1)

    @property
    def top_y(self) -> float:
        return self.page_height - self.margin_top

    @property
    def printable_height(self) -> float:
        return self.page_height - self.margin_top - self.margin_bottom

    @property
    def printable_width(self) -> float:
        return self.page_width - self.margin_left - self.margin_right


@dataclass
class Page:
    """One output page: rows of text, top to bottom"""
    number: int
    lines: List[str] = field(default_factory=list)
    title: Optional[str] = None
    title_lines: List[str] = field(default_factory=list)


@dataclass
class PaginatedDocument:
    """Pages ready for rendering"""
    title: Optional[str]
    pages: List[Page]
    metrics: LayoutMetrics

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def lines(self) -> List[str]:
        return [line for page in self.pages for line in page.lines]


def _fit_prefix(word: str, font_name: str, font_size: float, max_width: float) -> int:
    """Length of the longest prefix of word that fits; at least 1"""
    cut = 1
    while cut < len(word) and stringWidth(word[:cut + 1], font_name, font_size) <= max_width:
        cut += 1
    return cut


def fit_to_width(line: str, font_name: str, font_size: float, max_width: float) -> List[str]:
    """
    Break one line into rows no wider than max_width points.

    Breaks fall between words; a word wider than the row is split between
    characters.
    """
    if stringWidth(line, font_name, font_size) <= max_width:
        return [line]

    rows: List[str] = []
    current = ""
    for word in line.split(" "):
        candidate = f"{current} {word}" if current else word
        if stringWidth(candidate, font_name, font_size) <= max_width:
            current = candidate
            continue

        if current:
            rows.append(current)
        while word and stringWidth(word, font_name, font_size) > max_width:
            cut = _fit_prefix(word, font_name, font_size, max_width)
            rows.append(word[:cut])
            word = word[cut:]
        current = word

    if current:
        rows.append(current)
    return rows or [""]


def wrap_line(line: str, metrics: LayoutMetrics) -> List[str]:
    """Wrap one body line at wrap_columns, then fit each row to the printable width"""
    line = line.expandtabs(4)
    if len(line) <= metrics.wrap_columns:
        rows = [line]
    else:
        rows = textwrap.wrap(
            line,
            width=metrics.wrap_columns,
            break_long_words=True,
            break_on_hyphens=False,
        ) or [""]

    fitted: List[str] = []
    for row in rows:
        fitted.extend(fit_to_width(row, metrics.font_name, metrics.font_size, metrics.printable_width))
    return fitted


def layout_rows(body: str, metrics: LayoutMetrics) -> List[str]:
    """Split body into rows: one per input line, more where a line wraps"""
    if not body:
        return []
    normalized = body.replace("\r\n", "\n").replace("\r", "\n")
    rows: List[str] = []
    for line in normalized.split("\n"):
        rows.extend(wrap_line(line, metrics))
    return rows


def title_rows(title: Optional[str], metrics: LayoutMetrics) -> List[str]:
    """Title fitted in the title font, at most TITLE_MAX_LINES rows"""
    if not title:
        return []
    rows = fit_to_width(
        " ".join(title.split()),
        metrics.title_font_name,
        metrics.title_font_size,
        metrics.printable_width,
    )
    return rows[:TITLE_MAX_LINES]


class Paginator:
    """
    Places rows onto pages.

    A page is open from the moment it is created until a row no longer fits
    above the bottom margin; that row opens the next page.
    """

    def __init__(self, metrics: LayoutMetrics, title: Optional[str] = None):
        self.metrics = metrics
        self.pages: List[Page] = []
        self._cursor_y = 0.0
        self._new_page(title)

    def _new_page(self, title: Optional[str] = None) -> None:
        page = Page(number=len(self.pages) + 1, title=title, title_lines=title_rows(title, self.metrics))
        self.pages.append(page)
        self._cursor_y = self.metrics.top_y
        if page.title_lines:
            self._cursor_y -= self.metrics.title_block_height(len(page.title_lines))

    def _fits(self) -> bool:
        return self._cursor_y - self.metrics.line_height >= self.metrics.margin_bottom

    def add_row(self, row: str) -> None:
        if not self._fits():
            self._new_page()
        self.pages[-1].lines.append(row)
        self._cursor_y -= self.metrics.line_height

    def finish(self) -> List[Page]:
        return self.pages


def paginate(title: Optional[str], body: str, metrics: LayoutMetrics) -> List[Page]:
    """
    Lay out body text on pages.

    Every row of layout_rows(body) appears on exactly one page, in order.
    The title, if any, heads page 1. An empty body yields a single page.
    """
    paginator = Paginator(metrics, title=title)
    for row in layout_rows(body, metrics):
        paginator.add_row(row)
    return paginator.finish()
