"""
Unit tests for docsolver/output/pagination.py
"""
import pytest

from reportlab.pdfbase.pdfmetrics import stringWidth

from config.constants import TITLE_MAX_LINES
from docsolver.output import (
    LayoutMetrics,
    fit_to_width,
    layout_rows,
    paginate,
    title_rows,
    wrap_line,
)


@pytest.fixture
def metrics():
    """A4, 50pt margins, 12pt Helvetica, 4pt spacing, 16pt title."""
    return LayoutMetrics()


def _rows(n: int):
    return [f"Step {i}" for i in range(1, n + 1)]


class TestLayoutMetrics:

    def test_derived_values(self, metrics):
        assert metrics.line_height == 16
        assert metrics.title_height == 36
        assert metrics.top_y == pytest.approx(791.89)
        assert metrics.printable_height == pytest.approx(741.89)

    def test_from_settings(self, test_settings):
        settings = test_settings.model_copy(update={"page_height": 600.0, "font_size": 10.0})
        metrics = LayoutMetrics.from_settings(settings)

        assert metrics.page_height == 600.0
        assert metrics.line_height == 14.0

    def test_page_too_small(self):
        with pytest.raises(ValueError):
            LayoutMetrics(page_height=110, margin_top=50, margin_bottom=50)

    def test_invalid_wrap_columns(self):
        with pytest.raises(ValueError):
            LayoutMetrics(wrap_columns=0)


class TestLayoutRows:

    def test_short_lines_pass_through(self, metrics):
        assert layout_rows("a\n\nb", metrics) == ["a", "", "b"]

    def test_crlf_normalized(self, metrics):
        assert layout_rows("a\r\nb\rc", metrics) == ["a", "b", "c"]

    def test_empty_body(self, metrics):
        assert layout_rows("", metrics) == []

    def test_long_line_wrapped(self):
        rows = wrap_line("word " * 40, LayoutMetrics(wrap_columns=20))
        assert len(rows) > 1
        assert all(len(r) <= 20 for r in rows)

    def test_unbroken_token_split(self):
        metrics = LayoutMetrics(wrap_columns=10)
        assert wrap_line("x" * 25, metrics) == ["x" * 10, "x" * 10, "x" * 5]


class TestPrintableWidth:

    @staticmethod
    def _widest(rows, font_name, font_size):
        return max(stringWidth(row, font_name, font_size) for row in rows)

    def test_wide_glyphs_fitted_below_column_limit(self, metrics):
        # 90 digits fit the column limit but not the 495pt printable width
        line = "1234567890" * 9
        rows = wrap_line(line, metrics)

        assert len(rows) > 1
        assert self._widest(rows, metrics.font_name, metrics.font_size) <= metrics.printable_width
        assert "".join(rows) == line

    def test_capitals_fitted(self, metrics):
        rows = layout_rows("W" * 90, metrics)
        assert self._widest(rows, metrics.font_name, metrics.font_size) <= metrics.printable_width

    def test_narrow_page_long_answer(self, test_settings):
        settings = test_settings.model_copy(update={"page_width": 300.0})
        metrics = LayoutMetrics.from_settings(settings)
        answer = " ".join(f"step{i:02d}=ok" for i in range(1, 21)) + " " + "9" * 12
        assert len(answer) >= 200

        pages = paginate("Solved " + "worksheet " * 20, answer, metrics)
        rows = [line for page in pages for line in page.lines]

        assert metrics.printable_width == pytest.approx(200.0)
        assert self._widest(rows, metrics.font_name, metrics.font_size) <= metrics.printable_width
        assert "".join(rows).replace(" ", "") == answer.replace(" ", "")

        title_lines = pages[0].title_lines
        assert 1 < len(title_lines) <= TITLE_MAX_LINES
        assert (
            self._widest(title_lines, metrics.title_font_name, metrics.title_font_size)
            <= metrics.printable_width
        )

    def test_word_breaks_preferred(self, metrics):
        line = "alpha beta gamma delta " * 10
        rows = fit_to_width(line.strip(), metrics.font_name, metrics.font_size, 100)

        assert all(stringWidth(r, metrics.font_name, metrics.font_size) <= 100 for r in rows)
        assert " ".join(rows) == line.strip()

    def test_short_title_single_row(self, metrics):
        assert title_rows("Solved  hw.pdf", metrics) == ["Solved hw.pdf"]
        assert title_rows(None, metrics) == []

    def test_page_too_narrow(self):
        with pytest.raises(ValueError):
            LayoutMetrics(page_width=110, margin_left=50, margin_right=50)


class TestPaginate:

    def test_single_page(self, metrics):
        pages = paginate("Solved hw.pdf", "A1: 4\nA2: Paris", metrics)

        assert len(pages) == 1
        assert pages[0].title == "Solved hw.pdf"
        assert pages[0].lines == ["A1: 4", "A2: Paris"]

    def test_empty_body_single_page(self, metrics):
        pages = paginate("Solved", "", metrics)
        assert len(pages) == 1
        assert pages[0].lines == []

    def test_page_capacity_with_title(self, metrics):
        """Title page holds 44 rows, following pages 46."""
        pages = paginate("Title", "\n".join(_rows(44)), metrics)
        assert len(pages) == 1

        pages = paginate("Title", "\n".join(_rows(45)), metrics)
        assert [len(p.lines) for p in pages] == [44, 1]

        pages = paginate("Title", "\n".join(_rows(44 + 46 + 1)), metrics)
        assert [len(p.lines) for p in pages] == [44, 46, 1]

    def test_page_capacity_without_title(self, metrics):
        pages = paginate(None, "\n".join(_rows(47)), metrics)
        assert [len(p.lines) for p in pages] == [46, 1]
        assert pages[0].title is None

    @pytest.mark.parametrize("count", [1, 45, 200, 1000])
    def test_every_row_placed_once_in_order(self, metrics, count):
        rows = _rows(count)
        pages = paginate("Title", "\n".join(rows), metrics)

        assert [line for page in pages for line in page.lines] == rows
        assert [p.number for p in pages] == list(range(1, len(pages) + 1))
        assert all(p.title is None for p in pages[1:])

    def test_wrapped_rows_counted(self):
        metrics = LayoutMetrics(wrap_columns=10)
        body = "x" * 25 + "\nend"
        pages = paginate(None, body, metrics)

        assert pages[0].lines == ["x" * 10, "x" * 10, "x" * 5, "end"]
