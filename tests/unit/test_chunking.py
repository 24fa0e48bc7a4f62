"""
Unit tests for docsolver/output/chunking.py
"""
import pytest

from docsolver.output import ChunkedText, chunk_text


class TestChunkText:

    def test_short_answer_single_chunk(self):
        assert chunk_text("A1: 4\nA2: Paris", 2800) == ["A1: 4\nA2: Paris"]

    def test_exact_multiple(self):
        assert chunk_text("abcdef", 3) == ["abc", "def"]

    def test_remainder_in_last_chunk(self):
        assert chunk_text("abcdefg", 3) == ["abc", "def", "g"]

    def test_empty_text(self):
        assert chunk_text("", 10) == []

    @pytest.mark.parametrize("limit", [0, -5])
    def test_invalid_limit(self, limit):
        with pytest.raises(ValueError):
            chunk_text("text", limit)

    @pytest.mark.parametrize("text,limit", [
        ("x" * 10000, 2800),
        ("Step 1: expand.\n" * 500, 1),
        ("π ≈ 3.14159 — ∑ f(x) dx ✓" * 37, 7),
        ("no split needed", 1000),
    ])
    def test_concatenation_restores_text(self, text, limit):
        chunks = chunk_text(text, limit)

        assert "".join(chunks) == text
        assert all(1 <= len(c) <= limit for c in chunks)
        assert all(len(c) == limit for c in chunks[:-1])

    def test_words_may_be_split(self):
        assert chunk_text("hello world", 4) == ["hell", "o wo", "rld"]


class TestChunkedText:

    def test_iteration_order(self):
        chunked = ChunkedText.from_text("abcdefgh", 3)

        assert len(chunked) == 3
        assert list(chunked) == ["abc", "def", "gh"]
        assert chunked.text == "abcdefgh"
        assert chunked.limit == 3

    def test_resume_from(self):
        chunked = ChunkedText.from_text("abcdefgh", 3)

        assert list(chunked.resume_from(1)) == ["def", "gh"]
        assert list(chunked.resume_from(3)) == []

    def test_resume_from_negative(self):
        with pytest.raises(ValueError):
            ChunkedText.from_text("abc", 1).resume_from(-1)
