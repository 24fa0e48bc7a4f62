"""
Chunking for size-limited text channels.

Slices are contiguous and cut at fixed character offsets; words may be
split. "".join(chunk_text(s, n)) == s for every s and n >= 1.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple


def chunk_text(text: str, limit: int) -> List[str]:
    """
    Split text into consecutive slices of at most `limit` characters.

    Args:
        text: Text to split (empty text yields no chunks)
        limit: Maximum characters per chunk, >= 1

    Raises:
        ValueError: If limit < 1
    """
    if limit < 1:
        raise ValueError(f"Chunk limit must be positive, got {limit}")
    return [text[start:start + limit] for start in range(0, len(text), limit)]


@dataclass(frozen=True)
class ChunkedText:
    """
    Ordered message chunks for one answer.

    Iterating always starts from the first chunk; resume_from() restarts
    delivery after the last chunk that went out.
    """
    chunks: Tuple[str, ...]
    limit: int

    @classmethod
    def from_text(cls, text: str, limit: int) -> "ChunkedText":
        return cls(chunks=tuple(chunk_text(text, limit)), limit=limit)

    def __iter__(self) -> Iterator[str]:
        return iter(self.chunks)

    def __len__(self) -> int:
        return len(self.chunks)

    @property
    def text(self) -> str:
        return "".join(self.chunks)

    def resume_from(self, index: int) -> Iterator[str]:
        """Chunks from position `index` onwards"""
        if index < 0:
            raise ValueError(f"Resume index must be >= 0, got {index}")
        return iter(self.chunks[index:])
