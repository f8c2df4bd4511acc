"""Content-addressed parse cache for mdpreview.

A live preview re-renders on every edit, and edits are often undone or
toggled back. Caching (content_hash, config_hash) -> Document skips the
block scan for text that has been seen before.

Thread Safety:
    DictRenderCache is not thread-safe. Wrap it with a lock, or use another
    RenderCache implementation, when parsing from several threads.

Example:
    >>> from mdpreview import parse, DictRenderCache
    >>> cache = DictRenderCache()
    >>> doc1 = parse("# Hello", cache=cache)
    >>> doc2 = parse("# Hello", cache=cache)  # Cache hit, no re-scan
"""

from __future__ import annotations

from dataclasses import astuple
from typing import TYPE_CHECKING, Protocol

from mdpreview.utils.hashing import hash_str

if TYPE_CHECKING:
    from mdpreview.config import RenderConfig
    from mdpreview.nodes import Document


class RenderCache(Protocol):
    """Protocol for content-addressed parse caches."""

    def get(self, content_hash: str, config_hash: str) -> Document | None:
        """Return cached Document if present, else None."""
        ...

    def put(self, content_hash: str, config_hash: str, doc: Document) -> None:
        """Store Document in cache."""
        ...


class DictRenderCache:
    """In-memory cache backed by a dict, optionally bounded.

    When ``maxsize`` is set the oldest entry is evicted first, which suits an
    editor where recent revisions are the likely hits.
    """

    __slots__ = ("_data", "_maxsize")

    def __init__(self, maxsize: int | None = None) -> None:
        self._data: dict[tuple[str, str], Document] = {}
        self._maxsize = maxsize

    def get(self, content_hash: str, config_hash: str) -> Document | None:
        return self._data.get((content_hash, config_hash))

    def put(self, content_hash: str, config_hash: str, doc: Document) -> None:
        key = (content_hash, config_hash)
        self._data.pop(key, None)
        self._data[key] = doc
        if self._maxsize is not None:
            while len(self._data) > self._maxsize:
                del self._data[next(iter(self._data))]

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)


def hash_content(source: str) -> str:
    """Compute SHA256 hash of source for the cache key."""
    return hash_str(source)


def hash_config(config: RenderConfig) -> str:
    """Compute hash of every RenderConfig field for the cache key."""
    return hash_str("|".join(str(value) for value in astuple(config)))


__all__ = [
    "DictRenderCache",
    "RenderCache",
    "hash_config",
    "hash_content",
]
