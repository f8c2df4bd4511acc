"""Opt-in render profiling for mdpreview.

Collects totals across parse and render calls made inside a
``profiled_render()`` block. Outside such a block the accumulator lookup
returns None and nothing is recorded.

Example:
    from mdpreview import render_markdown
    from mdpreview.profiling import profiled_render

    with profiled_render() as metrics:
        render_markdown(source)

    print(metrics.summary())
    # {"total_ms": 0.4, "parse_calls": 1, "render_calls": 1, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class RenderAccumulator:
    """Accumulated metrics for parse and render calls.

    Attributes:
        start_time: Profiling start timestamp.
        parse_calls: Number of documents parsed (cache hits included).
        cache_hits: Parses answered from a cache.
        source_length: Total characters of source parsed.
        block_count: Total top-level blocks produced.
        render_calls: Number of documents rendered to HTML.
        output_length: Total characters of HTML produced.

    """

    start_time: float = field(default_factory=perf_counter)
    parse_calls: int = 0
    cache_hits: int = 0
    source_length: int = 0
    block_count: int = 0
    render_calls: int = 0
    output_length: int = 0

    def record_parse(self, source_length: int, block_count: int, *, cached: bool = False) -> None:
        self.parse_calls += 1
        self.source_length += source_length
        self.block_count += block_count
        if cached:
            self.cache_hits += 1

    def record_render(self, output_length: int) -> None:
        self.render_calls += 1
        self.output_length += output_length

    @property
    def total_duration_ms(self) -> float:
        """Milliseconds since profiling started."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of metrics as a plain dict."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "parse_calls": self.parse_calls,
            "cache_hits": self.cache_hits,
            "source_length": self.source_length,
            "block_count": self.block_count,
            "render_calls": self.render_calls,
            "output_length": self.output_length,
        }


_accumulator: ContextVar[RenderAccumulator | None] = ContextVar(
    "render_accumulator",
    default=None,
)


def get_render_accumulator() -> RenderAccumulator | None:
    """Get the active accumulator, or None when profiling is off."""
    return _accumulator.get()


@contextmanager
def profiled_render() -> Iterator[RenderAccumulator]:
    """Profile parse and render calls made within the block.

    Yields:
        RenderAccumulator populated as calls are made.

    """
    acc = RenderAccumulator()
    token: Token[RenderAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = [
    "RenderAccumulator",
    "get_render_accumulator",
    "profiled_render",
]
