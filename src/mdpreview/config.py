"""ContextVar-based render configuration for mdpreview.

Config is set once per Markdown instance and read by the scanner and the
inline transformer in the same context. Defaults reproduce the full dialect;
switching a flag off only removes a feature.

Thread Safety:
    ContextVars are thread-local by design, so concurrent renders with
    different configs never see each other's settings.

Usage:
    md = Markdown(RenderConfig(tables_enabled=False))
    html = md("a | b")  # Sets config internally via ContextVar

    # Or use the context manager around the low-level functions
    with render_config_context(RenderConfig(escape_code_spans=True)):
        html = render_inline("`<br>`")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        tables_enabled: Recognize pipe tables
        strikethrough_enabled: Rewrite ~~text~~ into <del>
        task_lists_enabled: Detect [ ] / [x] checkboxes on list items
        autolinks_enabled: Rewrite <https://...> and <user@host> into links
        escape_code_spans: Entity-escape the inner text of inline code spans

    """

    tables_enabled: bool = True
    strikethrough_enabled: bool = True
    task_lists_enabled: bool = True
    autolinks_enabled: bool = True
    escape_code_spans: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from a dictionary.

        Unknown keys are ignored so settings stored by an editor front end
        can be passed through unfiltered.

        Example:
            >>> RenderConfig.from_dict({"tables_enabled": False, "theme": "dark"})
            RenderConfig(tables_enabled=False, ...)

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the render configuration active in this context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for the current context."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the module-level default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(tables_enabled=False)):
        ...     blocks = scan(["a|b", "-|-"])
        >>> blocks[0]
        Paragraph(text='a|b\\n-|-')

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
]
