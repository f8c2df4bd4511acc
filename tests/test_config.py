"""Tests for ContextVar-based render configuration."""

import threading

import pytest

from mdpreview.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)


@pytest.fixture(autouse=True)
def _restore_default_config():
    yield
    reset_render_config()


class TestRenderConfig:
    """RenderConfig is an immutable value."""

    def test_defaults_enable_everything(self) -> None:
        config = RenderConfig()
        assert config.tables_enabled
        assert config.strikethrough_enabled
        assert config.task_lists_enabled
        assert config.autolinks_enabled
        assert not config.escape_code_spans

    def test_frozen(self) -> None:
        config = RenderConfig()
        with pytest.raises(AttributeError):
            config.tables_enabled = False  # type: ignore[misc]

    def test_equality(self) -> None:
        assert RenderConfig(tables_enabled=False) == RenderConfig(tables_enabled=False)
        assert RenderConfig(tables_enabled=False) != RenderConfig()

    def test_hashable(self) -> None:
        assert len({RenderConfig(), RenderConfig()}) == 1


class TestFromDict:
    def test_known_keys(self) -> None:
        config = RenderConfig.from_dict({"tables_enabled": False, "escape_code_spans": True})
        assert config == RenderConfig(tables_enabled=False, escape_code_spans=True)

    def test_unknown_keys_ignored(self) -> None:
        config = RenderConfig.from_dict({"autolinks_enabled": False, "theme": "dark"})
        assert config == RenderConfig(autolinks_enabled=False)

    def test_empty_dict(self) -> None:
        assert RenderConfig.from_dict({}) == RenderConfig()


class TestContextVar:
    def test_default(self) -> None:
        assert get_render_config() == RenderConfig()

    def test_set_and_reset(self) -> None:
        custom = RenderConfig(tables_enabled=False)
        set_render_config(custom)
        assert get_render_config() is custom
        reset_render_config()
        assert get_render_config() == RenderConfig()

    def test_context_manager_restores_previous(self) -> None:
        outer = RenderConfig(autolinks_enabled=False)
        inner = RenderConfig(tables_enabled=False)
        set_render_config(outer)
        with render_config_context(inner):
            assert get_render_config() is inner
        assert get_render_config() is outer

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(ValueError), render_config_context(RenderConfig(tables_enabled=False)):
            raise ValueError("boom")
        assert get_render_config() == RenderConfig()

    def test_threads_are_isolated(self) -> None:
        seen: list[RenderConfig] = []
        set_render_config(RenderConfig(tables_enabled=False))

        def worker() -> None:
            seen.append(get_render_config())

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()
        assert seen == [RenderConfig()]
