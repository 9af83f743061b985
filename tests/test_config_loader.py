"""Configuration loader: bundled defaults, caching, layered overrides."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from lib_layered_config import ConfigError

from hello_emitter.adapters.config import loader


@pytest.mark.os_agnostic
def test_default_config_file_ships_with_the_package() -> None:
    path = loader.get_default_config_path()

    assert path.name == "defaultconfig.toml"
    assert path.is_file()


@pytest.mark.os_agnostic
def test_defaults_keep_logging_single_threaded(clear_config_cache: None) -> None:
    config = loader.get_config()

    assert config.get("lib_log_rich.queue_enabled") is False


@pytest.mark.os_agnostic
def test_get_config_is_cached(clear_config_cache: None) -> None:
    assert loader.get_config() is loader.get_config()


@pytest.mark.os_agnostic
def test_cache_clear_forces_a_fresh_load(clear_config_cache: None) -> None:
    first = loader.get_config()

    loader.get_config.cache_clear()

    assert loader.get_config() is not first


@pytest.mark.posix_only
@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="XDG user paths are Linux-only")
def test_user_config_layer_is_merged_over_defaults(
    clear_config_cache: None,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    user_dir = tmp_path / "hello-emitter"
    user_dir.mkdir()
    (user_dir / "config.toml").write_text('[lib_log_rich]\nbackend_level = "DEBUG"\n', encoding="utf-8")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.setenv("HOME", str(tmp_path))

    config = loader.get_config(start_dir=str(tmp_path))

    assert config.get("lib_log_rich.backend_level") == "DEBUG"
    assert config.get("lib_log_rich.queue_enabled") is False


@pytest.mark.posix_only
@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="XDG user paths are Linux-only")
def test_malformed_user_config_raises_config_error(
    clear_config_cache: None,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    user_dir = tmp_path / "hello-emitter"
    user_dir.mkdir()
    (user_dir / "config.toml").write_text("[lib_log_rich\nnot toml", encoding="utf-8")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.setenv("HOME", str(tmp_path))

    with pytest.raises(ConfigError):
        loader.get_config(start_dir=str(tmp_path))
