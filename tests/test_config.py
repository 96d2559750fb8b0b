"""
Tests for footprint_estimator/config.py.

What we test
------------
- Default config/default.toml loads with the documented values.
- An explicit missing path raises FileNotFoundError.
- A sibling local.toml is deep-merged over the base file.
- FOOTPRINT_* environment variables override file values.
- Invalid values raise pydantic.ValidationError.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from footprint_estimator.config import (
    AppConfig,
    BenchmarkConfig,
    LoggingConfig,
    RecommendationsConfig,
    _deep_merge,
    load_config,
)

_BASE_TOML = """
[project]
debug = false

[logging]
level = "INFO"

[recommendations]
quick_win_limit = 4

[benchmark]
average_footprint_tons = 16.0
global_target_tons = 2.3
"""


class TestLoadConfig:
    def test_default_file(self, clean_env):
        config = load_config()
        assert isinstance(config, AppConfig)
        assert config.recommendations.quick_win_limit == 4
        assert config.benchmark.average_footprint_tons == 16.0
        assert config.benchmark.global_target_tons == 2.3
        assert config.debug is False

    def test_missing_explicit_path(self, clean_env, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")

    def test_local_override_merged(self, clean_env, tmp_path: Path):
        base = tmp_path / "default.toml"
        base.write_text(_BASE_TOML, encoding="utf-8")
        (tmp_path / "local.toml").write_text(
            "[recommendations]\nquick_win_limit = 6\n", encoding="utf-8"
        )
        config = load_config(base)
        assert config.recommendations.quick_win_limit == 6
        assert config.logging.level == "INFO"

    def test_env_overrides(self, clean_env, tmp_path: Path):
        base = tmp_path / "default.toml"
        base.write_text(_BASE_TOML, encoding="utf-8")
        clean_env.setenv("FOOTPRINT_LOG_LEVEL", "debug")
        clean_env.setenv("FOOTPRINT_QUICK_WIN_LIMIT", "2")
        clean_env.setenv("FOOTPRINT_DEBUG", "true")
        config = load_config(base)
        assert config.logging.level == "DEBUG"
        assert config.recommendations.quick_win_limit == 2
        assert config.debug is True

    def test_invalid_file_value(self, clean_env, tmp_path: Path):
        base = tmp_path / "default.toml"
        base.write_text("[recommendations]\nquick_win_limit = 0\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_config(base)


class TestSubConfigs:
    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")

    @pytest.mark.parametrize("limit", [0, 11])
    def test_quick_win_limit_range(self, limit):
        with pytest.raises(ValidationError):
            RecommendationsConfig(quick_win_limit=limit)

    def test_benchmark_must_be_positive(self):
        with pytest.raises(ValidationError):
            BenchmarkConfig(global_target_tons=0)

    def test_frozen(self):
        config = AppConfig()
        with pytest.raises(ValidationError):
            config.debug = True


class TestDeepMerge:
    def test_nested_keys_preserved(self):
        merged = _deep_merge({"a": {"x": 1, "y": 2}, "b": 1}, {"a": {"y": 3}})
        assert merged == {"a": {"x": 1, "y": 3}, "b": 1}
