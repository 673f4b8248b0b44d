from __future__ import annotations

import pytest

from proxyguard.config import AppConfig


class TestAppConfig:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("CHECK_WORKERS", "MODEL_FILE", "INCLUDE_FRAMEWORK_CATALOG"):
            monkeypatch.delenv(var, raising=False)
        config = AppConfig(_env_file=None)
        assert config.CHECK_WORKERS == 1
        assert config.MODEL_FILE is None
        assert config.INCLUDE_FRAMEWORK_CATALOG is True
        assert "target" in config.EXCLUDED_DIRS

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHECK_WORKERS", "4")
        monkeypatch.setenv("include_framework_catalog", "false")
        monkeypatch.setenv("EXCLUDED_DIRS", '["generated"]')
        config = AppConfig(_env_file=None)
        assert config.CHECK_WORKERS == 4
        assert config.INCLUDE_FRAMEWORK_CATALOG is False
        assert config.EXCLUDED_DIRS == ["generated"]


class TestResolveWorkers:
    def test_explicit_value_wins(self) -> None:
        config = AppConfig(_env_file=None, CHECK_WORKERS=3)
        assert config.resolve_workers(2) == 2

    def test_falls_back_to_setting(self) -> None:
        config = AppConfig(_env_file=None, CHECK_WORKERS=3)
        assert config.resolve_workers(None) == 3

    @pytest.mark.parametrize("workers", [0, -2])
    def test_rejects_non_positive(self, workers: int) -> None:
        config = AppConfig(_env_file=None)
        with pytest.raises(ValueError, match="positive integer"):
            config.resolve_workers(workers)
