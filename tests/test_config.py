from pathlib import Path

import pytest
from pydantic import ValidationError

from mtie.config import EngineConfig, MtieSettings


def test_settings_load_defaults() -> None:
    settings = MtieSettings()
    assert settings.logging.level
    assert settings.engine.complete_max_samples == 100_000
    assert settings.engine.selection_threshold == 100_000


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MTIE_ENGINE__SELECTION_THRESHOLD", "5000")
    monkeypatch.setenv("MTIE_LOGGING__LEVEL", "DEBUG")
    settings = MtieSettings()
    assert settings.engine.selection_threshold == 5000
    assert settings.logging.level == "DEBUG"


def test_settings_from_toml(tmp_path: Path) -> None:
    path = tmp_path / "mtie.toml"
    path.write_text(
        '[engine]\ncomplete_max_samples = 50000\n\n[logging]\nlevel = "INFO"\njson_format = true\n'
    )
    settings = MtieSettings.from_toml(path)
    assert settings.engine.complete_max_samples == 50_000
    assert settings.engine.selection_threshold == 100_000
    assert settings.logging.json_format is True


def test_engine_config_rejects_invalid_ceiling() -> None:
    with pytest.raises(ValidationError):
        EngineConfig(complete_max_samples=0)
