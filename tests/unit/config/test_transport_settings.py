"""Unit tests for config settings and TransportSettings."""

import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

import pytest

from sparkpost_transmission.config.settings import (
    EU_BASE_URL,
    GLOBAL_BASE_URL,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    TransportSettings,
)
from sparkpost_transmission.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

_SPARKPOST_KEYS = (
    "SPARKPOST_API_KEY",
    "SPARKPOST_REGION",
    "SPARKPOST_BASE_URL",
    "SPARKPOST_TIMEOUT",
    "SPARKPOST_SANDBOX",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for key in _SPARKPOST_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    # DotenvSettingsLoader writes straight into os.environ
    for key in _SPARKPOST_KEYS:
        os.environ.pop(key, None)


# ---------------------------------------------------------------------------
# Generic settings class used for loader coercion tests
# ---------------------------------------------------------------------------


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    debug: bool = False
    allowed_origins: list[str] = field(default_factory=list)


class TestEnvSettingsLoader:
    def test_loads_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "9000")
        assert EnvSettingsLoader().load(AppSettings).port == 9000

    def test_loads_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for truthy in ("true", "1", "yes", "on"):
            monkeypatch.setenv("APP_DEBUG", truthy)
            assert EnvSettingsLoader().load(AppSettings).debug is True
        monkeypatch.setenv("APP_DEBUG", "off")
        assert EnvSettingsLoader().load(AppSettings).debug is False

    def test_loads_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ALLOWED_ORIGINS", "http://a.com, http://b.com")
        assert EnvSettingsLoader().load(AppSettings).allowed_origins == ["http://a.com", "http://b.com"]

    def test_invalid_int_raises_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "eighty")
        with pytest.raises(ConfigError):
            EnvSettingsLoader().load(AppSettings)

    def test_defaults_preserved(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ("APP_HOST", "APP_PORT", "APP_DEBUG", "APP_ALLOWED_ORIGINS"):
            monkeypatch.delenv(key, raising=False)
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.host == "localhost"
        assert settings.allowed_origins == []


# ---------------------------------------------------------------------------
# TransportSettings
# ---------------------------------------------------------------------------


class TestTransportSettings:
    def test_defaults(self) -> None:
        settings = TransportSettings(api_key="key")
        assert settings.region == "global"
        assert settings.timeout == 10.0
        assert settings.sandbox is False
        assert settings.resolved_base_url == GLOBAL_BASE_URL

    def test_eu_region(self) -> None:
        assert TransportSettings(api_key="key", region="EU").resolved_base_url == EU_BASE_URL

    def test_base_url_override(self) -> None:
        settings = TransportSettings(api_key="key", region="eu", base_url="https://proxy.test/api/v1/")
        assert settings.resolved_base_url == "https://proxy.test/api/v1"

    def test_empty_key_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            TransportSettings(api_key="  ")
        assert exc_info.value.setting_name == "api_key"
        assert exc_info.value.env_var == "SPARKPOST_API_KEY"

    def test_unknown_region_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            TransportSettings(api_key="key", region="apac")
        assert exc_info.value.setting_name == "region"

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            TransportSettings(api_key="key", timeout=0)

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SPARKPOST_API_KEY", "env-key")
        monkeypatch.setenv("SPARKPOST_REGION", "eu")
        monkeypatch.setenv("SPARKPOST_TIMEOUT", "2.5")
        monkeypatch.setenv("SPARKPOST_SANDBOX", "true")
        settings = EnvSettingsLoader().load(TransportSettings)
        assert settings.api_key == "env-key"
        assert settings.resolved_base_url == EU_BASE_URL
        assert settings.timeout == 2.5
        assert settings.sandbox is True

    def test_missing_key_raises(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(TransportSettings)
        assert exc_info.value.env_var == "SPARKPOST_API_KEY"
        assert exc_info.value.setting_name == "api_key"

    def test_invalid_env_value_keeps_specific_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SPARKPOST_API_KEY", "env-key")
        monkeypatch.setenv("SPARKPOST_REGION", "mars")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(TransportSettings)
        assert exc_info.value.env_var == "SPARKPOST_REGION"
        assert exc_info.value.detail["setting"] == "region"

    def test_uncoercible_env_value_names_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SPARKPOST_API_KEY", "env-key")
        monkeypatch.setenv("SPARKPOST_TIMEOUT", "soon")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(TransportSettings)
        assert exc_info.value.env_var == "SPARKPOST_TIMEOUT"
        assert exc_info.value.setting_name == "timeout"


class TestDotenvSettingsLoader:
    def test_loads_key_from_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("SPARKPOST_API_KEY=dotenv-key\nSPARKPOST_REGION=eu\n")
        settings = DotenvSettingsLoader(str(env_file)).load(TransportSettings)
        assert settings.api_key == "dotenv-key"
        assert settings.region == "eu"

    def test_environment_wins_without_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SPARKPOST_API_KEY", "from-env")
        env_file = tmp_path / ".env"
        env_file.write_text("SPARKPOST_API_KEY=from-file\n")
        settings = DotenvSettingsLoader(str(env_file)).load(TransportSettings)
        assert settings.api_key == "from-env"

    def test_missing_file_falls_back_to_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SPARKPOST_API_KEY", "from-env")
        settings = DotenvSettingsLoader(str(tmp_path / "absent.env")).load(TransportSettings)
        assert settings.api_key == "from-env"
