"""Config validation errors.

Both setting errors name the environment variable that backs the setting, so
a failed start-up points straight at what to fix. Values of credential
settings never appear in the message or the detail payload.
"""
from __future__ import annotations

from sparkpost_transmission.kernel.errors import ApplicationError
from sparkpost_transmission.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS


class ConfigError(ApplicationError):
    """Settings could not be loaded or failed validation."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """The environment variable behind a required setting is unset."""
    default_code = "missing_required_setting"

    def __init__(self, env_var: str, *, setting_name: str | None = None) -> None:
        self.env_var = env_var
        self.setting_name = setting_name or env_var
        super().__init__(
            f"Environment variable '{env_var}' is required but not set",
            detail={"setting": self.setting_name, "env_var": env_var},
        )


class InvalidSettingValueError(ConfigError):
    """A setting is present but unusable, e.g. an unknown region or a zero timeout."""
    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: object,
        reason: str,
        *,
        env_var: str | None = None,
    ) -> None:
        self.setting_name = setting_name
        self.value = value
        self.reason = reason
        self.env_var = env_var
        shown = "[REDACTED]" if setting_name.lower() in DEFAULT_SENSITIVE_FIELDS else repr(value)
        source = f" (from {env_var})" if env_var else ""
        detail: dict[str, object] = {"setting": setting_name, "reason": reason}
        if env_var:
            detail["env_var"] = env_var
        super().__init__(
            f"Setting '{setting_name}'{source} has invalid value {shown}: {reason}",
            detail=detail,
        )


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
