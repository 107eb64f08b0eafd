"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses

from sparkpost_transmission.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Dataclass whose fields map onto ``<PREFIX>_<FIELD>`` environment variables.

    ``TransportSettings`` uses prefix ``SPARKPOST``, so ``api_key`` is read
    from ``SPARKPOST_API_KEY``. Validation runs on every construction, whether
    the values came from a loader or from code.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_var(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def _validate(self) -> None:
        """Override to check field values; raise through :meth:`_invalid`."""

    def _invalid(self, field_name: str, reason: str) -> InvalidSettingValueError:
        return InvalidSettingValueError(
            field_name,
            getattr(self, field_name),
            reason,
            env_var=self.env_var(field_name),
        )


__all__ = ["Settings"]
