"""Root error class for the sparkpost-transmission error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class SparkPostError(Exception):
    """Root of every error this library raises.

    Provider rejections are never raised; they come back as
    ``TransmissionFailure`` values. What remains are local encoding problems,
    bad configuration and failed or unreadable HTTP exchanges.

    Subclasses describe themselves through :meth:`_context`, whose keys are
    merged into :meth:`to_dict` next to ``error``, ``code`` and ``message``.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to the class ``default_code``).
        detail: Extra context supplied by the raiser.
        cause: Lower-level exception that triggered this error.
    """

    default_code: str = "sparkpost_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def _context(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Flat dict suitable as structured log fields."""
        payload: dict[str, Any] = {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
        }
        payload.update(self._context())
        if self.detail:
            payload["detail"] = self.detail
        if self.cause is not None:
            payload["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return payload


__all__ = ["SparkPostError"]
