"""Application-layer errors — caller setup rather than I/O."""

from __future__ import annotations

from sparkpost_transmission.kernel.errors.base import SparkPostError


class ApplicationError(SparkPostError):
    """The library was wired up incorrectly by the calling application."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
