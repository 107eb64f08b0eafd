"""Observability – structured logging helpers."""
from sparkpost_transmission.observability.logging.factory import JsonLoggerFactory
from sparkpost_transmission.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from sparkpost_transmission.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
