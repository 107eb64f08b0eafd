"""JSON value type and conversion of caller data into it."""

from __future__ import annotations

import dataclasses
import datetime
import json
from typing import Any

from sparkpost_transmission.kernel.errors.domain import EncodingError

type JSONValue = None | bool | int | float | str | list[JSONValue] | dict[str, JSONValue]


def _encode_default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    model_dump = getattr(value, "model_dump", None)
    if callable(model_dump):
        return model_dump(mode="json")
    if isinstance(value, (datetime.datetime, datetime.date)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json_value(data: Any, *, field: str | None = None) -> JSONValue:
    """Convert *data* into a plain JSON tree.

    Accepts JSON-native values, dataclass instances, pydantic models and
    dates. Anything else, non-finite floats and circular structures raise
    :class:`EncodingError`.
    """
    try:
        return json.loads(json.dumps(data, default=_encode_default, allow_nan=False))
    except (TypeError, ValueError) as exc:
        raise EncodingError(
            f"Value for {field or 'structured data'} cannot be encoded as JSON: {exc}",
            field=field,
            value_type=type(data).__name__,
            cause=exc,
        ) from exc


__all__ = ["JSONValue", "to_json_value"]
