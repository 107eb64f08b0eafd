"""Kernel value types — public re-export surface.

Modules:
  json.py — JSONValue, to_json_value
"""

from sparkpost_transmission.kernel.types.json import JSONValue, to_json_value

__all__ = ["JSONValue", "to_json_value"]
