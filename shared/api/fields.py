"""Serializer fields for typed key/value maps stored in JSON columns."""

from __future__ import annotations

from typing import Any

from rest_framework import serializers  # type: ignore


class TypedMapField(serializers.DictField):
    """
    Dict field that accepts only documented keys with declared value types.

    ``schema`` maps a key to a python type or to a ``(list, item_type)``
    tuple for homogeneous lists. Unknown keys are rejected.
    """

    default_error_messages = {
        "unknown_keys": "Unsupported keys: {keys}. Allowed keys: {allowed}.",
        "invalid_value": "Key '{name}' must be {expected}.",
    }

    def __init__(self, schema: dict[str, Any], **kwargs):
        self.schema = schema
        super().__init__(**kwargs)

    def to_internal_value(self, data):  # type: ignore
        data = super().to_internal_value(data)
        unknown = sorted(set(data) - set(self.schema))
        if unknown:
            self.fail("unknown_keys", keys=", ".join(unknown), allowed=", ".join(sorted(self.schema)))
        cleaned: dict[str, Any] = {}
        for key, value in data.items():
            cleaned[key] = self._coerce(key, value, self.schema[key])
        return cleaned

    def _coerce(self, key: str, value: Any, expected: Any) -> Any:
        if value is None:
            return None
        if isinstance(expected, tuple):
            _, item_type = expected
            if not isinstance(value, list) or not all(isinstance(item, item_type) for item in value):
                self.fail("invalid_value", name=key, expected=f"a list of {item_type.__name__}")
            return value
        if expected is int:
            # bool is an int subclass; reject it explicitly
            if isinstance(value, bool) or not isinstance(value, int):
                self.fail("invalid_value", name=key, expected="an integer")
            return value
        if not isinstance(value, expected):
            self.fail("invalid_value", name=key, expected=f"a {expected.__name__}")
        return value


class StringListField(serializers.ListField):
    """List of strings; a single comma-separated string is split into a list."""

    child = serializers.CharField(max_length=255)

    def to_internal_value(self, data):  # type: ignore
        if isinstance(data, str):
            data = [part.strip() for part in data.split(",") if part.strip()]
        return super().to_internal_value(data)
