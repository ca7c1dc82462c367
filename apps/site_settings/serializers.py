"""Serializers for the settings API."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from rest_framework import serializers  # type: ignore

from .defaults import DEFAULT_SETTINGS
from .models import Setting, normalize_key

_boolean = serializers.BooleanField()


def validate_setting_value(key: str, value: Any) -> Any:
    """
    Check ``value`` against the type of the default for ``key``.

    Keys without a default accept any JSON value. Booleans given as
    ``"true"``/``"false"`` style strings are coerced; numbers given as
    strings are converted to JSON numbers.
    """
    entry = DEFAULT_SETTINGS.get(normalize_key(key))
    if entry is None:
        return value
    expected = entry["value"]
    if isinstance(expected, bool):
        try:
            return _boolean.to_internal_value(value)
        except serializers.ValidationError:
            raise serializers.ValidationError("Must be a boolean.")
    if isinstance(expected, (int, float)):
        return _number(value)
    if isinstance(expected, str) and not isinstance(value, str):
        raise serializers.ValidationError("Must be a string.")
    if isinstance(expected, list) and not isinstance(value, list):
        raise serializers.ValidationError("Must be a list.")
    return value


def _number(value: Any) -> int | float:
    if isinstance(value, bool):
        raise serializers.ValidationError("Must be a number.")
    if isinstance(value, (int, float)):
        number = Decimal(str(value))
    elif isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            raise serializers.ValidationError("Must be a number.")
    else:
        raise serializers.ValidationError("Must be a number.")
    if not number.is_finite():
        raise serializers.ValidationError("Must be a number.")
    if number < 0:
        raise serializers.ValidationError("Must not be negative.")
    return int(number) if number == number.to_integral_value() else float(number)


class SettingSerializer(serializers.ModelSerializer):
    class Meta:
        model = Setting
        fields = ["key", "value", "category", "description", "is_public", "updated_at"]
        read_only_fields = fields


class SettingWriteSerializer(serializers.Serializer):
    """Value for the key passed in ``context["key"]``."""

    value = serializers.JSONField()
    category = serializers.CharField(required=False, max_length=50)
    description = serializers.CharField(required=False, allow_blank=True)
    is_public = serializers.BooleanField(required=False)

    def validate_value(self, value: Any) -> Any:
        key = self.context.get("key")
        return validate_setting_value(key, value) if key else value


class SettingImportItemSerializer(SettingWriteSerializer):
    key = serializers.CharField(max_length=100)

    def validate_key(self, value: str) -> str:
        key = normalize_key(value)
        if not key:
            raise serializers.ValidationError("Invalid setting key")
        return key

    def validate(self, attrs: dict) -> dict:
        try:
            attrs["value"] = validate_setting_value(attrs["key"], attrs["value"])
        except serializers.ValidationError as exc:
            raise serializers.ValidationError({"value": exc.detail})
        return attrs


class SettingImportSerializer(serializers.Serializer):
    settings = SettingImportItemSerializer(many=True)
