"""Settings API: admin management plus the public subset."""

from __future__ import annotations

import logging

from rest_framework import serializers  # type: ignore
from rest_framework.exceptions import NotFound  # type: ignore
from rest_framework.permissions import AllowAny  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from shared.api.permissions import IsAdmin

from .manager import settings_manager
from .models import Setting, normalize_key
from .serializers import (
    SettingImportSerializer,
    SettingSerializer,
    SettingWriteSerializer,
    validate_setting_value,
)

logger = logging.getLogger(__name__)


class SettingsView(APIView):
    """All settings grouped by category."""

    permission_classes = [IsAdmin]

    def get(self, request):  # type: ignore
        return Response(settings_manager.grouped())


class PublicSettingsView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):  # type: ignore
        return Response(settings_manager.grouped(public_only=True))


class CategorySettingsView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request, category):  # type: ignore
        return Response(settings_manager.by_category(category))

    def put(self, request, category):  # type: ignore
        if not isinstance(request.data, dict) or not request.data:
            raise serializers.ValidationError({"settings": "Settings must be a non-empty object"})
        invalid = [key for key in request.data if not normalize_key(key)]
        if invalid:
            raise serializers.ValidationError({"settings": f"Invalid setting keys: {', '.join(invalid)}"})
        values, errors = {}, {}
        for key, value in request.data.items():
            try:
                values[key] = validate_setting_value(key, value)
            except serializers.ValidationError as exc:
                errors[key] = exc.detail
        if errors:
            raise serializers.ValidationError(errors)
        updated = {}
        for key, value in values.items():
            setting = settings_manager.set(key, value, category=category)
            updated[setting.key] = setting.value
        return Response(
            {"message": f"{normalize_key(category)} settings updated successfully", "settings": updated}
        )


class SettingKeyView(APIView):
    permission_classes = [IsAdmin]

    def _get_setting(self, key: str) -> Setting:
        setting = Setting.objects.filter(key=normalize_key(key)).first()
        if setting is None:
            raise NotFound("Setting not found")
        return setting

    def get(self, request, key):  # type: ignore
        return Response(SettingSerializer(self._get_setting(key)).data)

    def put(self, request, key):  # type: ignore
        if not normalize_key(key):
            raise serializers.ValidationError({"key": "Invalid setting key"})
        serializer = SettingWriteSerializer(data=request.data, context={"key": normalize_key(key)})
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        setting = settings_manager.set(
            key,
            data["value"],
            category=data.get("category"),
            description=data.get("description"),
            is_public=data.get("is_public"),
        )
        return Response(SettingSerializer(setting).data)

    def delete(self, request, key):  # type: ignore
        if not settings_manager.delete(key):
            raise NotFound("Setting not found")
        return Response({"message": "Setting deleted successfully"})


class InitializeSettingsView(APIView):
    permission_classes = [IsAdmin]

    def post(self, request):  # type: ignore
        created = settings_manager.initialize_defaults()
        return Response({"message": "Default settings initialized successfully", "created": created})


class ExportSettingsView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request):  # type: ignore
        return Response(settings_manager.export())


class ImportSettingsView(APIView):
    permission_classes = [IsAdmin]

    def post(self, request):  # type: ignore
        serializer = SettingImportSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        imported = settings_manager.import_settings(serializer.validated_data["settings"])
        logger.info("Imported %s settings", len(imported))
        return Response(
            {
                "message": f"{len(imported)} settings imported successfully",
                "settings": [
                    {"key": setting.key, "value": setting.value, "category": setting.category}
                    for setting in imported
                ],
            }
        )
