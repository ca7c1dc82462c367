"""URL declarations for store settings."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import (
    CategorySettingsView,
    ExportSettingsView,
    ImportSettingsView,
    InitializeSettingsView,
    PublicSettingsView,
    SettingKeyView,
    SettingsView,
)

urlpatterns = [
    path("", SettingsView.as_view(), name="settings"),
    path("public/", PublicSettingsView.as_view(), name="settings-public"),
    path("export/", ExportSettingsView.as_view(), name="settings-export"),
    path("import/", ImportSettingsView.as_view(), name="settings-import"),
    path("initialize/", InitializeSettingsView.as_view(), name="settings-initialize"),
    path("key/<str:key>/", SettingKeyView.as_view(), name="settings-key"),
    path("<str:category>/", CategorySettingsView.as_view(), name="settings-category"),
]
