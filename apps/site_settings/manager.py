"""
Settings manager

Read-through cache in front of the ``settings`` table. Values are cached
per key in Django's cache; every write (through the manager, the admin or
the ORM) drops the cached entry via the model's save/delete signals.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Iterable, Optional

from django.conf import settings as django_settings  # type: ignore
from django.core.cache import cache  # type: ignore
from django.db import transaction  # type: ignore

from shared.domain.value_objects import to_decimal

from .defaults import DEFAULT_SETTINGS, default_value
from .models import Setting, normalize_key

logger = logging.getLogger(__name__)


class SettingsManager:

    @property
    def timeout(self) -> int:
        return getattr(django_settings, "STOREFRONT_SETTINGS_CACHE_TIMEOUT", 300)

    def get(self, key: str, default: Any = None) -> Any:
        key = normalize_key(key)
        cache_key = Setting.cache_key(key)
        entry = cache.get(cache_key)
        if entry is None:
            values = list(Setting.objects.filter(key=key).values_list("value", flat=True)[:1])
            # misses are cached too so unknown keys do not hit the database every time
            entry = (True, values[0]) if values else (False, None)
            cache.set(cache_key, entry, self.timeout)
        found, value = entry
        return value if found else default

    def get_many(self, keys: Iterable[str]) -> dict[str, Any]:
        return {normalize_key(key): self.get(key) for key in keys}

    def by_category(self, category: str) -> dict[str, Any]:
        rows = Setting.objects.filter(category=normalize_key(category)).values_list("key", "value")
        return dict(rows)

    def grouped(self, *, public_only: bool = False) -> dict[str, dict[str, Any]]:
        qs = Setting.objects.all()
        if public_only:
            qs = qs.filter(is_public=True)
        result: dict[str, dict[str, Any]] = {}
        for key, value, category in qs.values_list("key", "value", "category"):
            result.setdefault(category, {})[key] = value
        return result

    def set(
        self,
        key: str,
        value: Any,
        *,
        category: Optional[str] = None,
        description: Optional[str] = None,
        is_public: Optional[bool] = None,
    ) -> Setting:
        key = normalize_key(key)
        if not key:
            raise ValueError("Setting key must contain at least one letter or digit")
        defaults = DEFAULT_SETTINGS.get(key, {})
        with transaction.atomic():
            setting = Setting.objects.select_for_update().filter(key=key).first()
            if setting is None:
                setting = Setting(
                    key=key,
                    category=defaults.get("category", "general"),
                    description=defaults.get("description", ""),
                    is_public=defaults.get("is_public", False),
                )
            setting.value = value
            if category:
                setting.category = category
            if description is not None:
                setting.description = description
            if is_public is not None:
                setting.is_public = is_public
            setting.save()
        logger.info("Setting %s updated", key)
        return setting

    def delete(self, key: str) -> bool:
        deleted, _ = Setting.objects.filter(key=normalize_key(key)).delete()
        return bool(deleted)

    def initialize_defaults(self) -> int:
        """Create missing default settings; existing values are kept."""
        created = 0
        for key, entry in DEFAULT_SETTINGS.items():
            _, was_created = Setting.objects.get_or_create(
                key=key,
                defaults={
                    "value": entry["value"],
                    "category": entry["category"],
                    "description": entry["description"],
                    "is_public": entry["is_public"],
                },
            )
            created += int(was_created)
        logger.info("Initialized %s default settings", created)
        return created

    def export(self) -> list[dict[str, Any]]:
        return list(Setting.objects.values("key", "value", "category", "description", "is_public"))

    def import_settings(self, items: Iterable[dict[str, Any]]) -> list[Setting]:
        imported = []
        with transaction.atomic():
            for item in items:
                imported.append(
                    self.set(
                        item["key"],
                        item["value"],
                        category=item.get("category"),
                        description=item.get("description"),
                        is_public=item.get("is_public"),
                    )
                )
        return imported

    def clear_cache(self, keys: Optional[Iterable[str]] = None) -> None:
        if keys is None:
            keys = list(Setting.objects.values_list("key", flat=True)) + list(DEFAULT_SETTINGS)
        cache.delete_many([Setting.cache_key(normalize_key(key)) for key in keys])

    # typed accessors used by checkout pricing

    def tax_enabled(self) -> bool:
        return bool(self.get("tax_enabled", default_value("tax_enabled")))

    def tax_rate(self) -> Decimal:
        return to_decimal(self.get("tax_rate", default_value("tax_rate")))

    def flat_rate(self) -> Decimal:
        return to_decimal(self.get("flat_rate", default_value("flat_rate")))

    def free_shipping_threshold(self) -> Decimal:
        return to_decimal(self.get("free_shipping_threshold", default_value("free_shipping_threshold")))

    def store_name(self) -> str:
        return str(self.get("store_name", default_value("store_name")))


settings_manager = SettingsManager()
