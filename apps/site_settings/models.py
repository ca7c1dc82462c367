"""Persistent key/value settings grouped by category."""

from __future__ import annotations

import re
import uuid

from django.core.cache import cache  # type: ignore
from django.db import models  # type: ignore
from django.db.models.signals import post_delete, post_save  # type: ignore
from django.dispatch import receiver  # type: ignore

CACHE_PREFIX = "site-settings:"


def normalize_key(key: str) -> str:
    """``"Store Name"`` -> ``"store_name"``."""
    key = re.sub(r"[\s\-]+", "_", str(key).strip().lower())
    return re.sub(r"[^a-z0-9_.]", "", key)


class Setting(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    key = models.CharField(max_length=100, unique=True)
    value = models.JSONField()
    category = models.CharField(max_length=50, default="general", db_index=True)
    description = models.TextField(blank=True)
    is_public = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "settings"
        ordering = ["category", "key"]

    def __str__(self) -> str:
        return f"{self.category}.{self.key}"

    def save(self, *args, **kwargs):  # type: ignore
        self.key = normalize_key(self.key)
        self.category = normalize_key(self.category) or "general"
        super().save(*args, **kwargs)

    @staticmethod
    def cache_key(key: str) -> str:
        return f"{CACHE_PREFIX}{key}"


@receiver(post_save, sender=Setting)
@receiver(post_delete, sender=Setting)
def invalidate_cached_setting(sender, instance: Setting, **kwargs) -> None:
    cache.delete(Setting.cache_key(instance.key))
