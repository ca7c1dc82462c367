"""Helpers shared by several domain apps."""

from __future__ import annotations

import re

from django.utils.text import slugify  # type: ignore

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


def make_slug(value: str) -> str:
    """Lowercase, hyphen-separated slug containing only ``[a-z0-9-]``."""
    slug = slugify(value or "").replace("_", "-")
    return re.sub(r"-{2,}", "-", slug).strip("-")


def unique_slug(model, value: str, *, exclude_pk=None, field: str = "slug", max_length: int = 255) -> str:
    """Slug for ``value`` that is not yet taken in ``model``; ``-2``, ``-3``... on clashes."""
    base = make_slug(value)[:max_length] or "item"
    candidate = base
    counter = 2
    qs = model._default_manager.all()
    if exclude_pk is not None:
        qs = qs.exclude(pk=exclude_pk)
    while qs.filter(**{field: candidate}).exists():
        suffix = f"-{counter}"
        candidate = f"{base[: max_length - len(suffix)]}{suffix}"
        counter += 1
    return candidate
