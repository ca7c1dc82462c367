"""Serializers for editorials and gallery items."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.core.utils import SLUG_PATTERN
from shared.api.fields import StringListField

from .models import Editorial, GalleryItem


class EditorialListSerializer(serializers.ModelSerializer):
    class Meta:
        model = Editorial
        fields = ["id", "title", "slug", "excerpt", "hero_url", "hero_type", "author", "tags", "published_at"]
        read_only_fields = fields


class EditorialSerializer(serializers.ModelSerializer):
    slug = serializers.RegexField(SLUG_PATTERN, max_length=255, required=False, allow_blank=True)
    tags = StringListField(required=False)

    class Meta:
        model = Editorial
        fields = [
            "id",
            "title",
            "slug",
            "excerpt",
            "hero_url",
            "hero_type",
            "content",
            "author",
            "tags",
            "status",
            "published_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "published_at", "created_at", "updated_at"]

    def validate_slug(self, value: str) -> str:
        if value and Editorial.objects.exclude(pk=getattr(self.instance, "pk", None)).filter(slug=value).exists():
            raise serializers.ValidationError("Slug already exists. Choose a unique slug.")
        return value


class GalleryItemSerializer(serializers.ModelSerializer):
    tags = StringListField(required=False)

    class Meta:
        model = GalleryItem
        fields = [
            "id",
            "title",
            "description",
            "image_url",
            "thumbnail_url",
            "category",
            "featured",
            "display_order",
            "alt_text",
            "tags",
            "metadata",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]
