"""Editorial articles and gallery items shown on the public site."""

from __future__ import annotations

import uuid

from django.core.validators import RegexValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore

from apps.core.utils import SLUG_PATTERN, unique_slug


class Editorial(models.Model):
    class Status(models.TextChoices):
        DRAFT = "draft", "Draft"
        PUBLISHED = "published", "Published"

    class HeroType(models.TextChoices):
        IMAGE = "image", "Image"
        VIDEO = "video", "Video"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    slug = models.CharField(
        max_length=255,
        unique=True,
        blank=True,
        validators=[RegexValidator(SLUG_PATTERN, "Slug may contain lowercase letters, digits and hyphens.")],
    )
    excerpt = models.TextField(blank=True)
    hero_url = models.URLField(max_length=500, blank=True)
    hero_type = models.CharField(max_length=10, choices=HeroType.choices, default=HeroType.IMAGE)
    content = models.TextField()
    author = models.CharField(max_length=255, blank=True)
    tags = models.JSONField(default=list, blank=True)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.DRAFT)
    published_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "editorials"
        ordering = ["-published_at", "-created_at"]
        indexes = [
            models.Index(fields=["status", "-published_at"], name="editorials_status_pub_idx"),
        ]

    def __str__(self) -> str:
        return self.title

    def save(self, *args, **kwargs):  # type: ignore
        if not self.slug:
            self.slug = unique_slug(Editorial, self.title, exclude_pk=self.pk)
        # first publication keeps its original date on later edits
        if self.status == self.Status.PUBLISHED and self.published_at is None:
            self.published_at = timezone.now()
        super().save(*args, **kwargs)

    @property
    def is_published(self) -> bool:
        return self.status == self.Status.PUBLISHED


class GalleryItem(models.Model):
    class Category(models.TextChoices):
        BIRTHDAY = "birthday", "Birthday Parties"
        CORPORATE = "corporate", "Corporate Events"
        WEDDING = "wedding", "Weddings"
        SCHOOL = "school", "School Events"
        FESTIVAL = "festival", "Festivals"
        OTHER = "other", "Other Events"

    class Status(models.TextChoices):
        ACTIVE = "active", "Active"
        INACTIVE = "inactive", "Inactive"
        DRAFT = "draft", "Draft"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    image_url = models.URLField(max_length=500)
    thumbnail_url = models.URLField(max_length=500, blank=True)
    category = models.CharField(max_length=20, choices=Category.choices, default=Category.OTHER)
    featured = models.BooleanField(default=False)
    display_order = models.IntegerField(default=0)
    alt_text = models.CharField(max_length=255, blank=True)
    tags = models.JSONField(default=list, blank=True)
    metadata = models.JSONField(default=dict, blank=True)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.ACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "galleries"
        ordering = ["display_order", "-created_at"]
        indexes = [
            models.Index(fields=["category"], name="galleries_category_idx"),
            models.Index(fields=["featured"], name="galleries_featured_idx"),
            models.Index(fields=["status", "display_order"], name="galleries_status_order_idx"),
        ]

    def __str__(self) -> str:
        return self.title
