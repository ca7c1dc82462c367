"""Catalog models: category tree, products, images and variants."""

from __future__ import annotations

import uuid
from decimal import Decimal

from django.db import models, transaction  # type: ignore
from django.db.models import Q  # type: ignore
from mptt.models import MPTTModel, TreeForeignKey  # type: ignore

from apps.core.utils import unique_slug

DEFAULT_ITEM_WEIGHT = Decimal("0.5")


class Category(MPTTModel):
    """Catalog category; deleting one removes its subtree and un-files its products."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True, blank=True)
    description = models.TextField(blank=True)
    image = models.URLField(max_length=500, blank=True)
    parent = TreeForeignKey(
        "self",
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        related_name="children",
    )
    is_active = models.BooleanField(default=True)
    sort_order = models.IntegerField(default=0)
    meta_title = models.CharField(max_length=255, blank=True)
    meta_description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "categories"
        ordering = ["sort_order", "name"]
        verbose_name_plural = "categories"

    def __str__(self) -> str:
        return self.name

    def save(self, *args, **kwargs):  # type: ignore
        if not self.slug:
            self.slug = unique_slug(Category, self.name, exclude_pk=self.pk)
        super().save(*args, **kwargs)


class ProductQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_active=True)

    def in_stock(self):
        return self.filter(Q(track_quantity=False) | Q(quantity__gt=0))


class Product(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True, blank=True)
    description = models.TextField(blank=True)
    short_description = models.TextField(blank=True)
    sku = models.CharField(max_length=100, unique=True)
    price = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    compare_price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    cost_price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    track_quantity = models.BooleanField(default=True)
    quantity = models.IntegerField(default=0)
    weight = models.DecimalField(max_digits=8, decimal_places=2, null=True, blank=True)
    taxable = models.BooleanField(default=True)
    is_active = models.BooleanField(default=True)
    is_featured = models.BooleanField(default=False)
    meta_title = models.CharField(max_length=255, blank=True)
    meta_description = models.TextField(blank=True)
    category = models.ForeignKey(
        Category,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="products",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ProductQuerySet.as_manager()

    class Meta:
        db_table = "products"
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(condition=Q(price__gte=0), name="product_price_non_negative"),
        ]
        indexes = [
            models.Index(fields=["is_active", "created_at"], name="product_active_created_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.sku})"

    def save(self, *args, **kwargs):  # type: ignore
        if not self.slug:
            self.slug = unique_slug(Product, self.name, exclude_pk=self.pk)
        super().save(*args, **kwargs)

    @property
    def in_stock(self) -> bool:
        return not self.track_quantity or self.quantity > 0

    @property
    def shipping_weight(self) -> Decimal:
        return self.weight if self.weight is not None else DEFAULT_ITEM_WEIGHT

    @property
    def main_image(self) -> "ProductImage | None":
        for image in self.images.all():
            if image.is_main:
                return image
        return None


class ProductImage(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="images")
    url = models.URLField(max_length=500)
    alt_text = models.CharField(max_length=255, blank=True)
    sort_order = models.IntegerField(default=0)
    is_main = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "product_images"
        ordering = ["-is_main", "sort_order", "created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["product"],
                condition=Q(is_main=True),
                name="product_single_main_image",
            ),
        ]

    def __str__(self) -> str:
        return self.url

    def save(self, *args, **kwargs):  # type: ignore
        with transaction.atomic():
            siblings = ProductImage.objects.filter(product_id=self.product_id).exclude(pk=self.pk)
            if self._state.adding and not siblings.exists():
                self.is_main = True
            if self.is_main:
                siblings.filter(is_main=True).update(is_main=False)
            super().save(*args, **kwargs)


class ProductVariant(models.Model):
    """Sellable variation of a product; ``attributes`` keys are limited to VARIANT_ATTRIBUTE_KEYS."""

    VARIANT_ATTRIBUTE_KEYS = ("color", "size", "material")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="variants")
    name = models.CharField(max_length=255)
    sku = models.CharField(max_length=100, unique=True)
    price = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    quantity = models.IntegerField(default=0)
    weight = models.DecimalField(max_digits=8, decimal_places=2, null=True, blank=True)
    image = models.URLField(max_length=500, blank=True)
    attributes = models.JSONField(default=dict, blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "product_variants"
        ordering = ["name"]
        constraints = [
            models.CheckConstraint(condition=Q(price__gte=0), name="variant_price_non_negative"),
        ]

    def __str__(self) -> str:
        return f"{self.product.name} / {self.name}"

    @property
    def shipping_weight(self) -> Decimal:
        if self.weight is not None:
            return self.weight
        return self.product.shipping_weight
