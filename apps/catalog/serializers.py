"""Serializers for the catalog domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.core.utils import SLUG_PATTERN
from shared.api.fields import TypedMapField

from .models import Category, Product, ProductImage, ProductVariant

VARIANT_ATTRIBUTE_SCHEMA = {key: str for key in ProductVariant.VARIANT_ATTRIBUTE_KEYS}


class CategoryBriefSerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ["id", "name", "slug"]


class CategorySerializer(serializers.ModelSerializer):
    slug = serializers.RegexField(SLUG_PATTERN, max_length=255, required=False, allow_blank=True)
    parent_id = serializers.PrimaryKeyRelatedField(
        source="parent",
        queryset=Category.objects.all(),
        required=False,
        allow_null=True,
    )
    product_count = serializers.IntegerField(read_only=True, required=False)

    class Meta:
        model = Category
        fields = [
            "id",
            "name",
            "slug",
            "description",
            "image",
            "parent_id",
            "is_active",
            "sort_order",
            "meta_title",
            "meta_description",
            "level",
            "product_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "level", "product_count", "created_at", "updated_at"]

    def validate_slug(self, value: str) -> str:
        if value and Category.objects.exclude(pk=getattr(self.instance, "pk", None)).filter(slug=value).exists():
            raise serializers.ValidationError("Category with this slug already exists.")
        return value

    def validate(self, attrs):  # type: ignore
        parent = attrs.get("parent")
        if self.instance is not None and parent is not None:
            if parent.pk == self.instance.pk or parent.is_descendant_of(self.instance):
                raise serializers.ValidationError({"parent_id": "A category cannot be nested under itself."})
        return attrs


class CategoryTreeSerializer(CategorySerializer):
    children = serializers.SerializerMethodField()

    class Meta(CategorySerializer.Meta):
        fields = CategorySerializer.Meta.fields + ["children"]

    def get_children(self, obj: Category):
        include_inactive = self.context.get("include_inactive", False)
        children = [child for child in obj.get_children() if include_inactive or child.is_active]
        return CategoryTreeSerializer(children, many=True, context=self.context).data


class ProductImageSerializer(serializers.ModelSerializer):
    class Meta:
        model = ProductImage
        fields = ["id", "url", "alt_text", "sort_order", "is_main", "created_at"]
        read_only_fields = ["id", "created_at"]


class ProductVariantSerializer(serializers.ModelSerializer):
    attributes = TypedMapField(VARIANT_ATTRIBUTE_SCHEMA, required=False)

    class Meta:
        model = ProductVariant
        fields = [
            "id",
            "name",
            "sku",
            "price",
            "quantity",
            "weight",
            "image",
            "attributes",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]


class ProductListSerializer(serializers.ModelSerializer):
    category = CategoryBriefSerializer(read_only=True)
    main_image = serializers.SerializerMethodField()
    in_stock = serializers.BooleanField(read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "slug",
            "short_description",
            "sku",
            "price",
            "compare_price",
            "quantity",
            "in_stock",
            "is_active",
            "is_featured",
            "category",
            "main_image",
            "created_at",
        ]

    def get_main_image(self, obj: Product):
        image = obj.main_image
        return ProductImageSerializer(image).data if image else None


class ProductDetailSerializer(ProductListSerializer):
    images = ProductImageSerializer(many=True, read_only=True)
    variants = ProductVariantSerializer(many=True, read_only=True)

    class Meta(ProductListSerializer.Meta):
        fields = ProductListSerializer.Meta.fields + [
            "description",
            "cost_price",
            "track_quantity",
            "weight",
            "taxable",
            "meta_title",
            "meta_description",
            "images",
            "variants",
            "updated_at",
        ]


class ProductWriteSerializer(serializers.ModelSerializer):
    slug = serializers.RegexField(SLUG_PATTERN, max_length=255, required=False, allow_blank=True)
    category_id = serializers.PrimaryKeyRelatedField(
        source="category",
        queryset=Category.objects.all(),
        required=False,
        allow_null=True,
    )
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    quantity = serializers.IntegerField(min_value=0, required=False)

    class Meta:
        model = Product
        fields = [
            "name",
            "slug",
            "description",
            "short_description",
            "sku",
            "price",
            "compare_price",
            "cost_price",
            "track_quantity",
            "quantity",
            "weight",
            "taxable",
            "is_active",
            "is_featured",
            "meta_title",
            "meta_description",
            "category_id",
        ]

    def validate_slug(self, value: str) -> str:
        if value and Product.objects.exclude(pk=getattr(self.instance, "pk", None)).filter(slug=value).exists():
            raise serializers.ValidationError("Product with this slug already exists.")
        return value
