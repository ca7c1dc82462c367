"""Catalog API views: categories, products, product images and variants."""

from __future__ import annotations

import logging

from django.db import transaction  # type: ignore
from django.db.models import Count  # type: ignore
from django.shortcuts import get_object_or_404  # type: ignore
from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import serializers, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.filters import OrderingFilter  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.api.mixins import MessageDestroyMixin
from shared.api.pagination import StandardPagination
from shared.api.permissions import IsAdmin, IsAdminOrReadOnly, is_admin

from .filters import ProductFilterSet
from .models import Category, Product, ProductImage, ProductVariant
from .serializers import (
    CategorySerializer,
    CategoryTreeSerializer,
    ProductDetailSerializer,
    ProductImageSerializer,
    ProductListSerializer,
    ProductVariantSerializer,
    ProductWriteSerializer,
)

logger = logging.getLogger(__name__)

UUID_REGEX = "[0-9a-fA-F-]{36}"
PRODUCT_ORDERING_FIELDS = ("name", "price", "created_at")


class CategoryViewSet(MessageDestroyMixin, viewsets.ModelViewSet):
    """Category tree. Non-admins only ever see active categories."""

    serializer_class = CategorySerializer
    permission_classes = [IsAdminOrReadOnly]
    pagination_class = None
    lookup_value_regex = UUID_REGEX
    destroy_message = "Category deleted successfully"

    def get_queryset(self):  # type: ignore
        qs = Category.objects.annotate(product_count=Count("products"))
        if not is_admin(self.request.user):
            qs = qs.filter(is_active=True)
        return qs

    def list(self, request, *args, **kwargs):  # type: ignore
        qs = self.get_queryset()
        if request.query_params.get("flat") == "true":
            return Response(CategorySerializer(qs.order_by("tree_id", "lft"), many=True).data)
        context = {"include_inactive": is_admin(request.user)}
        roots = qs.filter(parent__isnull=True).order_by("sort_order", "name")
        return Response(CategoryTreeSerializer(roots, many=True, context=context).data)

    def retrieve(self, request, *args, **kwargs):  # type: ignore
        category = self.get_object()
        context = {"include_inactive": is_admin(request.user)}
        return Response(CategoryTreeSerializer(category, context=context).data)

    @action(detail=False, methods=["get"], url_path=r"slug/(?P<slug>[-a-z0-9]+)")
    def by_slug(self, request, slug=None):  # type: ignore
        category = get_object_or_404(self.get_queryset(), slug=slug)
        context = {"include_inactive": is_admin(request.user)}
        return Response(CategoryTreeSerializer(category, context=context).data)

    @action(detail=True, methods=["get"])
    def products(self, request, pk=None):  # type: ignore
        category = self.get_object()
        ordering = request.query_params.get("ordering", "-created_at")
        if ordering.lstrip("-") not in PRODUCT_ORDERING_FIELDS:
            ordering = "-created_at"
        qs = (
            Product.objects.active()
            .filter(category__in=category.get_descendants(include_self=True))
            .select_related("category")
            .prefetch_related("images")
            .order_by(ordering)
        )
        paginator = StandardPagination()
        page = paginator.paginate_queryset(qs, request, view=self)
        response = paginator.get_paginated_response(ProductListSerializer(page, many=True).data)
        response.data["category"] = CategorySerializer(category).data
        return response

    @action(detail=False, methods=["post", "delete"], url_path="bulk", permission_classes=[IsAdmin])
    def bulk_delete(self, request):  # type: ignore
        """Delete several categories (and their subtrees when ``cascade`` is true)."""
        body = request.data if isinstance(request.data, dict) else {"ids": request.data}
        ids = body.get("ids")
        if not ids and request.query_params.get("ids"):
            ids = [part.strip() for part in request.query_params["ids"].split(",") if part.strip()]
        if not isinstance(ids, list) or not ids:
            raise serializers.ValidationError({"ids": "ids array is required"})
        cascade = str(body.get("cascade", request.query_params.get("cascade", "false"))).lower() == "true"

        field = serializers.ListField(child=serializers.UUIDField())
        ids = field.run_validation(ids)
        with transaction.atomic():
            categories = list(Category.objects.filter(pk__in=ids))
            if not cascade and Category.objects.filter(parent_id__in=ids).exclude(pk__in=ids).exists():
                raise serializers.ValidationError(
                    {"ids": "Cannot delete categories that have subcategories. Use cascade=true."}
                )
            for category in categories:
                # an ancestor deleted earlier in the loop may already have removed it
                node = Category.objects.filter(pk=category.pk).first()
                if node is not None:
                    node.delete()
        logger.info("Bulk deleted %s categories", len(categories))
        return Response({"message": "Categories deleted successfully", "deleted": len(categories)})


class ProductViewSet(MessageDestroyMixin, viewsets.ModelViewSet):
    """Product catalog. Deleting a product that was ever ordered fails with 409."""

    permission_classes = [IsAdminOrReadOnly]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = ProductFilterSet
    ordering_fields = ["name", "price", "created_at"]
    ordering = ["-created_at"]
    lookup_value_regex = UUID_REGEX
    destroy_message = "Product deleted successfully"

    def get_queryset(self):  # type: ignore
        qs = Product.objects.select_related("category").prefetch_related("images", "variants")
        if not is_admin(self.request.user):
            return qs.active()
        is_active = self.request.query_params.get("is_active")
        if is_active in {"true", "false"}:
            qs = qs.filter(is_active=is_active == "true")
        return qs

    def get_serializer_class(self):  # type: ignore
        if self.action in {"create", "update", "partial_update"}:
            return ProductWriteSerializer
        if self.action == "retrieve":
            return ProductDetailSerializer
        return ProductListSerializer

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = serializer.save()
        logger.info("Product %s created (sku=%s)", product.pk, product.sku)
        return Response(ProductDetailSerializer(product).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):  # type: ignore
        partial = kwargs.pop("partial", False)
        product = self.get_object()
        serializer = self.get_serializer(product, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        product = serializer.save()
        return Response(ProductDetailSerializer(product).data)

    @action(detail=False, methods=["get"])
    def featured(self, request):  # type: ignore
        limit = _limit(request, default=8)
        qs = Product.objects.active().select_related("category").prefetch_related("images")
        qs = qs.order_by("-is_featured", "-created_at")[:limit]
        return Response(ProductListSerializer(qs, many=True).data)

    @action(detail=False, methods=["get"], url_path=rf"related/(?P<product_id>{UUID_REGEX})")
    def related(self, request, product_id=None):  # type: ignore
        product = get_object_or_404(Product, pk=product_id)
        limit = _limit(request, default=4)
        if product.category_id is None:
            return Response([])
        qs = (
            Product.objects.active()
            .filter(category_id=product.category_id)
            .exclude(pk=product.pk)
            .select_related("category")
            .prefetch_related("images")
            .order_by("-created_at")[:limit]
        )
        return Response(ProductListSerializer(qs, many=True).data)

    @action(detail=False, methods=["get"], url_path=r"slug/(?P<slug>[-a-z0-9]+)")
    def by_slug(self, request, slug=None):  # type: ignore
        product = get_object_or_404(self.get_queryset(), slug=slug)
        return Response(ProductDetailSerializer(product).data)


class ProductChildViewSet(MessageDestroyMixin, viewsets.ModelViewSet):
    """Base for resources nested under ``/products/<product_id>/``."""

    permission_classes = [IsAdminOrReadOnly]
    pagination_class = None
    model = None

    def get_product(self) -> Product:
        if not hasattr(self, "_product"):
            self._product = get_object_or_404(Product, pk=self.kwargs["product_id"])
        return self._product

    def get_queryset(self):  # type: ignore
        return self.model.objects.filter(product=self.get_product())

    def perform_create(self, serializer):  # type: ignore
        serializer.save(product=self.get_product())


class ProductImageViewSet(ProductChildViewSet):
    serializer_class = ProductImageSerializer
    model = ProductImage
    destroy_message = "Image deleted successfully"

    def perform_destroy(self, instance):  # type: ignore
        with transaction.atomic():
            was_main = instance.is_main
            product = instance.product
            instance.delete()
            if was_main:
                successor = product.images.order_by("sort_order", "created_at").first()
                if successor is not None:
                    successor.is_main = True
                    successor.save(update_fields=["is_main", "updated_at"])


class ProductVariantViewSet(ProductChildViewSet):
    serializer_class = ProductVariantSerializer
    model = ProductVariant
    destroy_message = "Variant deleted successfully"


def _limit(request, default: int, maximum: int = 50) -> int:
    try:
        value = int(request.query_params.get("limit", default))
    except (TypeError, ValueError):
        return default
    return max(1, min(value, maximum))
