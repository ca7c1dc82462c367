"""URL routing for the catalog domain (categories and products)."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import CategoryViewSet, ProductImageViewSet, ProductVariantViewSet, ProductViewSet

router = SimpleRouter()
router.register(r"categories", CategoryViewSet, basename="category")
router.register(r"products", ProductViewSet, basename="product")

image_list = ProductImageViewSet.as_view({"get": "list", "post": "create"})
image_detail = ProductImageViewSet.as_view(
    {"get": "retrieve", "put": "update", "patch": "partial_update", "delete": "destroy"}
)
variant_list = ProductVariantViewSet.as_view({"get": "list", "post": "create"})
variant_detail = ProductVariantViewSet.as_view(
    {"get": "retrieve", "put": "update", "patch": "partial_update", "delete": "destroy"}
)

urlpatterns = [
    path("", include(router.urls)),
    path("products/<uuid:product_id>/images/", image_list, name="product-image-list"),
    path("products/<uuid:product_id>/images/<uuid:pk>/", image_detail, name="product-image-detail"),
    path("products/<uuid:product_id>/variants/", variant_list, name="product-variant-list"),
    path("products/<uuid:product_id>/variants/<uuid:pk>/", variant_detail, name="product-variant-detail"),
]
