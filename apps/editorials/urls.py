"""URL routing for editorials and the gallery."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import EditorialViewSet, GalleryItemViewSet

router = SimpleRouter()
router.register(r"editorials", EditorialViewSet, basename="editorial")
router.register(r"gallery", GalleryItemViewSet, basename="gallery")

urlpatterns = [
    path("", include(router.urls)),
]
