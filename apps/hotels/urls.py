"""URL routing for hotels."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import HotelViewSet

router = SimpleRouter()
router.register(r"", HotelViewSet, basename="hotel")

urlpatterns = [
    path("", include(router.urls)),
]
