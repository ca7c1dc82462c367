"""Hotel API views."""

from __future__ import annotations

import uuid

from django.shortcuts import get_object_or_404  # type: ignore
from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.filters import OrderingFilter  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.api.mixins import MessageDestroyMixin
from shared.api.permissions import IsAdminOrReadOnly, is_admin

from .filters import HotelFilterSet
from .models import Hotel
from .serializers import HotelListSerializer, HotelSerializer

POPULAR_LIMIT = 12


class HotelViewSet(MessageDestroyMixin, viewsets.ModelViewSet):
    """Hotels addressed by UUID or slug; inactive hotels are admin-only."""

    serializer_class = HotelSerializer
    permission_classes = [IsAdminOrReadOnly]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = HotelFilterSet
    ordering_fields = ["name", "price", "created_at", "display_order"]
    ordering = ["display_order", "-created_at"]
    lookup_field = "identifier"
    lookup_value_regex = "[^/]+"
    destroy_message = "Hotel deleted successfully"

    def get_queryset(self):  # type: ignore
        qs = Hotel.objects.all()
        if self.action == "list" or not is_admin(self.request.user):
            qs = qs.active()
        return qs

    def get_object(self):  # type: ignore
        identifier = self.kwargs[self.lookup_field]
        try:
            lookup = {"pk": uuid.UUID(identifier)}
        except ValueError:
            lookup = {"slug": identifier}
        hotel = get_object_or_404(self.get_queryset(), **lookup)
        self.check_object_permissions(self.request, hotel)
        return hotel

    @action(detail=False, methods=["get"], url_path="special-offers")
    def special_offers(self, request):  # type: ignore
        qs = Hotel.objects.with_valid_offers().order_by("display_order", "-created_at")
        return Response(HotelListSerializer(qs, many=True).data)

    @action(detail=False, methods=["get"])
    def popular(self, request):  # type: ignore
        qs = Hotel.objects.active().filter(popular=True).order_by("display_order", "-created_at")
        return Response(HotelListSerializer(qs[:POPULAR_LIMIT], many=True).data)
