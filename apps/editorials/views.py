"""Editorial and gallery API views."""

from __future__ import annotations

import uuid

from django.shortcuts import get_object_or_404  # type: ignore
from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.api.mixins import MessageDestroyMixin
from shared.api.permissions import IsAdminOrReadOnly, is_admin

from .filters import GalleryFilterSet
from .models import Editorial, GalleryItem
from .serializers import EditorialListSerializer, EditorialSerializer, GalleryItemSerializer


class EditorialViewSet(MessageDestroyMixin, viewsets.ModelViewSet):
    """
    Published articles, newest first.

    The public reads by slug; administrators may also address an article
    by UUID and see drafts.
    """

    permission_classes = [IsAdminOrReadOnly]
    lookup_field = "identifier"
    lookup_value_regex = "[^/]+"
    destroy_message = "Article deleted successfully"

    def get_queryset(self):  # type: ignore
        qs = Editorial.objects.all()
        if self.action == "list" or not is_admin(self.request.user):
            qs = qs.filter(status=Editorial.Status.PUBLISHED)
        return qs.order_by("-published_at", "-created_at")

    def get_serializer_class(self):  # type: ignore
        if self.action == "list":
            return EditorialListSerializer
        return EditorialSerializer

    def get_object(self):  # type: ignore
        identifier = self.kwargs[self.lookup_field]
        try:
            lookup = {"pk": uuid.UUID(identifier)}
        except ValueError:
            lookup = {"slug": identifier}
        editorial = get_object_or_404(self.get_queryset(), **lookup)
        self.check_object_permissions(self.request, editorial)
        return editorial


class GalleryItemViewSet(MessageDestroyMixin, viewsets.ModelViewSet):
    """Gallery photos; the public list shows active items only."""

    serializer_class = GalleryItemSerializer
    permission_classes = [IsAdminOrReadOnly]
    filter_backends = [DjangoFilterBackend]
    filterset_class = GalleryFilterSet
    lookup_value_regex = "[0-9a-fA-F-]{36}"
    destroy_message = "Gallery item deleted successfully"

    def get_queryset(self):  # type: ignore
        qs = GalleryItem.objects.order_by("display_order", "-created_at")
        if not is_admin(self.request.user):
            qs = qs.filter(status=GalleryItem.Status.ACTIVE)
        return qs

    @action(detail=False, methods=["get"])
    def categories(self, request):  # type: ignore
        return Response([{"id": value, "name": label} for value, label in GalleryItem.Category.choices])
