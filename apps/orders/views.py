"""Order API views: listings, tracking, invoices and admin status changes."""

from __future__ import annotations

import logging

from django.db.models import Count  # type: ignore
from django.http import HttpResponse  # type: ignore
from django.template.loader import render_to_string  # type: ignore
from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import mixins, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.filters import OrderingFilter  # type: ignore
from rest_framework.permissions import AllowAny, IsAuthenticated  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.site_settings.manager import settings_manager
from shared.api.permissions import IsAdmin, is_admin

from . import services
from .filters import OrderFilterSet
from .models import Order
from .serializers import (
    BulkOrderDeleteSerializer,
    BulkOrderStatusSerializer,
    InquirySerializer,
    OrderListSerializer,
    OrderSerializer,
    OrderStatusSerializer,
    OrderTrackingSerializer,
    PaymentStatusSerializer,
)

logger = logging.getLogger(__name__)

UUID_REGEX = "[0-9a-fA-F-]{36}"


class OrderViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    """Customers see their own orders; administrators see every order."""

    permission_classes = [IsAuthenticated]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = OrderFilterSet
    ordering_fields = ["created_at", "total", "status"]
    ordering = ["-created_at"]
    lookup_value_regex = UUID_REGEX

    def get_queryset(self):  # type: ignore
        qs = Order.objects.select_related("user")
        if self.action == "list":
            qs = qs.annotate(item_count=Count("items"))
        else:
            qs = qs.prefetch_related("items")
        if not is_admin(self.request.user):
            qs = qs.filter(user=self.request.user)
        return qs

    def get_serializer_class(self):  # type: ignore
        if self.action == "list":
            return OrderListSerializer
        return OrderSerializer

    @action(detail=True, methods=["get"])
    def tracking(self, request, pk=None):  # type: ignore
        return Response(OrderTrackingSerializer(self.get_object()).data)

    @action(detail=True, methods=["get"])
    def invoice(self, request, pk=None):  # type: ignore
        """Invoice rendered from the order snapshot; ``?plain=1`` for text."""
        order = self.get_object()
        plain = request.query_params.get("plain") in {"1", "true"}
        context = {"order": order, "items": order.items.all(), "store_name": settings_manager.store_name()}
        template = "orders/invoice.txt" if plain else "orders/invoice.html"
        content_type = "text/plain; charset=utf-8" if plain else "text/html; charset=utf-8"
        return HttpResponse(render_to_string(template, context), content_type=content_type)

    @action(detail=True, methods=["patch"], url_path="status", permission_classes=[IsAdmin])
    def update_status(self, request, pk=None):  # type: ignore
        order = self.get_object()
        serializer = OrderStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = services.transition_order_status(
            order.pk,
            serializer.validated_data["status"],
            tracking_number=serializer.validated_data.get("tracking_number", ""),
        )
        return Response(OrderSerializer(order).data)

    @action(detail=False, methods=["patch"], url_path="bulk/status", permission_classes=[IsAdmin])
    def bulk_status(self, request):  # type: ignore
        serializer = BulkOrderStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        result = services.bulk_transition(
            data["order_ids"], data["status"], tracking_number=data.get("tracking_number", "")
        )
        result["message"] = f"{len(result['updated'])} orders updated, {len(result['failed'])} failed"
        return Response(result)

    @action(detail=True, methods=["patch"], url_path="payment-status", permission_classes=[IsAdmin])
    def payment_status(self, request, pk=None):  # type: ignore
        order = self.get_object()
        serializer = PaymentStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = services.update_payment_status(order.pk, serializer.validated_data["payment_status"])
        return Response(OrderSerializer(order).data)

    @action(detail=False, methods=["post", "delete"], url_path="bulk", permission_classes=[IsAdmin])
    def bulk_delete(self, request):  # type: ignore
        serializer = BulkOrderDeleteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        deleted, _ = Order.objects.filter(pk__in=serializer.validated_data["ids"]).delete()
        logger.info("Bulk deleted orders (%s rows)", deleted)
        return Response({"message": "Orders deleted successfully"})

    @action(detail=False, methods=["post"], permission_classes=[AllowAny])
    def inquiry(self, request):  # type: ignore
        serializer = InquirySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.data
        details = {key: value for key, value in data.items() if key != "contact"}
        services.submit_inquiry(dict(data["contact"]), details)
        return Response({"message": "Inquiry submitted successfully"}, status=status.HTTP_201_CREATED)
