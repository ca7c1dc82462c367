"""API views for hotel bookings."""

from __future__ import annotations

from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.orders.domain.status import OrderType
from apps.orders.models import Order
from shared.api.permissions import is_admin

from .application.command_handlers import (
    CancelBookingCommand,
    CancelBookingHandler,
    CreateBookingCommand,
    CreateBookingHandler,
)
from .serializers import BookingCancelSerializer, BookingCreateSerializer, BookingSerializer


class BookingViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """Hotel bookings of the signed-in customer, newest first."""

    serializer_class = BookingSerializer
    permission_classes = [permissions.IsAuthenticated]
    lookup_value_regex = "[0-9a-fA-F-]{36}"

    def get_queryset(self):  # type: ignore
        qs = Order.objects.filter(order_type=OrderType.HOTEL).prefetch_related("items").order_by("-created_at")
        if not is_admin(self.request.user):
            qs = qs.filter(user=self.request.user)
        return qs

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = CreateBookingCommand(user_id=request.user.pk, **serializer.validated_data)
        order = CreateBookingHandler().handle(command, user=request.user)
        order = self.get_queryset().get(pk=order.pk)
        return Response(BookingSerializer(order).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["post"])
    def cancel(self, request, pk=None):  # type: ignore
        booking = self.get_object()
        serializer = BookingCancelSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = CancelBookingHandler().handle(
            CancelBookingCommand(order_id=booking.pk, reason=serializer.validated_data["reason"])
        )
        return Response(BookingSerializer(order).data)
