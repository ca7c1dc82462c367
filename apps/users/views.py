"""User administration and address book views."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from django.db.models import Count  # type: ignore
from rest_framework import filters, mixins, permissions, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.api.mixins import MessageDestroyMixin
from shared.api.permissions import IsAdmin

from .models import Address
from .serializers import AddressSerializer, AdminUserSerializer

User = get_user_model()


class UserViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """Customer management for administrators.

    Deleting a user deactivates the account; order history stays intact.
    """

    serializer_class = AdminUserSerializer
    permission_classes = [IsAdmin]
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ["email", "first_name", "last_name", "phone"]
    ordering_fields = ["created_at", "email", "last_login"]

    def get_queryset(self):  # type: ignore
        qs = User.objects.annotate(order_count=Count("orders"))
        role = self.request.query_params.get("role")
        if role:
            qs = qs.filter(role=role)
        is_active = self.request.query_params.get("is_active")
        if is_active in {"true", "false"}:
            qs = qs.filter(is_active=is_active == "true")
        return qs.order_by("-created_at")

    def destroy(self, request, *args, **kwargs):  # type: ignore
        user = self.get_object()
        user.is_active = False
        user.save(update_fields=["is_active", "updated_at"])
        return Response({"message": "User deactivated"})


class AddressViewSet(MessageDestroyMixin, viewsets.ModelViewSet):
    """Address book of the current user."""

    serializer_class = AddressSerializer
    permission_classes = [permissions.IsAuthenticated]
    pagination_class = None
    destroy_message = "Address deleted successfully"

    def get_queryset(self):  # type: ignore
        qs = Address.objects.filter(user=self.request.user)
        address_type = self.request.query_params.get("type")
        if address_type:
            qs = qs.filter(type=address_type)
        return qs

    def perform_create(self, serializer):  # type: ignore
        serializer.save(user=self.request.user)

    @action(detail=True, methods=["put"], url_path="default")
    def set_default(self, request, pk=None):  # type: ignore
        address: Address = self.get_object()  # type: ignore
        address.make_default()
        return Response(AddressSerializer(address).data)
