"""Cart API views."""

from __future__ import annotations

from django.shortcuts import get_object_or_404  # type: ignore
from rest_framework import serializers, status  # type: ignore
from rest_framework.permissions import AllowAny, IsAuthenticated  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from shared.api.session import get_session_id

from . import services
from .serializers import (
    AddToCartSerializer,
    CartItemSerializer,
    CartSummarySerializer,
    MergeCartSerializer,
    UpdateCartItemSerializer,
)


class CartOwnerMixin:
    permission_classes = [AllowAny]

    def get_owner(self) -> services.CartOwner:
        return services.CartOwner.from_request(self.request)


class CartView(CartOwnerMixin, APIView):
    def get(self, request):  # type: ignore
        return Response(CartSummarySerializer(services.cart_summary(self.get_owner())).data)

    def post(self, request):  # type: ignore
        owner = self.get_owner()
        owner.require()
        serializer = AddToCartSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        item = services.add_item(
            owner,
            data["product_id"],
            data["quantity"],
            variant_id=data.get("variant_id"),
            attributes=data.get("attributes"),
        )
        return Response(CartItemSerializer(item).data, status=status.HTTP_201_CREATED)

    def delete(self, request):  # type: ignore
        services.clear_cart(self.get_owner())
        return Response({"message": "Cart cleared successfully"})


class CartItemView(CartOwnerMixin, APIView):
    def put(self, request, item_id):  # type: ignore
        owner = self.get_owner()
        owner.require()
        get_object_or_404(services.cart_items(owner), pk=item_id)
        serializer = UpdateCartItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item = services.update_quantity(owner, item_id, serializer.validated_data["quantity"])
        return Response(CartItemSerializer(item).data)

    def delete(self, request, item_id):  # type: ignore
        owner = self.get_owner()
        owner.require()
        get_object_or_404(services.cart_items(owner), pk=item_id)
        services.remove_item(owner, item_id)
        return Response({"message": "Item removed from cart"})


class CartCountView(CartOwnerMixin, APIView):
    def get(self, request):  # type: ignore
        return Response({"count": services.cart_count(self.get_owner())})


class CartMergeView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):  # type: ignore
        serializer = MergeCartSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        session_id = serializer.validated_data.get("session_id") or get_session_id(request)
        if not session_id:
            raise serializers.ValidationError({"session_id": "Session ID is required"})
        merged = services.merge_session_cart(request.user, session_id)
        return Response({"message": "Cart merged successfully", "merged": merged})
