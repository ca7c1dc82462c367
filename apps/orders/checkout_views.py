"""Checkout API: quotes, order placement, shipping options and coupons."""

from __future__ import annotations

import logging

from rest_framework import status  # type: ignore
from rest_framework.permissions import AllowAny, IsAuthenticated  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from . import pricing, services
from .checkout_serializers import (
    CheckoutCalculateSerializer,
    CreateOrderSerializer,
    GuestOrderSerializer,
    ValidateCouponSerializer,
)

logger = logging.getLogger(__name__)


def _order_summary(order) -> dict:
    return {
        "order_id": order.pk,
        "order_number": order.order_number,
        "total": order.total,
        "payment_status": order.payment_status,
        "payment_method": order.payment_method,
    }


class CheckoutCalculateView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = CheckoutCalculateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        quote = pricing.build_quote(data["items"], data["shipping_address"], data.get("coupon_code"))
        return Response(quote.as_dict())


class CreateOrderView(APIView):
    permission_classes = [IsAuthenticated]
    serializer_class = CreateOrderSerializer

    def get_order_kwargs(self, data) -> dict:
        return {"user": self.request.user, "clear_cart": data["clear_cart"]}

    def post(self, request):  # type: ignore
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        order = services.place_order(
            items=data["items"],
            shipping_address=dict(data["shipping_address"]),
            billing_address=dict(data["billing_address"]) if data.get("billing_address") else None,
            payment_method=data["payment_method"],
            notes=data.get("notes", ""),
            coupon_code=data.get("coupon_code") or None,
            **self.get_order_kwargs(data),
        )
        body = {"message": "Order created successfully", **_order_summary(order)}
        return Response(body, status=status.HTTP_201_CREATED)


class GuestOrderView(CreateOrderView):
    permission_classes = [AllowAny]
    serializer_class = GuestOrderSerializer

    def get_order_kwargs(self, data) -> dict:
        return {
            "user": None,
            "customer_email": data["customer_email"],
            "customer_name": data["customer_name"],
            "clear_cart": False,
        }


class ShippingOptionsView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):  # type: ignore
        return Response(pricing.SHIPPING_OPTIONS)


class ValidateCouponView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = ValidateCouponSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        subtotal = serializer.validated_data["subtotal"]
        coupon = pricing.find_coupon(serializer.validated_data["coupon_code"])
        discount = pricing.coupon_discount(coupon, subtotal)
        return Response(
            {
                "coupon": coupon.as_dict(),
                "discount_amount": discount,
                "new_subtotal": max(subtotal - discount, pricing.ZERO),
            }
        )
