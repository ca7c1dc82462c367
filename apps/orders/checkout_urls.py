"""URL declarations for checkout."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .checkout_views import (
    CheckoutCalculateView,
    CreateOrderView,
    GuestOrderView,
    ShippingOptionsView,
    ValidateCouponView,
)

urlpatterns = [
    path("calculate/", CheckoutCalculateView.as_view(), name="checkout-calculate"),
    path("create-order/", CreateOrderView.as_view(), name="checkout-create-order"),
    path("guest/", GuestOrderView.as_view(), name="checkout-guest"),
    path("shipping-options/", ShippingOptionsView.as_view(), name="checkout-shipping-options"),
    path("validate-coupon/", ValidateCouponView.as_view(), name="checkout-validate-coupon"),
]
