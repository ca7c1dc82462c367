"""URL declarations for the cart."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import CartCountView, CartItemView, CartMergeView, CartView

urlpatterns = [
    path("", CartView.as_view(), name="cart"),
    path("count/", CartCountView.as_view(), name="cart-count"),
    path("merge/", CartMergeView.as_view(), name="cart-merge"),
    path("<uuid:item_id>/", CartItemView.as_view(), name="cart-item"),
]
