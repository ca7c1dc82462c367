"""
Checkout pricing

Resolves requested cart lines against the catalogue and computes the
order quote: subtotal, tax, shipping, coupon discount and total. All
amounts are ``Decimal`` quantized to cents (half-up).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Optional

from apps.catalog.models import Product, ProductVariant
from apps.site_settings.manager import settings_manager
from shared.domain.exceptions import InsufficientStock, InvalidCoupon, ProductUnavailable
from shared.domain.value_objects import quantize, to_decimal

FREE_WEIGHT_KG = Decimal("5")
EXTRA_KG_RATE = Decimal("2")
INTERNATIONAL_SURCHARGE = Decimal("15.00")
DOMESTIC_COUNTRY = "US"

ZERO = Decimal("0.00")


@dataclass(frozen=True)
class Coupon:
    code: str
    type: str  # "percentage" or "shipping"
    value: Decimal
    min_order_amount: Decimal
    max_discount: Decimal

    def as_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "type": self.type,
            "value": self.value,
            "min_order_amount": self.min_order_amount,
            "max_discount": self.max_discount,
        }


COUPONS = {
    "SAVE10": Coupon("SAVE10", "percentage", Decimal("10"), Decimal("50"), Decimal("100")),
    "FREESHIP": Coupon("FREESHIP", "shipping", Decimal("100"), Decimal("0"), Decimal("25")),
    "WELCOME20": Coupon("WELCOME20", "percentage", Decimal("20"), Decimal("100"), Decimal("50")),
}

SHIPPING_OPTIONS = [
    {"id": "standard", "name": "Standard Shipping", "description": "5-7 business days", "price": Decimal("10.00"), "estimated_days": "5-7"},
    {"id": "express", "name": "Express Shipping", "description": "2-3 business days", "price": Decimal("25.00"), "estimated_days": "2-3"},
    {"id": "overnight", "name": "Overnight Shipping", "description": "Next business day", "price": Decimal("50.00"), "estimated_days": "1"},
    {
        "id": "free",
        "name": "Free Shipping",
        "description": "Orders over $100",
        "price": ZERO,
        "estimated_days": "5-7",
        "min_order_amount": Decimal("100.00"),
    },
]


@dataclass
class QuoteLine:
    product: Product
    variant: Optional[ProductVariant]
    quantity: int
    price: Decimal
    total: Decimal
    weight: Decimal

    @property
    def product_name(self) -> str:
        return self.product.name

    @property
    def variant_name(self) -> str:
        return self.variant.name if self.variant else ""

    @property
    def sku(self) -> str:
        return self.variant.sku if self.variant else self.product.sku

    @property
    def attributes(self) -> dict:
        return dict(self.variant.attributes) if self.variant else {}

    def as_dict(self) -> dict[str, Any]:
        main_image = self.product.main_image
        return {
            "product_id": self.product.pk,
            "variant_id": self.variant.pk if self.variant else None,
            "product_name": self.product_name,
            "variant_name": self.variant_name or None,
            "sku": self.sku,
            "price": self.price,
            "quantity": self.quantity,
            "total": self.total,
            "weight": self.weight,
            "image": main_image.url if main_image else None,
        }


@dataclass
class Quote:
    lines: list[QuoteLine]
    subtotal: Decimal
    tax_amount: Decimal
    shipping_amount: Decimal
    discount_amount: Decimal
    total: Decimal
    coupon: Optional[Coupon] = None
    currency: str = "USD"

    @property
    def total_items(self) -> int:
        return sum(line.quantity for line in self.lines)

    def as_dict(self) -> dict[str, Any]:
        return {
            "items": [line.as_dict() for line in self.lines],
            "subtotal": self.subtotal,
            "tax_amount": self.tax_amount,
            "shipping_amount": self.shipping_amount,
            "discount_amount": self.discount_amount,
            "total": self.total,
            "total_items": self.total_items,
            "coupon_code": self.coupon.code if self.coupon else None,
            "currency": self.currency,
        }


def calculate_shipping(subtotal: Decimal, total_weight: Decimal, country: Optional[str]) -> Decimal:
    if subtotal >= settings_manager.free_shipping_threshold():
        return ZERO
    cost = settings_manager.flat_rate()
    if total_weight > FREE_WEIGHT_KG:
        cost += (total_weight - FREE_WEIGHT_KG) * EXTRA_KG_RATE
    if (country or "").strip().upper() != DOMESTIC_COUNTRY:
        cost += INTERNATIONAL_SURCHARGE
    return quantize(cost)


def calculate_tax(subtotal: Decimal) -> Decimal:
    if not settings_manager.tax_enabled():
        return ZERO
    return quantize(subtotal * settings_manager.tax_rate() / Decimal("100"))


def find_coupon(code: str) -> Coupon:
    coupon = COUPONS.get((code or "").strip().upper())
    if coupon is None:
        raise InvalidCoupon("Invalid coupon code")
    return coupon


def coupon_discount(coupon: Coupon, subtotal, shipping_amount: Optional[Decimal] = None) -> Decimal:
    """
    Discount granted by ``coupon`` for ``subtotal``.

    Shipping coupons are additionally capped at the actual shipping
    amount when it is known.
    """
    subtotal = to_decimal(subtotal)
    if subtotal < coupon.min_order_amount:
        raise InvalidCoupon(
            f"Minimum order amount of ${coupon.min_order_amount:.2f} required for this coupon"
        )
    if coupon.type == "percentage":
        discount = min(subtotal * coupon.value / Decimal("100"), coupon.max_discount)
    else:
        discount = min(coupon.value, coupon.max_discount)
        if shipping_amount is not None:
            discount = min(discount, shipping_amount)
    return quantize(discount)


def resolve_line(product_id, quantity: int, variant_id=None, *, lock: bool = False) -> QuoteLine:
    """
    Look up the product (and variant) for one requested line and check stock.

    With ``lock=True`` the rows are read with ``select_for_update`` and
    must be called inside a transaction.
    """
    products = Product.objects.select_related("category")
    variants = ProductVariant.objects.all()
    if lock:
        products = products.select_for_update(of=("self",))
        variants = variants.select_for_update()

    product = products.filter(pk=product_id, is_active=True).first()
    if product is None:
        raise ProductUnavailable(f"Product {product_id} not found or inactive")

    variant = None
    if variant_id:
        variant = variants.filter(pk=variant_id, product_id=product.pk, is_active=True).first()
        if variant is None:
            raise ProductUnavailable(f"Product variant {variant_id} not found")

    available = variant.quantity if variant else product.quantity
    if product.track_quantity and available < quantity:
        raise InsufficientStock(product.name, available, quantity)

    price = quantize(variant.price if variant else product.price)
    unit_weight = variant.shipping_weight if variant else product.shipping_weight
    return QuoteLine(
        product=product,
        variant=variant,
        quantity=quantity,
        price=price,
        total=quantize(price * quantity),
        weight=to_decimal(unit_weight),
    )


def build_quote(
    items: Iterable[dict[str, Any]],
    shipping_address: Optional[dict[str, Any]] = None,
    coupon_code: Optional[str] = None,
    *,
    lock: bool = False,
) -> Quote:
    """``items`` are dicts with ``product_id``, ``quantity`` and optional ``variant_id``."""
    lines = [
        resolve_line(item["product_id"], item["quantity"], item.get("variant_id"), lock=lock)
        for item in items
    ]
    subtotal = quantize(sum((line.total for line in lines), ZERO))
    total_weight = sum((line.weight * line.quantity for line in lines), Decimal("0"))
    country = (shipping_address or {}).get("country")

    shipping_amount = calculate_shipping(subtotal, total_weight, country)
    tax_amount = calculate_tax(subtotal)

    coupon = None
    discount_amount = ZERO
    if coupon_code:
        coupon = find_coupon(coupon_code)
        discount_amount = coupon_discount(coupon, subtotal, shipping_amount)

    total = max(subtotal + tax_amount + shipping_amount - discount_amount, ZERO)
    return Quote(
        lines=lines,
        subtotal=subtotal,
        tax_amount=tax_amount,
        shipping_amount=shipping_amount,
        discount_amount=discount_amount,
        total=quantize(total),
        coupon=coupon,
    )
