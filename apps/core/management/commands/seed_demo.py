"""Populate the database with demo data for local development."""

from datetime import timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.catalog.models import Category, Product, ProductImage, ProductVariant
from apps.editorials.models import Editorial, GalleryItem
from apps.hotels.models import Hotel
from apps.site_settings.manager import settings_manager
from apps.users.models import Address

User = get_user_model()

CATEGORIES = [
    ("party-supplies", "Party Supplies", None),
    ("balloons", "Balloons", "party-supplies"),
    ("tableware", "Tableware", "party-supplies"),
    ("decorations", "Decorations", None),
]

PRODUCTS = [
    {
        "sku": "BAL-FOIL-STAR",
        "name": "Foil Star Balloon",
        "category": "balloons",
        "price": Decimal("4.50"),
        "quantity": 200,
        "weight": Decimal("0.05"),
        "is_featured": True,
        "images": ["https://images.example.com/products/foil-star.jpg"],
        "variants": [
            {"sku": "BAL-FOIL-STAR-GLD", "name": "Gold", "price": Decimal("4.50"), "quantity": 120, "attributes": {"color": "gold"}},
            {"sku": "BAL-FOIL-STAR-SLV", "name": "Silver", "price": Decimal("4.50"), "quantity": 80, "attributes": {"color": "silver"}},
        ],
    },
    {
        "sku": "TBL-PLATE-24",
        "name": "Compostable Plates (24 pack)",
        "category": "tableware",
        "price": Decimal("12.00"),
        "compare_price": Decimal("15.00"),
        "quantity": 60,
        "weight": Decimal("1.20"),
        "images": ["https://images.example.com/products/plates.jpg"],
    },
    {
        "sku": "DEC-GARLAND-10M",
        "name": "Paper Garland 10m",
        "category": "decorations",
        "price": Decimal("18.90"),
        "quantity": 35,
        "weight": Decimal("0.40"),
        "is_featured": True,
        "images": [
            "https://images.example.com/products/garland.jpg",
            "https://images.example.com/products/garland-detail.jpg",
        ],
    },
]

HOTELS = [
    {
        "slug": "harbour-view-lisbon",
        "name": "Harbour View",
        "location": "1 Cais do Sodre",
        "city": "Lisbon",
        "country": "Portugal",
        "price": Decimal("210.00"),
        "currency": "EUR",
        "featured": True,
        "popular": True,
        "special_offer": True,
        "offer_title": "Third night free",
        "vip_benefits": ["Late checkout", "Welcome drink"],
        "hotel_details": {"rooms": 48, "star_rating": 4, "amenities": ["pool", "spa"]},
    },
    {
        "slug": "cliff-house-cork",
        "name": "Cliff House",
        "location": "Ridge Road",
        "city": "Cork",
        "country": "Ireland",
        "price": Decimal("160.00"),
        "currency": "EUR",
        "popular": True,
        "hotel_details": {"rooms": 20, "star_rating": 5},
    },
]

EDITORIALS = [
    {
        "slug": "planning-a-garden-party",
        "title": "Planning a Garden Party",
        "excerpt": "Everything you need for an afternoon outdoors.",
        "content": "<p>Start with the guest list, then pick a colour palette.</p>",
        "author": "Store Team",
        "tags": ["parties", "outdoors"],
        "status": Editorial.Status.PUBLISHED,
    },
    {
        "slug": "city-breaks-for-winter",
        "title": "City Breaks for Winter",
        "content": "<p>Five cities that shine in the cold months.</p>",
        "tags": ["travel"],
        "status": Editorial.Status.DRAFT,
    },
]

GALLERY = [
    ("Garden wedding arch", "wedding", True),
    ("Office summer party", "corporate", False),
    ("Sixth birthday", "birthday", True),
]


class Command(BaseCommand):
    help = "Create demo users, catalog, hotels, editorials, gallery items and default settings"

    def add_arguments(self, parser):
        parser.add_argument("--admin-email", default="admin@example.com")
        parser.add_argument("--admin-password", default="Admin12345")

    @transaction.atomic
    def handle(self, *args, **options):
        admin = self._user(options["admin_email"], options["admin_password"], "Store", "Admin", role=User.Role.ADMIN)
        customer = self._user("customer@example.com", "Customer123", "Casey", "Customer")
        Address.objects.update_or_create(
            user=customer,
            type=Address.AddressType.SHIPPING,
            address1="500 Congress Ave",
            defaults={"first_name": "Casey", "last_name": "Customer", "city": "Austin", "state": "TX", "zip_code": "78701"},
        )

        categories = {}
        for slug, name, parent_slug in CATEGORIES:
            categories[slug], _ = Category.objects.update_or_create(
                slug=slug, defaults={"name": name, "parent": categories.get(parent_slug)}
            )

        for data in PRODUCTS:
            data = dict(data)
            images = data.pop("images", [])
            variants = data.pop("variants", [])
            data["category"] = categories[data["category"]]
            product, _ = Product.objects.update_or_create(sku=data.pop("sku"), defaults=data)
            for position, url in enumerate(images):
                ProductImage.objects.update_or_create(
                    product=product, url=url, defaults={"sort_order": position, "alt_text": product.name}
                )
            for variant in variants:
                variant = dict(variant)
                ProductVariant.objects.update_or_create(sku=variant.pop("sku"), defaults={"product": product, **variant})

        offer_until = timezone.now() + timedelta(days=60)
        for data in HOTELS:
            data = dict(data)
            if data.get("special_offer"):
                data["offer_valid_until"] = offer_until
            Hotel.objects.update_or_create(slug=data.pop("slug"), defaults=data)

        for data in EDITORIALS:
            data = dict(data)
            Editorial.objects.update_or_create(slug=data.pop("slug"), defaults=data)

        for position, (title, category, featured) in enumerate(GALLERY):
            GalleryItem.objects.update_or_create(
                title=title,
                defaults={
                    "category": category,
                    "featured": featured,
                    "display_order": position,
                    "image_url": f"https://images.example.com/gallery/{category}-{position}.jpg",
                },
            )

        created_settings = settings_manager.initialize_defaults()

        self.stdout.write(
            self.style.SUCCESS(
                f"Demo data ready: admin {admin.email}, {len(categories)} categories, {len(PRODUCTS)} products, "
                f"{len(HOTELS)} hotels, {len(EDITORIALS)} editorials, {len(GALLERY)} gallery items, "
                f"{created_settings} new settings"
            )
        )

    def _user(self, email, password, first_name, last_name, role=None):
        defaults = {"first_name": first_name, "last_name": last_name, "is_active": True}
        if role is not None:
            defaults["role"] = role
        user, created = User.objects.update_or_create(email=email, defaults=defaults)
        if created:
            user.set_password(password)
            user.save(update_fields=["password"])
            self.stdout.write(f"Created user {email}")
        return user
