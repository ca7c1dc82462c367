"""Default store settings created by ``SettingsManager.initialize_defaults``."""

from __future__ import annotations

DEFAULT_SETTINGS: dict[str, dict] = {
    # general
    "store_name": {"value": "My Ecommerce Store", "category": "general", "description": "Store name", "is_public": True},
    "store_email": {"value": "admin@myecommercestore.com", "category": "general", "description": "Store email", "is_public": True},
    "store_phone": {"value": "+1 (555) 123-4567", "category": "general", "description": "Store phone", "is_public": True},
    "store_address": {
        "value": "123 Commerce St, Business City, BC 12345",
        "category": "general",
        "description": "Store address",
        "is_public": True,
    },
    "timezone": {"value": "America/New_York", "category": "general", "description": "Store timezone", "is_public": True},
    "currency": {"value": "USD", "category": "general", "description": "Store currency", "is_public": True},
    "language": {"value": "en", "category": "general", "description": "Store language", "is_public": True},
    # payment
    "stripe_enabled": {"value": True, "category": "payment", "description": "Enable card payments", "is_public": True},
    "paypal_enabled": {"value": False, "category": "payment", "description": "Enable PayPal payments", "is_public": True},
    "cash_on_delivery": {"value": True, "category": "payment", "description": "Enable cash on delivery", "is_public": True},
    # email
    "from_email": {"value": "noreply@myecommercestore.com", "category": "email", "description": "From email address", "is_public": False},
    "from_name": {"value": "My Ecommerce Store", "category": "email", "description": "From name", "is_public": False},
    # shipping
    "free_shipping_threshold": {"value": 50, "category": "shipping", "description": "Free shipping threshold", "is_public": True},
    "flat_rate": {"value": 5.99, "category": "shipping", "description": "Flat rate shipping", "is_public": True},
    "weight_based": {"value": False, "category": "shipping", "description": "Enable weight-based shipping", "is_public": False},
    "shipping_zones": {
        "value": [
            {"name": "Domestic", "countries": ["US"], "rate": 5.99},
            {"name": "International", "countries": ["CA", "MX"], "rate": 15.99},
        ],
        "category": "shipping",
        "description": "Shipping zones",
        "is_public": False,
    },
    # tax
    "tax_enabled": {"value": True, "category": "tax", "description": "Enable tax calculation", "is_public": True},
    "tax_rate": {"value": 8.5, "category": "tax", "description": "Tax rate percentage", "is_public": True},
    "include_in_price": {"value": True, "category": "tax", "description": "Include tax in product prices", "is_public": False},
    "exempt_categories": {"value": [], "category": "tax", "description": "Tax exempt categories", "is_public": False},
    # security
    "require_email_verification": {"value": True, "category": "security", "description": "Require email verification", "is_public": False},
    "max_login_attempts": {"value": 5, "category": "security", "description": "Maximum login attempts", "is_public": False},
    "session_timeout": {"value": 24, "category": "security", "description": "Session timeout in hours", "is_public": False},
    # media
    "max_file_size": {"value": 5, "category": "media", "description": "Maximum file size in MB", "is_public": True},
    "allowed_types": {
        "value": ["jpg", "jpeg", "png", "gif", "webp"],
        "category": "media",
        "description": "Allowed file types",
        "is_public": True,
    },
    "image_quality": {"value": 85, "category": "media", "description": "Image quality percentage", "is_public": False},
}


def default_value(key: str, fallback=None):
    entry = DEFAULT_SETTINGS.get(key)
    return entry["value"] if entry else fallback
