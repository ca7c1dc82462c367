"""Serializers for user and address endpoints."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

from .models import PHONE_VALIDATOR, Address

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Public representation of an account."""

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "first_name",
            "last_name",
            "phone",
            "role",
            "is_active",
            "email_verified",
            "last_login",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ProfileSerializer(serializers.ModelSerializer):
    """Fields a user may change on their own profile."""

    phone = serializers.CharField(required=False, allow_blank=True, validators=[PHONE_VALIDATOR])

    class Meta:
        model = User
        fields = ["first_name", "last_name", "phone"]


class AdminUserSerializer(serializers.ModelSerializer):
    """Administrative view of an account: role and activation are writable."""

    order_count = serializers.IntegerField(read_only=True, required=False)

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "first_name",
            "last_name",
            "phone",
            "role",
            "is_active",
            "email_verified",
            "order_count",
            "last_login",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "email", "order_count", "last_login", "created_at", "updated_at"]


class AddressSerializer(serializers.ModelSerializer):
    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = Address
        fields = [
            "id",
            "type",
            "first_name",
            "last_name",
            "full_name",
            "company",
            "address1",
            "address2",
            "city",
            "state",
            "zip_code",
            "country",
            "phone",
            "is_default",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "full_name", "created_at", "updated_at"]

    def validate_country(self, value: str) -> str:
        return value.upper()
