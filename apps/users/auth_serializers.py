"""Serializers for authentication flows (register, login, password change)."""

from __future__ import annotations

from typing import Any

from django.contrib.auth import get_user_model  # type: ignore
from django.db import transaction  # type: ignore
from rest_framework import exceptions, serializers  # type: ignore

from .models import PHONE_VALIDATOR


User = get_user_model()


class RegisterSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6, write_only=True)
    first_name = serializers.CharField(max_length=150)
    last_name = serializers.CharField(max_length=150)
    phone = serializers.CharField(required=False, allow_blank=True, validators=[PHONE_VALIDATOR])

    def validate_email(self, value: str) -> str:
        value = value.lower()
        if User.objects.filter(email__iexact=value, is_active=True).exists():
            raise serializers.ValidationError("User already exists with this email.")
        return value

    @transaction.atomic
    def create(self, validated_data: dict[str, Any]):  # type: ignore
        password = validated_data.pop("password")
        dormant = User.objects.select_for_update().filter(email__iexact=validated_data["email"]).first()
        if dormant is not None:
            # a deactivated account with the same email comes back to life
            for field, value in validated_data.items():
                setattr(dormant, field, value)
            dormant.is_active = True
            dormant.set_password(password)
            dormant.save()
            return dormant
        return User.objects.create_user(password=password, **validated_data)


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        user = User.objects.filter(email__iexact=attrs["email"]).first()
        if user is None or not user.check_password(attrs["password"]):
            raise exceptions.AuthenticationFailed("Invalid credentials")
        if not user.is_active:
            raise exceptions.AuthenticationFailed("Account is deactivated")
        attrs["user"] = user
        return attrs


class PasswordChangeSerializer(serializers.Serializer):
    current_password = serializers.CharField(write_only=True)
    new_password = serializers.CharField(min_length=6, write_only=True)

    def validate_current_password(self, value: str) -> str:
        user = self.context["request"].user
        if not user.check_password(value):
            raise serializers.ValidationError("Current password is incorrect.")
        return value

    def save(self, **kwargs):  # type: ignore
        user = self.context["request"].user
        user.set_password(self.validated_data["new_password"])
        user.save(update_fields=["password", "updated_at"])
        return user
