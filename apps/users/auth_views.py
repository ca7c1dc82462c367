"""Views for authentication flows (register, login, profile, password, logout)."""

from __future__ import annotations

import logging

from django.contrib.auth.models import update_last_login  # type: ignore
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle  # type: ignore
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken  # type: ignore

from apps.cart.services import merge_session_cart
from shared.api.session import get_session_id

from .auth_serializers import LoginSerializer, PasswordChangeSerializer, RegisterSerializer
from .serializers import ProfileSerializer, UserSerializer

logger = logging.getLogger(__name__)


def _tokens_for_user(user) -> dict[str, str]:
    refresh = RefreshToken.for_user(user)
    return {"refresh": str(refresh), "access": str(refresh.access_token)}


def _adopt_guest_cart(request, user) -> int:
    """Re-key the presenting guest session's cart rows to ``user``."""
    session_id = get_session_id(request)
    if not session_id:
        return 0
    return merge_session_cart(user, session_id)


class AuthThrottleMixin:
    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "auth"


class RegisterView(AuthThrottleMixin, APIView):
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        merged = _adopt_guest_cart(request, user)
        data = {
            "user": UserSerializer(user).data,
            "tokens": _tokens_for_user(user),
            "merged_cart_items": merged,
        }
        return Response(data, status=status.HTTP_201_CREATED)


class LoginView(AuthThrottleMixin, APIView):
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]
        update_last_login(None, user)
        logger.info("User %s logged in", user.pk)
        merged = _adopt_guest_cart(request, user)
        data = {
            "user": UserSerializer(user).data,
            "tokens": _tokens_for_user(user),
            "merged_cart_items": merged,
        }
        return Response(data, status=status.HTTP_200_OK)


class MeView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):  # type: ignore
        return Response({"user": UserSerializer(request.user).data})


class ProfileView(APIView):
    permission_classes = [IsAuthenticated]

    def put(self, request):  # type: ignore
        serializer = ProfileSerializer(request.user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        return Response({"user": UserSerializer(user).data})


class PasswordChangeView(AuthThrottleMixin, APIView):
    permission_classes = [IsAuthenticated]

    def put(self, request):  # type: ignore
        serializer = PasswordChangeSerializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response({"message": "Password updated successfully"})


class LogoutView(APIView):
    """Tokens are stateless; the client discards them."""

    permission_classes = [IsAuthenticated]

    def post(self, request):  # type: ignore
        return Response({"message": "Logged out successfully"})
