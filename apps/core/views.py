"""Service-level endpoints."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.utils import timezone  # type: ignore
from rest_framework.permissions import AllowAny  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore


class HealthView(APIView):
    authentication_classes: list = []
    permission_classes = [AllowAny]

    def get(self, request):  # type: ignore
        return Response(
            {
                "message": "Storefront API is running",
                "timestamp": timezone.now().isoformat(),
                "environment": settings.ENVIRONMENT,
            }
        )
