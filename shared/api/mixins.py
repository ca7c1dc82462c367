"""Viewset mixins."""

from __future__ import annotations

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore


class MessageDestroyMixin:
    """Answer deletes with 200 and a message instead of an empty 204."""

    destroy_message = "Deleted successfully"

    def destroy(self, request, *args, **kwargs):  # type: ignore
        instance = self.get_object()
        self.perform_destroy(instance)
        return Response({"message": self.destroy_message}, status=status.HTTP_200_OK)
