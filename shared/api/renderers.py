"""JSON renderer that wraps successful payloads in the API envelope."""

from __future__ import annotations

from rest_framework.renderers import JSONRenderer  # type: ignore


class EnvelopeJSONRenderer(JSONRenderer):
    """
    Wraps response data as ``{"success": true, "data": ...}``.

    Error responses are already shaped by ``envelope_exception_handler``
    and pass through untouched.
    """

    def render(self, data, accepted_media_type=None, renderer_context=None):  # type: ignore
        renderer_context = renderer_context or {}
        response = renderer_context.get("response")
        if response is not None and response.status_code == 204:
            return b""
        if not (isinstance(data, dict) and "success" in data):
            if response is not None and response.status_code >= 400:
                data = {"success": False, "error": data}
            else:
                data = {"success": True, "data": data}
        return super().render(data, accepted_media_type, renderer_context)
