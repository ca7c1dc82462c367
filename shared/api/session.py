"""Guest identity helpers."""

from __future__ import annotations

SESSION_HEADER = "HTTP_X_SESSION_ID"
MAX_SESSION_ID_LENGTH = 255


def get_session_id(request) -> str | None:
    """Return the guest session id from the ``X-Session-Id`` header, if any."""
    value = request.META.get(SESSION_HEADER, "")
    value = value.strip()[:MAX_SESSION_ID_LENGTH]
    return value or None
