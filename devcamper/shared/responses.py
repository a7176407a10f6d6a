"""
Uniform response envelope.

Every success body is ``{"success": true, "data": ...}`` with ``count``
for list-shaped results and ``pagination`` when neighbouring pages exist.
Every failure body is ``{"success": false, "error": "..."}``; failures are
only ever built by the centralized error handlers.
"""

from typing import Any, Optional


def success(
    data: Any,
    *,
    count: Optional[int] = None,
    pagination: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    """Build a success envelope."""
    body: dict[str, Any] = {"success": True}
    if count is not None:
        body["count"] = count
    if pagination:
        body["pagination"] = pagination
    body["data"] = data
    return body


def failure(error: str) -> dict[str, Any]:
    """Build a failure envelope."""
    return {"success": False, "error": error}
