"""Response error extraction for load test observability.

Parses notifier API error responses into human-readable messages.
Error bodies have the shape ``{"error": {"field": "msg"}, "code": "..."}``;
request-shape problems carry ``"code": "malformed_request"``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from an API error response.

    Returns a compact string suitable for Locust failure messages and log lines.
    """
    try:
        body = response.json()
    except ValueError:
        # Not JSON: return raw text, truncated
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if isinstance(body, dict) and "error" in body:
        error = body["error"]
        if isinstance(error, dict):
            detail = " | ".join(f"{k}: {v}" for k, v in error.items())
        else:
            detail = str(error)
        code = body.get("code")
        return f"[{code}] {detail}" if code else detail

    return str(body)[:300]


def failed_channels(response: Response) -> list[str]:
    """Names of channels whose outcome in a 202 dispatch response is not Sent."""
    try:
        outcomes = response.json()
    except ValueError:
        return []
    if not isinstance(outcomes, list):
        return []
    return [item.get("channel", "?") for item in outcomes if item.get("status") != "Sent"]
