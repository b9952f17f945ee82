"""Query-string and error-body helpers shared by the client and resources."""

from __future__ import annotations

import json
from typing import Any, Mapping
from urllib.parse import urlencode

import httpx

NO_ERROR_MESSAGE = "[no error message]"


def encode_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def to_query_params(params: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Flatten ``params`` into query pairs.

    ``None`` values are dropped and container values become one JSON-encoded
    parameter, which is how the Engine API expects ``filters``.
    """
    if not params:
        return []
    return [(key, encode_query_value(value)) for key, value in params.items() if value is not None]


def build_path(path: str, params: Mapping[str, Any] | None = None) -> str:
    pairs = to_query_params(params)
    if not pairs:
        return path
    return f"{path}?{urlencode(pairs)}"


def extract_error_message(response: httpx.Response, path: str) -> str:
    """Best-effort message for an error response; never raises."""
    content_type = response.headers.get("content-type", "")
    try:
        if content_type.startswith("application/json"):
            parsed = response.json()
            message = parsed.get("message") if isinstance(parsed, dict) else None
            if message is None:
                return f"error from {path}"
            return message if isinstance(message, str) else str(message)
        return response.text or NO_ERROR_MESSAGE
    except Exception:
        return f"error from {path}"


__all__ = ["NO_ERROR_MESSAGE", "build_path", "encode_query_value", "extract_error_message", "to_query_params"]
