"""API Gateway request and response helpers for the render endpoint."""

from __future__ import annotations

import base64
import json
from typing import Any
from typing import Mapping
from typing import Union

from pydantic import BaseModel

from mailbuilder.exceptions import MailBuilderError, ValidationError

# Rendered mails must never be cached by intermediaries.
RESPONSE_HEADERS = {
    "Content-Type": "application/json",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Cache-Control": "no-store, no-cache, must-revalidate",
    "Pragma": "no-cache",
}


def read_json_body(event: Mapping[str, Any]) -> dict[str, Any]:
    """Return the JSON object carried by a render request.

    Raises:
        ValidationError: If a POST is not declared as application/json,
            or the body is missing, not JSON, or not a JSON object.
    """
    if event.get("httpMethod") == "POST":
        _require_json_content_type(event.get("headers") or {})

    raw = event.get("body") or ""
    if event.get("isBase64Encoded"):
        raw = base64.b64decode(raw).decode("utf-8")
    if not raw:
        raise ValidationError("Request body is required")

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValidationError("Request body must be valid JSON") from exc

    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def _require_json_content_type(headers: Mapping[str, Any]) -> None:
    content_type = next(
        (str(value) for key, value in headers.items() if key.lower() == "content-type"),
        "",
    )
    # Parameters such as "; charset=utf-8" are allowed.
    if not content_type.strip().lower().startswith("application/json"):
        raise ValidationError(
            "Content-Type must be application/json",
            field="Content-Type",
        )


def json_response(
    status_code: int,
    body: Union[BaseModel, Mapping[str, Any]],
) -> dict[str, Any]:
    payload = body.model_dump() if isinstance(body, BaseModel) else dict(body)
    return {
        "statusCode": status_code,
        "headers": dict(RESPONSE_HEADERS),
        "body": json.dumps(payload, default=str),
    }


def error_response(error: MailBuilderError) -> dict[str, Any]:
    """Build the response for a failed render."""
    return json_response(error.status_code, error.to_dict())
