"""Render endpoint: build a mail from a JSON description.

The request body is a ``RenderRequest``. The mail is rendered against
the configured template source and returned as HTML; when recipients
are given it is also delivered via SES.
"""

from __future__ import annotations

import time
from typing import Any
from typing import Mapping

from mailbuilder.api.gateway import error_response, json_response, read_json_body
from mailbuilder.api.schemas import RenderRequest, RenderResponse
from mailbuilder.components.factory import build_document, parse_document
from mailbuilder.config import get_template_source
from mailbuilder.exceptions import MailBuilderError, ValidationError
from mailbuilder.services.email import send_document
from mailbuilder.utils.logging import (
    clear_request_context,
    get_logger,
    log_response,
    set_request_context,
)

logger = get_logger(__name__)


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Handle a render request.

    Args:
        event: API Gateway event.
        context: Lambda context.

    Returns:
        API Gateway response with the rendered HTML or an error body.
    """
    request_id = (event.get("requestContext") or {}).get("requestId", "")
    set_request_context(req_id=request_id)
    start_time = time.perf_counter()

    response = _safe_handler(event)

    duration_ms = (time.perf_counter() - start_time) * 1000
    log_response(logger, response["statusCode"], duration_ms)
    clear_request_context()
    return response


def _safe_handler(event: Mapping[str, Any]) -> dict[str, Any]:
    """Execute the render with common error handling."""
    try:
        request = parse_document(read_json_body(event), RenderRequest)
        return _handle_render(request)
    except ValidationError as exc:
        logger.warning(f"Validation error: {exc.message}")
        return error_response(exc)
    except MailBuilderError as exc:
        logger.warning(f"Render failed: {exc.message}")
        return error_response(exc)
    except Exception as exc:  # pragma: no cover
        logger.exception("Unexpected error in render handler")
        return error_response(
            MailBuilderError("Internal server error", detail=str(exc))
        )


def _handle_render(request: RenderRequest) -> dict[str, Any]:
    document = build_document(request)
    source = get_template_source()

    logger.info(
        f"Rendering mail with {len(request.components)} top-level components"
    )

    if not request.to:
        return json_response(200, RenderResponse(html=document.render(source)))

    if not request.subject:
        raise ValidationError("subject is required when sending", field="subject")

    content = send_document(
        document,
        to_addresses=request.to,
        subject=request.subject,
        body_text=request.body_text,
        template_source=source,
    )
    return json_response(200, RenderResponse(html=content.body_html, sent=True))

