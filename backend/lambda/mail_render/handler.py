"""Lambda entrypoint for the mail render endpoint."""

from __future__ import annotations

from typing import Any
from typing import Mapping

from mailbuilder.api.render import lambda_handler as _handler
from mailbuilder.utils.logging import configure_logging

configure_logging()


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Delegate to the render handler."""
    return _handler(dict(event), context)
