"""Utility modules for the mail builder."""

from mailbuilder.utils.logging import (
    clear_request_context,
    configure_logging,
    get_logger,
    log_response,
    mask_email,
    mask_emails,
    set_request_context,
)

__all__ = [
    "clear_request_context",
    "configure_logging",
    "get_logger",
    "log_response",
    "mask_email",
    "mask_emails",
    "set_request_context",
]
