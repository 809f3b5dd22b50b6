"""SES email sending helpers."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from mailbuilder.components.base import MailComponent
from mailbuilder.config import get_sender_email
from mailbuilder.services.aws_clients import get_ses_client
from mailbuilder.templates.source import TemplateSource
from mailbuilder.templates.types import EmailContent
from mailbuilder.utils.logging import get_logger, mask_emails

logger = get_logger(__name__)


def send_email(
    *,
    source: str,
    to_addresses: Iterable[str],
    subject: str,
    body_text: str,
    body_html: Optional[str] = None,
) -> str:
    """Send a plain or HTML email via SES and return the message id."""
    message: dict[str, Any] = {
        "Subject": {"Data": subject, "Charset": "UTF-8"},
        "Body": {"Text": {"Data": body_text, "Charset": "UTF-8"}},
    }
    if body_html:
        message["Body"]["Html"] = {"Data": body_html, "Charset": "UTF-8"}

    response = get_ses_client().send_email(
        Source=source,
        Destination={"ToAddresses": list(to_addresses)},
        Message=message,
    )
    return response.get("MessageId", "")


def build_email_content(
    document: MailComponent,
    subject: str,
    body_text: Optional[str] = None,
    source: Optional[TemplateSource] = None,
) -> EmailContent:
    """Render a document into subject, text and HTML bodies.

    The plain-text body falls back to the subject; the HTML is not
    converted to text.
    """
    return EmailContent(
        subject=subject,
        body_text=body_text or subject,
        body_html=document.render(source),
    )


def send_document(
    document: MailComponent,
    *,
    to_addresses: Iterable[str],
    subject: str,
    body_text: Optional[str] = None,
    sender: Optional[str] = None,
    template_source: Optional[TemplateSource] = None,
) -> EmailContent:
    """Render a document and deliver it via SES.

    Args:
        document: Root of the mail tree, usually a ``MailBuilder``.
        to_addresses: Recipient addresses.
        subject: Mail subject.
        body_text: Optional plain-text alternative body.
        sender: Sender address; defaults to SES_SENDER_EMAIL.
        template_source: Source to render against; defaults to built-ins.

    Returns:
        The rendered content that was sent.

    Raises:
        ConfigurationError: If no sender is given and none is configured.
        TemplateNotFoundError: If any component's template is missing.
    """
    recipients = list(to_addresses)
    source_address = sender or get_sender_email()
    content = build_email_content(
        document,
        subject,
        body_text=body_text,
        source=template_source,
    )

    message_id = send_email(
        source=source_address,
        to_addresses=recipients,
        subject=content.subject,
        body_text=content.body_text,
        body_html=content.body_html,
    )
    logger.info(
        f"Sent mail {message_id} to {', '.join(mask_emails(recipients))}"
    )
    return content
