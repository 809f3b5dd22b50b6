"""Pytest configuration and fixtures for mail builder tests.

This module provides shared fixtures for testing the mail builder,
including in-memory template sources, API Gateway events and AWS mocks.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any
from typing import Generator
from uuid import uuid4

import pytest

# Add backend source to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))


# --- Template Fixtures ---


@pytest.fixture
def simple_templates() -> dict[str, str]:
    """Minimal fragments for exercising the core render algorithm."""
    return {
        'span': '<span>{content}</span>',
        'div': '<div>{content}</div>',
        'p': '<p>{content}</p>',
        'structure': '<html>{content}</html>',
    }


@pytest.fixture
def template_source(simple_templates):
    """In-memory template source over the minimal fragments."""
    from mailbuilder.templates.source import DictTemplateSource

    return DictTemplateSource(simple_templates)


@pytest.fixture
def builtin_templates():
    """Source over the bundled HTML fragments."""
    from mailbuilder.templates.source import builtin_source

    return builtin_source()


# --- Environment Fixtures ---


@pytest.fixture
def clean_env(monkeypatch) -> None:
    """Remove configuration variables that affect template resolution."""
    for name in (
        'MAIL_TEMPLATES_DIR',
        'MAIL_TEMPLATES_BUCKET',
        'MAIL_TEMPLATES_PREFIX',
        'SES_SENDER_EMAIL',
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_client_cache() -> Generator[None, None, None]:
    """Ensure cached boto3 clients never leak between tests."""
    from mailbuilder.services.aws_clients import clear_client_cache

    clear_client_cache()
    yield
    clear_client_cache()


# --- API Event Fixtures ---


@pytest.fixture
def api_gateway_event() -> dict:
    """Base API Gateway event structure for a render request."""
    return {
        'httpMethod': 'POST',
        'path': '/v1/mails/render',
        'queryStringParameters': {},
        'headers': {'Content-Type': 'application/json'},
        'requestContext': {
            'requestId': str(uuid4()),
        },
        'body': None,
        'isBase64Encoded': False,
    }


@pytest.fixture
def render_event(api_gateway_event):
    """Factory building a render event with a JSON body."""

    def _make(body: Any) -> dict:
        event = dict(api_gateway_event)
        event['body'] = json.dumps(body)
        return event

    return _make


# --- Mock Fixtures ---


@pytest.fixture
def mock_ses_client(mocker):
    """Mock SES client used by the email service."""
    client = mocker.MagicMock()
    client.send_email.return_value = {'MessageId': 'message-123'}
    mocker.patch('mailbuilder.services.email.get_ses_client', return_value=client)
    return client


@pytest.fixture
def mock_s3_client(mocker):
    """Mock S3 client used by the S3 template source."""
    client = mocker.MagicMock()
    mocker.patch('mailbuilder.templates.source.get_s3_client', return_value=client)
    return client
