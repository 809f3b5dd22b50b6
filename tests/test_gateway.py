"""Tests for API Gateway request and response helpers."""

from __future__ import annotations

import base64
import json
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from mailbuilder.api.gateway import (  # noqa: E402
    error_response,
    json_response,
    read_json_body,
)
from mailbuilder.api.schemas import RenderResponse  # noqa: E402
from mailbuilder.exceptions import TemplateNotFoundError, ValidationError  # noqa: E402


def _event(body, headers=None, method='POST') -> dict:
    return {
        'httpMethod': method,
        'headers': {'Content-Type': 'application/json'} if headers is None else headers,
        'body': body,
        'isBase64Encoded': False,
    }


class TestReadJsonBody:
    """Tests for read_json_body."""

    def test_returns_object(self) -> None:
        assert read_json_body(_event('{"components": []}')) == {'components': []}

    def test_accepts_charset_parameter(self) -> None:
        event = _event('{}', headers={'content-type': 'Application/JSON; charset=utf-8'})
        assert read_json_body(event) == {}

    def test_rejects_missing_content_type(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            read_json_body(_event('{}', headers={}))
        assert exc_info.value.field == 'Content-Type'

    def test_direct_invocation_skips_content_type(self) -> None:
        event = {'body': '{"components": []}'}
        assert read_json_body(event) == {'components': []}

    def test_decodes_base64(self) -> None:
        event = _event(base64.b64encode(b'{"a": 1}').decode('ascii'))
        event['isBase64Encoded'] = True
        assert read_json_body(event) == {'a': 1}

    @pytest.mark.parametrize(
        ('body', 'message'),
        [
            (None, 'Request body is required'),
            ('', 'Request body is required'),
            ('{oops', 'Request body must be valid JSON'),
            ('[1, 2]', 'Request body must be a JSON object'),
        ],
    )
    def test_rejects_bad_bodies(self, body, message) -> None:
        with pytest.raises(ValidationError) as exc_info:
            read_json_body(_event(body))
        assert exc_info.value.message == message


class TestResponses:
    """Tests for json_response and error_response."""

    def test_serializes_models(self) -> None:
        response = json_response(200, RenderResponse(html='<p>hi</p>'))
        assert response['statusCode'] == 200
        assert json.loads(response['body']) == {'html': '<p>hi</p>', 'sent': False}
        assert response['headers']['Cache-Control'].startswith('no-store')

    def test_headers_are_copied(self) -> None:
        response = json_response(200, {'ok': True})
        response['headers']['X-Extra'] = '1'
        assert 'X-Extra' not in json_response(200, {})['headers']

    def test_error_response_uses_exception(self) -> None:
        response = error_response(TemplateNotFoundError('footer'))
        assert response['statusCode'] == 404
        assert json.loads(response['body']) == {'error': 'Template not found: footer'}
