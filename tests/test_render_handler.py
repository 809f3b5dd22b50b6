"""Tests for the render Lambda handler."""

from __future__ import annotations

import base64
import json
import logging
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from mailbuilder.api.render import lambda_handler  # noqa: E402
from mailbuilder.templates.source import DictTemplateSource  # noqa: E402
from mailbuilder.utils.logging import record_extra  # noqa: E402

SIMPLE_MAIL = {
    'components': [
        {'type': 'row', 'children': [
            {'type': 'column', 'width': 12, 'children': [
                {'type': 'text', 'text': 'Hello from the handler'},
            ]},
        ]},
    ],
}


def _body(response: dict) -> dict:
    return json.loads(response['body'])


class TestRenderHandler:
    """Tests for rendering without delivery."""

    def test_renders_html(self, clean_env, render_event) -> None:
        response = lambda_handler(render_event(SIMPLE_MAIL), None)

        assert response['statusCode'] == 200
        body = _body(response)
        assert body['sent'] is False
        assert body['html'].startswith('<!DOCTYPE html>')
        assert 'Hello from the handler' in body['html']

    def test_includes_security_headers(self, clean_env, render_event) -> None:
        response = lambda_handler(render_event(SIMPLE_MAIL), None)
        assert response['headers']['Content-Type'] == 'application/json'
        assert response['headers']['X-Content-Type-Options'] == 'nosniff'

    def test_logs_status_and_duration(self, clean_env, render_event, caplog) -> None:
        with caplog.at_level(logging.INFO, logger='mailbuilder.api.render'):
            lambda_handler(render_event(SIMPLE_MAIL), None)

        (record,) = [r for r in caplog.records if r.getMessage() == 'Render response']
        extra = record_extra(record)
        assert extra['status_code'] == 200
        assert extra['duration_ms'] >= 0

    def test_decodes_base64_body(self, clean_env, api_gateway_event) -> None:
        event = dict(api_gateway_event)
        event['body'] = base64.b64encode(json.dumps(SIMPLE_MAIL).encode('utf-8')).decode('ascii')
        event['isBase64Encoded'] = True

        response = lambda_handler(event, None)
        assert response['statusCode'] == 200

    def test_uses_directory_overrides(self, clean_env, monkeypatch, tmp_path, render_event) -> None:
        (tmp_path / 'text_left.html').write_text('<p class="custom">{content}</p>', encoding='utf-8')
        monkeypatch.setenv('MAIL_TEMPLATES_DIR', str(tmp_path))

        response = lambda_handler(render_event(SIMPLE_MAIL), None)
        assert '<p class="custom">Hello from the handler</p>' in _body(response)['html']


class TestRenderHandlerErrors:
    """Tests for error responses."""

    def test_missing_body(self, clean_env, api_gateway_event) -> None:
        response = lambda_handler(api_gateway_event, None)
        assert response['statusCode'] == 400
        assert _body(response)['error'] == 'Request body is required'

    def test_invalid_json(self, clean_env, api_gateway_event) -> None:
        event = dict(api_gateway_event)
        event['body'] = '{not json'
        response = lambda_handler(event, None)
        assert response['statusCode'] == 400

    def test_non_object_body(self, clean_env, render_event) -> None:
        response = lambda_handler(render_event(['not', 'an', 'object']), None)
        assert response['statusCode'] == 400

    def test_wrong_content_type(self, clean_env, render_event) -> None:
        event = render_event(SIMPLE_MAIL)
        event['headers'] = {'content-type': 'text/plain'}
        response = lambda_handler(event, None)
        assert response['statusCode'] == 400
        assert _body(response)['detail'] == 'Field: Content-Type'

    def test_unknown_component_type(self, clean_env, render_event) -> None:
        response = lambda_handler(render_event({'components': [{'type': 'video'}]}), None)
        assert response['statusCode'] == 400

    def test_missing_template(self, clean_env, mocker, render_event) -> None:
        mocker.patch(
            'mailbuilder.api.render.get_template_source',
            return_value=DictTemplateSource({}),
        )
        response = lambda_handler(render_event(SIMPLE_MAIL), None)

        assert response['statusCode'] == 404
        assert _body(response)['error'] == 'Template not found: structure'

    def test_missing_nested_template(self, clean_env, mocker, render_event) -> None:
        mocker.patch(
            'mailbuilder.api.render.get_template_source',
            return_value=DictTemplateSource({
                'structure': '<html>{content}</html>',
                'row': '<tr>{content}</tr>',
                'col': '<td>{content}</td>',
            }),
        )
        response = lambda_handler(render_event(SIMPLE_MAIL), None)

        assert response['statusCode'] == 404
        assert _body(response)['error'] == 'Template not found: text_left'


class TestRenderHandlerDelivery:
    """Tests for rendering with SES delivery."""

    def test_sends_rendered_mail(self, clean_env, monkeypatch, mock_ses_client, render_event) -> None:
        monkeypatch.setenv('SES_SENDER_EMAIL', 'noreply@acme.test')
        request = dict(SIMPLE_MAIL, subject='Hello', to=['jane@example.com'])

        response = lambda_handler(render_event(request), None)

        assert response['statusCode'] == 200
        body = _body(response)
        assert body['sent'] is True

        kwargs = mock_ses_client.send_email.call_args.kwargs
        assert kwargs['Source'] == 'noreply@acme.test'
        assert kwargs['Destination'] == {'ToAddresses': ['jane@example.com']}
        assert kwargs['Message']['Subject']['Data'] == 'Hello'
        assert kwargs['Message']['Body']['Text']['Data'] == 'Hello'
        assert kwargs['Message']['Body']['Html']['Data'] == body['html']

    def test_sending_requires_subject(self, clean_env, monkeypatch, mock_ses_client, render_event) -> None:
        monkeypatch.setenv('SES_SENDER_EMAIL', 'noreply@acme.test')
        request = dict(SIMPLE_MAIL, to=['jane@example.com'])

        response = lambda_handler(render_event(request), None)

        assert response['statusCode'] == 400
        mock_ses_client.send_email.assert_not_called()

    def test_rejects_unknown_request_field(
        self, clean_env, monkeypatch, mock_ses_client, render_event
    ) -> None:
        monkeypatch.setenv('SES_SENDER_EMAIL', 'noreply@acme.test')
        request = dict(SIMPLE_MAIL, subject='Hello', recipients=['jane@example.com'])

        response = lambda_handler(render_event(request), None)

        assert response['statusCode'] == 400
        assert _body(response)['detail'] == 'Field: recipients'
        mock_ses_client.send_email.assert_not_called()

    def test_sending_requires_sender(self, clean_env, mock_ses_client, render_event) -> None:
        request = dict(SIMPLE_MAIL, subject='Hello', to=['jane@example.com'])

        response = lambda_handler(render_event(request), None)

        assert response['statusCode'] == 500
        assert _body(response)['error'] == 'Missing required configuration: SES_SENDER_EMAIL'
        mock_ses_client.send_email.assert_not_called()
