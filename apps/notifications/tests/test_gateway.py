from __future__ import annotations

import io
from unittest import mock

import pytest
import requests

from apps.notifications.backends import locmem
from apps.notifications.backends.console import ConsoleSMSBackend
from apps.notifications.backends.http import HttpSMSBackend
from apps.notifications.backends.locmem import LocMemSMSBackend, SentMessage
from apps.notifications.exceptions import DeliveryFailed
from apps.notifications.gateway import NotificationGateway, get_sms_backend
from apps.notifications.utils import mask_phone


def test_default_backend_comes_from_settings():
    assert isinstance(NotificationGateway().backend, LocMemSMSBackend)
    assert isinstance(
        get_sms_backend("apps.notifications.backends.console.ConsoleSMSBackend"),
        ConsoleSMSBackend,
    )


def test_send_delivers_through_backend(sms_outbox):
    NotificationGateway().send("+998901234567", "hello")

    assert sms_outbox == [SentMessage(phone="+998901234567", text="hello")]


def test_delivery_failure_propagates(sms_outbox):
    locmem.fail_next = True

    with pytest.raises(DeliveryFailed):
        NotificationGateway().send("+998901234567", "hello")

    assert sms_outbox == []
    # One failure only; the next message goes through.
    NotificationGateway().send("+998901234567", "again")
    assert len(sms_outbox) == 1


def test_unexpected_backend_error_becomes_delivery_failed():
    backend = mock.Mock()
    backend.send_message.side_effect = RuntimeError("boom")

    with pytest.raises(DeliveryFailed) as exc_info:
        NotificationGateway(backend=backend).send("+998901234567", "hello")

    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_mask_phone():
    assert mask_phone("+998901234567") == "*********4567"
    assert mask_phone("4567") == "****"
    assert mask_phone("") == ""


def test_logs_never_carry_the_full_phone(sms_outbox):
    with mock.patch("apps.notifications.gateway.logger") as logger:
        NotificationGateway().send("+998901234567", "hello")
        locmem.fail_next = True
        with pytest.raises(DeliveryFailed):
            NotificationGateway().send("+998901234567", "hello")

    messages = [c.args[0] for c in logger.info.call_args_list + logger.warning.call_args_list]
    assert len(messages) == 2
    for message in messages:
        assert "+998901234567" not in message
        assert "*********4567" in message


def test_console_backend_writes_message():
    stream = io.StringIO()

    NotificationGateway(backend=ConsoleSMSBackend(stream=stream)).send("+998901234567", "hello")

    assert stream.getvalue() == "SMS to +998901234567: hello\n"


class TestHttpSMSBackend:
    def make_backend(self, session, **kwargs):
        options = {
            "url": "https://sms.example.com/send",
            "token": "secret",
            "sender": "VenueBook",
            "timeout": 3,
        }
        options.update(kwargs)
        return HttpSMSBackend(session=session, **options)

    def test_posts_json_with_bearer_token(self):
        session = mock.Mock()

        self.make_backend(session).send_message("+998901234567", "hello")

        session.post.assert_called_once_with(
            "https://sms.example.com/send",
            headers={"Content-Type": "application/json", "Authorization": "Bearer secret"},
            json={"to": "+998901234567", "from": "VenueBook", "text": "hello"},
            timeout=3,
        )
        session.post.return_value.raise_for_status.assert_called_once_with()

    def test_no_token_no_authorization_header(self):
        session = mock.Mock()

        self.make_backend(session, token="").send_message("+998901234567", "hello")

        headers = session.post.call_args.kwargs["headers"]
        assert "Authorization" not in headers

    def test_http_error_is_delivery_failure(self):
        session = mock.Mock()
        session.post.return_value.raise_for_status.side_effect = requests.HTTPError("503")

        with pytest.raises(DeliveryFailed):
            self.make_backend(session).send_message("+998901234567", "hello")

    def test_connection_error_is_delivery_failure(self):
        session = mock.Mock()
        session.post.side_effect = requests.ConnectionError("refused")

        with mock.patch("apps.notifications.backends.http.logger") as logger:
            with pytest.raises(DeliveryFailed):
                self.make_backend(session).send_message("+998901234567", "hello")

        assert "+998901234567" not in logger.error.call_args.args[0]

    def test_missing_url_is_delivery_failure(self, settings):
        settings.SMS_GATEWAY_URL = ""
        session = mock.Mock()

        with pytest.raises(DeliveryFailed):
            self.make_backend(session, url=None).send_message("+998901234567", "hello")

        session.post.assert_not_called()
