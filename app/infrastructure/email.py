"""SendGrid-backed delivery sink for event notification emails."""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from app.config import get_settings
from app.domain.exceptions import DeliveryError

logger = logging.getLogger(__name__)


class DeliverySink(Protocol):
    """Channel able to deliver one message to one address."""

    def send(self, address: str, subject: str, body: str) -> None:
        """Deliver the message or raise :class:`DeliveryError`."""


def _extract_sendgrid_error_details(body: Any) -> str | None:
    """Return a human readable description for a SendGrid error payload."""

    if body in (None, ""):
        return None

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError:
            return body
    else:
        parsed = body

    if isinstance(parsed, dict):
        errors = parsed.get("errors")
        if isinstance(errors, list):
            messages = [
                str(item["message"])
                for item in errors
                if isinstance(item, dict) and item.get("message")
            ]
            if messages:
                return "; ".join(messages)
        try:
            return json.dumps(parsed)
        except (TypeError, ValueError):
            return None

    if isinstance(parsed, list):
        return "; ".join(str(item) for item in parsed)

    return None


def _describe_failure(status_code: Any, body: Any) -> str:
    details = _extract_sendgrid_error_details(body)
    if status_code and details:
        return f"SendGrid API request failed with status {status_code}: {details}"
    if status_code:
        return f"SendGrid API request failed with status {status_code}"
    if details:
        return f"SendGrid API request failed: {details}"
    return "SendGrid API request failed"


class SendGridEmailSink:
    """Deliver HTML emails through the SendGrid REST API.

    When SendGrid is not configured the sink logs and drops the message
    instead of failing, so local setups still produce in-app notifications.
    """

    def __init__(
        self,
        api_key: str | None = None,
        sender: str | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        settings = get_settings()
        self._api_key = api_key if api_key is not None else settings.sendgrid_api_key
        self._sender = sender if sender is not None else settings.sendgrid_sender
        self._timeout = timeout if timeout is not None else settings.delivery_timeout_seconds

    @property
    def configured(self) -> bool:
        return bool(self._api_key and self._sender)

    def send(self, address: str, subject: str, body: str) -> None:
        if not self.configured:
            logger.info("SendGrid configuration incomplete; skipping email to %s", address)
            return

        message = Mail(
            from_email=self._sender,
            to_emails=address,
            subject=subject,
            html_content=body,
        )

        try:
            client = SendGridAPIClient(self._api_key)
            # python-http-client reads the timeout from the underlying client.
            client.client.timeout = self._timeout
            response = client.send(message)
        except Exception as exc:
            description = _describe_failure(
                getattr(exc, "status_code", None), getattr(exc, "body", None)
            )
            raise DeliveryError(description) from exc

        status_code = getattr(response, "status_code", None)
        if not isinstance(status_code, int) or not 200 <= status_code < 300:
            raise DeliveryError(
                _describe_failure(status_code, getattr(response, "body", None))
            )


__all__ = ["DeliverySink", "SendGridEmailSink"]
