from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from .config import (
    API_HOST,
    URL_SMS_BALANCE,
    URL_SMS_ORIGINATOR,
    URL_SMS_SEND,
    URL_SMS_STATUS,
    Settings,
    get_settings,
)
from .errors import RemoteError, TransportError
from .sms import ClientConfig, HttpResponse, SendRequest, StatusRequest
from .transport import HttpTransport, HttpxTransport
from .validation import (
    check_duplicates,
    check_integration_id,
    check_message,
    check_sender_name,
    check_token,
    prepare_phones,
    prepare_sms_ids,
)

logger = logging.getLogger(__name__)


class SmsGatewayClient:
    """
    Binding for the SMSClub JSON API.

    Every call validates its input first and fails before any I/O;
    then it does exactly one POST and unwraps the
    {"success_request": {"info": ...}} envelope.
    """

    def __init__(
        self,
        token: str,
        integration_id: Any = 0,
        *,
        transport: HttpTransport | None = None,
        base_url: str = API_HOST,
        timeout: float | None = None,
    ) -> None:
        check_token(token)
        check_integration_id(integration_id)

        self._config = ClientConfig(token=token, integration_id=integration_id)
        self._base_url = base_url.rstrip("/")
        if transport is None:
            transport = HttpxTransport(timeout=timeout)
        self._transport = transport

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, transport: HttpTransport | None = None
    ) -> SmsGatewayClient:
        settings = settings or get_settings()
        return cls(
            settings.token,  # type: ignore[arg-type]  # None is rejected by check_token
            settings.integration_id,
            transport=transport,
            base_url=settings.api_host,
            timeout=settings.timeout,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    def send_sms(self, sender_name: str, message: str, recipients: Any) -> dict[str, Any] | list[Any]:
        """
        Send `message` from alpha-name `sender_name` to up to 100 numbers.

        `recipients` may be a single number or a list; numbers are reduced
        to digits and must look like 380XXXXXXXXX.
        """
        check_sender_name(sender_name)
        check_message(message)
        phones = check_duplicates(prepare_phones(recipients))

        request = SendRequest(sender_name=sender_name, message=message, recipients=phones)
        integration_id = self._config.integration_id if self._config.has_integration_id else None

        info = self._send_command(URL_SMS_SEND, request.to_payload(integration_id))
        if isinstance(info, (dict, list)):
            return info
        return [info]

    def sms_status(self, ids: Any) -> Any:
        """Delivery status for up to 100 SMS ids returned by send_sms()."""
        request = StatusRequest(ids=prepare_sms_ids(ids))
        return self._send_command(URL_SMS_STATUS, request.to_payload())

    def get_signatures(self) -> Any:
        """Alpha-names registered on the account."""
        return self._send_command(URL_SMS_ORIGINATOR)

    def get_balance(self) -> Any:
        return self._send_command(URL_SMS_BALANCE)

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> SmsGatewayClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._config.token}",
        }

    def _send_command(self, path: str, data: dict[str, Any] | None = None) -> Any:
        body = json.dumps(data or {}).encode("utf-8")
        logger.debug("POST %s (%d bytes)", path, len(body))

        try:
            response = self._transport.post(self._base_url + path, self._headers(), body)
        except TransportError:
            raise
        except (httpx.HTTPError, OSError) as exc:
            raise TransportError(str(exc)) from exc

        return unwrap_response(response)


def unwrap_response(response: HttpResponse) -> Any:
    """Return success_request.info, or raise RemoteError with the raw body."""
    text = response.text
    try:
        parsed = json.loads(text)
    except ValueError:
        raise RemoteError(text, status=response.status, raw=response.body) from None

    if isinstance(parsed, dict):
        success = parsed.get("success_request")
        if isinstance(success, dict) and success.get("info") is not None:
            return success["info"]

    raise RemoteError(text, status=response.status, raw=response.body)
