from __future__ import annotations


class SmsClubError(Exception):
    """Base class for everything this library raises."""


class ValidationError(SmsClubError):
    """Malformed caller input. Raised before any network call."""


class LimitExceededError(SmsClubError):
    """More phone numbers / SMS ids than one request may carry."""


class DuplicateError(SmsClubError):
    """The same phone number appears twice in one send request."""


class TransportError(SmsClubError):
    """The HTTP call itself failed (connection, TLS, timeout)."""


class RemoteError(SmsClubError):
    """
    The API answered, but not with the success envelope.

    The message is the response body text so unexpected answers
    (error codes, maintenance pages) stay readable; `raw` keeps the
    undecoded bytes for bodies that are not valid UTF-8.
    """

    def __init__(self, body: str, status: int | None = None, raw: bytes | None = None) -> None:
        super().__init__(body)
        self.body = body
        self.status = status
        self.raw = raw
