from __future__ import annotations

from collections.abc import Iterator

import pytest

from smsclub.config import get_settings

from fakes import RecordingTransport, envelope


@pytest.fixture
def ok_transport() -> RecordingTransport:
    return RecordingTransport(envelope({"balance": "42.00", "currency": "UAH"}))


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from SMSCLUB_* variables of the developer's shell."""
    for name in ("SMSCLUB_TOKEN", "SMSCLUB_INTEGRATION_ID", "SMSCLUB_API_HOST", "SMSCLUB_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
