from __future__ import annotations

import os
from functools import lru_cache
from typing import Final

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError

API_HOST: Final[str] = "https://im.smsclub.mobi"

URL_SMS_SEND: Final[str] = "/sms/send"
URL_SMS_STATUS: Final[str] = "/sms/status"
URL_SMS_ORIGINATOR: Final[str] = "/sms/originator"
URL_SMS_BALANCE: Final[str] = "/sms/balance"

# Max phone numbers / SMS ids accepted in one request
ARRAY_LIMIT: Final[int] = 100

DEFAULT_TIMEOUT: Final[float] = 30.0


class Settings(BaseModel):
    # Environment is read when Settings() is built, so tests can
    # monkeypatch env vars and then clear the get_settings() cache.
    # Env values arrive as strings and are validated like explicit ones.
    model_config = ConfigDict(validate_default=True)

    # Token from the SMSClub profile page (https://my.smsclub.mobi/profile)
    token: str | None = Field(default_factory=lambda: os.getenv("SMSCLUB_TOKEN"))

    # Optional referral id forwarded with /sms/send
    integration_id: str = Field(
        default_factory=lambda: os.getenv("SMSCLUB_INTEGRATION_ID", "0")
    )

    # Override only for staging / mock servers
    api_host: str = Field(default_factory=lambda: os.getenv("SMSCLUB_API_HOST", API_HOST))

    # Connect/read timeout in seconds for the default httpx transport
    timeout: float = Field(
        default_factory=lambda: os.getenv("SMSCLUB_TIMEOUT", str(DEFAULT_TIMEOUT)), gt=0
    )


@lru_cache
def get_settings() -> Settings:
    try:
        return Settings()
    except PydanticValidationError as exc:
        problems = "; ".join(
            f"SMSCLUB_{str(err['loc'][0]).upper()}: {err['msg']}" for err in exc.errors()
        )
        raise ValidationError(f"Invalid settings: {problems}") from exc
