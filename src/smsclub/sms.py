from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class ClientConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str
    # int, float or numeric string, as given by the caller
    integration_id: Any = 0

    @property
    def has_integration_id(self) -> bool:
        return self.integration_id not in (0, "0")


class SendRequest(BaseModel):
    sender_name: str
    message: str
    recipients: list[str]

    def to_payload(self, integration_id: Any = None) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "phone": self.recipients,
            "message": self.message,
            "src_addr": self.sender_name,
        }
        if integration_id is not None:
            payload["integration_id"] = integration_id
        return payload


class StatusRequest(BaseModel):
    ids: list[Any]

    def to_payload(self) -> dict[str, Any]:
        return {"id_sms": self.ids}


class HttpResponse(BaseModel):
    status: int
    body: bytes

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")
