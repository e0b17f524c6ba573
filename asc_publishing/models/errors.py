from __future__ import annotations
from typing import Any
from pydantic import BaseModel, ConfigDict


class ErrorSource(BaseModel):
    pointer: str | None = None
    parameter: str | None = None


class ErrorDetail(BaseModel):
    model_config = ConfigDict(extra="allow")
    id: str | None = None
    status: str
    code: str
    title: str
    detail: str | None = None
    source: ErrorSource | None = None
    meta: dict[str, Any] | None = None

    def __str__(self) -> str:
        text = f"{self.status} {self.code}: {self.title}"
        if self.detail:
            text += f" - {self.detail}"
        return text


class ErrorResponse(BaseModel):
    """Structured payload returned with every non-2xx response."""
    errors: list[ErrorDetail]
