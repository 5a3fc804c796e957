"""
Error contracts.

Non-2xx responses carry an envelope of the form
``{"errors": [{"code": "...", "message": "..."}, ...]}``.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class APIError(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    code: str
    message: str


class ErrorEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    errors: List[APIError] = Field(default_factory=list)

    def first(self) -> Optional[APIError]:
        """Only the first reported error is kept by the client."""
        return self.errors[0] if self.errors else None
