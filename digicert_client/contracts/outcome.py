"""
Executor outcome.

Every call through the request executor ends in exactly one of:
- SUCCESS:   status 200/201, raw body bytes attached
- API_ERROR: non-2xx status with a decodable error envelope (first error kept)
- NO_DATA:   invalid URL, transport failure, or non-2xx without an envelope
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import APIError


class OutcomeKind(str, Enum):
    SUCCESS = "SUCCESS"
    API_ERROR = "API_ERROR"
    NO_DATA = "NO_DATA"


@dataclass(frozen=True)
class RequestOutcome:
    kind: OutcomeKind
    data: Optional[bytes] = None
    error: Optional[APIError] = None
    status_code: Optional[int] = None
    transport_error: Optional[BaseException] = None

    @classmethod
    def success(cls, data: bytes, status_code: int) -> "RequestOutcome":
        return cls(kind=OutcomeKind.SUCCESS, data=data, status_code=status_code)

    @classmethod
    def api_error(cls, error: APIError, status_code: int) -> "RequestOutcome":
        return cls(kind=OutcomeKind.API_ERROR, error=error, status_code=status_code)

    @classmethod
    def no_data(
        cls,
        *,
        status_code: Optional[int] = None,
        transport_error: Optional[BaseException] = None,
    ) -> "RequestOutcome":
        return cls(kind=OutcomeKind.NO_DATA, status_code=status_code, transport_error=transport_error)

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS
