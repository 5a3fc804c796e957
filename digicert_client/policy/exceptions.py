from __future__ import annotations

from typing import Optional

from digicert_client.contracts.errors import APIError


class DigiCertError(Exception):
    """Base exception for all client errors."""


class RequestFailedError(DigiCertError):
    """Raised when a call produced no data: invalid URL, transport failure,
    or a non-2xx status without a decodable error envelope."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.cause = cause


class DigiCertAPIError(DigiCertError):
    """Raised when the API answered with a non-2xx status and an error envelope."""

    def __init__(self, error: APIError, *, status_code: Optional[int] = None) -> None:
        super().__init__(f"{error.code}: {error.message}")
        self.error = error
        self.status_code = status_code

    @property
    def code(self) -> str:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message


class ResponseParsingError(DigiCertError, ValueError):
    """Raised when a success-status body does not match the expected shape."""

    def __init__(self, message: str, *, raw_text: Optional[str] = None) -> None:
        super().__init__(message)
        self.raw_text = raw_text
