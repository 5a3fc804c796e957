"""
Policy layer.

Sits between the raw request executor and callers:
- response_wrappers: decode success bodies into contracts, or raise ResponseParsingError
- exceptions: the typed errors surfaced to callers
- error_policy: decides whether a failed outcome is raised or logged and dropped
"""

from .error_policy import ErrorPolicy
from .exceptions import (
    DigiCertAPIError,
    DigiCertError,
    RequestFailedError,
    ResponseParsingError,
)
from .response_wrappers import decode_response

__all__ = [
    "ErrorPolicy",
    "DigiCertAPIError",
    "DigiCertError",
    "RequestFailedError",
    "ResponseParsingError",
    "decode_response",
]
