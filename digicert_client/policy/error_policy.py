"""Error handling policy for executor outcomes."""
from typing import Optional
import logging

from digicert_client.contracts.outcome import OutcomeKind, RequestOutcome
from digicert_client.policy.exceptions import DigiCertAPIError, DigiCertError, RequestFailedError

logger = logging.getLogger(__name__)


class ErrorPolicy:
    """
    Turns a failed RequestOutcome into a typed exception.

    With ``raise_on_error`` (the default) the exception propagates to the caller.
    Without it the failure is logged and the operation yields None.
    """

    def __init__(self, raise_on_error: bool = True):
        self.raise_on_error = raise_on_error

    def resolve(self, outcome: RequestOutcome, operation: str) -> Optional[bytes]:
        if outcome.ok:
            return outcome.data

        exc = self.to_exception(outcome, operation)
        if self.raise_on_error:
            raise exc
        logger.error("%s failed: %s", operation, exc)
        return None

    @staticmethod
    def to_exception(outcome: RequestOutcome, operation: str) -> DigiCertError:
        if outcome.kind is OutcomeKind.API_ERROR and outcome.error is not None:
            return DigiCertAPIError(outcome.error, status_code=outcome.status_code)

        if outcome.transport_error is not None:
            message = f"{operation}: transport error: {outcome.transport_error}"
        elif outcome.status_code is not None:
            message = f"{operation}: HTTP {outcome.status_code} with no error details"
        else:
            message = f"{operation}: no data returned"
        return RequestFailedError(message, status_code=outcome.status_code, cause=outcome.transport_error)
