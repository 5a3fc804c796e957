from __future__ import annotations

import logging
from typing import Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from digicert_client.policy.exceptions import ResponseParsingError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode_response(
    model_type: Type[ModelT],
    data: Optional[bytes],
    *,
    include_raw: bool = False,
) -> ModelT:
    """
    Decode a success body into ``model_type``.

    Args:
        model_type: contract to validate against
        data: raw response bytes (may be empty or None)
        include_raw: attach the raw body text to the raised error

    Raises:
        ResponseParsingError: if the body is absent, not JSON, or has the wrong shape
    """
    raw_text = _as_text(data)
    if not data:
        raise ResponseParsingError(
            f"Empty response body, expected {model_type.__name__}.",
            raw_text=raw_text if include_raw else None,
        )
    try:
        return model_type.model_validate_json(data)
    except ValidationError as exc:
        logger.error("Could not parse %s: %s", model_type.__name__, exc)
        if include_raw:
            logger.debug("Raw response was: %s", raw_text)
        raise ResponseParsingError(
            f"Response validation failed for {model_type.__name__}: {exc}",
            raw_text=raw_text if include_raw else None,
        ) from exc


def _as_text(data: Optional[bytes]) -> str:
    if data is None:
        return ""
    return data.decode("utf-8", errors="replace")
