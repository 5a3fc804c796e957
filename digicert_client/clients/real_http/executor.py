"""
Request executor.

Purpose:
- Builds one authenticated request against the configured base URL
- Performs exactly one request/response cycle per call (blocking, or awaited)
- Classifies the response into a RequestOutcome (success / API error / no data)

Implementation notes:
- Each call owns its own httpx request/response; nothing is shared between
  concurrent calls except the immutable config and the connection pool.
- Query parameters are encoded by httpx, so the first one is joined with '?'.
- A malformed URL produces NO_DATA without touching the network.
- Any httpx.RequestError (connect/read failures, undecodable content
  encodings, redirect loops) produces NO_DATA with the error attached.
"""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

import httpx
from pydantic import ValidationError

from digicert_client.config import ClientConfig
from digicert_client.contracts.errors import ErrorEnvelope
from digicert_client.contracts.outcome import RequestOutcome

logger = logging.getLogger(__name__)

SUCCESS_STATUSES = frozenset({200, 201})
SUPPORTED_METHODS = frozenset({"GET", "POST"})


class _BaseExecutor:
    def __init__(self, config: ClientConfig) -> None:
        self.config = config

    def build_url(self, path: str) -> Optional[httpx.URL]:
        raw = f"{self.config.base_url.rstrip('/')}/{path.lstrip('/')}"
        try:
            url = httpx.URL(raw)
        except httpx.InvalidURL as exc:
            logger.error("Invalid request URL %r: %s", raw, exc)
            return None
        if url.scheme not in ("http", "https") or not url.host:
            logger.error("Invalid request URL %r: expected an absolute http(s) URL", raw)
            return None
        return url

    def build_headers(self, body: Optional[bytes]) -> Dict[str, str]:
        headers: Dict[str, str] = {
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
            self.config.auth_header: self.config.api_key,
        }
        if body is not None:
            headers["Content-Type"] = "application/json"
        return headers

    @staticmethod
    def _check_method(method: str) -> str:
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method '{method}'.")
        return method

    @staticmethod
    def classify(response: httpx.Response) -> RequestOutcome:
        status = response.status_code
        if status in SUCCESS_STATUSES:
            return RequestOutcome.success(response.content, status)

        logger.warning("Non-200 response was: %s %s", status, response.reason_phrase)
        try:
            envelope = ErrorEnvelope.model_validate_json(response.content)
        except ValidationError:
            logger.debug("No error envelope in %s response body", status)
            return RequestOutcome.no_data(status_code=status)

        error = envelope.first()
        if error is None:
            return RequestOutcome.no_data(status_code=status)
        logger.warning("API error %s: %s", error.code, error.message)
        return RequestOutcome.api_error(error, status)

    @staticmethod
    def _transport_failure(exc: httpx.RequestError, debug: bool) -> RequestOutcome:
        logger.error("Transport error: %s", exc, exc_info=debug)
        return RequestOutcome.no_data(transport_error=exc)


class RequestExecutor(_BaseExecutor):
    """Blocking executor over ``httpx.Client``."""

    def __init__(self, config: ClientConfig, client: Optional[httpx.Client] = None) -> None:
        super().__init__(config)
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=httpx.Timeout(config.timeout_seconds))

    def submit_request(
        self,
        path: str,
        parameters: Optional[Mapping[str, str]] = None,
        method: str = "GET",
        body: Optional[bytes] = None,
        debug: bool = False,
    ) -> RequestOutcome:
        method = self._check_method(method)
        url = self.build_url(path)
        if url is None:
            return RequestOutcome.no_data()

        if debug:
            logger.debug("%s %s params=%s", method, url, dict(parameters or {}))
        try:
            response = self._client.request(
                method,
                url,
                params=dict(parameters) if parameters else None,
                content=body,
                headers=self.build_headers(body),
                timeout=self.config.timeout_seconds,
            )
        except httpx.RequestError as exc:
            return self._transport_failure(exc, debug)
        return self.classify(response)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


class AsyncRequestExecutor(_BaseExecutor):
    """Same contract as RequestExecutor, over ``httpx.AsyncClient``."""

    def __init__(self, config: ClientConfig, client: Optional[httpx.AsyncClient] = None) -> None:
        super().__init__(config)
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(config.timeout_seconds))

    async def submit_request(
        self,
        path: str,
        parameters: Optional[Mapping[str, str]] = None,
        method: str = "GET",
        body: Optional[bytes] = None,
        debug: bool = False,
    ) -> RequestOutcome:
        method = self._check_method(method)
        url = self.build_url(path)
        if url is None:
            return RequestOutcome.no_data()

        if debug:
            logger.debug("%s %s params=%s", method, url, dict(parameters or {}))
        try:
            response = await self._client.request(
                method,
                url,
                params=dict(parameters) if parameters else None,
                content=body,
                headers=self.build_headers(body),
                timeout=self.config.timeout_seconds,
            )
        except httpx.RequestError as exc:
            return self._transport_failure(exc, debug)
        return self.classify(response)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
