"""
Async CertCentral HTTP Client.

Same operations and error policy as DigiCertClient, awaited over
httpx.AsyncClient. Each awaited call is one full request/response cycle.
"""

from __future__ import annotations

from typing import List, Optional

import httpx

from digicert_client.config import ClientConfig
from digicert_client.contracts.orders import Order, Organization
from digicert_client.contracts.submissions import (
    CertificateSubmissionRequest,
    CertificateSubmissionResponse,
)
from digicert_client.clients.real_http.base import (
    ORDERS_PATH,
    ORGANIZATIONS_PATH,
    BaseDigiCertClient,
)
from digicert_client.clients.real_http.executor import AsyncRequestExecutor


class AsyncDigiCertClient(BaseDigiCertClient):
    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        config: Optional[ClientConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        debug: bool = False,
    ) -> None:
        super().__init__(api_key, config=config, debug=debug)
        self._executor = AsyncRequestExecutor(self.config, client=http_client)

    async def __aenter__(self) -> "AsyncDigiCertClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._executor.aclose()

    async def list_orders(self) -> Optional[List[Order]]:
        outcome = await self._executor.submit_request(ORDERS_PATH, debug=self.debug)
        return self._decode_orders(outcome)

    async def _list_organizations(self) -> Optional[List[Organization]]:
        outcome = await self._executor.submit_request(ORGANIZATIONS_PATH, debug=self.debug)
        return self._decode_organizations(outcome)

    async def submit(
        self, path: str, request: CertificateSubmissionRequest
    ) -> Optional[CertificateSubmissionResponse]:
        outcome = await self._executor.submit_request(
            path, method="POST", body=request.to_json(), debug=self.debug
        )
        return self._decode_submission(path, outcome)
