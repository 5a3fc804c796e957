"""
Real CertCentral HTTP Client.

Purpose:
- Lists certificate orders on the account
- Submits wildcard / cloud SSL certificate orders
- Decodes success bodies into contracts, failures into typed errors

Usage:
    with DigiCertClient(api_key) as client:
        orders = client.list_orders()

Important:
- Endpoint paths and request building live in base.py, shared with the async client.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import httpx

from digicert_client.config import ClientConfig
from digicert_client.contracts.interfaces import CertificateAuthorityClient
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
from digicert_client.clients.real_http.executor import RequestExecutor

logger = logging.getLogger(__name__)


class DigiCertClient(BaseDigiCertClient, CertificateAuthorityClient):
    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        config: Optional[ClientConfig] = None,
        http_client: Optional[httpx.Client] = None,
        debug: bool = False,
    ) -> None:
        super().__init__(api_key, config=config, debug=debug)
        self._executor = RequestExecutor(self.config, client=http_client)

    def __enter__(self) -> "DigiCertClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._executor.close()

    # -- Orders --

    def list_orders(self) -> Optional[List[Order]]:
        """
        List all certificate orders.

        Returns:
            The decoded orders in response order, or None when the call
            failed and the client is not raising errors.

        Raises:
            ResponseParsingError: the body did not match the Orders shape
            DigiCertAPIError / RequestFailedError: see ErrorPolicy
        """
        outcome = self._executor.submit_request(ORDERS_PATH, debug=self.debug)
        return self._decode_orders(outcome)

    def _list_organizations(self) -> Optional[List[Organization]]:
        # Not part of the public interface yet.
        outcome = self._executor.submit_request(ORGANIZATIONS_PATH, debug=self.debug)
        return self._decode_organizations(outcome)

    # -- Submissions --

    def submit(
        self, path: str, request: CertificateSubmissionRequest
    ) -> Optional[CertificateSubmissionResponse]:
        logger.info("Submitting %s order for %s", path, request.certificate.common_name)
        outcome = self._executor.submit_request(
            path, method="POST", body=request.to_json(), debug=self.debug
        )
        return self._decode_submission(path, outcome)
