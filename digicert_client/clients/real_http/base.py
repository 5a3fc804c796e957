"""
Shared CertCentral client base.

Holds everything the sync and async clients have in common:
- config resolution (api key / ClientConfig)
- endpoint paths
- building the wildcard / cloud request bodies
- turning executor outcomes into decoded contracts

``request_wildcard`` / ``request_cloud`` build the body and hand it to
``self.submit``. On DigiCertClient that returns the response; on
AsyncDigiCertClient ``submit`` is a coroutine function, so the same
methods return an awaitable.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence

from digicert_client.config import ClientConfig
from digicert_client.contracts.orders import Order, Orders, Organization, Organizations
from digicert_client.contracts.outcome import RequestOutcome
from digicert_client.contracts.submissions import (
    CertificateSubmissionRequest,
    CertificateSubmissionResponse,
    CloudRequest,
    SignatureHash,
    WildcardRequest,
    build_submission,
)
from digicert_client.policy.error_policy import ErrorPolicy
from digicert_client.policy.response_wrappers import decode_response

ORDERS_PATH = "order/certificate"
ORGANIZATIONS_PATH = "organization"
WILDCARD_PATH = "order/certificate/ssl_wildcard"
CLOUD_PATH = "order/certificate/ssl_cloud_wildcard"


class BaseDigiCertClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        config: Optional[ClientConfig] = None,
        debug: bool = False,
    ) -> None:
        if config is None:
            if not api_key:
                raise ValueError("api_key is required when no config is given.")
            config = ClientConfig(api_key=api_key)
        elif api_key:
            config = config.model_copy(update={"api_key": api_key})

        self.config = config
        self.debug = debug
        self._errors = ErrorPolicy(raise_on_error=config.raise_on_error)

    # -- Decoding --

    def _decode_orders(self, outcome: RequestOutcome) -> Optional[List[Order]]:
        data = self._errors.resolve(outcome, "list_orders")
        if data is None:
            return None
        return decode_response(Orders, data).orders

    def _decode_organizations(self, outcome: RequestOutcome) -> Optional[List[Organization]]:
        data = self._errors.resolve(outcome, "list_organizations")
        if data is None:
            return None
        return decode_response(Organizations, data).organizations

    def _decode_submission(
        self, path: str, outcome: RequestOutcome
    ) -> Optional[CertificateSubmissionResponse]:
        data = self._errors.resolve(outcome, f"POST {path}")
        if data is None:
            return None
        return decode_response(CertificateSubmissionResponse, data, include_raw=True)

    # -- Submissions --

    def request_wildcard(
        self,
        common_name: str,
        csr: str,
        organization_id: int,
        validity_years: int,
        *,
        signature_hash: SignatureHash = SignatureHash.SHA256,
        organization_units: Optional[Sequence[str]] = None,
        server_platform_id: Optional[int] = None,
        profile_option: Optional[str] = None,
        custom_expiration_date: Optional[date] = None,
        comments: Optional[str] = None,
        disable_renewal_notifications: Optional[bool] = None,
        renewal_of_order_id: Optional[int] = None,
        disable_ct: Optional[bool] = None,
    ):
        """
        Request a new Wildcard certificate.

        https://www.digicert.com/services/v2/documentation/order/order-ssl-wildcard
        """
        request = build_submission(
            WildcardRequest,
            common_name,
            csr,
            organization_id,
            validity_years,
            signature_hash=signature_hash,
            organization_units=organization_units,
            server_platform_id=server_platform_id,
            profile_option=profile_option,
            custom_expiration_date=custom_expiration_date,
            comments=comments,
            disable_renewal_notifications=disable_renewal_notifications,
            renewal_of_order_id=renewal_of_order_id,
            disable_ct=disable_ct,
        )
        return self.submit(WILDCARD_PATH, request)

    def request_cloud(
        self,
        common_name: str,
        csr: str,
        organization_id: int,
        validity_years: int,
        sans: Sequence[str],
        *,
        signature_hash: SignatureHash = SignatureHash.SHA256,
        organization_units: Optional[Sequence[str]] = None,
        server_platform_id: Optional[int] = None,
        profile_option: Optional[str] = None,
        custom_expiration_date: Optional[date] = None,
        comments: Optional[str] = None,
        disable_renewal_notifications: Optional[bool] = None,
        renewal_of_order_id: Optional[int] = None,
        disable_ct: Optional[bool] = None,
    ):
        """Request a new Cloud certificate; ``sans`` become the certificate's dns_names."""
        request = build_submission(
            CloudRequest,
            common_name,
            csr,
            organization_id,
            validity_years,
            dns_names=list(sans),
            signature_hash=signature_hash,
            organization_units=organization_units,
            server_platform_id=server_platform_id,
            profile_option=profile_option,
            custom_expiration_date=custom_expiration_date,
            comments=comments,
            disable_renewal_notifications=disable_renewal_notifications,
            renewal_of_order_id=renewal_of_order_id,
            disable_ct=disable_ct,
        )
        return self.submit(CLOUD_PATH, request)

    def submit(self, path: str, request: CertificateSubmissionRequest):
        raise NotImplementedError
