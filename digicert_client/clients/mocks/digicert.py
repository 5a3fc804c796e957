"""
CertCentral — MOCK client.

⚠️  This is a mock implementation for development and testing.
    Nothing leaves the process: orders live in memory, submissions are
    numbered sequentially and every submitted request is recorded.
"""

import itertools
import logging
from datetime import date, datetime, timedelta, timezone
from typing import Dict, List, Optional, Sequence

from digicert_client.contracts.interfaces import CertificateAuthorityClient
from digicert_client.contracts.orders import (
    Certificate,
    Container,
    Order,
    Organization,
    Product,
)
from digicert_client.contracts.submissions import (
    CertificateSubmissionRequest,
    CertificateSubmissionResponse,
    CloudRequest,
    RequestStatus,
    SignatureHash,
    SubmissionRequest,
    WildcardRequest,
    build_submission,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

_MOCK_ORGANIZATIONS: List[Organization] = [
    Organization(id=112233, name="Example Org, Inc."),
]

_MOCK_CONTAINER = Container(id=5, name="Example Org, Inc.")

_PRODUCTS: Dict[type, Product] = {
    WildcardRequest: Product(name_id="ssl_wildcard", name="Wildcard SSL", type="ssl_certificate"),
    CloudRequest: Product(name_id="ssl_cloud_wildcard", name="Cloud SSL", type="ssl_certificate"),
}

_MOCK_ORDERS: List[Order] = [
    Order(
        id=1000001,
        certificate=Certificate(
            common_name="*.example.com",
            dns_names=["*.example.com", "example.com"],
            valid_till="2027-01-31",
            signature_hash="sha256",
        ),
        status="issued",
        date_created=datetime(2025, 1, 30, 17, 2, 44, tzinfo=timezone.utc),
        organization=_MOCK_ORGANIZATIONS[0],
        validity_years=2,
        container=_MOCK_CONTAINER,
        product=_PRODUCTS[WildcardRequest],
        price=688.0,
    ),
]


# ---------------------------------------------------------------------------
# Mock client
# ---------------------------------------------------------------------------

class DigiCertMockClient(CertificateAuthorityClient):
    """
    Mock CertCentral client.

    Parameters
    ----------
    auto_approve : bool
        If True, submitted requests come back ``approved`` instead of ``pending``.
    seed_orders : bool
        If True (default), start with a small set of existing orders.
    """

    def __init__(self, auto_approve: bool = False, seed_orders: bool = True):
        self._auto_approve = auto_approve
        self._ids = itertools.count(2000001)

        # In-memory stores (reset on restart)
        self._orders: List[Order] = list(_MOCK_ORDERS) if seed_orders else []
        self._organizations: List[Organization] = list(_MOCK_ORGANIZATIONS)
        self.submissions: List[CertificateSubmissionRequest] = []

        logger.info("[DIGICERT MOCK] Client initialised (%d orders)", len(self._orders))

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------

    def list_orders(self) -> Optional[List[Order]]:
        return list(self._orders)

    def _list_organizations(self) -> Optional[List[Organization]]:
        return list(self._organizations)

    # ------------------------------------------------------------------
    # Submissions
    # ------------------------------------------------------------------

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
    ) -> Optional[CertificateSubmissionResponse]:
        request = build_submission(
            WildcardRequest, common_name, csr, organization_id, validity_years,
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
        return self._submit(request)

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
    ) -> Optional[CertificateSubmissionResponse]:
        request = build_submission(
            CloudRequest, common_name, csr, organization_id, validity_years,
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
        return self._submit(request)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _organization(self, organization_id: int) -> Organization:
        for org in self._organizations:
            if org.id == organization_id:
                return org
        return Organization(id=organization_id, name=f"Organization {organization_id}")

    def _submit(self, request: CertificateSubmissionRequest) -> CertificateSubmissionResponse:
        status = RequestStatus.APPROVED if self._auto_approve else RequestStatus.PENDING
        order_id = next(self._ids)
        request_id = next(self._ids)
        cert = request.certificate
        valid_till = request.custom_expiration_date or (
            date.today() + timedelta(days=365 * request.validity_years)
        )

        self.submissions.append(request)
        self._orders.append(
            Order(
                id=order_id,
                certificate=Certificate(
                    common_name=cert.common_name,
                    dns_names=cert.dns_names,
                    valid_till=valid_till.isoformat(),
                    signature_hash=cert.signature_hash.value,
                ),
                status="issued" if status is RequestStatus.APPROVED else "pending",
                date_created=datetime.now(timezone.utc),
                organization=self._organization(request.organization.id),
                validity_years=request.validity_years,
                container=_MOCK_CONTAINER,
                product=_PRODUCTS[type(request)],
            )
        )
        logger.info("[DIGICERT MOCK] Order %s for %s → %s", order_id, cert.common_name, status.value)
        return CertificateSubmissionResponse(
            id=order_id,
            requests=[SubmissionRequest(id=request_id, status=status)],
        )
