from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional, Sequence

from .orders import Order
from .submissions import CertificateSubmissionResponse, SignatureHash


class CertificateAuthorityClient(ABC):
    """Every certificate authority client (real or mock) must implement this interface."""

    # -- Orders --

    @abstractmethod
    def list_orders(self) -> Optional[List[Order]]:
        """Return all certificate orders on the account."""

    # -- Submissions --

    @abstractmethod
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
        """Order a new wildcard certificate."""

    @abstractmethod
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
        """Order a new cloud (wildcard + extra SANs) certificate."""
