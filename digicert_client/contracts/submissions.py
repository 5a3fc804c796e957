"""
Certificate submission contracts.

Defines the request bodies for:
- ``POST order/certificate/ssl_wildcard``       (WildcardRequest)
- ``POST order/certificate/ssl_cloud_wildcard`` (CloudRequest)

and the response both endpoints share (CertificateSubmissionResponse).

Requests are built once from typed parameters and serialized with ``to_json``;
optional fields left as ``None`` are omitted from the body.

https://www.digicert.com/services/v2/documentation/order/order-ssl-wildcard
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class SignatureHash(str, Enum):
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"


class RequestStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Request bodies
# ---------------------------------------------------------------------------

class ServerPlatform(_FrozenModel):
    id: int


class RequestOrganization(_FrozenModel):
    id: int


class CertificateRequest(_FrozenModel):
    common_name: str
    csr: str
    signature_hash: SignatureHash = SignatureHash.SHA256
    dns_names: Optional[List[str]] = None
    organization_units: Optional[List[str]] = None
    server_platform: Optional[ServerPlatform] = None
    profile_option: Optional[str] = None


class CertificateSubmissionRequest(_FrozenModel):
    """Fields shared by every certificate order body."""

    certificate: CertificateRequest
    organization: RequestOrganization
    validity_years: int
    custom_expiration_date: Optional[date] = None      # sent as YYYY-MM-DD
    comments: Optional[str] = None
    disable_renewal_notifications: Optional[bool] = None
    renewal_of_order_id: Optional[int] = None
    disable_ct: Optional[bool] = None

    def to_json(self) -> bytes:
        return self.model_dump_json(exclude_none=True).encode("utf-8")


class WildcardRequest(CertificateSubmissionRequest):
    pass


class CloudRequest(CertificateSubmissionRequest):
    pass


# ---------------------------------------------------------------------------
# Response
# ---------------------------------------------------------------------------

class SubmissionRequest(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    status: RequestStatus


class CertificateSubmissionResponse(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    requests: List[SubmissionRequest]


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def build_submission(
    request_type,
    common_name: str,
    csr: str,
    organization_id: int,
    validity_years: int,
    *,
    dns_names: Optional[List[str]] = None,
    signature_hash: SignatureHash = SignatureHash.SHA256,
    organization_units: Optional[List[str]] = None,
    server_platform_id: Optional[int] = None,
    profile_option: Optional[str] = None,
    custom_expiration_date: Optional[date] = None,
    comments: Optional[str] = None,
    disable_renewal_notifications: Optional[bool] = None,
    renewal_of_order_id: Optional[int] = None,
    disable_ct: Optional[bool] = None,
):
    """
    Build a WildcardRequest or CloudRequest from flat keyword parameters.

    Raises:
        pydantic.ValidationError: if a parameter has the wrong type
    """
    certificate = CertificateRequest(
        common_name=common_name,
        csr=csr,
        signature_hash=signature_hash,
        dns_names=list(dns_names) if dns_names is not None else None,
        organization_units=list(organization_units) if organization_units is not None else None,
        server_platform=ServerPlatform(id=server_platform_id) if server_platform_id is not None else None,
        profile_option=profile_option,
    )
    return request_type(
        certificate=certificate,
        organization=RequestOrganization(id=organization_id),
        validity_years=validity_years,
        custom_expiration_date=custom_expiration_date,
        comments=comments,
        disable_renewal_notifications=disable_renewal_notifications,
        renewal_of_order_id=renewal_of_order_id,
        disable_ct=disable_ct,
    )
