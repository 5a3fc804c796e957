"""
Contracts (data models).

This folder defines the request/response shapes for the CertCentral API:
- order list envelopes (orders, page metadata, embedded references)
- wildcard / cloud certificate submission requests and their responses
- the structured error envelope returned on non-2xx statuses

Both mock and real HTTP clients should use these contracts.
"""

from .errors import APIError, ErrorEnvelope
from .interfaces import CertificateAuthorityClient
from .outcome import OutcomeKind, RequestOutcome
from .orders import (
    Certificate,
    Container,
    Order,
    Orders,
    Organization,
    Organizations,
    Page,
    Product,
)
from .submissions import (
    CertificateRequest,
    CertificateSubmissionRequest,
    CertificateSubmissionResponse,
    CloudRequest,
    RequestOrganization,
    RequestStatus,
    ServerPlatform,
    SignatureHash,
    SubmissionRequest,
    WildcardRequest,
    build_submission,
)

__all__ = [
    # errors
    "APIError", "ErrorEnvelope",
    # interfaces
    "CertificateAuthorityClient",
    # outcome
    "OutcomeKind", "RequestOutcome",
    # orders
    "Certificate", "Container", "Order", "Orders", "Organization",
    "Organizations", "Page", "Product",
    # submissions
    "CertificateRequest", "CertificateSubmissionRequest",
    "CertificateSubmissionResponse", "CloudRequest", "RequestOrganization",
    "RequestStatus", "ServerPlatform", "SignatureHash", "SubmissionRequest",
    "WildcardRequest", "build_submission",
]
