"""
DigiCert CertCentral client.

Lists certificate orders and submits wildcard / cloud SSL certificate orders
against the CertCentral v2 REST API.

    from digicert_client import DigiCertClient

    with DigiCertClient(api_key) as client:
        for order in client.list_orders():
            print(order.id, order.status)
"""

from .config import ClientConfig, config_from_env, load_client_config
from .contracts import (
    APIError,
    Certificate,
    CertificateSubmissionResponse,
    CloudRequest,
    Container,
    Order,
    Organization,
    Page,
    Product,
    RequestOutcome,
    RequestStatus,
    SignatureHash,
    SubmissionRequest,
    WildcardRequest,
)
from .clients.mocks import DigiCertMockClient
from .clients.real_http import AsyncDigiCertClient, DigiCertClient
from .policy import (
    DigiCertAPIError,
    DigiCertError,
    RequestFailedError,
    ResponseParsingError,
)

__all__ = [
    # clients
    "DigiCertClient", "AsyncDigiCertClient", "DigiCertMockClient",
    # config
    "ClientConfig", "config_from_env", "load_client_config",
    # contracts
    "APIError", "Certificate", "CertificateSubmissionResponse", "CloudRequest",
    "Container", "Order", "Organization", "Page", "Product", "RequestOutcome",
    "RequestStatus", "SignatureHash", "SubmissionRequest", "WildcardRequest",
    # errors
    "DigiCertAPIError", "DigiCertError", "RequestFailedError", "ResponseParsingError",
]
