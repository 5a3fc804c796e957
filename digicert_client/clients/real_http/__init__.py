"""
Real HTTP clients.

These clients communicate with the DigiCert CertCentral v2 REST API.

Important:
- Must implement the same interface as the mock client
- Must return data shaped according to digicert_client/contracts/*
"""

from .async_digicert import AsyncDigiCertClient
from .digicert import DigiCertClient
from .executor import AsyncRequestExecutor, RequestExecutor

__all__ = ["AsyncDigiCertClient", "DigiCertClient", "AsyncRequestExecutor", "RequestExecutor"]
