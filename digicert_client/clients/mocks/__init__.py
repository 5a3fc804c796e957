"""
Mock clients.

These clients return fake (but realistic) responses without calling any external API.
They are used when:
- no CertCentral API key is available (local development, demos)
- callers want to test their own code end-to-end without network access

Important:
- Mock clients must follow the SAME interface as the real HTTP client.
- Mock clients return data shaped according to digicert_client/contracts/*
"""

from .digicert import DigiCertMockClient

__all__ = ["DigiCertMockClient"]
