"""
CertCentral clients.

- real_http: talks to the DigiCert REST API over httpx
- mocks: in-memory client with the same interface, no network calls

Both implement contracts.interfaces.CertificateAuthorityClient and return
data shaped according to digicert_client/contracts/*.
"""
