"""Tests for wildcard / cloud certificate submissions."""

from datetime import date

import httpx
import pytest

from digicert_client.clients.real_http.digicert import DigiCertClient
from digicert_client.config import ClientConfig
from digicert_client.contracts.submissions import RequestStatus, SignatureHash
from digicert_client.policy.exceptions import DigiCertAPIError, ResponseParsingError

CSR = "-----BEGIN CERTIFICATE REQUEST-----\nMIIC...\n-----END CERTIFICATE REQUEST-----"


@pytest.fixture
def client(config, http_client, handler, json_response, submission_payload):
    handler.response = json_response(201, submission_payload)
    return DigiCertClient(config=config, http_client=http_client)


def test_request_wildcard_body_has_defaults_and_no_optional_fields(client, handler):
    client.request_wildcard("example.com", CSR, 42, 2)

    request = handler.last
    assert request.method == "POST"
    assert request.url.path == "/services/v2/order/certificate/ssl_wildcard"
    assert request.headers["Content-Type"] == "application/json"
    body = handler.last_json()
    assert body == {
        "certificate": {"common_name": "example.com", "csr": CSR, "signature_hash": "sha256"},
        "organization": {"id": 42},
        "validity_years": 2,
    }


def test_request_wildcard_decodes_submission_response(client):
    response = client.request_wildcard("*.example.com", CSR, 42, 1)

    assert response.id == 2001
    assert len(response.requests) == 1
    assert response.requests[0].id == 3001
    assert response.requests[0].status is RequestStatus.PENDING


def test_request_wildcard_optional_fields_are_sent_when_supplied(client, handler):
    client.request_wildcard(
        "*.example.com",
        CSR,
        42,
        1,
        signature_hash=SignatureHash.SHA384,
        organization_units=["Ops", "Web"],
        server_platform_id=45,
        profile_option="some_ev_profile",
        custom_expiration_date=date(2026, 12, 31),
        comments="rotate before launch",
        disable_renewal_notifications=True,
        renewal_of_order_id=1001,
        disable_ct=False,
    )

    body = handler.last_json()
    assert body["certificate"]["signature_hash"] == "sha384"
    assert body["certificate"]["organization_units"] == ["Ops", "Web"]
    assert body["certificate"]["server_platform"] == {"id": 45}
    assert body["certificate"]["profile_option"] == "some_ev_profile"
    assert body["custom_expiration_date"] == "2026-12-31"
    assert body["comments"] == "rotate before launch"
    assert body["disable_renewal_notifications"] is True
    assert body["renewal_of_order_id"] == 1001
    assert body["disable_ct"] is False


def test_request_cloud_places_sans_in_dns_names_in_order(client, handler):
    client.request_cloud("*.example.com", CSR, 42, 2, sans=["a.example.com", "b.example.com"])

    assert handler.last.url.path == "/services/v2/order/certificate/ssl_cloud_wildcard"
    body = handler.last_json()
    assert body["certificate"]["dns_names"] == ["a.example.com", "b.example.com"]
    assert body["certificate"]["common_name"] == "*.example.com"
    assert body["organization"] == {"id": 42}


@pytest.mark.parametrize(
    "status, expected",
    [("pending", RequestStatus.PENDING), ("approved", RequestStatus.APPROVED), ("rejected", RequestStatus.REJECTED)],
)
def test_submission_status_values(client, handler, json_response, status, expected):
    handler.response = json_response(201, {"id": 1, "requests": [{"id": 2, "status": status}]})

    response = client.request_wildcard("example.com", CSR, 42, 1)

    assert response.requests[0].status is expected


def test_unknown_submission_status_raises_parsing_error_with_raw_text(client, handler, json_response):
    handler.response = json_response(201, {"id": 1, "requests": [{"id": 2, "status": "issued"}]})

    with pytest.raises(ResponseParsingError) as excinfo:
        client.request_cloud("example.com", CSR, 42, 1, sans=["www.example.com"])

    assert '"issued"' in excinfo.value.raw_text


def test_garbage_body_surfaces_raw_text(client, handler):
    handler.response = httpx.Response(200, content=b"<html>maintenance</html>")

    with pytest.raises(ResponseParsingError) as excinfo:
        client.request_wildcard("example.com", CSR, 42, 1)

    assert excinfo.value.raw_text == "<html>maintenance</html>"


def test_submission_api_error_is_raised(client, handler, json_response):
    handler.response = json_response(400, {"errors": [{"code": "invalid_csr", "message": "Bad CSR."}]})

    with pytest.raises(DigiCertAPIError) as excinfo:
        client.request_wildcard("example.com", "junk", 42, 1)

    assert excinfo.value.code == "invalid_csr"


def test_lenient_client_returns_none_on_submission_error(handler, http_client, json_response):
    handler.response = json_response(400, {"errors": [{"code": "invalid_csr", "message": "Bad CSR."}]})
    client = DigiCertClient(config=ClientConfig(api_key="k", raise_on_error=False), http_client=http_client)

    assert client.request_wildcard("example.com", "junk", 42, 1) is None
