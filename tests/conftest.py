"""Pytest fixtures for the CertCentral client tests."""

import json

import httpx
import pytest

from digicert_client.config import ClientConfig

API_KEY = "test-devkey"


@pytest.fixture
def config():
    return ClientConfig(api_key=API_KEY)


@pytest.fixture
def orders_payload():
    """Two orders as returned by GET order/certificate."""
    def order(order_id, common_name, created, price=None):
        body = {
            "id": order_id,
            "certificate": {
                "id": order_id + 1,
                "common_name": common_name,
                "dns_names": [common_name],
                "valid_till": "2027-01-31",
                "signature_hash": "sha256",
            },
            "status": "issued",
            "date_created": created,
            "organization": {"id": 112233, "name": "Example Org, Inc."},
            "validity_years": 2,
            "container": {"id": 5, "name": "Example Org, Inc."},
            "product": {"name_id": "ssl_wildcard", "name": "Wildcard SSL", "type": "ssl_certificate"},
        }
        if price is not None:
            body["price"] = price
        return body

    return {
        "orders": [
            order(1001, "*.example.com", "2025-01-30T17:02:44+00:00", price=688),
            order(1002, "*.example.org", "2025-02-01T08:00:00Z"),
        ],
        "page": {"total": 2, "limit": 0, "offset": 0},
    }


@pytest.fixture
def submission_payload():
    return {"id": 2001, "requests": [{"id": 3001, "status": "pending"}]}


def _json_response(status_code, payload):
    return httpx.Response(status_code, content=json.dumps(payload).encode("utf-8"))


@pytest.fixture
def json_response():
    """Build an httpx.Response with a JSON body."""
    return _json_response


class RecordingHandler:
    """MockTransport handler that records requests and replies with a fixed response."""

    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc("mock transport failure", request=request)
        return self.response

    @property
    def last(self):
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def handler():
    return RecordingHandler(response=httpx.Response(200, content=b"{}"))


@pytest.fixture
def http_client(handler):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    yield client
    client.close()
