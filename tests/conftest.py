"""Pytest configuration and fixtures for MAAS client tests."""

import json
from dataclasses import dataclass, field

import httpx
import pytest

from maasclient import Client
from maasclient.transport.base import Transport
from maasclient.transport.envelope import Envelope

API_KEY = "ck:tk:ts"
ENDPOINT = "http://maas.example:5240/MAAS"


@dataclass
class Call:
    method: str
    path: str
    params: dict
    body: bytes | None = None
    content_type: str | None = None
    content_length: int | None = None


@dataclass
class RecordingTransport(Transport):
    """Replays queued envelopes and records every call a controller makes."""

    responses: list = field(default_factory=list)
    calls: list = field(default_factory=list)
    closed: bool = False

    def reply(self, payload=None, status: int = 200) -> "RecordingTransport":
        body = payload if isinstance(payload, bytes) else json.dumps(payload).encode()
        self.responses.append(Envelope(status_code=status, body=body))
        return self

    def _record(self, method, path, params, **extra) -> Envelope:
        # Snapshot: controllers reuse and reset their Params between calls.
        snapshot = {k: list(v) for k, v in params.values().items()} if params is not None else {}
        self.calls.append(Call(method, path, snapshot, **extra))
        if not self.responses:
            return Envelope(status_code=204, body=b"")
        return self.responses.pop(0)

    def get(self, path, params=None):
        return self._record("GET", path, params)

    def post(self, path, params=None):
        return self._record("POST", path, params)

    def post_form(self, path, content_type, params, body):
        return self._record("POST", path, params, body=body, content_type=content_type)

    def put(self, path, params, body, content_length):
        return self._record("PUT", path, params, body=body, content_length=content_length)

    def put_params(self, path, params=None):
        return self._record("PUT", path, params)

    def delete(self, path, params=None):
        return self._record("DELETE", path, params)

    def close(self):
        self.closed = True


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def client(transport: RecordingTransport) -> Client:
    """Client wired to the recording transport; no network, no config lookup."""
    return Client(ENDPOINT, API_KEY, transport=transport)


@pytest.fixture
def captured():
    """Requests seen by ``http_client``; the handler answers with ``captured.reply``."""

    class Captured:
        def __init__(self):
            self.requests: list[httpx.Request] = []
            self.reply = httpx.Response(200, json={})

        def handler(self, request: httpx.Request) -> httpx.Response:
            request.read()
            self.requests.append(request)
            return httpx.Response(self.reply.status_code, headers=self.reply.headers, content=self.reply.content)

    return Captured()


@pytest.fixture
def http_client(captured) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(captured.handler))


@pytest.fixture
def sample_machine_data() -> dict:
    return {
        "system_id": "abc123",
        "fqdn": "node1.maas",
        "hostname": "node1",
        "zone": {"id": 1, "name": "az1", "description": ""},
        "pool": {"id": 0, "name": "default", "description": ""},
        "power_state": "off",
        "power_type": "ipmi",
        "ip_addresses": ["10.0.0.10"],
        "status_name": "Ready",
        "osystem": "ubuntu",
        "distro_series": "jammy",
        "swap_size": None,
        "memory": 16384,
        "storage": 250059.35,
        "boot_interface": {"id": 7, "name": "br0", "type": "bridge", "children": []},
    }
