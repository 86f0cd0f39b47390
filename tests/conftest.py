from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import jwt
import pytest
from typer.testing import CliRunner

from dropl_cli.client import DroplClient
from dropl_cli.credentials import MemoryCredentialStore
from dropl_cli.utils import Runtime

BASE_URL = "http://dropl.test"


def encode_token(claims: Optional[Dict[str, Any]] = None) -> str:
    payload = {"sub": "u123"} if claims is None else claims
    return jwt.encode(payload, "not-verified-by-the-client", algorithm="HS256")


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it handled."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            request.read()
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


def ok_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/api/files":
        return httpx.Response(200, json={"files": []})
    return httpx.Response(200, json={"ok": True})


@pytest.fixture
def token() -> str:
    return encode_token()


@pytest.fixture
def make_token() -> Callable[..., str]:
    return encode_token


@pytest.fixture
def store() -> MemoryCredentialStore:
    return MemoryCredentialStore()


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport(ok_handler)


@pytest.fixture
def runtime(store: MemoryCredentialStore, transport: RecordingTransport) -> Runtime:
    return Runtime(
        store=store,
        client_factory=lambda t: DroplClient(base_url=BASE_URL, token=t, transport=transport),
    )


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def make_client() -> Callable[..., Tuple[DroplClient, RecordingTransport]]:
    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> Tuple[DroplClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        return DroplClient(base_url=BASE_URL, token="tok", transport=transport), transport

    return factory


@pytest.fixture
def make_runtime(store: MemoryCredentialStore) -> Callable[..., Tuple[Runtime, RecordingTransport]]:
    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> Tuple[Runtime, RecordingTransport]:
        transport = RecordingTransport(handler)
        runtime = Runtime(
            store=store,
            client_factory=lambda t: DroplClient(base_url=BASE_URL, token=t, transport=transport),
        )
        return runtime, transport

    return factory
