"""Pytest fixtures for httpdiff tests."""

from __future__ import annotations

from collections.abc import Iterator

import httpx
import pytest

from httpdiff.mocking import MockedResponse, RequestRecorder


class FailingStream(httpx.SyncByteStream):
    """Body stream that fails on first read and remembers being closed."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error or httpx.ReadError("connection dropped")
        self.closed = False

    def __iter__(self) -> Iterator[bytes]:
        raise self.error
        yield b""  # pragma: no cover

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep HTTPDIFF_* variables and stray .env files out of tests."""
    for key in (
        "HTTPDIFF_TIMEOUT",
        "HTTPDIFF_FOLLOW_REDIRECTS",
        "HTTPDIFF_VERIFY_SSL",
        "HTTPDIFF_BODY_ENCODING",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def recorder() -> RequestRecorder:
    return RequestRecorder(MockedResponse(status=201, body="created"))


@pytest.fixture
def recording_client(recorder: RequestRecorder) -> Iterator[httpx.Client]:
    with httpx.Client(transport=recorder.transport()) as client:
        yield client


@pytest.fixture
def echo_client() -> Iterator[httpx.Client]:
    """Client whose server echoes the request body back with a 200."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            headers={"X-Echo-Method": request.method},
            content=request.read(),
        )

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        yield client
