"""Recording mock endpoint.

RequestRecorder stands in for a downstream API in end-to-end tests:

- The code under test sends its requests through the recorder's transport.
- The recorder answers with a canned response and keeps a RequestModel
  snapshot of every request it received.
- The test then reads the recordings back (directly, or as JSON when the
  recorder lives in another process) and compares them against what it
  expected the code to send.

Example:
    >>> recorder = RequestRecorder(MockedResponse(status=202))
    >>> client = httpx.Client(transport=recorder.transport())
    >>> client.post("http://payments.local/charges", json={"amount": 2000})
    >>> want = RequestModel(method="POST", url="http://payments.local/charges",
    ...                     body='{"amount":2000}')
    >>> assert recorder.compare_last(want) == ""
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import Lock

import httpx

from httpdiff.comparison.http import compare_requests
from httpdiff.core.models import RequestModel, dump_requests
from httpdiff.http.client import request_to_model

logger = logging.getLogger(__name__)

NO_REQUESTS = "no requests were recorded"


@dataclass(frozen=True)
class MockedResponse:
    """The canned answer a RequestRecorder gives to every request.

    ``body`` may be bytes or text; text is sent UTF-8 encoded.
    """

    status: int = 200
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | str = b""

    def build(self, request: httpx.Request) -> httpx.Response:
        content = self.body.encode("utf-8") if isinstance(self.body, str) else self.body
        return httpx.Response(self.status, headers=self.headers, content=content, request=request)


class RequestRecorder:
    """Mock endpoint that records the requests it receives."""

    def __init__(self, response: MockedResponse | None = None) -> None:
        self._response = response or MockedResponse()
        self._requests: list[RequestModel] = []
        self._lock = Lock()

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        """Record ``request`` and answer with the canned response."""
        snapshot = request_to_model(request)
        with self._lock:
            self._requests.append(snapshot)
        logger.debug(f"Recorded request: {snapshot}")
        return self._response.build(request)

    def transport(self) -> httpx.MockTransport:
        """Create an httpx transport backed by this recorder.

        Example:
            >>> client = httpx.Client(transport=recorder.transport())
        """
        return httpx.MockTransport(self.handle_request)

    @property
    def requests(self) -> list[RequestModel]:
        """Recorded requests, oldest first."""
        with self._lock:
            return list(self._requests)

    def last_request(self) -> RequestModel | None:
        with self._lock:
            return self._requests[-1] if self._requests else None

    def clear(self) -> None:
        """Forget all recorded requests."""
        with self._lock:
            self._requests.clear()

    def to_json(self) -> str:
        """Recorded requests as a JSON array (see load_recorded_requests)."""
        return dump_requests(self.requests)

    def compare_last(self, want: RequestModel) -> str:
        """Diff the most recent recorded request against ``want``."""
        last = self.last_request()
        if last is None:
            return NO_REQUESTS
        return compare_requests(last, want)

    def __len__(self) -> int:
        with self._lock:
            return len(self._requests)
