"""Building, sending and reading HTTP messages for tests.

These helpers wrap httpx and turn every I/O failure into a SetupError
subclass. A test that cannot build its request, reach its server or read
a body has a broken setup; there is nothing to compare, so the test must
fail outright instead of reporting a diff.

Example:
    >>> request = must_new_request("POST", "http://api.local/users", body='{"name": "John"}')
    >>> response = must_send_request(request)
    >>> diff = compare_responses(response, ResponseModel(status_code=201))
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

import httpx

from httpdiff.config import DiffConfig
from httpdiff.core.models import RequestModel, ResponseModel, normalize_headers
from httpdiff.errors import (
    BodyReadError,
    ErrorContext,
    RequestBuildError,
    RequestSendError,
)

logger = logging.getLogger(__name__)

Body = str | bytes | Iterable[bytes] | None


def must_new_request(
    method: str,
    url: str,
    body: Body = None,
    headers: Mapping[str, str] | None = None,
) -> httpx.Request:
    """Create an HTTP request suitable for sending.

    Args:
        method: HTTP method (GET, POST, ...).
        url: Absolute URL including scheme and host.
        body: Request body as str, bytes or an iterable of bytes.
        headers: Request headers.

    Returns:
        httpx.Request: The request, ready for must_send_request.

    Raises:
        RequestBuildError: If the request cannot be created.
    """
    context = ErrorContext(request={"method": method, "url": url})
    try:
        request = httpx.Request(method, url, content=body, headers=headers)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise RequestBuildError(
            f"Cannot build {method} request for {url!r}: {e}",
            context=context,
            cause=e,
        ) from e

    if not request.url.scheme or not request.url.host:
        raise RequestBuildError(
            f"Cannot build {method} request for {url!r}: URL needs a scheme and host",
            context=context,
        )

    logger.debug(f"Built request: {request.method} {request.url}")
    return request


def must_send_request(
    request: httpx.Request,
    client: httpx.Client | None = None,
    config: DiffConfig | None = None,
) -> httpx.Response:
    """Send a request and return the response.

    When no client is given a short-lived one is built from ``config``.
    The response body is fully read before it is returned.

    Raises:
        RequestSendError: If the request cannot be sent.
    """
    context = ErrorContext(request={"method": request.method, "url": str(request.url)})
    try:
        if client is not None:
            response = client.send(request)
        else:
            config = config or DiffConfig()
            with httpx.Client(
                timeout=config.timeout,
                follow_redirects=config.follow_redirects,
                verify=config.verify_ssl,
            ) as default_client:
                response = default_client.send(request)
    except httpx.HTTPError as e:
        raise RequestSendError(
            f"{request.method} {request.url} failed: {e}",
            context=context,
            cause=e,
        ) from e

    logger.debug(f"Sent {request.method} {request.url} -> {response.status_code}")
    return response


def must_read_all(source: Any, encoding: str = "utf-8") -> str:
    """Read everything from a body source and return it as text.

    ``source`` may be an httpx.Request, an httpx.Response, a file-like
    object with ``read()``, or an iterable of bytes. It is consumed
    exactly once and released (closed) whether or not reading succeeds.
    Bytes that do not decode are kept via ``surrogateescape``.

    Raises:
        BodyReadError: If the source cannot be read.
    """
    try:
        data = _read(source)
    except (httpx.HTTPError, httpx.StreamError, OSError, TypeError) as e:
        raise BodyReadError(
            f"Cannot read body from {type(source).__name__}: {e}",
            cause=e,
        ) from e

    if isinstance(data, str):
        return data
    logger.debug(f"Read {len(data)} body bytes from {type(source).__name__}")
    return data.decode(encoding, errors="surrogateescape")


def _read(source: Any) -> bytes | str:
    if isinstance(source, (httpx.Request, httpx.Response)) and not isinstance(
        source.stream, httpx.SyncByteStream
    ):
        name = type(source).__name__
        raise TypeError(f"{name} has an async body and cannot be read synchronously")
    if isinstance(source, httpx.Response):
        try:
            return source.read()
        finally:
            source.close()
    if isinstance(source, httpx.Request):
        return source.read()
    if hasattr(source, "read"):
        try:
            return source.read()
        finally:
            close = getattr(source, "close", None)
            if close is not None:
                close()
    if isinstance(source, (str, bytes)):
        return source
    return b"".join(source)


def request_to_model(request: httpx.Request, config: DiffConfig | None = None) -> RequestModel:
    """Snapshot a live request as a RequestModel.

    Reads and consumes the request body.
    """
    config = config or DiffConfig()
    return RequestModel(
        method=request.method,
        url=str(request.url),
        headers=normalize_headers(request.headers),
        body=must_read_all(request, encoding=config.body_encoding),
    )


def response_to_model(response: httpx.Response, config: DiffConfig | None = None) -> ResponseModel:
    """Snapshot a live response as a ResponseModel.

    Reads the response body and closes the response.
    """
    config = config or DiffConfig()
    return ResponseModel(
        status_code=response.status_code,
        headers=normalize_headers(response.headers),
        body=must_read_all(response, encoding=config.body_encoding),
    )
