"""Comparing HTTP requests and responses against expected models.

Each comparator collects every mismatch it finds, in a fixed order, into
one diff string: a summary line followed by one entry per mismatch.
An empty string means the actual message matches.

Headers are checked as "expected is contained in actual": only the header
names present in the expected model are looked at, and only their first
value. Transport layers add headers of their own (Host, Content-Length,
User-Agent, ...) which a test has no control over, so extra actual headers
are never reported.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping

import httpx

from httpdiff.comparison.strings import compare_strings
from httpdiff.config import DiffConfig
from httpdiff.core.models import RequestModel, ResponseModel, first_header_value
from httpdiff.http.client import request_to_model, response_to_model

logger = logging.getLogger(__name__)

REQUEST_MISMATCH = "request does not match what is expected:"
RESPONSE_MISMATCH = "response does not match what is expected:"


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _header_diffs(
    got: Mapping[str, tuple[str, ...]],
    want: Mapping[str, tuple[str, ...]],
) -> list[str]:
    diffs = []
    for name in want:
        got_value = first_header_value(got, name)
        want_value = first_header_value(want, name)
        if got_value != want_value:
            diffs.append(
                f"header {_quote(name)} got value {_quote(got_value)}, want {_quote(want_value)}"
            )
    return diffs


def _body_diff(got: str, want: str) -> list[str]:
    diff = compare_strings(got, want)
    if diff:
        return ["body is not expected, " + diff]
    return []


def _join(summary: str, diffs: list[str]) -> str:
    if diffs:
        return summary + "\n" + "\n".join(diffs)
    return ""


def compare_requests(
    got: RequestModel | httpx.Request,
    want: RequestModel,
    config: DiffConfig | None = None,
) -> str:
    """Compare a request against the expected request.

    ``got`` may be a live httpx.Request, in which case its body is read
    (and consumed). A body that cannot be read raises BodyReadError.

    Checks, in order: expected headers, method, URL, body.

    Example:
        >>> want = RequestModel(method="POST", url="http://api.local/users", body="{}")
        >>> diff = compare_requests(recorded_request, want)
        >>> assert diff == "", diff
    """
    if isinstance(got, httpx.Request):
        got = request_to_model(got, config)

    diffs = _header_diffs(got.headers, want.headers)
    if got.method != want.method:
        diffs.append(f"got method {_quote(got.method)}, want {_quote(want.method)}")
    if got.url != want.url:
        diffs.append(f"got url:\n  {_quote(got.url)}\nwant:\n  {_quote(want.url)}")
    diffs.extend(_body_diff(got.body, want.body))

    if diffs:
        logger.debug(f"Request {got} differs from {want} in {len(diffs)} place(s)")
    return _join(REQUEST_MISMATCH, diffs)


def compare_responses(
    got: ResponseModel | httpx.Response,
    want: ResponseModel,
    config: DiffConfig | None = None,
) -> str:
    """Compare a response against the expected response.

    ``got`` may be a live httpx.Response, in which case its body is read
    and the response closed.

    Checks, in order: status code, expected headers, body.
    """
    if isinstance(got, httpx.Response):
        got = response_to_model(got, config)

    diffs = []
    if got.status_code != want.status_code:
        diffs.append(f"got status code {got.status_code}, want {want.status_code}")
    diffs.extend(_header_diffs(got.headers, want.headers))
    diffs.extend(_body_diff(got.body, want.body))

    if diffs:
        logger.debug(f"Response differs from expected in {len(diffs)} place(s)")
    return _join(RESPONSE_MISMATCH, diffs)
