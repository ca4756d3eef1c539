"""Tests for compare_requests and compare_responses."""

from __future__ import annotations

import httpx
import pytest

from httpdiff.comparison import (
    REQUEST_MISMATCH,
    RESPONSE_MISMATCH,
    compare_requests,
    compare_responses,
)
from httpdiff.core import RequestModel, ResponseModel
from httpdiff.errors import BodyReadError
from tests.conftest import FailingStream

WANT_REQUEST = RequestModel(
    method="POST",
    url="http://hello-there.com/greet",
    headers={"Header1": "a different value"},
    body="goodbye buddy!",
)


def _with_headers(model: RequestModel, headers: dict) -> RequestModel:
    return RequestModel.model_validate({**model.model_dump(), "headers": headers})


class TestCompareRequests:
    """Tests for request comparison."""

    def test_requests_not_equal(self) -> None:
        got = RequestModel(
            method="DELETE",
            url="http://hello.com/greet",
            headers={"Header1": "some value", "Header2": "some other value"},
            body="hello buddy!",
        )

        diff = compare_requests(got, WANT_REQUEST)

        assert diff == (
            "request does not match what is expected:\n"
            'header "Header1" got value "some value", want "a different value"\n'
            'got method "DELETE", want "POST"\n'
            "got url:\n"
            '  "http://hello.com/greet"\n'
            "want:\n"
            '  "http://hello-there.com/greet"\n'
            "body is not expected, strings differ at index 0, from that index on:\n"
            "##### got string #####\n"
            "hello buddy!\n"
            "##### want string #####\n"
            "goodbye buddy!"
        )
        assert "Header2" not in diff

    def test_requests_equal_ignores_extra_headers(self) -> None:
        got = RequestModel(
            method="POST",
            url="http://hello-there.com/greet",
            headers={"Header1": "a different value", "Header2": "some value"},
            body="goodbye buddy!",
        )
        assert compare_requests(got, WANT_REQUEST) == ""

    def test_live_request(self) -> None:
        got = httpx.Request(
            "DELETE",
            "http://hello.com/greet",
            headers={"Header1": "some value", "Header2": "some other value"},
            content=b"hello buddy!",
        )

        diff = compare_requests(got, WANT_REQUEST)

        lines = diff.split("\n")
        assert lines[0] == REQUEST_MISMATCH
        assert lines[1] == 'header "Header1" got value "some value", want "a different value"'
        assert lines[2] == 'got method "DELETE", want "POST"'
        assert "Header2" not in diff

    def test_live_request_matches(self) -> None:
        got = httpx.Request(
            "POST",
            "http://hello-there.com/greet",
            headers={"header1": "a different value"},
            content="goodbye buddy!",
        )
        assert compare_requests(got, WANT_REQUEST) == ""

    def test_live_request_with_unreadable_body(self) -> None:
        def body():
            yield b"partial"
            raise OSError("disk gone")

        got = httpx.Request("POST", "http://hello-there.com/greet", content=body())
        with pytest.raises(BodyReadError):
            compare_requests(got, WANT_REQUEST)

    def test_async_live_request_is_a_setup_error(self) -> None:
        async def body():
            yield b"goodbye buddy!"

        got = httpx.Request("POST", "http://hello-there.com/greet", content=body())
        with pytest.raises(BodyReadError) as exc_info:
            compare_requests(got, WANT_REQUEST)
        assert not isinstance(exc_info.value, AssertionError)

    def test_missing_header(self) -> None:
        got = _with_headers(WANT_REQUEST, {})
        assert compare_requests(got, WANT_REQUEST) == (
            f"{REQUEST_MISMATCH}\n"
            'header "Header1" got value "", want "a different value"'
        )

    def test_header_names_are_case_insensitive(self) -> None:
        got = _with_headers(WANT_REQUEST, {"HEADER1": "a different value"})
        assert compare_requests(got, WANT_REQUEST) == ""

    def test_only_first_header_value_is_compared(self) -> None:
        got = _with_headers(WANT_REQUEST, {"Header1": ["a different value", "something else"]})
        assert compare_requests(got, WANT_REQUEST) == ""

    def test_one_line_per_mismatched_header(self) -> None:
        want = RequestModel(
            method="GET",
            url="http://api.local/",
            headers={"Accept": "application/json", "X-Request-Id": "42"},
        )
        got = RequestModel(
            method="GET",
            url="http://api.local/",
            headers={"Accept": "text/html", "X-Request-Id": "43"},
        )
        assert compare_requests(got, want).split("\n") == [
            REQUEST_MISMATCH,
            'header "Accept" got value "text/html", want "application/json"',
            'header "X-Request-Id" got value "43", want "42"',
        ]

    def test_url_only(self) -> None:
        got = WANT_REQUEST.model_copy(update={"url": "http://hello-there.com/greet?lang=en"})
        assert compare_requests(got, WANT_REQUEST) == (
            f"{REQUEST_MISMATCH}\n"
            "got url:\n"
            '  "http://hello-there.com/greet?lang=en"\n'
            "want:\n"
            '  "http://hello-there.com/greet"'
        )

    def test_quoting_escapes(self) -> None:
        got = WANT_REQUEST.model_copy(update={"method": 'PO"ST'})
        assert 'got method "PO\\"ST", want "POST"' in compare_requests(got, WANT_REQUEST)

    def test_idempotent(self) -> None:
        got = RequestModel(method="GET", url="http://hello.com/", body="x")
        assert compare_requests(got, WANT_REQUEST) == compare_requests(got, WANT_REQUEST)


WANT_RESPONSE = ResponseModel(
    status_code=200,
    headers={"Header1": "a different value"},
    body="hello buddy-ol-pal!",
)


class TestCompareResponses:
    """Tests for response comparison."""

    def test_responses_not_equal(self) -> None:
        got = httpx.Response(
            101,
            headers={"Header1": "some value", "Header2": "some other value"},
            content=b"hello buddy!",
        )

        assert compare_responses(got, WANT_RESPONSE) == (
            "response does not match what is expected:\n"
            "got status code 101, want 200\n"
            'header "Header1" got value "some value", want "a different value"\n'
            "body is not expected, strings differ at index 11, from that index on:\n"
            "##### got string #####\n"
            "!\n"
            "##### want string #####\n"
            "-ol-pal!"
        )

    def test_responses_equal(self) -> None:
        got = httpx.Response(
            200,
            headers={"Header1": "a different value", "Header2": "some other value"},
            content=b"hello buddy-ol-pal!",
        )
        assert compare_responses(got, WANT_RESPONSE) == ""

    def test_models_equal(self) -> None:
        assert compare_responses(WANT_RESPONSE, WANT_RESPONSE) == ""

    @pytest.mark.parametrize(
        ("update", "want_line"),
        [
            ({"status_code": 404}, "got status code 404, want 200"),
            (
                {"headers": {"Header1": "nope"}},
                'header "Header1" got value "nope", want "a different value"',
            ),
            (
                {"body": "hello buddy-ol-pal!!"},
                "body is not expected, got a longer string than what we wanted "
                "(characters match otherwise) and the extra characters are: !",
            ),
        ],
    )
    def test_single_mismatch(self, update: dict, want_line: str) -> None:
        got = ResponseModel(**{**WANT_RESPONSE.model_dump(), **update})
        assert compare_responses(got, WANT_RESPONSE) == f"{RESPONSE_MISMATCH}\n{want_line}"

    def test_unreadable_body_raises_and_closes(self) -> None:
        stream = FailingStream()
        got = httpx.Response(200, stream=stream)

        with pytest.raises(BodyReadError) as exc_info:
            compare_responses(got, WANT_RESPONSE)

        assert isinstance(exc_info.value.cause, httpx.ReadError)
        assert stream.closed
