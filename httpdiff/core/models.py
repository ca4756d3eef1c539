"""Request and response models used as the expected side of a comparison.

Models are plain values: they hold the fields of a request or response
that matter to a test, independent of any live transport object. They
also serialise to JSON, so a mock endpoint can hand the requests it
received back to the test that triggered them.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_serializer, field_validator

HeaderMap = dict[str, tuple[str, ...]]


def _header_text(value: Any, encoding: str = "latin-1") -> str:
    if isinstance(value, bytes):
        return value.decode(encoding)
    return str(value)


def normalize_headers(value: Any) -> HeaderMap:
    """Normalize headers into an insertion-ordered name -> values mapping.

    Accepts an ``httpx.Headers`` instance, a mapping whose values are a
    single string or a sequence of strings, or an iterable of
    ``(name, value)`` pairs. Repeated names accumulate values in order.
    """
    if value is None:
        return {}

    headers: dict[str, list[str]] = {}

    if isinstance(value, httpx.Headers):
        # raw keeps the original casing of each name
        for raw_name, raw_value in value.raw:
            name = _header_text(raw_name, value.encoding)
            headers.setdefault(name, []).append(_header_text(raw_value, value.encoding))
    elif isinstance(value, Mapping):
        for name, values in value.items():
            values_list = headers.setdefault(_header_text(name), [])
            if isinstance(values, (str, bytes)):
                values_list.append(_header_text(values))
            else:
                values_list.extend(_header_text(v) for v in values)
    else:
        for name, header_value in value:
            headers.setdefault(_header_text(name), []).append(_header_text(header_value))

    return {name: tuple(values) for name, values in headers.items()}


def first_header_value(headers: Mapping[str, tuple[str, ...]], name: str) -> str:
    """Return the first value of a header, looked up case-insensitively.

    A missing header, or one with no values, reads as "".
    """
    wanted = name.lower()
    for header_name, values in headers.items():
        if header_name.lower() == wanted:
            return values[0] if values else ""
    return ""


class _HeaderModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    headers: HeaderMap = Field(default_factory=dict, validate_default=True)

    @field_validator("headers", mode="before")
    @classmethod
    def _coerce_headers(cls, v: Any) -> HeaderMap:
        return normalize_headers(v)

    @field_validator("headers")
    @classmethod
    def _freeze_headers(cls, v: HeaderMap) -> Mapping[str, tuple[str, ...]]:
        # frozen=True only guards attribute assignment
        return MappingProxyType(v)

    @field_serializer("headers")
    def _serialize_headers(self, headers: Mapping[str, tuple[str, ...]]) -> HeaderMap:
        return dict(headers)

    def header(self, name: str) -> str:
        """First value of ``name`` (case-insensitive), or "" when absent."""
        return first_header_value(self.headers, name)


class RequestModel(_HeaderModel):
    """The parts of an HTTP request checked by compare_requests.

    Example:
        >>> want = RequestModel(
        ...     method="POST",
        ...     url="http://api.local/users",
        ...     headers={"Content-Type": "application/json"},
        ...     body='{"name": "John"}',
        ... )
    """

    method: str
    url: str
    body: str = ""

    def __str__(self) -> str:
        return f"{self.method} {self.url}"


class ResponseModel(_HeaderModel):
    """The parts of an HTTP response checked by compare_responses."""

    status_code: int
    body: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400


_REQUEST_LIST = TypeAdapter(list[RequestModel])


def dump_requests(requests: list[RequestModel]) -> str:
    """Serialise a list of requests to a JSON array."""
    return _REQUEST_LIST.dump_json(requests).decode("utf-8")


def load_recorded_requests(payload: str | bytes) -> list[RequestModel]:
    """Load a JSON array of requests, as produced by RequestRecorder.to_json()."""
    return _REQUEST_LIST.validate_json(payload)
