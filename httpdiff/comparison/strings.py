"""Character-level string diffing.

compare_strings reports where two strings first diverge rather than
computing an edit script. Test failures are usually "right up to a
point", so the first divergence plus the remaining text of both sides is
the most useful thing to show.

Indexing is byte-oriented: str inputs are encoded as UTF-8 and compared
byte by byte. With multi-byte text the reported index is a byte offset
and may fall inside a character; the suffixes are then shown with
``\\xNN`` escapes for the partial character. This is a known limitation.
"""

from __future__ import annotations

_ENCODING = "utf-8"


def _to_bytes(value: str | bytes) -> bytes:
    if isinstance(value, bytes):
        return value
    try:
        return value.encode(_ENCODING, errors="surrogateescape")
    except UnicodeEncodeError:
        # lone surrogates outside the escape range
        return value.encode(_ENCODING, errors="surrogatepass")


def _to_text(value: bytes) -> str:
    return value.decode(_ENCODING, errors="backslashreplace")


def compare_strings(got: str | bytes, want: str | bytes) -> str:
    """Describe where ``got`` first diverges from ``want``.

    Returns "" when the two are equal. Useful when two large strings need
    to be compared.

    Example:
        >>> compare_strings("hello there!!", "hello there")
        'got a longer string than what we wanted (characters match otherwise) and the extra characters are: !!'
    """
    got_bytes = _to_bytes(got)
    want_bytes = _to_bytes(want)

    for i in range(len(want_bytes)):
        if i >= len(got_bytes):
            return (
                "got a shorter string than what we wanted (characters match otherwise) "
                f"and the missing characters are: {_to_text(want_bytes[i:])}"
            )
        if got_bytes[i] != want_bytes[i]:
            return (
                f"strings differ at index {i}, from that index on:\n"
                "##### got string #####\n"
                f"{_to_text(got_bytes[i:])}\n"
                "##### want string #####\n"
                f"{_to_text(want_bytes[i:])}"
            )

    if len(got_bytes) > len(want_bytes):
        return (
            "got a longer string than what we wanted (characters match otherwise) "
            f"and the extra characters are: {_to_text(got_bytes[len(want_bytes):])}"
        )
    return ""
