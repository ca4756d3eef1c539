"""Checking error messages against an expected prefix."""

from __future__ import annotations


def check_error_message(err: BaseException | None, want_prefix: str) -> str:
    """Check that ``err`` has a message starting with ``want_prefix``.

    An empty ``want_prefix`` means no error is expected at all. Prefix
    matching pins down why something failed without pinning the exact
    wording of any detail appended after it.

    Returns "" when the error is as expected, otherwise a description of
    the mismatch.
    """
    if not want_prefix and err is not None:
        return f"got non-nil error: {err}"

    got = f"{err}"
    if want_prefix and (err is None or not got.startswith(want_prefix)):
        return (
            "got error message:\n"
            f"  {got}\n"
            "want error message to start with the string:\n"
            f"  {want_prefix}"
        )
    return ""
