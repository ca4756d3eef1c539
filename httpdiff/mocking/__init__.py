"""Mock endpoints that record what the code under test sent."""

from httpdiff.core.models import load_recorded_requests
from httpdiff.mocking.recorder import NO_REQUESTS, MockedResponse, RequestRecorder

__all__ = [
    "MockedResponse",
    "RequestRecorder",
    "NO_REQUESTS",
    "load_recorded_requests",
]
