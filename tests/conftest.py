"""
pytest configuration and fixtures.
"""

from typing import Generator, List

import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from httpstatus import Status, STATUS_MESSAGES


# The table as published; tests compare the package against this copy.
EXPECTED_PHRASES = {
    100: "Continue",
    101: "Switching Protocols",
    200: "OK",
    201: "Created",
    202: "Accepted",
    203: "Non-Authoritative Information",
    204: "No Content",
    205: "Reset Content",
    206: "Partial Content",
    300: "Multiple Choices",
    301: "Moved Permanently",
    302: "Found",
    303: "See Other",
    304: "Not Modified",
    305: "Use Proxy",
    307: "Temporary Redirect",
    400: "Bad Request",
    401: "Unauthorized",
    402: "Payment Required",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    407: "Proxy Authentication Required",
    408: "Request Timeout",
    409: "Conflict",
    410: "Gone",
    411: "Length Required",
    412: "Precondition Failed",
    413: "Request Entity Too Large",
    414: "Request-URI Too Large",
    415: "Unsupported Media Type",
    416: "Request Range Not Satisfiable",
    417: "Expectation Failed",
    500: "Internal Server Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
    505: "HTTP Version Not Supported",
}


@pytest.fixture
def expected_phrases() -> dict:
    """The published code -> reason phrase table."""
    return EXPECTED_PHRASES


@pytest.fixture
def registered_codes() -> List[int]:
    """Every code in the status table, in ascending order."""
    return sorted(STATUS_MESSAGES)


@pytest.fixture
def escape_calls(monkeypatch) -> Generator[List[str], None, None]:
    """
    Replace the message escaper with a recording one.

    Yields the list of raw messages passed to it; the escaper itself
    upper-cases its input so tests can see it was applied.
    """
    calls: List[str] = []

    def recording_escape(message):
        calls.append(message)
        return message.upper()

    monkeypatch.setattr(Status, "escape", staticmethod(recording_escape))
    yield calls
