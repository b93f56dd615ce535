"""
=============================================================================
ACCESS LOG ESCAPING
=============================================================================

Exception messages often echo request data (a path, a header value) and
end up in the access and error logs. A raw CR/LF in that data would let a
client forge extra log lines:

    GET /foo%0D%0A127.0.0.1 - - "GET /admin" 200

    ┌─────────────────────────────────────────────────────────────────────┐
    │ raw:      Not found: /foo\r\n127.0.0.1 - - "GET /admin" 200        │
    │ escaped:  Not found: /foo\\r\\n127.0.0.1 - - "GET /admin" 200      │
    └─────────────────────────────────────────────────────────────────────┘

escape() rewrites every run of control characters (C0, DEL, C1) and every
backslash into its backslash-escaped form, so the logged text stays on one
line and stays unambiguous.

Escapes follow Python's unicode_escape form: ESC is written \\x1b and
NEL is written \\x85.

=============================================================================
"""

import re


# Control characters plus the backslash itself, so "\\r" typed by a client
# can't be confused with an escaped CR.
_UNSAFE_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f\\]+")


def _escape_run(match: "re.Match") -> str:
    return match.group(0).encode("unicode_escape").decode("ascii")


def escape(data) -> str:
    """
    Make a value safe to write into a log line.

        >>> escape("bad\\r\\ninjected")
        'bad\\\\r\\\\ninjected'

    Args:
        data: Text to escape. Non-strings are converted with str().

    Returns:
        The text with control characters and backslashes escaped.
    """
    return _UNSAFE_CHARS.sub(_escape_run, str(data))
