"""
Unit tests for log escaping.
"""

from httpstatus.accesslog import escape


class TestEscape:
    """Tests for escape()."""

    def test_plain_text_unchanged(self):
        """Test that printable text passes through."""
        assert escape("GET /index.html") == "GET /index.html"
        assert escape("café ünïcode") == "café ünïcode"

    def test_crlf_escaped(self):
        """Test that CR/LF can't start a new log line."""
        assert escape("bad\r\ninjected") == "bad\\r\\ninjected"

    def test_other_control_characters(self):
        """Test tab, NUL, ESC and DEL."""
        assert escape("a\tb") == "a\\tb"
        assert escape("\x00") == "\\x00"
        assert escape("\x1b[31m") == "\\x1b[31m"
        assert escape("\x7f") == "\\x7f"

    def test_c1_control_characters(self):
        """Test the 0x80-0x9f control range."""
        assert escape("next\x85line") == "next\\x85line"

    def test_backslash_escaped(self):
        """Test that a literal backslash is doubled."""
        assert escape("C:\\temp") == "C:\\\\temp"
        assert escape("\\r") == "\\\\r"

    def test_non_string_converted(self):
        """Test that non-strings are converted with str()."""
        assert escape(404) == "404"

    def test_empty(self):
        """Test the empty string."""
        assert escape("") == ""
