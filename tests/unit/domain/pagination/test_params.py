"""Unit tests for limit and cursor parameter parsing."""

import pytest

from learnhub.domain.error import ValidationError
from learnhub.domain.pagination import parse_cursor, parse_limit


class TestParseLimit:
    """Tests for parse_limit."""

    def test_missing_limit_uses_default(self):
        assert parse_limit(None, default=10, maximum=50) == 10
        assert parse_limit("", default=10, maximum=50) == 10

    def test_default_never_exceeds_maximum(self):
        assert parse_limit(None, default=60, maximum=40) == 40

    def test_numeric_string(self):
        assert parse_limit("25", default=10, maximum=50) == 25

    def test_clamps_to_maximum(self):
        assert parse_limit("100", default=10, maximum=40) == 40
        assert parse_limit(1000, default=10, maximum=50) == 50

    @pytest.mark.parametrize("raw", ["0", 0, "-5", -1])
    def test_rejects_non_positive(self, raw):
        with pytest.raises(ValidationError, match="greater than 0"):
            parse_limit(raw, default=10, maximum=50)

    @pytest.mark.parametrize("raw", ["ten", "2.5", "1e3", True])
    def test_rejects_non_numeric(self, raw):
        with pytest.raises(ValidationError, match="must be a number"):
            parse_limit(raw, default=10, maximum=50)


class TestParseCursor:
    """Tests for parse_cursor."""

    def test_blank_cursor_is_absent(self):
        assert parse_cursor(None) is None
        assert parse_cursor("   ") is None

    def test_cursor_is_trimmed(self):
        assert parse_cursor(" 12 ") == "12"
