"""Unit tests for post route helpers."""

from fastapi import status

from stockboard.domain.error import NotFoundError, ValidationError
from stockboard.domain.value import PositionType, Sentiment
from stockboard.interface.api.routes.posts import (
    _http_error,
    _parse_choice,
    _parse_number,
)


class TestParseNumber:
    """Tests for lenient query number parsing."""

    def test_parses_integers_and_decimals(self):
        assert _parse_number("3") == 3.0
        assert _parse_number("2.5") == 2.5

    def test_unparsable_is_none(self):
        assert _parse_number("abc") is None
        assert _parse_number("") is None
        assert _parse_number(None) is None


class TestParseChoice:
    """Tests for enum whitelisting."""

    def test_known_values(self):
        assert _parse_choice(Sentiment, "bullish") == Sentiment.BULLISH
        assert _parse_choice(PositionType, "sell") == PositionType.SELL

    def test_unknown_values_are_ignored(self):
        assert _parse_choice(Sentiment, "euphoric") is None
        assert _parse_choice(Sentiment, "BULLISH") is None
        assert _parse_choice(PositionType, "") is None


class TestHttpError:
    """Tests for mapping use case failures onto HTTP errors."""

    def test_validation_error_is_400(self):
        exc = _http_error(ValidationError("Title is required"), "create post")

        assert exc.status_code == status.HTTP_400_BAD_REQUEST
        assert exc.detail == "Title is required"

    def test_not_found_is_404(self):
        exc = _http_error(NotFoundError("Post", "5"), "delete post")

        assert exc.status_code == status.HTTP_404_NOT_FOUND
        assert exc.detail == "Post not found: 5"

    def test_anything_else_is_500_with_message(self):
        exc = _http_error(RuntimeError("connection refused"), "list posts")

        assert exc.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert exc.detail == "connection refused"
