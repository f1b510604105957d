"""Tests for URL decoding of location values."""

from visitor_info.application import safe_url_decode


def test_percent_encoded_value_is_decoded() -> None:
    """Given a percent-encoded city, when decoding, then the text is restored."""
    assert safe_url_decode("S%C3%A3o%20Paulo") == "São Paulo"


def test_plain_value_is_unchanged() -> None:
    """Given a value without escapes, when decoding, then it is returned as-is."""
    assert safe_url_decode("Berlin") == "Berlin"


def test_invalid_utf8_sequence_returns_original() -> None:
    """Given an escape sequence that is not valid UTF-8, when decoding, then the original is kept."""
    assert safe_url_decode("%E0%A4%A") == "%E0%A4%A"


def test_none_and_empty_pass_through() -> None:
    """Given no value, when decoding, then it is returned unchanged."""
    assert safe_url_decode(None) is None
    assert safe_url_decode("") == ""
