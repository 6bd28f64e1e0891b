import pytest

from tracker.meetings.phone import only_digits, format_phone_number, dial_uri


class TestOnlyDigits:
    """Test digit extraction."""

    @pytest.mark.parametrize("raw,expected", [
        ("(705) 813-4343", "7058134343"),
        ("+1 434.434.3434", "14344343434"),
        ("ext. 12 / 34", "1234"),
        ("no digits here", ""),
        ("", ""),
    ])
    def test_only_digits(self, raw, expected):
        assert only_digits(raw) == expected

    @pytest.mark.parametrize("raw", ["(705) 813-4343", "a1b2c3", "٣٤٥-12", "   "])
    def test_result_is_digits_in_original_order(self, raw):
        """Every character is a digit and the digits keep their relative order."""
        digits = only_digits(raw)
        assert all(ch.isdecimal() for ch in digits)
        assert digits == "".join(ch for ch in raw if ch.isdecimal())

    def test_idempotent(self):
        raw = "+1 (705) 813-4343 ext 9"
        assert only_digits(only_digits(raw)) == only_digits(raw)


class TestFormatPhoneNumber:
    """Test display formatting of phone numbers."""

    def test_ten_digits(self):
        assert format_phone_number("7058134343") == "(705) 813-4343"

    def test_ten_digits_with_punctuation(self):
        assert format_phone_number("705.813.4343") == "(705) 813-4343"

    def test_eleven_digits_leading_one(self):
        assert format_phone_number("14344343434") == "+1 (434) 434-3434"

    def test_eleven_digits_without_leading_one_is_unchanged(self):
        assert format_phone_number("24344343434") == "24344343434"

    def test_short_number_is_unchanged(self):
        assert format_phone_number("12345") == "12345"

    def test_fallback_returns_original_text_not_digits(self):
        """Unformattable input comes back exactly as typed."""
        assert format_phone_number("call me: 555-0100") == "call me: 555-0100"

    def test_empty_string(self):
        assert format_phone_number("") == ""


def test_dial_uri_uses_digits_only():
    assert dial_uri("(705) 813-4343") == "tel://7058134343"
    assert dial_uri("") == "tel://"
