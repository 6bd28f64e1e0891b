"""
Phone number helpers.

Stored phone numbers are kept exactly as typed; these functions only derive
display and dial forms from them.
"""


def only_digits(value: str) -> str:
    """Return the decimal digits of value, in their original order."""
    return "".join(ch for ch in value if ch.isdecimal())


def format_phone_number(value: str) -> str:
    """
    Format a North American phone number for display.

    Args:
        value: Phone number as entered by the user

    Returns:
        "(xxx) xxx-xxxx" for 10 digits, "+1 (xxx) xxx-xxxx" for 11 digits
        starting with 1, otherwise the original string
    """
    digits = only_digits(value)
    if len(digits) == 10:
        return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"
    if len(digits) == 11 and digits[0] == "1":
        return f"+1 ({digits[1:4]}) {digits[4:7]}-{digits[7:]}"
    return value


def dial_uri(value: str) -> str:
    """Build the tel URI used to place a call."""
    return f"tel://{only_digits(value)}"
