import webbrowser
from typing import Callable

from tracker.meetings.phone import dial_uri
from tracker.observability.logger import log_info, log_warning, mask_phone


def dial(phone_number: str, opener: Callable[[str], bool] = webbrowser.open) -> bool:
    """
    Hand the tel URI for phone_number to the platform URL opener.

    Failures (no handler, no telephony) are logged and reported as False.

    Args:
        phone_number: Raw phone number as stored on the meeting
        opener: URL-opening function, webbrowser.open by default

    Returns:
        True if the opener accepted the URI
    """
    uri = dial_uri(phone_number)
    context = {"phone": mask_phone(phone_number)}
    try:
        opened = bool(opener(uri))
    except (webbrowser.Error, OSError) as e:
        log_warning(f"Dial failed: {e}", context)
        return False

    if not opened:
        log_warning("Dial failed: no handler accepted the tel URI", context)
        return False

    log_info("Dial started", context)
    return True
