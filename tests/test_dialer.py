import logging
import webbrowser
from unittest.mock import MagicMock

from tracker.meetings.dialer import dial


class TestDial:
    """Test handing tel URIs to the platform opener."""

    def test_opens_tel_uri(self):
        opener = MagicMock(return_value=True)

        assert dial("(705) 813-4343", opener=opener) is True
        opener.assert_called_once_with("tel://7058134343")

    def test_opener_refuses(self):
        opener = MagicMock(return_value=False)
        assert dial("7058134343", opener=opener) is False

    def test_opener_raises_browser_error(self):
        opener = MagicMock(side_effect=webbrowser.Error("no runnable browser"))
        assert dial("7058134343", opener=opener) is False

    def test_opener_raises_os_error(self):
        opener = MagicMock(side_effect=OSError("no telephony"))
        assert dial("7058134343", opener=opener) is False

    def test_failure_log_masks_number(self, caplog):
        caplog.set_level(logging.WARNING, logger="tracker.observability.logger")
        opener = MagicMock(return_value=False)

        dial("7058134343", opener=opener)

        message = caplog.records[-1].getMessage()
        assert "******4343" in message
        assert "7058134343" not in message
