import logging

import pytest

from clientreport.logging.logger import Log


class TestLog:
    def test_appends_fields(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="clientreport"):
            Log.info("Stored file", project=3, file="a.csv")

        assert "Stored file [project=3 file=a.csv]" in caplog.text

    def test_plain_message(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="clientreport"):
            Log.warning("Summarizer unavailable")

        assert caplog.records[-1].getMessage() == "Summarizer unavailable"

    def test_configure_sets_level(self) -> None:
        Log.configure("debug")

        assert logging.getLogger("clientreport").level == logging.DEBUG
