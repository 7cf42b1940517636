from __future__ import annotations

import logging

import pytest

from autosubsync.notifier import Notifier


def test_notify_shows_and_logs(session, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="autosubsync.notifier"):
        Notifier(session).notify("Subtitle synchronized.", "info", 2)

    assert session.messages == [("Subtitle synchronized.", 2)]
    assert caplog.records[-1].levelno == logging.INFO


def test_fatal_notifications_log_as_critical(session, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="autosubsync.notifier"):
        Notifier(session).notify("Parsing failed or no args passed.", "fatal", 3)

    assert caplog.records[-1].levelno == logging.CRITICAL


def test_unknown_level_is_rejected(session) -> None:
    with pytest.raises(ValueError):
        Notifier(session).notify("hello", "loud")
    assert session.messages == []
