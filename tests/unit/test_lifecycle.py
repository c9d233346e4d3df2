#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for lifecycle notices and the notice collector."""

from __future__ import annotations

from datetime import datetime

import pytest
from provide.testkit.mocking import Mock

from babylog.lifecycle import (
    BaseNotice,
    MutationDispatched,
    MutationSettled,
    Notice,
    NoticeCollector,
    SuggestionsApplied,
)


class TestNotices:
    """Test notice creation and formatting."""

    def test_base_notice_defaults(self) -> None:
        """Test timestamp and metadata defaults."""
        notice = BaseNotice(description="hello")
        assert isinstance(notice.timestamp, datetime)
        assert notice.metadata == {}
        assert notice.source == "babylog"

    def test_notices_are_immutable(self) -> None:
        """Test that notices are frozen."""
        notice = BaseNotice(description="hello")
        with pytest.raises(AttributeError):
            notice.description = "changed"

    def test_format(self) -> None:
        """Test the single-line format."""
        notice = MutationDispatched(
            description="UPDATE_BATH_EVENT b1",
            timestamp=datetime(2025, 3, 14, 9, 30, 5),
            action="UPDATE_BATH_EVENT",
            event_id="b1",
        )
        assert notice.format() == "[09:30:05] [mutation] UPDATE_BATH_EVENT b1"

    def test_settled_format_includes_outcome(self) -> None:
        """Test the failure outcome in the settled format."""
        notice = MutationSettled(
            description="REMOVE_NOTE_EVENT n1",
            action="REMOVE_NOTE_EVENT",
            event_id="n1",
            succeeded=False,
            error="timeout",
        )
        assert notice.format().endswith("(failed: timeout)")

    def test_protocol_conformance(self) -> None:
        """Test that every notice satisfies the Notice protocol."""
        notice = SuggestionsApplied(description="2 suggestions", profile_id="p1", search_text="a", count=2)
        assert isinstance(notice, Notice)


class TestNoticeCollector:
    """Test fan-out of notices to handlers."""

    def test_subscribe_and_emit(self) -> None:
        """Test that every handler receives the notice in order."""
        collector = NoticeCollector()
        received = []
        collector.subscribe(lambda n: received.append(("first", n)))
        collector.subscribe(lambda n: received.append(("second", n)))

        notice = BaseNotice(description="x")
        collector.emit(notice)

        assert received == [("first", notice), ("second", notice)]

    def test_unsubscribe(self) -> None:
        """Test that unsubscribed handlers no longer receive notices, and unknown ones are ignored."""
        collector = NoticeCollector()
        handler = Mock()
        collector.subscribe(handler)
        collector.unsubscribe(handler)
        collector.unsubscribe(handler)

        collector.emit(BaseNotice(description="x"))
        handler.assert_not_called()

    def test_failing_handler_does_not_stop_others(self) -> None:
        """Test that a raising handler is skipped."""
        collector = NoticeCollector()
        failing = Mock(side_effect=RuntimeError("handler bug"))
        healthy = Mock()
        collector.subscribe(failing)
        collector.subscribe(healthy)

        collector.emit(BaseNotice(description="x"))

        healthy.assert_called_once()


# 🔼⚙️🔚
