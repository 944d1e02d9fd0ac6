"""Unit tests for the capture channel."""

import threading

from noir.core.capture import CaptureChannel


class TestCaptureChannel:
    """Tests for CaptureChannel."""

    def test_publish_then_take(self):
        channel = CaptureChannel()

        assert channel.publish("selected text") is True
        assert channel.take() == "selected text"

    def test_each_capture_is_delivered_once(self):
        channel = CaptureChannel()
        channel.publish("once")

        assert channel.take() == "once"
        assert channel.take() is None

    def test_empty_text_is_ignored(self):
        channel = CaptureChannel()

        assert channel.publish("") is False
        assert channel.pending() == 0

    def test_text_is_verbatim(self):
        channel = CaptureChannel()
        text = "  leading spaces\n\ttabs and\r\nnewlines  "

        channel.publish(text)

        assert channel.take() == text

    def test_captures_keep_order(self):
        channel = CaptureChannel()
        for text in ("a", "b", "c"):
            channel.publish(text)

        assert [channel.take() for _ in range(3)] == ["a", "b", "c"]

    def test_full_backlog_drops_oldest(self):
        channel = CaptureChannel(backlog=2)
        for text in ("a", "b", "c"):
            channel.publish(text)

        assert channel.pending() == 2
        assert [channel.take(), channel.take()] == ["b", "c"]

    def test_take_times_out(self):
        assert CaptureChannel().take(timeout=0.05) is None

    def test_take_waits_for_publisher(self):
        channel = CaptureChannel()
        timer = threading.Timer(0.05, channel.publish, args=("late",))
        timer.start()
        try:
            assert channel.take(timeout=5) == "late"
        finally:
            timer.cancel()
