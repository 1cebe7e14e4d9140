"""
test_frame_scheduler.py
-----------------------
Tests for the one-shot frame callback slot.
"""

from cactus_run.core.runtime.frame_scheduler import FrameScheduler


def test_dispatch_without_request_does_nothing():
    scheduler = FrameScheduler()
    assert scheduler.dispatch(0) is False


def test_callback_fires_once():
    scheduler = FrameScheduler()
    seen = []
    scheduler.request(seen.append)

    assert scheduler.dispatch(16) is True
    assert scheduler.dispatch(32) is False
    assert seen == [16]


def test_callback_can_rearm_itself():
    scheduler = FrameScheduler()
    seen = []

    def frame(timestamp):
        seen.append(timestamp)
        if len(seen) < 3:
            scheduler.request(frame)

    scheduler.request(frame)
    for t in (1, 2, 3, 4):
        scheduler.dispatch(t)

    assert seen == [1, 2, 3]
    assert not scheduler.pending


def test_cancel():
    scheduler = FrameScheduler()
    scheduler.request(lambda t: None)
    scheduler.cancel()

    assert not scheduler.pending
