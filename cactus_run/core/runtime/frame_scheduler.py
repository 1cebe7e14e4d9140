"""
frame_scheduler.py
------------------
One-shot frame callback slot, the pygame counterpart of a browser's
requestAnimationFrame.

A callback is armed with `request()` and fired once by the host loop via
`dispatch()`. Only one callback is pending at a time; a callback that wants
another frame must request it again.
"""

from typing import Callable, Optional


class FrameScheduler:
    """Holds at most one pending frame callback."""

    def __init__(self):
        self._callback: Optional[Callable[[float], object]] = None

    @property
    def pending(self) -> bool:
        return self._callback is not None

    def request(self, callback: Callable[[float], object]):
        """Arm the next frame. Replaces any callback already pending."""
        self._callback = callback

    def cancel(self):
        self._callback = None

    def dispatch(self, timestamp: float) -> bool:
        """
        Fire the pending callback, if any.

        The slot is cleared before the call so the callback can re-arm it.

        Returns:
            bool: True if a callback ran.
        """
        callback = self._callback
        if callback is None:
            return False
        self._callback = None
        callback(timestamp)
        return True
