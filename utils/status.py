"""
Status Module - Single-slot, self-clearing status message
"""

import threading
import time


class StatusSlot:
    """
    Holds one status message with an optional clear deadline.

    A new message replaces the old one together with its deadline, so only
    the latest message's delay decides when the slot empties.
    """

    def __init__(self, clock=time.monotonic):
        self._clock = clock
        self._lock = threading.Lock()
        self._message = ''
        self._clear_at = None

    def set(self, message, clear_after=None):
        """
        Show a message

        Args:
            message (str): Text to show
            clear_after (float, optional): Seconds until the slot empties;
                None keeps the message until it is replaced
        """
        with self._lock:
            self._message = message
            self._clear_at = None if clear_after is None else self._clock() + clear_after

    def clear(self):
        with self._lock:
            self._message = ''
            self._clear_at = None

    @property
    def message(self):
        with self._lock:
            if self._clear_at is not None and self._clock() >= self._clear_at:
                self._message = ''
                self._clear_at = None
            return self._message

    def __str__(self):
        return self.message
