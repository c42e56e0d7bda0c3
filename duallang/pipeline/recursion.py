# -*- coding: utf-8 -*-
"""Re-entrancy flag for guarded secondary lookups."""
from __future__ import annotations
import threading
from contextlib import contextmanager


class RecursionFlag:
    """
    True only while a secondary-locale lookup is in progress.

    State is kept per thread, so a lookup running on one thread never
    suppresses interception on another.
    """

    def __init__(self):
        self._local = threading.local()

    @property
    def is_set(self) -> bool:
        return getattr(self._local, "active", False)

    def set(self) -> None:
        self._local.active = True

    def clear(self) -> None:
        self._local.active = False

    @contextmanager
    def held(self):
        self.set()
        try:
            yield self
        finally:
            self.clear()

    def __bool__(self) -> bool:
        return self.is_set
