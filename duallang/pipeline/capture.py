# -*- coding: utf-8 -*-
"""Most recent bilingual pair, for on-screen display."""
from __future__ import annotations
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from PySide6 import QtCore


@dataclass
class CapturedPair:
    sheet: str
    key: str
    primary: str
    secondary: str
    captured_at: float = field(default_factory=time.monotonic)
    timestamp: datetime = field(default_factory=datetime.now)


class CaptureStatus(QtCore.QObject):
    pair_captured = QtCore.Signal(str, str)

    def __init__(self, display_duration: float = 6.0, clock=time.monotonic, parent=None):
        super().__init__(parent)
        self.display_duration = display_duration
        self._clock = clock
        self.last: Optional[CapturedPair] = None

    def capture(self, sheet: str, key: str, primary: str, secondary: str) -> CapturedPair:
        pair = CapturedPair(sheet, key, primary, secondary, captured_at=self._clock())
        self.last = pair
        self.pair_captured.emit(primary, secondary)
        return pair

    def visible_pair(self, now: Optional[float] = None) -> Optional[CapturedPair]:
        pair = self.last
        if pair is None or not pair.primary or not pair.secondary:
            return None
        if now is None:
            now = self._clock()
        if now - pair.captured_at > self.display_duration:
            return None
        return pair
