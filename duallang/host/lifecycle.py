# -*- coding: utf-8 -*-
"""Arms interception once the host has settled after startup."""
from __future__ import annotations
import logging
from typing import Callable

from PySide6 import QtCore

logger = logging.getLogger(__name__)


class InterceptionArmer(QtCore.QObject):
    """
    Waits ``delay_ms`` after ``start()``, then polls ``is_ready`` every
    ``poll_ms`` until it returns True and arms the controller.
    """

    armed = QtCore.Signal()

    def __init__(self, controller, is_ready: Callable[[], bool], delay_ms: int = 3000, poll_ms: int = 500, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.is_ready = is_ready
        self.delay_ms = delay_ms
        self._poll_timer = QtCore.QTimer(self)
        self._poll_timer.setInterval(poll_ms)
        self._poll_timer.timeout.connect(self.poll)
        self._started = False

    @classmethod
    def from_settings(cls, controller, is_ready, settings, parent=None) -> "InterceptionArmer":
        return cls(controller, is_ready, delay_ms=settings.arm_delay_ms, poll_ms=settings.arm_poll_ms, parent=parent)

    def start(self) -> None:
        if self._started:
            return
        self._started = True
        logger.info(f"Interception will arm after {self.delay_ms} ms")
        QtCore.QTimer.singleShot(self.delay_ms, self._begin_polling)

    def _begin_polling(self) -> None:
        if not self._started:
            return
        if not self.poll():
            self._poll_timer.start()

    def poll(self) -> bool:
        if self.controller.armed:
            self._poll_timer.stop()
            return True
        try:
            ready = bool(self.is_ready())
        except Exception as e:
            logger.warning(f"Readiness check failed: {e}")
            ready = False
        if not ready:
            return False
        self._poll_timer.stop()
        self.controller.arm()
        self.armed.emit()
        return True

    def stop(self) -> None:
        self._started = False
        self._poll_timer.stop()
        self.controller.disarm()
