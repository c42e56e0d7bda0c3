# -*- coding: utf-8 -*-
from __future__ import annotations

from PySide6 import QtCore, QtWidgets

from duallang.pipeline.capture import CaptureStatus
from duallang.ui.theme import apply_overlay_style


class PairOverlay(QtWidgets.QWidget):
    """Frameless always-on-top strip showing the last captured pair."""

    def __init__(self, status: CaptureStatus, primary_label: str = "EN", secondary_label: str = "RU", parent=None):
        super().__init__(parent)
        self.setObjectName("pairOverlay")
        self.setWindowFlags(
            QtCore.Qt.FramelessWindowHint
            | QtCore.Qt.WindowStaysOnTopHint
            | QtCore.Qt.Tool
        )
        self.setAttribute(QtCore.Qt.WA_TranslucentBackground)
        self.setAttribute(QtCore.Qt.WA_StyledBackground)
        self.status = status
        self.primary_label = primary_label
        self.secondary_label = secondary_label
        self.resize(1400, 90)
        self.move(20, 20)

        layout = QtWidgets.QVBoxLayout(self)
        self.primary_view = QtWidgets.QLabel()
        self.secondary_view = QtWidgets.QLabel()
        self.secondary_view.setProperty("secondary", True)
        for label in (self.primary_view, self.secondary_view):
            label.setWordWrap(True)
            label.setTextFormat(QtCore.Qt.PlainText)
            layout.addWidget(label)
        apply_overlay_style(self)

        self._refresh_timer = QtCore.QTimer(self)
        self._refresh_timer.setInterval(250)
        self._refresh_timer.timeout.connect(self.refresh)
        self.status.pair_captured.connect(lambda *_: self.refresh())

    def start(self) -> None:
        self._refresh_timer.start()
        self.refresh()

    def refresh(self) -> None:
        pair = self.status.visible_pair()
        if pair is None:
            self.hide()
            return
        self.primary_view.setText(f"{self.primary_label}: {pair.primary}")
        self.secondary_view.setText(f"{self.secondary_label}: {pair.secondary}")
        if not self.isVisible():
            self.show()
