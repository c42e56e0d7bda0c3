# -*- coding: utf-8 -*-
from __future__ import annotations
import logging

from PySide6 import QtCore, QtWidgets

from duallang.host.store import MissingEntryError

logger = logging.getLogger(__name__)


class SandboxWindow(QtWidgets.QWidget):
    """Issues lookups against the hooked store and shows what the caller gets back."""

    def __init__(self, store, controller, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Bilingual Lookup Sandbox")
        self.resize(640, 360)
        self.store = store
        self.controller = controller

        layout = QtWidgets.QVBoxLayout(self)
        form = QtWidgets.QFormLayout()
        self.sheet_combo = QtWidgets.QComboBox()
        self.sheet_combo.addItems(sorted(store.sheets().keys()))
        self.sheet_combo.currentTextChanged.connect(self._populate_keys)
        self.key_combo = QtWidgets.QComboBox()
        self.key_combo.setEditable(True)
        form.addRow("Sheet", self.sheet_combo)
        form.addRow("Key", self.key_combo)
        layout.addLayout(form)

        self.lookup_btn = QtWidgets.QPushButton("Look up")
        self.lookup_btn.clicked.connect(self.lookup)
        layout.addWidget(self.lookup_btn)

        self.result_view = QtWidgets.QPlainTextEdit()
        self.result_view.setReadOnly(True)
        layout.addWidget(self.result_view)

        self.status_label = QtWidgets.QLabel()
        layout.addWidget(self.status_label)
        self._populate_keys(self.sheet_combo.currentText())
        self.refresh_status()

    def _populate_keys(self, sheet: str) -> None:
        self.key_combo.clear()
        self.key_combo.addItems(sorted(self.store.sheets().get(sheet, {}).keys()))

    def refresh_status(self) -> None:
        state = "armed" if self.controller.armed else "waiting"
        self.status_label.setText(
            f"Active locale: {self.store.current_locale().value} | interception {state} | "
            f"merged {self.controller.merge_count}"
        )

    @QtCore.Slot()
    def lookup(self) -> None:
        sheet = self.sheet_combo.currentText()
        key = self.key_combo.currentText().strip()
        try:
            text = self.store.get(key, sheet)
        except MissingEntryError as e:
            logger.warning(f"Lookup failed: {e}")
            text = f"<missing {sheet}.{key}>"
        self.result_view.setPlainText(text.replace("<page>", "\n--- page ---\n"))
        self.refresh_status()
