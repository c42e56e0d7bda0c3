# -*- coding: utf-8 -*-
"""Overlay and sandbox window styling."""
from PySide6 import QtGui


def apply_dark_palette(app) -> None:
    palette = QtGui.QPalette()
    palette.setColor(QtGui.QPalette.Window, QtGui.QColor(22, 22, 24))
    palette.setColor(QtGui.QPalette.WindowText, QtGui.QColor(236, 236, 236))
    palette.setColor(QtGui.QPalette.Base, QtGui.QColor(18, 18, 20))
    palette.setColor(QtGui.QPalette.Text, QtGui.QColor(236, 236, 236))
    palette.setColor(QtGui.QPalette.Button, QtGui.QColor(38, 38, 42))
    palette.setColor(QtGui.QPalette.ButtonText, QtGui.QColor(236, 236, 236))
    palette.setColor(QtGui.QPalette.Highlight, QtGui.QColor(86, 180, 240))
    palette.setColor(QtGui.QPalette.HighlightedText, QtGui.QColor(0, 0, 0))
    app.setPalette(palette)


def apply_overlay_style(widget, font_size: int = 18) -> None:
    widget.setStyleSheet(_overlay_stylesheet(font_size))


def _overlay_stylesheet(font_size: int) -> str:
    return f"""
QWidget#pairOverlay {{
  background-color: rgba(11, 16, 24, 190);
  border: 1px solid #263244;
  border-radius: 10px;
}}
QLabel {{
  color: #ffffff;
  font-size: {font_size}px;
  padding: 2px 8px;
}}
QLabel[secondary="true"] {{
  color: #c9d5ea;
}}
"""
