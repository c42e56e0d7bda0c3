import sys
import os
from PySide6 import QtWidgets, QtCore

# Add project root to path
sys.path.insert(0, os.getcwd())

def verify_overlay_layout():
    app = QtWidgets.QApplication(sys.argv)

    print("Testing PairOverlay instantiation...")
    try:
        from duallang.pipeline.capture import CaptureStatus
        from duallang.ui.overlay import PairOverlay

        status = CaptureStatus(display_duration=6.0)
        overlay = PairOverlay(status, "EN", "RU")

        # 1. Hidden until something is captured
        overlay.refresh()
        if overlay.isVisible():
            print("FAIL: overlay visible with no captured pair")
        else:
            print("PASS: overlay hidden with no captured pair")

        # 2. Shows both lines after a capture
        status.capture("Dialogue", "SHERMA_MEET", "Oh! A traveller.", "О! Путник.")
        if overlay.primary_view.text() != "EN: Oh! A traveller.":
            print(f"FAIL: primary line is {overlay.primary_view.text()!r}")
        else:
            print("PASS: primary line rendered")
        if overlay.secondary_view.text() != "RU: О! Путник.":
            print(f"FAIL: secondary line is {overlay.secondary_view.text()!r}")
        else:
            print("PASS: secondary line rendered")

        # 3. Window flags
        if overlay.windowFlags() & QtCore.Qt.WindowStaysOnTopHint:
            print("PASS: overlay stays on top")
        else:
            print("FAIL: overlay is not on top")

    except Exception as e:
        print(f"FAIL: PairOverlay error: {e}")
        import traceback
        traceback.print_exc()
        return

    print("PairOverlay layout verification completed.")

if __name__ == "__main__":
    verify_overlay_layout()
