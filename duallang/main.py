# -*- coding: utf-8 -*-
"""Sandbox entry point: a sample host store with interception wired in."""
import argparse
import os
import sys
from pathlib import Path

SAMPLE_STORE = Path(__file__).resolve().parent / "data" / "sample_store.json"


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Bilingual lookup sandbox")
    parser.add_argument("--store", default=str(SAMPLE_STORE), help="Store JSON file")
    parser.add_argument("--log-dir", default=os.path.join(os.getcwd(), "logs"))
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_known_args(argv)


def main(argv=None) -> int:
    args, qt_args = _parse_args(sys.argv[1:] if argv is None else argv)

    from PySide6 import QtWidgets
    from duallang.config.defaults import get_defaults
    from duallang.host.hook import LookupHook
    from duallang.host.lifecycle import InterceptionArmer
    from duallang.io.store_file import load_store
    from duallang.pipeline.capture import CaptureStatus
    from duallang.pipeline.controller import InterceptionController, build_pair_log
    from duallang.ui.overlay import PairOverlay
    from duallang.ui.sandbox import SandboxWindow
    from duallang.ui.theme import apply_dark_palette
    from duallang.utils.logger import setup_logger

    settings = get_defaults()
    if args.verbose:
        settings.verbose_logging = True
    setup_logger("duallang", verbose=settings.verbose_logging, log_dir=args.log_dir)

    app = QtWidgets.QApplication([sys.argv[0], *qt_args])
    apply_dark_palette(app)

    store = load_store(args.store)
    capture = CaptureStatus(settings.display_duration)
    controller = InterceptionController(
        store,
        settings=settings,
        capture=capture,
        pair_log=build_pair_log(settings, args.log_dir),
    )
    hook = LookupHook(store, controller.postfix)
    hook.install()

    window = SandboxWindow(store, controller)
    overlay = PairOverlay(capture, settings.primary_locale.value, settings.secondary_locale.value)
    armer = InterceptionArmer.from_settings(controller, window.isVisible, settings, parent=window)
    armer.armed.connect(window.refresh_status)
    app.aboutToQuit.connect(hook.uninstall)

    window.show()
    overlay.start()
    armer.start()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
