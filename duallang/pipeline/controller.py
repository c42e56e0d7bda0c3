# -*- coding: utf-8 -*-
"""Interception controller: turns a primary lookup result into bilingual text."""
from __future__ import annotations
import logging
import os
from typing import Optional

from duallang.config.defaults import HookDefaults, get_defaults
from duallang.pipeline.capture import CapturedPair, CaptureStatus
from duallang.pipeline.filters import EligibilityFilter
from duallang.pipeline.locale_guard import LocaleSwitchGuard
from duallang.pipeline.pages import BilingualMerger, PageSplitter
from duallang.pipeline.recursion import RecursionFlag

logger = logging.getLogger(__name__)


class InterceptionController:
    """
    Post-call handler for the host's ``get(key, sheet)``.

    ``postfix`` is handed every completed lookup and returns what the caller
    should see: the merged bilingual text when a usable secondary translation
    exists, otherwise the primary result unchanged. Lookups issued while the
    controller is fetching a secondary translation pass straight through.
    """

    def __init__(
        self,
        store,
        settings: Optional[HookDefaults] = None,
        eligibility: Optional[EligibilityFilter] = None,
        merger: Optional[BilingualMerger] = None,
        flag: Optional[RecursionFlag] = None,
        capture: Optional[CaptureStatus] = None,
        pair_log=None,
    ):
        self.store = store
        self.settings = settings or get_defaults()
        self.flag = flag if flag is not None else RecursionFlag()
        self.eligibility = eligibility or EligibilityFilter.from_settings(self.settings)
        self.merger = merger or BilingualMerger(
            PageSplitter(self.settings.page_markers),
            delimiter=self.settings.page_delimiter,
            inline_break=self.settings.inline_break,
        )
        self.guard = LocaleSwitchGuard(
            store,
            self.settings.secondary_locale,
            flag=self.flag,
            messages=self.settings.messages,
        )
        self.capture = capture
        self.pair_log = pair_log
        self._armed = False
        self.merge_count = 0

    @property
    def armed(self) -> bool:
        return self._armed

    def arm(self) -> None:
        if not self._armed:
            logger.info(f"Interception armed, secondary locale {self.guard.secondary.value}")
        self._armed = True

    def disarm(self) -> None:
        self._armed = False

    def postfix(self, key: str, sheet: str, result: str) -> str:
        if not self._armed or self.flag.is_set:
            return result
        if not result:
            return result
        try:
            return self._process(key, sheet, result)
        except Exception as e:
            logger.error(f"Error in lookup interception for {sheet}.{key}: {e}", exc_info=self.settings.verbose_logging)
            return result

    def _process(self, key: str, sheet: str, primary: str) -> str:
        if not self.eligibility.is_eligible(sheet, key):
            logger.debug(f"Skipping ineligible entry {sheet}.{key}")
            return primary

        secondary = self.guard.with_secondary_locale(lambda: self.store.get(key, sheet))
        if not secondary or self.guard.is_sentinel(secondary):
            logger.debug(f"No usable secondary text for {sheet}.{key}: {secondary!r}")
            return primary

        merged = self.merger.merge(primary, secondary)
        self.merge_count += 1
        self._record(sheet, key, primary, secondary)
        return merged

    def _record(self, sheet: str, key: str, primary: str, secondary: str) -> None:
        logger.info(f"[TRANSLATION] {sheet}.{key} EN: {primary}")
        logger.info(f"[TRANSLATION] {sheet}.{key} {self.guard.secondary.value}: {secondary}")
        pair = None
        if self.capture is not None:
            pair = self.capture.capture(sheet, key, primary, secondary)
        if self.pair_log is not None:
            if pair is None:
                pair = CapturedPair(sheet, key, primary, secondary)
            self.pair_log.append(pair)


def intercept(
    key: str,
    sheet: str,
    primary: str,
    lookup_backend,
    settings: Optional[HookDefaults] = None,
    flag: Optional[RecursionFlag] = None,
) -> str:
    """
    One-shot interception against ``lookup_backend``.

    Equivalent to an armed controller's ``postfix``: returns the merged text,
    or ``primary`` unchanged when nothing should be merged.
    """
    controller = InterceptionController(lookup_backend, settings=settings, flag=flag)
    controller.arm()
    return controller.postfix(key, sheet, primary)


def build_pair_log(settings: HookDefaults, log_dir: str):
    if not settings.enable_pair_log:
        return None
    from duallang.io.pair_log import PairLog
    os.makedirs(log_dir, exist_ok=True)
    path = os.path.join(log_dir, settings.pair_log_name)
    logger.info(f"Translation logging enabled. File: {path}")
    return PairLog(path, primary=settings.primary_locale, secondary=settings.secondary_locale)
