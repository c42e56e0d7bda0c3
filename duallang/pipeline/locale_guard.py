# -*- coding: utf-8 -*-
"""Scoped switch to the secondary locale for a single lookup."""
from __future__ import annotations
import logging
from typing import Callable, Optional

from duallang.config.defaults import Locale, LocaleMessages, messages_for
from duallang.pipeline.recursion import RecursionFlag

logger = logging.getLogger(__name__)


class LocaleSwitchGuard:
    """
    Runs one lookup with the store's active locale set to ``secondary``.

    The locale found on entry is restored afterwards whatever the lookup did.
    Callers never see an exception; they get back either the translation, the
    ``already_active`` sentinel (store was already on the secondary locale), or
    the ``not_found`` sentinel (lookup failed or returned no text).
    """

    def __init__(
        self,
        store,
        secondary: Locale,
        flag: Optional[RecursionFlag] = None,
        messages: Optional[LocaleMessages] = None,
    ):
        self.store = store
        self.secondary = Locale.parse(secondary)
        self.flag = flag if flag is not None else RecursionFlag()
        self.messages = messages or messages_for(self.secondary)

    @property
    def already_active(self) -> str:
        return self.messages.already_active

    @property
    def not_found(self) -> str:
        return self.messages.not_found

    def is_sentinel(self, text) -> bool:
        return text in (self.messages.already_active, self.messages.not_found)

    def with_secondary_locale(self, lookup: Callable[[], str]) -> str:
        # Raised before anything else so nested lookups see it
        self.flag.set()
        try:
            return self._switch_and_lookup(lookup)
        finally:
            self.flag.clear()

    def _switch_and_lookup(self, lookup: Callable[[], str]) -> str:
        try:
            saved = self.store.current_locale()
        except Exception as e:
            logger.warning(f"Could not read active locale: {e}")
            return self.not_found

        if saved == self.secondary:
            return self.already_active

        try:
            self.store.switch_locale(self.secondary)
            text = lookup()
        except Exception as e:
            logger.warning(f"Lookup in {self.secondary.value} failed: {e}")
            return self.not_found
        finally:
            self._restore(saved)

        if not isinstance(text, str):
            logger.warning(f"Lookup in {self.secondary.value} returned {type(text).__name__}, expected str")
            return self.not_found
        return text

    def _restore(self, saved: Locale) -> None:
        try:
            if self.store.current_locale() != self.secondary:
                # Someone else moved the locale while we held it; leave theirs
                logger.debug("Active locale changed during lookup, skipping restore")
                return
            self.store.switch_locale(saved)
        except Exception as e:
            logger.error(f"Failed to restore locale to {getattr(saved, 'value', saved)}: {e}")
