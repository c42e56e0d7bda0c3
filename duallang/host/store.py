# -*- coding: utf-8 -*-
"""In-memory stand-in for the host's localization store."""
from __future__ import annotations
import logging
from typing import Callable, Dict, List, Optional

from duallang.config.defaults import Locale

logger = logging.getLogger(__name__)

Tables = Dict[Locale, Dict[str, Dict[str, str]]]


class UnsupportedLocaleError(ValueError):
    """Raised when the store is asked to switch to a locale it has no table for."""


class MissingEntryError(KeyError):
    """Raised when a sheet/key pair is absent from the active locale's table."""


class InMemoryLocalizationStore:
    """
    Key/sheet -> text lookup keyed by a process-wide active locale.

    ``on_switch`` callbacks run after every successful locale switch and may
    call back into ``get``, the way a host re-resolves cached text when its
    language changes.
    """

    def __init__(self, tables: Tables, active: Locale = Locale.EN):
        self._tables: Tables = {Locale.parse(code): sheets for code, sheets in tables.items()}
        active = Locale.parse(active)
        if active not in self._tables:
            raise UnsupportedLocaleError(f"No table for locale {active.value}")
        self._active = active
        self.on_switch: List[Callable[[Locale], None]] = []
        self.switch_count = 0

    def get(self, key: str, sheet: str) -> str:
        try:
            return self._tables[self._active][sheet][key]
        except KeyError:
            raise MissingEntryError(f"{self._active.value}:{sheet}.{key}") from None

    def current_locale(self) -> Locale:
        return self._active

    def switch_locale(self, locale: Locale) -> None:
        try:
            locale = Locale.parse(locale)
        except ValueError:
            raise UnsupportedLocaleError(f"Unknown locale {locale!r}") from None
        if locale not in self._tables:
            raise UnsupportedLocaleError(f"No table for locale {locale.value}")
        self._active = locale
        self.switch_count += 1
        logger.debug(f"Active locale switched to {locale.value}")
        for callback in list(self.on_switch):
            callback(locale)

    def locales(self) -> List[Locale]:
        return list(self._tables)

    def sheets(self, locale: Optional[Locale] = None) -> Dict[str, Dict[str, str]]:
        return self._tables.get(Locale.parse(locale) if locale else self._active, {})

    def tables(self) -> Tables:
        return self._tables
