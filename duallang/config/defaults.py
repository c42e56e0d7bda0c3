# -*- coding: utf-8 -*-
"""Default settings."""
from __future__ import annotations
import enum
import logging
import os
from dataclasses import dataclass, replace
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)


class Locale(str, enum.Enum):
    EN = "EN"
    DE = "DE"
    ES = "ES"
    FR = "FR"
    IT = "IT"
    JA = "JA"
    KO = "KO"
    PT = "PT"
    RU = "RU"
    ZH = "ZH"

    @classmethod
    def parse(cls, value) -> "Locale":
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().upper())


@dataclass(frozen=True)
class LocaleMessages:
    already_active: str
    not_found: str


LOCALE_MESSAGES: Dict[Locale, LocaleMessages] = {
    Locale.RU: LocaleMessages("<уже на русском>", "<перевод не найден>"),
    Locale.DE: LocaleMessages("<bereits auf Deutsch>", "<Übersetzung nicht gefunden>"),
    Locale.FR: LocaleMessages("<déjà en français>", "<traduction introuvable>"),
    Locale.ES: LocaleMessages("<ya en español>", "<traducción no encontrada>"),
}


def messages_for(locale: Locale) -> LocaleMessages:
    known = LOCALE_MESSAGES.get(locale)
    if known is not None:
        return known
    return LocaleMessages(
        f"<already in {locale.value}>",
        f"<{locale.value} translation not found>",
    )


@dataclass
class HookDefaults:
    primary_locale: Locale = Locale.EN
    secondary_locale: Locale = Locale.RU
    # Matched case-insensitively against the lookup sheet
    excluded_sheets: Tuple[str, ...] = (
        "MainMenu",
        "Options",
        "Controls",
        "Credits",
        "Achievements",
    )
    # Only keys carrying the description marker are merged for these
    description_only_sheets: Tuple[str, ...] = ("Quests", "Tools", "Crests")
    description_marker: str = "DESC"
    page_markers: Tuple[str, ...] = ("<page>", "<hpage>")
    page_delimiter: str = "<page>"
    inline_break: str = "<br>"
    verbose_logging: bool = False
    enable_pair_log: bool = True
    pair_log_name: str = "translation_pairs.txt"
    display_duration: float = 6.0
    arm_delay_ms: int = 3000
    arm_poll_ms: int = 500
    messages: Optional[LocaleMessages] = None

    def __post_init__(self) -> None:
        self.secondary_locale = Locale.parse(self.secondary_locale)
        self.primary_locale = Locale.parse(self.primary_locale)
        if self.messages is None:
            self.messages = messages_for(self.secondary_locale)


def get_defaults() -> HookDefaults:
    defaults = HookDefaults()
    code = os.getenv("DUALLANG_SECONDARY_LOCALE")
    if code:
        try:
            locale = Locale.parse(code)
        except ValueError:
            logger.warning(f"Unknown secondary locale {code!r}, keeping {defaults.secondary_locale.value}")
        else:
            defaults = replace(defaults, secondary_locale=locale, messages=messages_for(locale))
    if os.getenv("DUALLANG_VERBOSE") == "1":
        defaults.verbose_logging = True
    return defaults
