# -*- coding: utf-8 -*-
"""Store JSON helpers."""
from __future__ import annotations
import json
import logging
from typing import Any, Dict

from duallang.config.defaults import Locale
from duallang.host.store import InMemoryLocalizationStore

logger = logging.getLogger(__name__)


def store_to_dict(store: InMemoryLocalizationStore) -> Dict[str, Any]:
    return {
        "schema_version": "1.0",
        "active": store.current_locale().value,
        "locales": {locale.value: sheets for locale, sheets in store.tables().items()},
    }


def load_store(path: str) -> InMemoryLocalizationStore:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    locales = data.get("locales") or {}
    if not locales:
        raise ValueError(f"{path} defines no locales")
    tables = {}
    for code, sheets in locales.items():
        try:
            tables[Locale.parse(code)] = sheets
        except ValueError:
            logger.warning(f"Ignoring unknown locale {code!r} in {path}")
    return InMemoryLocalizationStore(tables, active=data.get("active", Locale.EN.value))


def save_store(path: str, store: InMemoryLocalizationStore) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(store_to_dict(store), f, ensure_ascii=False, indent=2)
