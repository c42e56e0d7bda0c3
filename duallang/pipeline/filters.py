# -*- coding: utf-8 -*-
"""
Entry filtering for the interception pipeline.
Responsible for deciding which sheet/key lookups get a bilingual merge.
"""
from __future__ import annotations
from typing import Iterable, Optional


class EligibilityFilter:
    """
    Decides whether a looked-up entry should be merged at all.

    Excluded sheets are never merged. Description-only sheets are merged for
    keys carrying the description marker. Everything else is merged.
    """

    def __init__(
        self,
        excluded_sheets: Iterable[str] = (),
        description_only_sheets: Iterable[str] = (),
        description_marker: str = "DESC",
    ):
        self.excluded_sheets = frozenset(s.casefold() for s in excluded_sheets if s)
        self.description_only_sheets = frozenset(s.casefold() for s in description_only_sheets if s)
        self.description_marker = description_marker.casefold()

    @classmethod
    def from_settings(cls, settings) -> "EligibilityFilter":
        return cls(
            excluded_sheets=settings.excluded_sheets,
            description_only_sheets=settings.description_only_sheets,
            description_marker=settings.description_marker,
        )

    def is_eligible(self, sheet: Optional[str], key: Optional[str] = None) -> bool:
        if not sheet or not isinstance(sheet, str):
            return False

        folded = sheet.casefold()
        if folded in self.excluded_sheets:
            return False

        if folded in self.description_only_sheets:
            if not key or not isinstance(key, str):
                return False
            return self.description_marker in key.casefold()

        return True
