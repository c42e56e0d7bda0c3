# -*- coding: utf-8 -*-
"""
Page splitting and bilingual merging.

Host texts may be paginated with ``<page>`` or ``<hpage>`` markers; each page
is one screen of dialogue. Merging pairs pages by position so that page N of
the result holds page N of both languages.
"""
from __future__ import annotations
import re
from typing import Iterable, List, Optional, Sequence

DEFAULT_PAGE_MARKERS = ("<page>", "<hpage>")
DEFAULT_PAGE_DELIMITER = "<page>"
DEFAULT_INLINE_BREAK = "<br>"


class PageSplitter:
    def __init__(self, markers: Iterable[str] = DEFAULT_PAGE_MARKERS):
        self.markers = tuple(markers)
        if not self.markers:
            raise ValueError("At least one page marker is required")
        # Longest first so a marker that prefixes another never wins early
        ordered = sorted(self.markers, key=len, reverse=True)
        self._pattern = re.compile("|".join(re.escape(m) for m in ordered))

    def split(self, text: Optional[str]) -> List[str]:
        """
        Split ``text`` on any page marker.

        Without markers the text comes back untouched as a single page. With
        markers every piece is stripped and empty pieces are dropped. Empty or
        None input gives an empty list.
        """
        if not text:
            return []
        pieces = self._pattern.split(text)
        if len(pieces) == 1:
            return [text]
        return [piece.strip() for piece in pieces if piece.strip()]


class BilingualMerger:
    def __init__(
        self,
        splitter: Optional[PageSplitter] = None,
        delimiter: str = DEFAULT_PAGE_DELIMITER,
        inline_break: str = DEFAULT_INLINE_BREAK,
    ):
        self.splitter = splitter or PageSplitter()
        self.delimiter = delimiter
        self.inline_break = inline_break

    def merge(self, primary: Optional[str], secondary: Optional[str]) -> str:
        """Merge two texts page by page, primary language first."""
        if not primary or not secondary:
            return primary or ""
        primary_pages = self._pages(primary)
        secondary_pages = self._pages(secondary)
        return self.delimiter.join(self.merge_pages(primary_pages, secondary_pages))

    def merge_pages(self, primary_pages: Sequence[str], secondary_pages: Sequence[str]) -> List[str]:
        count = max(len(primary_pages), len(secondary_pages))
        merged = []
        for index in range(count):
            first = primary_pages[index] if index < len(primary_pages) else ""
            second = secondary_pages[index] if index < len(secondary_pages) else ""
            if first and second:
                merged.append(f"{first}{self.inline_break}{second}")
            else:
                # Keep the slot even when both are empty to hold page alignment
                merged.append(first or second)
        return merged

    def _pages(self, text: str) -> List[str]:
        pages = self.splitter.split(text)
        return pages or [""]


_default_splitter = PageSplitter()
_default_merger = BilingualMerger(_default_splitter)


def split_pages(text: Optional[str]) -> List[str]:
    return _default_splitter.split(text)


def merge_pages(primary: Optional[str], secondary: Optional[str]) -> str:
    return _default_merger.merge(primary, secondary)
