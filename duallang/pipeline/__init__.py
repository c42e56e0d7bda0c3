# -*- coding: utf-8 -*-
"""Lookup interception: eligibility, guarded secondary lookup and page merge."""
from .pages import PageSplitter, BilingualMerger, split_pages, merge_pages
from .filters import EligibilityFilter
from .recursion import RecursionFlag
from .locale_guard import LocaleSwitchGuard
from .controller import InterceptionController, intercept

__all__ = [
    "PageSplitter",
    "BilingualMerger",
    "split_pages",
    "merge_pages",
    "EligibilityFilter",
    "RecursionFlag",
    "LocaleSwitchGuard",
    "InterceptionController",
    "intercept",
]
