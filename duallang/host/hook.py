# -*- coding: utf-8 -*-
"""Post-call hook on the store's lookup function."""
from __future__ import annotations
import functools
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

Postfix = Callable[[str, str, str], str]


class LookupHook:
    """
    Wraps ``store.get`` so that every completed lookup is handed to ``postfix``.

    The postfix receives ``(key, sheet, result)`` and returns the value the
    caller will see in place of ``result``.
    """

    def __init__(self, store, postfix: Postfix):
        self.store = store
        self.postfix = postfix
        self._original: Optional[Callable[[str, str], str]] = None

    @property
    def installed(self) -> bool:
        return self._original is not None

    def install(self) -> None:
        if self.installed:
            return
        original = self.store.get

        @functools.wraps(original)
        def patched_get(key: str, sheet: str) -> str:
            result = original(key, sheet)
            return self.postfix(key, sheet, result)

        self._original = original
        self.store.get = patched_get
        logger.info(f"Lookup hook installed on {type(self.store).__name__}.get")

    def uninstall(self) -> None:
        if not self.installed:
            return
        # Drop the instance attribute so the class method is visible again
        if "get" in vars(self.store):
            del self.store.get
        if self.store.get != self._original:
            self.store.get = self._original
        self._original = None
        logger.info("Lookup hook removed")
