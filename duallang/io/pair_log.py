# -*- coding: utf-8 -*-
"""Append-only log of merged translation pairs."""
from __future__ import annotations
import logging
import re
from datetime import datetime
from typing import List

from duallang.config.defaults import Locale
from duallang.pipeline.capture import CapturedPair

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_RECORD_RE = re.compile(
    r"^(?P<ts>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}) \| "
    r"(?P<sheet>[^.|]*)\.(?P<key>.*?) \| "
    r"(?P<plabel>[A-Z]+): (?P<primary>.*?) \| "
    r"(?P<slabel>[A-Z]+): (?P<secondary>.*)$"
)


def _one_line(text: str) -> str:
    return text.replace("\r\n", "\\n").replace("\n", "\\n").replace("\r", "\\n")


def format_record(pair: CapturedPair, primary_label: str = "EN", secondary_label: str = "RU") -> str:
    return (
        f"{pair.timestamp.strftime(TIMESTAMP_FORMAT)} | {pair.sheet}.{pair.key} | "
        f"{primary_label}: {_one_line(pair.primary)} | {secondary_label}: {_one_line(pair.secondary)}"
    )


class PairLog:
    def __init__(self, path: str, primary: Locale = Locale.EN, secondary: Locale = Locale.RU):
        self.path = path
        self.primary_label = Locale.parse(primary).value
        self.secondary_label = Locale.parse(secondary).value

    def append(self, pair: CapturedPair) -> bool:
        record = format_record(pair, self.primary_label, self.secondary_label)
        try:
            # Opened per write so external tools can rotate or tail the file
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(record + "\n")
        except OSError as e:
            logger.warning(f"Failed to write to log file {self.path}: {e}")
            return False
        return True

    def read_records(self) -> List[CapturedPair]:
        records = []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except FileNotFoundError:
            return records
        for line in lines:
            match = _RECORD_RE.match(line)
            if not match:
                logger.debug(f"Skipping malformed pair record: {line!r}")
                continue
            records.append(
                CapturedPair(
                    sheet=match.group("sheet"),
                    key=match.group("key"),
                    primary=match.group("primary"),
                    secondary=match.group("secondary"),
                    timestamp=datetime.strptime(match.group("ts"), TIMESTAMP_FORMAT),
                )
            )
        return records
