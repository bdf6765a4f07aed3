"""
Record Statistics

A pure reduction over the record stream, reported at the end of a run.
"""

import logging
from collections import Counter
from typing import Iterable

from .schema import Record

logger = logging.getLogger(__name__)


class RecordStats:
    """Counts records by outcome, payload type and error kind"""

    def __init__(self):
        self.total = 0
        self.ok = 0
        self.errors = 0
        self.with_tag_block = 0
        self.with_warnings = 0
        self.by_type: Counter = Counter()
        self.errors_by_kind: Counter = Counter()

    def add(self, record: Record):
        self.total += 1
        self.by_type[record.message_type] += 1
        if record.is_error:
            self.errors += 1
            self.errors_by_kind[record.message.kind] += 1
        else:
            self.ok += 1
        if record.tag_block is not None:
            self.with_tag_block += 1
        if record.warnings:
            self.with_warnings += 1

    def track(self, records: Iterable[Record]):
        """Pass records through while counting them"""
        for record in records:
            self.add(record)
            yield record

    @property
    def error_ratio(self) -> float:
        return self.errors / self.total if self.total else 0.0

    @property
    def tag_block_ratio(self) -> float:
        return self.with_tag_block / self.total if self.total else 0.0

    def as_dict(self) -> dict:
        return {
            "total": self.total,
            "ok": self.ok,
            "errors": self.errors,
            "error_ratio": round(self.error_ratio, 4),
            "tag_block_ratio": round(self.tag_block_ratio, 4),
            "with_warnings": self.with_warnings,
            "by_type": dict(sorted(self.by_type.items())),
            "errors_by_kind": dict(sorted(self.errors_by_kind.items())),
        }

    def log_summary(self):
        logger.info(
            f"Stats: total={self.total}, ok={self.ok}, errors={self.errors} "
            f"({self.error_ratio:.1%}), tag_blocks={self.tag_block_ratio:.1%}, "
            f"warnings={self.with_warnings}"
        )
        for name, count in self.by_type.most_common():
            logger.info(f"  {name}: {count}")
        for kind, count in self.errors_by_kind.most_common():
            logger.info(f"  error[{kind}]: {count}")
