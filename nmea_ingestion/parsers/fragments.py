"""
Multi-sentence AIS reassembly

Fragments are grouped by (channel, talker, sequence id). A group is
decoded once its last fragment arrives in order. Groups are dropped when
the buffer is full (oldest first), when they go stale (counted in input
lines, not wall-clock time), or when fragments arrive out of order.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AisFragmentKey:
    channel: Optional[str]
    talker: str
    sequence_id: Optional[int]


@dataclass
class _FragmentGroup:
    total: int
    first_line: int
    payloads: List[str] = field(default_factory=list)


class FragmentBuffer:
    """Bounded reassembly buffer, owned by one parser"""

    def __init__(self, capacity: int = 64, max_age_lines: int = 100):
        self.capacity = capacity
        self.max_age_lines = max_age_lines
        self._groups: "OrderedDict[AisFragmentKey, _FragmentGroup]" = OrderedDict()
        self.evicted = 0

    def __len__(self) -> int:
        return len(self._groups)

    def add(
        self,
        key: AisFragmentKey,
        total: int,
        number: int,
        payload: str,
        line_number: int,
    ) -> Tuple[Optional[str], int]:
        """
        Add one fragment.

        Returns (joined payload, held) where the payload is set only when
        this fragment completes its group, and held is how many fragments
        of the group are buffered after this call (0 if it was dropped).
        """
        self._expire(line_number)

        if number == 1:
            if key in self._groups:
                logger.debug(f"Restarting incomplete AIS group {key}")
                del self._groups[key]
            self._make_room()
            group = _FragmentGroup(total=total, first_line=line_number)
            self._groups[key] = group
        else:
            group = self._groups.get(key)
            if group is None or group.total != total or len(group.payloads) != number - 1:
                if group is not None:
                    logger.debug(f"Dropping AIS group {key}: fragment {number}/{total} out of order")
                    del self._groups[key]
                return None, 0

        group.payloads.append(payload)

        if len(group.payloads) == total:
            del self._groups[key]
            return ''.join(group.payloads), total

        return None, len(group.payloads)

    def clear(self):
        self._groups.clear()

    def _make_room(self):
        while self._groups and len(self._groups) >= self.capacity:
            key, _ = self._groups.popitem(last=False)
            self.evicted += 1
            logger.debug(f"Evicted incomplete AIS group {key} (buffer full)")

    def _expire(self, line_number: int):
        stale = [
            key for key, group in self._groups.items()
            if line_number - group.first_line > self.max_age_lines
        ]
        for key in stale:
            del self._groups[key]
            self.evicted += 1
            logger.debug(f"Evicted stale AIS group {key}")
