"""
Record Schema for Decoded NMEA Data
Every input line becomes exactly one Record, success or failure.
"""

import json
from dataclasses import asdict, dataclass, is_dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


@dataclass(frozen=True)
class RawLine:
    """One input line, as read by the pipeline"""
    text: str
    source_file: str
    line_number: int


@dataclass
class ParseError:
    """Decode failure captured as data"""
    raw_sentence: str
    error: str
    line_number: int
    file: str
    kind: str = "field"


@dataclass
class AisFragment:
    """One piece of a multi-sentence AIS message that did not complete a group"""
    talker: str
    own_vessel: bool
    fragment_count: int
    fragment_number: int
    sequence_id: Optional[int]
    channel: Optional[str]
    payload: str
    fill_bits: int
    # Fragments held for this group so far, including this one
    fragments_received: int = 1


class SentenceGrouping(BaseModel):
    """Tag block ``g:`` field (sentence-of-group)"""

    sentence_number: int
    total_sentences: int
    group_id: int


class TagBlock(BaseModel):
    """NMEA 4.10 tag block"""

    unix_timestamp: Optional[int] = None      # c
    destination: Optional[str] = None         # d
    grouping: Optional[SentenceGrouping] = None  # g
    line_count: Optional[int] = None          # n
    relative_time: Optional[int] = None       # r
    source_station: Optional[str] = None      # s
    text: Optional[str] = None                # t, i
    extra: Optional[Dict[str, str]] = None    # unknown codes, kept verbatim
    checksum: Optional[str] = None
    checksum_valid: Optional[bool] = None
    issues: Optional[List[str]] = None

    # Codes in the order they appeared, for re-serialization
    _codes: List[str] = PrivateAttr(default_factory=list)

    def add_issue(self, issue: str):
        if self.issues is None:
            self.issues = []
        self.issues.append(issue)

    def _field_value(self, code: str) -> Optional[str]:
        if code == 'c':
            value = self.unix_timestamp
        elif code == 'd':
            value = self.destination
        elif code == 'g':
            g = self.grouping
            return f"{g.sentence_number}-{g.total_sentences}-{g.group_id}" if g else None
        elif code == 'n':
            value = self.line_count
        elif code == 'r':
            value = self.relative_time
        elif code == 's':
            value = self.source_station
        elif code in ('t', 'i'):
            value = self.text
        else:
            value = (self.extra or {}).get(code)
        return None if value is None else str(value)

    def interior(self) -> str:
        """Comma-joined ``code:value`` pairs, without checksum"""
        pairs = []
        for code in self._codes:
            value = self._field_value(code)
            if value is not None:
                pairs.append(f"{code}:{value}")
        return ','.join(pairs)

    def to_json_dict(self) -> dict:
        return self.model_dump(exclude_none=True)


def payload_to_dict(payload: Any) -> dict:
    """Convert a payload dataclass (possibly nested) to plain JSON data"""
    if is_dataclass(payload):
        return asdict(payload)
    return dict(payload)


class Record(BaseModel):
    """One decoded input line"""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    raw_sentence: str
    tag_block: Optional[TagBlock] = None
    message: Any
    warnings: List[str] = Field(default_factory=list)

    @property
    def message_type(self) -> str:
        return type(self.message).__name__

    @property
    def is_error(self) -> bool:
        return isinstance(self.message, ParseError)

    def to_json_dict(self) -> dict:
        """Convert to the JSON Lines record layout"""
        result = {
            "raw_sentence": self.raw_sentence,
            "tag_block": self.tag_block.to_json_dict() if self.tag_block else None,
            "message": {
                "type": self.message_type,
                "data": payload_to_dict(self.message),
            },
        }
        if self.warnings:
            result["warnings"] = list(self.warnings)
        return result

    def to_json(self, pretty: bool = False) -> str:
        return json.dumps(
            self.to_json_dict(),
            ensure_ascii=False,
            allow_nan=False,
            indent=2 if pretty else None,
        )

    def to_redis_dict(self) -> dict:
        """Flat mapping for Redis stream storage"""
        return {
            "type": self.message_type,
            "raw_sentence": self.raw_sentence,
            "record": self.to_json(),
        }
