"""
NMEA 4.10 Tag Block Parser

Format: \\s:2573515,c:1643588424*09\\!BSVDM,...
         |                       | |
         |                       | +-- Checksum over the interior
         |                       +---- '*' separator
         +---------------------------- code:value pairs

Codes: c (unix time), d (destination), g (grouping a-b-c),
n (line count), r (relative time), s (source), t/i (text).
Unknown codes are kept as opaque strings.
"""

import logging
from typing import Optional, Tuple

from ..schema import SentenceGrouping, TagBlock
from .checksum import checksum_matches, format_checksum, split_checksum
from .errors import FrameError

logger = logging.getLogger(__name__)

INTEGER_FIELDS = {
    'c': 'unix_timestamp',
    'n': 'line_count',
    'r': 'relative_time',
}

TEXT_FIELDS = {
    'd': 'destination',
    's': 'source_station',
    't': 'text',
    'i': 'text',
}


def split_tag_block(line: str) -> Tuple[Optional[str], str]:
    """
    Separate the tag block interior from the sentence.

    Returns (interior or None, remainder). A line starting with a
    backslash but lacking the closing one is a frame error.
    """
    if not line.startswith('\\'):
        return None, line

    end = line.find('\\', 1)
    if end < 0:
        raise FrameError("tag block is not closed with '\\'")

    return line[1:end], line[end + 1:]


def parse_tag_block(interior: str) -> TagBlock:
    """
    Parse the text between the two backslashes.

    Malformed values become issues on the returned TagBlock rather
    than errors, so the sentence that follows is still decoded.
    """
    content, checksum = split_checksum(interior)
    tag_block = TagBlock()

    if checksum is not None:
        tag_block.checksum = checksum
        tag_block.checksum_valid = checksum_matches(content, checksum)

    if not content:
        return tag_block

    for pair in content.split(','):
        if ':' not in pair:
            tag_block.add_issue(f"malformed tag block field '{pair}'")
            continue

        code, value = pair.split(':', 1)
        tag_block._codes.append(code)

        if code in INTEGER_FIELDS:
            try:
                setattr(tag_block, INTEGER_FIELDS[code], int(value))
            except ValueError:
                tag_block.add_issue(f"invalid integer for '{code}': '{value}'")
        elif code in TEXT_FIELDS:
            setattr(tag_block, TEXT_FIELDS[code], value)
        elif code == 'g':
            grouping = _parse_grouping(value)
            if grouping is None:
                tag_block.add_issue(f"invalid grouping for 'g': '{value}'")
            else:
                tag_block.grouping = grouping
        else:
            if tag_block.extra is None:
                tag_block.extra = {}
            tag_block.extra[code] = value

    if tag_block.checksum_valid is False:
        logger.debug(f"Tag block checksum mismatch: {interior}")

    return tag_block


def serialize_tag_block(tag_block: TagBlock) -> str:
    """Re-serialize as ``\\...*HH\\`` with a freshly computed checksum"""
    interior = tag_block.interior()
    return f"\\{interior}*{format_checksum(interior)}\\"


def _parse_grouping(value: str) -> Optional[SentenceGrouping]:
    parts = value.split('-')
    if len(parts) != 3:
        return None
    try:
        number, total, group_id = (int(p) for p in parts)
    except ValueError:
        return None
    return SentenceGrouping(
        sentence_number=number,
        total_sentences=total,
        group_id=group_id,
    )
