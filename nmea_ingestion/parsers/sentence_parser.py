"""
NMEA 0183 / 4.10 Sentence Parser

Classifies one input line and dispatches it to the matching decoder.

Format: \\s:2573515,c:1643588424*09\\!AIVDM,1,1,,A,15NG6V0P01PrRcsQVCoP8ch2089h,0*30
        |                         | |     | | || |                            | |
        |                         | |     | | || |                            | +-- Checksum (XOR)
        |                         | |     | | || |                            +---- Fill bits
        |                         | |     | | || +--------------------------------- Payload (6-bit ASCII)
        |                         | |     | | |+----------------------------------- Radio channel
        |                         | |     | | +------------------------------------ Sequential message ID
        |                         | |     | +-------------------------------------- Sentence number
        |                         | |     +---------------------------------------- Total sentences
        |                         | +---------------------------------------------- Talker + formatter
        +-------------------------+------------------------------------------------ Optional tag block

Every call returns a Record. Decode failures become ParseError payloads.
"""

import logging
from typing import List, Optional, Sequence

from ..schema import AisFragment, ParseError, Record
from .ais_decoder import decode_payload
from .ais_layouts import PAYLOAD_CLASSES
from .bitstream import validate_payload
from .checksum import checksum_matches, format_checksum, split_checksum
from .errors import ChecksumError, DecodeError, FieldError, FrameError, UnknownFormatterError
from .fragments import AisFragmentKey, FragmentBuffer
from .gnss import GNSS_DECODERS, GNSS_PAYLOADS, FieldReader, navigation_system
from .tag_block import parse_tag_block, split_tag_block

logger = logging.getLogger(__name__)

AIS_FORMATTERS = ("VDM", "VDO")

# Every payload class a Record can carry, by JSON type name
MESSAGE_TYPES = {
    cls.__name__: cls
    for cls in (ParseError, AisFragment, *GNSS_PAYLOADS, *PAYLOAD_CLASSES.values())
}


class NMEAParser:
    """
    NMEA 0183 / 4.10 line parser

    Handles tag blocks, checksums, GNSS sentences and AIS VDM/VDO
    sentences, including multi-sentence reassembly. One instance per
    input source: the fragment buffer is its only state.
    """

    def __init__(
        self,
        strict_checksum: bool = False,
        reassemble_fragments: bool = True,
        fragment_buffer_size: int = 64,
        fragment_max_age_lines: int = 100,
    ):
        self.strict_checksum = strict_checksum
        self.reassemble_fragments = reassemble_fragments
        self.fragments = FragmentBuffer(fragment_buffer_size, fragment_max_age_lines)

    def reset(self):
        """Forget buffered fragments"""
        self.fragments.clear()

    def parse_line(self, line: str, line_number: int = 1, source: str = "-") -> Record:
        """
        Decode one line into a Record.

        Never raises for malformed input.
        """
        line = line.strip()
        warnings: List[str] = []
        tag_block = None

        try:
            interior, sentence = split_tag_block(line)
            if interior is not None:
                tag_block = parse_tag_block(interior)
                if tag_block.checksum_valid is False:
                    computed = format_checksum(interior.rsplit('*', 1)[0])
                    warnings.append(
                        f"tag block checksum mismatch: expected {tag_block.checksum}, "
                        f"computed {computed}"
                    )
            message = self._parse_sentence(sentence, line_number, warnings)
        except DecodeError as e:
            error = str(e)
            if warnings and e.kind != "checksum":
                error = f"{error} ({'; '.join(warnings)})"
            message = ParseError(
                raw_sentence=line,
                error=error,
                line_number=line_number,
                file=source,
                kind=e.kind,
            )

        return Record(
            raw_sentence=line,
            tag_block=tag_block,
            message=message,
            warnings=warnings,
        )

    def _parse_sentence(self, sentence: str, line_number: int, warnings: List[str]):
        if not sentence or sentence[0] not in '$!':
            raise FrameError("not a valid sentence frame")

        body, checksum = split_checksum(sentence[1:])
        if checksum is not None and not checksum_matches(body, checksum):
            mismatch = f"checksum mismatch: expected {checksum}, computed {format_checksum(body)}"
            if self.strict_checksum:
                raise ChecksumError(mismatch)
            warnings.append(mismatch)

        fields = body.split(',')
        address = fields[0]

        if address.startswith('P'):
            raise UnknownFormatterError(address[1:], address)
        if len(address) != 5 or not address.isalnum():
            raise FrameError(f"invalid address field '{address}'")

        talker, formatter = address[:2], address[2:]

        decoder = GNSS_DECODERS.get(formatter)
        if decoder is not None:
            message = decoder(talker, fields[1:])
            message.navigation_system = navigation_system(talker)
            return message

        if formatter in AIS_FORMATTERS:
            return self._parse_ais(talker, formatter, fields[1:], line_number)

        raise UnknownFormatterError(formatter, address)

    def _parse_ais(self, talker: str, formatter: str, fields: Sequence[str], line_number: int):
        """
        !AIVDM,<count>,<number>,<sequence id>,<channel>,<payload>,<fill bits>
        """
        if len(fields) != 6:
            raise FieldError(f"{formatter}: expected 6 fields, got {len(fields)}")

        f = FieldReader(formatter, fields)
        total = f.integer(0, "fragment count")
        number = f.integer(1, "fragment number")
        if total is None or total < 1:
            raise f.error(0, "fragment count", "expected a positive count")
        if number is None or not 1 <= number <= total:
            raise f.error(1, "fragment number", f"expected 1-{total}")

        sequence_id = f.integer(2, "sequence id")
        channel = f.text(3)
        payload = fields[4].strip()
        fill_bits = f.integer(5, "fill bits") or 0
        if not 0 <= fill_bits <= 5:
            raise f.error(5, "fill bits", "expected 0-5")

        own_vessel = formatter == "VDO"

        if total == 1:
            return decode_payload(payload, fill_bits, talker, channel, own_vessel)

        validate_payload(payload)
        fragment = AisFragment(
            talker=talker,
            own_vessel=own_vessel,
            fragment_count=total,
            fragment_number=number,
            sequence_id=sequence_id,
            channel=channel,
            payload=payload,
            fill_bits=fill_bits,
        )

        if not self.reassemble_fragments:
            return fragment

        key = AisFragmentKey(channel=channel, talker=talker, sequence_id=sequence_id)
        joined, held = self.fragments.add(key, total, number, payload, line_number)
        if joined is None:
            fragment.fragments_received = held
            return fragment

        return decode_payload(joined, fill_bits, talker, channel, own_vessel)


def parse_sentence(line: str, parser: Optional[NMEAParser] = None) -> Record:
    """Decode a single line with a throwaway (or given) parser"""
    return (parser or NMEAParser()).parse_line(line)
