"""Tests for NMEA 4.10 tag block parsing"""

import pytest

from nmea_ingestion.generators.nmea_generator import SentenceBuilder
from nmea_ingestion.parsers.errors import FrameError
from nmea_ingestion.parsers.tag_block import (
    parse_tag_block,
    serialize_tag_block,
    split_tag_block,
)


class TestSplitTagBlock:
    """Locating the tag block in front of a sentence"""

    def test_no_tag_block(self):
        assert split_tag_block("$GPHDT,90.0,T") == (None, "$GPHDT,90.0,T")

    def test_tag_block_and_sentence(self):
        interior, rest = split_tag_block("\\s:r1,c:100*00\\!AIVDM,1,1,,A,1,0*00")
        assert interior == "s:r1,c:100*00"
        assert rest == "!AIVDM,1,1,,A,1,0*00"

    def test_unclosed_tag_block(self):
        with pytest.raises(FrameError):
            split_tag_block("\\s:r1,c:100*00!AIVDM")


class TestParseTagBlock:
    """Field decoding and checksum status"""

    def test_known_tag_block(self):
        tag_block = parse_tag_block("s:2573515,c:1643588424*09")
        assert tag_block.source_station == "2573515"
        assert tag_block.unix_timestamp == 1643588424
        assert tag_block.checksum == "09"
        assert tag_block.checksum_valid is True
        assert tag_block.issues is None

    def test_all_standard_codes(self):
        interior = SentenceBuilder.tag_block([
            ("c", 1700000000), ("d", "DEST"), ("g", "1-2-42"),
            ("n", 7), ("r", 15), ("s", "station"), ("t", "hello"),
        ])[1:-1]
        tag_block = parse_tag_block(interior)
        assert tag_block.unix_timestamp == 1700000000
        assert tag_block.destination == "DEST"
        assert tag_block.grouping.sentence_number == 1
        assert tag_block.grouping.total_sentences == 2
        assert tag_block.grouping.group_id == 42
        assert tag_block.line_count == 7
        assert tag_block.relative_time == 15
        assert tag_block.source_station == "station"
        assert tag_block.text == "hello"
        assert tag_block.checksum_valid is True

    def test_i_is_alias_for_text(self):
        assert parse_tag_block("i:info").text == "info"

    def test_missing_checksum_is_unknown(self):
        tag_block = parse_tag_block("s:station,c:1")
        assert tag_block.checksum is None
        assert tag_block.checksum_valid is None

    def test_bad_checksum_is_not_fatal(self):
        tag_block = parse_tag_block("s:2573515,c:1643588424*10")
        assert tag_block.checksum_valid is False
        assert tag_block.source_station == "2573515"

    def test_unknown_codes_kept(self):
        tag_block = parse_tag_block("x:opaque,s:a")
        assert tag_block.extra == {"x": "opaque"}

    def test_malformed_values_become_issues(self):
        tag_block = parse_tag_block("c:notanumber,g:1-2,bogus")
        assert tag_block.unix_timestamp is None
        assert tag_block.grouping is None
        assert len(tag_block.issues) == 3

    def test_json_omits_none(self):
        data = parse_tag_block("s:2573515,c:1643588424*09").to_json_dict()
        assert data == {
            "unix_timestamp": 1643588424,
            "source_station": "2573515",
            "checksum": "09",
            "checksum_valid": True,
        }


class TestSerializeTagBlock:
    """Re-serialization keeps field order and recomputes the checksum"""

    def test_round_trip(self):
        original = "\\s:2573515,c:1643588424*09\\"
        assert serialize_tag_block(parse_tag_block(original[1:-1])) == original

    def test_round_trip_repairs_checksum(self):
        tag_block = parse_tag_block("s:2573515,c:1643588424*FF")
        assert serialize_tag_block(tag_block) == "\\s:2573515,c:1643588424*09\\"

    def test_round_trip_with_grouping_and_extra(self):
        text = SentenceBuilder.tag_block([("g", "2-3-7"), ("x", "y"), ("n", 5)])
        again = serialize_tag_block(parse_tag_block(text[1:-1]))
        assert again == text
