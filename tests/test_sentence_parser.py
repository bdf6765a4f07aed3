"""Tests for line classification and Record construction"""

import json
import random

import pytest

from nmea_ingestion.parsers.bitstream import ARMOR_ALPHABET
from nmea_ingestion.parsers.sentence_parser import MESSAGE_TYPES, NMEAParser, parse_sentence
from nmea_ingestion.schema import Record

from .conftest import GGA_LINE, TAGGED_TYPE3_LINE, TYPE1_LINE


class TestGoldenLines:
    """Known lines from receiver logs"""

    def test_type1_with_wrong_checksum_is_decoded_with_warning(self, parser):
        record = parser.parse_line(TYPE1_LINE)
        assert record.message_type == "PositionReport"
        assert record.message.mmsi == 227006760
        assert record.message.lat == pytest.approx(53.532683, abs=1e-6)
        assert record.message.lon == pytest.approx(7.725053, abs=1e-6)
        assert record.warnings == ["checksum mismatch: expected 23, computed 7B"]
        assert record.raw_sentence == TYPE1_LINE

    def test_strict_checksum_rejects(self):
        record = NMEAParser(strict_checksum=True).parse_line(TYPE1_LINE, 3, "feed.nmea")
        assert record.is_error
        assert record.message.kind == "checksum"
        assert record.message.line_number == 3
        assert record.message.file == "feed.nmea"

    def test_tagged_type3(self, parser):
        record = parser.parse_line(TAGGED_TYPE3_LINE)
        assert record.tag_block.source_station == "2573515"
        assert record.tag_block.unix_timestamp == 1643588424
        assert record.tag_block.checksum == "09"
        assert record.tag_block.checksum_valid is True
        assert record.message_type == "PositionReport"
        assert record.message.message_type == 3
        assert record.message.mmsi == 257675500
        assert record.message.talker == "BS"
        assert record.message.channel == "B"
        assert record.warnings == []

    def test_gga(self, parser):
        record = parser.parse_line(GGA_LINE)
        assert record.message_type == "GGA"
        assert record.message.latitude == pytest.approx(48.1173)
        assert not record.warnings

    def test_unknown_formatter(self, parser):
        record = parser.parse_line("$GPXXX,bad", 42, "log.nmea")
        assert record.is_error
        assert record.message.kind == "unknown_formatter"
        assert "XXX" in record.message.error
        assert record.message.line_number == 42
        assert record.message.file == "log.nmea"
        assert record.message.raw_sentence == "$GPXXX,bad"


class TestMalformedLines:
    """Every failure becomes a ParseError record"""

    @pytest.mark.parametrize("line,kind", [
        ("hello world", "frame"),
        ("\\s:unclosed!AIVDM,1,1,,A,1,0", "frame"),
        ("$G,1,2", "frame"),
        ("$PGRME,15.0,M,45.0,M,25.0,M", "unknown_formatter"),
        ("!AIVDM,1,1,,A", "field"),
        ("!AIVDM,1,1,,A,13HOI X,0", "field"),
        ("!AIVDM,1,1,,A,13HOI,7", "field"),
        ("!AIVDM,x,1,,A,13HOI,0", "field"),
        ("!AIVDM,1,2,,A,13HOI,0", "field"),
        ("!AIVDM,1,1,,A,,0", "truncation"),
        ("!AIVDM,1,1,,A,000000,0", "unknown_ais_type"),
        ("!AIVDM,1,1,,A,wwwwww,0", "unknown_ais_type"),
        ("$GPGGA,1,2,3", "field"),
    ])
    def test_error_kinds(self, parser, line, kind):
        record = parser.parse_line(line)
        assert record.is_error
        assert record.message.kind == kind
        assert record.raw_sentence == line

    def test_short_payload_decodes_partially(self, parser):
        record = parser.parse_line("!AIVDM,1,1,,A,1,0")
        assert record.message_type == "PositionReport"
        assert record.message.mmsi is None

    def test_tag_block_checksum_mismatch_is_a_warning(self, parser):
        record = parser.parse_line("\\s:2573515,c:1643588424*10\\" + GGA_LINE)
        assert record.message_type == "GGA"
        assert record.tag_block.checksum_valid is False
        assert record.warnings == ["tag block checksum mismatch: expected 10, computed 09"]

    def test_warning_kept_on_failed_decode(self, parser):
        record = parser.parse_line("$GPGGA,1,2,3*00")
        assert record.is_error
        assert record.warnings
        assert "checksum mismatch" in record.message.error

    def test_surrounding_whitespace_ignored(self, parser):
        record = parser.parse_line("  " + GGA_LINE + "\r\n")
        assert record.raw_sentence == GGA_LINE
        assert record.message_type == "GGA"


class TestAisSentences:
    """VDM/VDO handling, including multi-sentence messages"""

    def test_vdo_marks_own_vessel(self, parser, builder):
        bits = builder.position_report(mmsi=123456789, latitude=10.0, longitude=20.0)
        [line] = builder.vdm(bits, formatter="VDO")
        record = parser.parse_line(line)
        assert record.message.own_vessel is True
        assert record.message.mmsi == 123456789
        assert not record.warnings

    def test_two_part_message_is_reassembled(self, parser, builder):
        bits = builder.static_voyage(
            mmsi=351759000, imo=9134270, callsign="3FOF8", name="EVER DIADEM",
            ship_type=70, destination="NEW YORK",
        )
        first, second = builder.vdm(bits, channel="B", sequence_id=3)

        fragment = parser.parse_line(first, 1)
        assert fragment.message_type == "AisFragment"
        assert fragment.message.fragment_count == 2
        assert fragment.message.fragment_number == 1
        assert fragment.message.sequence_id == 3
        assert fragment.message.channel == "B"
        assert fragment.message.fragments_received == 1

        record = parser.parse_line(second, 2)
        assert record.message_type == "StaticVoyageData"
        assert record.message.shipname == "EVER DIADEM"
        assert record.message.destination == "NEW YORK"
        assert len(parser.fragments) == 0

    def test_fragments_on_other_channel_do_not_join(self, parser, builder):
        bits = builder.static_voyage(
            mmsi=1, imo=1, callsign="A", name="B", ship_type=70, destination="C",
        )
        first, _ = builder.vdm(bits, channel="A", sequence_id=1)
        _, second = builder.vdm(bits, channel="B", sequence_id=1)
        parser.parse_line(first, 1)
        record = parser.parse_line(second, 2)
        assert record.message_type == "AisFragment"
        assert record.message.fragments_received == 0

    def test_reassembly_disabled(self, builder):
        parser = NMEAParser(reassemble_fragments=False)
        bits = builder.static_voyage(
            mmsi=1, imo=1, callsign="A", name="B", ship_type=70, destination="C",
        )
        records = [parser.parse_line(line) for line in builder.vdm(bits, sequence_id=5)]
        assert [r.message_type for r in records] == ["AisFragment", "AisFragment"]
        assert records[1].message.fill_bits == 2

    def test_reset_drops_partial_groups(self, parser, builder):
        bits = builder.static_voyage(
            mmsi=1, imo=1, callsign="A", name="B", ship_type=70, destination="C",
        )
        first, second = builder.vdm(bits, sequence_id=2)
        parser.parse_line(first, 1)
        parser.reset()
        assert parser.parse_line(second, 2).message_type == "AisFragment"


class TestRecordJson:
    """JSON Lines layout"""

    def test_layout(self, parser):
        data = json.loads(parser.parse_line(TAGGED_TYPE3_LINE).to_json())
        assert set(data) == {"raw_sentence", "tag_block", "message"}
        assert data["tag_block"] == {
            "unix_timestamp": 1643588424,
            "source_station": "2573515",
            "checksum": "09",
            "checksum_valid": True,
        }
        assert data["message"]["type"] == "PositionReport"
        assert data["message"]["data"]["mmsi"] == 257675500

    def test_warnings_serialized_only_when_present(self, parser):
        assert "warnings" in parser.parse_line(TYPE1_LINE).to_json_dict()
        assert "warnings" not in parser.parse_line(GGA_LINE).to_json_dict()

    def test_parse_error_data(self, parser):
        data = parser.parse_line("$GPXXX,bad", 7, "a.nmea").to_json_dict()
        assert data["tag_block"] is None
        assert data["message"]["type"] == "ParseError"
        assert set(data["message"]["data"]) == {"raw_sentence", "error", "line_number", "file", "kind"}

    def test_nested_payloads_serialize(self, parser):
        line = "$GPGSV,1,1,01,19,38,058,41*78"
        data = parser.parse_line(line).to_json_dict()
        assert data["message"]["data"]["satellites"][0]["prn"] == 19

    def test_output_is_idempotent(self):
        lines = [TYPE1_LINE, TAGGED_TYPE3_LINE, GGA_LINE, "$GPXXX,bad"]
        first = [NMEAParser().parse_line(line).to_json() for line in lines]
        second = [NMEAParser().parse_line(line).to_json() for line in lines]
        assert first == second

    def test_pretty(self, parser):
        assert "\n  " in parser.parse_line(GGA_LINE).to_json(pretty=True)


class TestRegistry:
    """Payload class registry"""

    def test_known_names(self):
        for name in ("ParseError", "AisFragment", "GGA", "ALM", "PositionReport", "LongRangePositionReport"):
            assert name in MESSAGE_TYPES

    def test_parse_sentence_helper(self):
        assert parse_sentence(GGA_LINE).message_type == "GGA"


def strict_loads(text):
    def reject(constant):
        raise ValueError(f"non-standard JSON constant {constant}")
    return json.loads(text, parse_constant=reject)


class TestNumericFields:
    """Only plain decimals become numbers"""

    @pytest.mark.parametrize("value", ["nan", "inf", "-infinity", "1_0"])
    def test_non_decimal_heading_is_a_field_error(self, parser, value):
        record = parser.parse_line(f"$GPHDT,{value},T")
        assert record.is_error
        assert record.message.kind == "field"
        assert strict_loads(record.to_json())["message"]["type"] == "ParseError"

    def test_overlong_coordinate_is_a_field_error(self, parser):
        record = parser.parse_line("$GPGLL," + "1" * 5000 + ".0,N,00000.0,E,,A")
        assert record.is_error
        assert record.message.kind == "field"

    def test_gnss_records_carry_navigation_system(self, parser):
        assert parser.parse_line(GGA_LINE).message.navigation_system == "GPS"
        record = parser.parse_line("$HEHDT,274.07,T")
        assert record.message.navigation_system == "Other"
        assert strict_loads(record.to_json())["message"]["data"]["navigation_system"] == "Other"


class TestArbitraryPayloads:
    """Any armored payload decodes to a Record and serializes to strict JSON"""

    @pytest.mark.parametrize("message_type", range(1, 28))
    @pytest.mark.parametrize("filler", ["0", "w"])
    @pytest.mark.parametrize("length", [1, 27, 70, 167])
    def test_uniform_payloads(self, message_type, filler, length):
        payload = ARMOR_ALPHABET[message_type] + filler * length
        for fill_bits in (0, 5):
            record = NMEAParser().parse_line(f"!AIVDM,1,1,,A,{payload},{fill_bits}")
            assert isinstance(record, Record)
            assert not record.is_error
            assert record.message.message_type == message_type
            strict_loads(record.to_json())

    @pytest.mark.parametrize("seed", range(20))
    def test_random_payloads(self, seed):
        rng = random.Random(seed)
        parser = NMEAParser()
        for _ in range(25):
            payload = ''.join(rng.choice(ARMOR_ALPHABET) for _ in range(rng.randint(1, 170)))
            fill_bits = rng.randint(0, 5)
            record = parser.parse_line(f"!AIVDM,1,1,,B,{payload},{fill_bits}")
            assert isinstance(record, Record)
            if record.is_error:
                assert record.message.kind in ("unknown_ais_type", "truncation")
            strict_loads(record.to_json())

    def test_very_long_payload(self, parser):
        record = parser.parse_line("!AIVDM,1,1,,A,8" + "w" * 100000 + ",0")
        assert record.message_type == "BinaryBroadcastMessage"
        assert record.message.data_bits == 6 * 100000 - 50
