"""
AIS message layouts

Each message type is a sequence of BitField entries read in order by a
BitCursor. Widths, scale factors and "not available" values follow the
AIVDM tables: https://gpsd.gitlab.io/gpsd/AIVDM.html

Payload dataclasses are generated from the layouts, so the decoded
fields of a type are exactly the names its layouts declare.
"""

from dataclasses import dataclass, field, make_dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from .bitstream import Bits


class Encoding(str, Enum):
    UNSIGNED = "unsigned"
    SIGNED = "signed"
    SCALED = "scaled"
    TEXT = "text"
    BOOLEAN = "boolean"
    ENUM = "enum"
    RAW = "raw"
    SPARE = "spare"


@dataclass(frozen=True)
class BitField:
    """
    One field of a layout.

    width 0 means "rest of the message", minus ``reserve`` bits kept
    for trailing fields.
    """
    name: str
    width: int
    encoding: Encoding
    not_available: Tuple[int, ...] = ()
    signed: bool = False
    scale: float = 1.0
    offset: float = 0.0
    reserve: int = 0
    convert: Optional[Callable[[int], float]] = None
    legend: Optional[Callable[[int], Optional[str]]] = None


# Navigation status codes
NAV_STATUS = {
    0: "Under way using engine",
    1: "At anchor",
    2: "Not under command",
    3: "Restricted manoeuverability",
    4: "Constrained by draught",
    5: "Moored",
    6: "Aground",
    7: "Engaged in fishing",
    8: "Under way sailing",
    9: "Reserved for HSC",
    10: "Reserved for WIG",
    11: "Power-driven vessel towing astern",
    12: "Power-driven vessel pushing ahead or towing alongside",
    13: "Reserved",
    14: "AIS-SART active",
    15: "Not defined",
}

# Ship type codes, exact entries first then by tens
SHIP_TYPES = {
    20: "WIG",
    30: "Fishing",
    31: "Towing",
    32: "Towing large",
    33: "Dredging",
    34: "Diving ops",
    35: "Military ops",
    36: "Sailing",
    37: "Pleasure craft",
    40: "HSC",
    50: "Pilot vessel",
    51: "SAR",
    52: "Tug",
    53: "Port tender",
    54: "Anti-pollution",
    55: "Law enforcement",
    58: "Medical transport",
    59: "Noncombatant ship",
    60: "Passenger",
    70: "Cargo",
    80: "Tanker",
    90: "Other",
}

EPFD_TYPES = {
    0: "Undefined",
    1: "GPS",
    2: "GLONASS",
    3: "Combined GPS/GLONASS",
    4: "Loran-C",
    5: "Chayka",
    6: "Integrated navigation system",
    7: "Surveyed",
    8: "Galileo",
    15: "Internal GNSS",
}

AID_TYPES = (
    "Unspecified", "Reference point", "RACON", "Fixed offshore structure",
    "Spare", "Light, without sectors", "Light, with sectors",
    "Leading Light Front", "Leading Light Rear", "Beacon, Cardinal N",
    "Beacon, Cardinal E", "Beacon, Cardinal S", "Beacon, Cardinal W",
    "Beacon, Port hand", "Beacon, Starboard hand",
    "Beacon, Preferred Channel port hand",
    "Beacon, Preferred Channel starboard hand", "Beacon, Isolated danger",
    "Beacon, Safe water", "Beacon, Special mark", "Cardinal Mark N",
    "Cardinal Mark E", "Cardinal Mark S", "Cardinal Mark W",
    "Port hand Mark", "Starboard hand Mark", "Preferred Channel Port hand",
    "Preferred Channel Starboard hand", "Isolated danger", "Safe Water",
    "Special Mark", "Light Vessel / LANBY / Rigs",
)


def ship_type_text(code: int) -> Optional[str]:
    if code in SHIP_TYPES:
        return SHIP_TYPES[code]
    if 20 <= code < 100:
        return SHIP_TYPES.get(code // 10 * 10)
    return None


def aid_type_text(code: int) -> Optional[str]:
    return AID_TYPES[code] if 0 <= code < len(AID_TYPES) else None


def rate_of_turn(raw: int) -> float:
    """ROT_AIS = 4.733 * sqrt(ROT_sensor), sign carried separately"""
    rot = (raw / 4.733) ** 2
    return -rot if raw < 0 else rot


# Field constructors

def _na(na) -> Tuple[int, ...]:
    if na is None:
        return ()
    return tuple(na) if isinstance(na, tuple) else (na,)


def u(name: str, width: int, na=None) -> BitField:
    return BitField(name, width, Encoding.UNSIGNED,
                    not_available=_na(na))


def s(name: str, width: int, na: Optional[int] = None, convert=None) -> BitField:
    return BitField(name, width, Encoding.SIGNED,
                    not_available=_na(na), signed=True,
                    convert=convert)


def scaled(name: str, width: int, scale: float, na: Optional[int] = None,
           signed: bool = False, offset: float = 0.0) -> BitField:
    return BitField(name, width, Encoding.SCALED,
                    not_available=_na(na),
                    signed=signed, scale=scale, offset=offset)


def lon(name: str = "lon", width: int = 28, scale: float = 600000.0) -> BitField:
    return scaled(name, width, scale, na=int(181 * scale), signed=True)


def lat(name: str = "lat", width: int = 27, scale: float = 600000.0) -> BitField:
    return scaled(name, width, scale, na=int(91 * scale), signed=True)


def short_lon(name: str = "lon") -> BitField:
    return lon(name, 18, 600.0)


def short_lat(name: str = "lat") -> BitField:
    return lat(name, 17, 600.0)


def flag(name: str) -> BitField:
    return BitField(name, 1, Encoding.BOOLEAN)


def enum(name: str, width: int, legend, na: Optional[int] = None) -> BitField:
    return BitField(name, width, Encoding.ENUM,
                    not_available=_na(na), legend=legend)


def text(name: str, width: int = 0) -> BitField:
    return BitField(name, width, Encoding.TEXT)


def raw(name: str, reserve: int = 0) -> BitField:
    return BitField(name, 0, Encoding.RAW, reserve=reserve)


def spare(width: int) -> BitField:
    return BitField("", width, Encoding.SPARE)


def dimensions() -> Tuple[BitField, ...]:
    return (
        u("to_bow", 9),
        u("to_stern", 9),
        u("to_port", 6),
        u("to_starboard", 6),
    )


# Layouts

HEADER = (
    u("message_type", 6),
    u("repeat", 2),
    u("mmsi", 30),
)

COMMON_NAVIGATION_BLOCK = HEADER + (
    enum("status", 4, NAV_STATUS.get),
    s("turn", 8, na=-128, convert=rate_of_turn),
    scaled("speed", 10, 10.0, na=1023),
    flag("accuracy"),
    lon(),
    lat(),
    scaled("course", 12, 10.0, na=3600),
    u("heading", 9, na=511),
    u("second", 6, na=60),
    u("maneuver", 2, na=0),
    spare(3),
    flag("raim"),
    u("radio", 19),
)

BASE_STATION = HEADER + (
    u("year", 14, na=0),
    u("month", 4, na=0),
    u("day", 5, na=0),
    u("hour", 5, na=24),
    u("minute", 6, na=60),
    u("second", 6, na=60),
    flag("accuracy"),
    lon(),
    lat(),
    enum("epfd", 4, EPFD_TYPES.get),
    spare(10),
    flag("raim"),
    u("radio", 19),
)

STATIC_VOYAGE = HEADER + (
    u("ais_version", 2),
    u("imo", 30, na=0),
    text("callsign", 42),
    text("shipname", 120),
    enum("shiptype", 8, ship_type_text, na=0),
) + dimensions() + (
    enum("epfd", 4, EPFD_TYPES.get),
    u("month", 4, na=0),
    u("day", 5, na=0),
    u("hour", 5, na=24),
    u("minute", 6, na=60),
    scaled("draught", 8, 10.0, na=0),
    text("destination", 120),
    flag("dte"),
    spare(1),
)

BINARY_ADDRESSED = HEADER + (
    u("seqno", 2),
    u("dest_mmsi", 30),
    flag("retransmit"),
    spare(1),
    u("dac", 10),
    u("fid", 6),
    raw("data"),
)

ACKNOWLEDGE = HEADER + (
    spare(2),
    u("mmsi1", 30),
    u("mmsiseq1", 2),
    u("mmsi2", 30),
    u("mmsiseq2", 2),
    u("mmsi3", 30),
    u("mmsiseq3", 2),
    u("mmsi4", 30),
    u("mmsiseq4", 2),
)

BINARY_BROADCAST = HEADER + (
    spare(2),
    u("dac", 10),
    u("fid", 6),
    raw("data"),
)

SAR_AIRCRAFT = HEADER + (
    u("alt", 12, na=4095),
    u("speed", 10, na=1023),
    flag("accuracy"),
    lon(),
    lat(),
    scaled("course", 12, 10.0, na=3600),
    u("second", 6, na=60),
    u("regional", 8),
    flag("dte"),
    spare(3),
    flag("assigned"),
    flag("raim"),
    u("radio", 20),
)

UTC_INQUIRY = HEADER + (
    spare(2),
    u("dest_mmsi", 30),
    spare(2),
)

ADDRESSED_SAFETY = HEADER + (
    u("seqno", 2),
    u("dest_mmsi", 30),
    flag("retransmit"),
    spare(1),
    text("text"),
)

SAFETY_BROADCAST = HEADER + (
    spare(2),
    text("text"),
)

INTERROGATION = HEADER + (
    spare(2),
    u("mmsi1", 30),
    u("type1_1", 6),
    u("offset1_1", 12),
    spare(2),
    u("type1_2", 6),
    u("offset1_2", 12),
    spare(2),
    u("mmsi2", 30),
    u("type2_1", 6),
    u("offset2_1", 12),
    spare(2),
)

ASSIGNED_MODE = HEADER + (
    spare(2),
    u("mmsi1", 30),
    u("offset1", 12),
    u("increment1", 10),
    u("mmsi2", 30),
    u("offset2", 12),
    u("increment2", 10),
)

DGNSS_BROADCAST = HEADER + (
    spare(2),
    short_lon(),
    short_lat(),
    spare(5),
    raw("data"),
)

CLASS_B_POSITION = HEADER + (
    spare(8),
    scaled("speed", 10, 10.0, na=1023),
    flag("accuracy"),
    lon(),
    lat(),
    scaled("course", 12, 10.0, na=3600),
    u("heading", 9, na=511),
    u("second", 6, na=60),
    u("regional", 2),
    flag("cs"),
    flag("display"),
    flag("dsc"),
    flag("band"),
    flag("msg22"),
    flag("assigned"),
    flag("raim"),
    u("radio", 20),
)

EXTENDED_CLASS_B = HEADER + (
    spare(8),
    scaled("speed", 10, 10.0, na=1023),
    flag("accuracy"),
    lon(),
    lat(),
    scaled("course", 12, 10.0, na=3600),
    u("heading", 9, na=511),
    u("second", 6, na=60),
    u("regional", 4),
    text("shipname", 120),
    enum("shiptype", 8, ship_type_text, na=0),
) + dimensions() + (
    enum("epfd", 4, EPFD_TYPES.get),
    flag("raim"),
    flag("dte"),
    flag("assigned"),
    spare(4),
)

DATA_LINK_MANAGEMENT = HEADER + (spare(2),) + tuple(
    bit_field
    for n in range(1, 5)
    for bit_field in (
        u(f"offset{n}", 12),
        u(f"number{n}", 4),
        u(f"timeout{n}", 3),
        u(f"increment{n}", 11),
    )
)

AID_TO_NAVIGATION = HEADER + (
    enum("aid_type", 5, aid_type_text),
    text("name", 120),
    flag("accuracy"),
    lon(),
    lat(),
) + dimensions() + (
    enum("epfd", 4, EPFD_TYPES.get),
    u("second", 6, na=60),
    flag("off_position"),
    u("regional", 8),
    flag("raim"),
    flag("virtual_aid"),
    flag("assigned"),
    spare(1),
    text("name_extension"),
)

_CHANNEL_MANAGEMENT_HEAD = HEADER + (
    spare(2),
    u("channel_a", 12),
    u("channel_b", 12),
    u("txrx", 4),
    flag("power"),
)

_CHANNEL_MANAGEMENT_TAIL = (
    flag("addressed"),
    flag("band_a"),
    flag("band_b"),
    u("zonesize", 3),
    spare(23),
)

CHANNEL_MANAGEMENT_AREA = _CHANNEL_MANAGEMENT_HEAD + (
    short_lon("ne_lon"),
    short_lat("ne_lat"),
    short_lon("sw_lon"),
    short_lat("sw_lat"),
) + _CHANNEL_MANAGEMENT_TAIL

CHANNEL_MANAGEMENT_ADDRESSED = _CHANNEL_MANAGEMENT_HEAD + (
    u("dest1", 30),
    spare(5),
    u("dest2", 30),
    spare(5),
) + _CHANNEL_MANAGEMENT_TAIL

GROUP_ASSIGNMENT = HEADER + (
    spare(2),
    short_lon("ne_lon"),
    short_lat("ne_lat"),
    short_lon("sw_lon"),
    short_lat("sw_lat"),
    u("station_type", 4),
    enum("shiptype", 8, ship_type_text, na=0),
    spare(22),
    u("txrx", 2),
    u("interval", 4),
    u("quiet", 4),
    spare(6),
)

_STATIC_DATA_HEAD = HEADER + (u("partno", 2),)

STATIC_DATA_PART_A = _STATIC_DATA_HEAD + (
    text("shipname", 120),
)

_STATIC_DATA_PART_B = _STATIC_DATA_HEAD + (
    enum("shiptype", 8, ship_type_text, na=0),
    text("vendorid", 18),
    u("model", 4),
    u("serial", 20),
    text("callsign", 42),
)

STATIC_DATA_PART_B = _STATIC_DATA_PART_B + dimensions() + (spare(6),)

STATIC_DATA_PART_B_AUXILIARY = _STATIC_DATA_PART_B + (
    u("mothership_mmsi", 30),
    spare(6),
)

_SLOT_BINARY_FLAGS = HEADER + (
    flag("addressed"),
    flag("structured"),
)


def _slot_binary_variants(reserve: int) -> Tuple[Tuple[BitField, ...], ...]:
    """Layouts for types 25/26, indexed by addressed * 2 + structured"""
    data = raw("data", reserve=reserve)
    trailer = (u("radio", 20),) if reserve else ()
    return (
        _SLOT_BINARY_FLAGS + (data,) + trailer,
        _SLOT_BINARY_FLAGS + (u("dac", 10), u("fid", 6), data) + trailer,
        _SLOT_BINARY_FLAGS + (u("dest_mmsi", 30), data) + trailer,
        _SLOT_BINARY_FLAGS + (u("dest_mmsi", 30), u("dac", 10), u("fid", 6), data) + trailer,
    )


LONG_RANGE = HEADER + (
    flag("accuracy"),
    flag("raim"),
    enum("status", 4, NAV_STATUS.get),
    short_lon(),
    short_lat(),
    u("speed", 6, na=63),
    u("course", 9, na=511),
    u("gnss", 1),
    spare(1),
)


# Layout selection for types with variant bodies

def _select_channel_management(bits: Bits) -> int:
    return 1 if bits.unsigned(139, 1) == 1 else 0


def _select_static_data(bits: Bits) -> int:
    partno = bits.unsigned(38, 2)
    if partno == 1:
        mmsi = bits.unsigned(8, 30)
        if mmsi is not None and str(mmsi).startswith("98"):
            return 2
        return 1
    return 0


def _select_slot_binary(bits: Bits) -> int:
    addressed = bits.unsigned(38, 1) or 0
    structured = bits.unsigned(39, 1) or 0
    return addressed * 2 + structured


@dataclass(frozen=True)
class MessageLayout:
    """Layout variants for one payload class"""
    name: str
    variants: Tuple[Tuple[BitField, ...], ...]
    select: Optional[Callable[[Bits], int]] = None
    doc: str = ""

    def layout_for(self, bits: Bits) -> Tuple[BitField, ...]:
        if self.select is None:
            return self.variants[0]
        return self.variants[self.select(bits)]


def _single(name: str, layout: Sequence[BitField], doc: str) -> MessageLayout:
    return MessageLayout(name, (tuple(layout),), doc=doc)


POSITION_REPORT = _single("PositionReport", COMMON_NAVIGATION_BLOCK,
                          "Types 1, 2 and 3: Class A position report")
BASE_STATION_REPORT = _single("BaseStationReport", BASE_STATION,
                              "Type 4: base station report")
UTC_DATE_RESPONSE = _single("UtcDateResponse", BASE_STATION,
                            "Type 11: UTC/date response")
SLOT_BINARY_VARIANTS = _slot_binary_variants(0)

LAYOUTS: Dict[int, MessageLayout] = {
    1: POSITION_REPORT,
    2: POSITION_REPORT,
    3: POSITION_REPORT,
    4: BASE_STATION_REPORT,
    5: _single("StaticVoyageData", STATIC_VOYAGE,
               "Type 5: static and voyage related data"),
    6: _single("BinaryAddressedMessage", BINARY_ADDRESSED,
               "Type 6: binary addressed message"),
    7: _single("BinaryAcknowledge", ACKNOWLEDGE,
               "Type 7: binary acknowledge"),
    8: _single("BinaryBroadcastMessage", BINARY_BROADCAST,
               "Type 8: binary broadcast message"),
    9: _single("SarAircraftPositionReport", SAR_AIRCRAFT,
               "Type 9: standard SAR aircraft position report"),
    10: _single("UtcDateInquiry", UTC_INQUIRY,
                "Type 10: UTC/date inquiry"),
    11: UTC_DATE_RESPONSE,
    12: _single("AddressedSafetyMessage", ADDRESSED_SAFETY,
                "Type 12: addressed safety related message"),
    13: _single("SafetyAcknowledge", ACKNOWLEDGE,
                "Type 13: safety related acknowledge"),
    14: _single("SafetyBroadcastMessage", SAFETY_BROADCAST,
                "Type 14: safety related broadcast message"),
    15: _single("Interrogation", INTERROGATION, "Type 15: interrogation"),
    16: _single("AssignedModeCommand", ASSIGNED_MODE,
                "Type 16: assigned mode command"),
    17: _single("DgnssBroadcast", DGNSS_BROADCAST,
                "Type 17: DGNSS broadcast binary message"),
    18: _single("ClassBPositionReport", CLASS_B_POSITION,
                "Type 18: standard Class B position report"),
    19: _single("ExtendedClassBPositionReport", EXTENDED_CLASS_B,
                "Type 19: extended Class B position report"),
    20: _single("DataLinkManagement", DATA_LINK_MANAGEMENT,
                "Type 20: data link management"),
    21: _single("AidToNavigationReport", AID_TO_NAVIGATION,
                "Type 21: aid-to-navigation report"),
    22: MessageLayout("ChannelManagement",
                      (CHANNEL_MANAGEMENT_AREA, CHANNEL_MANAGEMENT_ADDRESSED),
                      _select_channel_management,
                      "Type 22: channel management"),
    23: _single("GroupAssignmentCommand", GROUP_ASSIGNMENT,
                "Type 23: group assignment command"),
    24: MessageLayout("StaticDataReport",
                      (STATIC_DATA_PART_A, STATIC_DATA_PART_B,
                       STATIC_DATA_PART_B_AUXILIARY),
                      _select_static_data,
                      "Type 24: static data report, part A or B"),
    25: MessageLayout("SingleSlotBinaryMessage", SLOT_BINARY_VARIANTS,
                      _select_slot_binary,
                      "Type 25: single slot binary message"),
    26: MessageLayout("MultipleSlotBinaryMessage", _slot_binary_variants(20),
                      _select_slot_binary,
                      "Type 26: multiple slot binary message"),
    27: _single("LongRangePositionReport", LONG_RANGE,
                "Type 27: long range AIS broadcast message"),
}


# IMO236 meteorological and hydrological data (DAC 1, FID 11), read
# from the start of the type 8 application data.
METEO_HYDRO = (
    lat("lat", 24, 60000.0),
    lon("lon", 25, 60000.0),
    u("day", 5, na=0),
    u("hour", 5, na=24),
    u("minute", 6, na=60),
    u("wspeed", 7, na=127),
    u("wgust", 7, na=127),
    u("wdir", 9, na=511),
    u("wgustdir", 9, na=511),
    scaled("temperature", 11, 10.0, na=2047, offset=-60.0),
    u("humidity", 7, na=127),
    scaled("dewpoint", 10, 10.0, na=1023, offset=-20.0),
    scaled("pressure", 9, 1.0, na=511, offset=800.0),
    u("pressuretend", 2, na=3),
    scaled("visibility", 8, 10.0, na=255),
    scaled("waterlevel", 9, 10.0, na=511, offset=-10.0),
    u("leveltrend", 2, na=3),
    scaled("cspeed", 8, 10.0, na=255),
    u("cdir", 9, na=511),
    scaled("cspeed2", 8, 10.0, na=255),
    u("cdir2", 9, na=511),
    u("cdepth2", 5, na=31),
    scaled("cspeed3", 8, 10.0, na=255),
    u("cdir3", 9, na=511),
    u("cdepth3", 5, na=31),
    scaled("waveheight", 8, 10.0, na=255),
    u("waveperiod", 6, na=63),
    u("wavedir", 9, na=511),
    scaled("swellheight", 8, 10.0, na=255),
    u("swellperiod", 6, na=63),
    u("swelldir", 9, na=511),
    u("seastate", 4, na=(13, 14, 15)),
    scaled("watertemp", 10, 10.0, na=1023, offset=-10.0),
    u("preciptype", 3, na=7),
    scaled("salinity", 9, 10.0, na=511),
    u("ice", 2, na=3),
    spare(6),
)


# IMO289 meteorological and hydrographic data (DAC 1, FID 31). Replaces
# FID 11 with a position accuracy flag, signed temperatures and finer
# water level.
METEO_HYDRO_31 = (
    lon("lon", 25, 60000.0),
    lat("lat", 24, 60000.0),
    flag("accuracy"),
    u("day", 5, na=0),
    u("hour", 5, na=24),
    u("minute", 6, na=60),
    u("wspeed", 7, na=127),
    u("wgust", 7, na=127),
    u("wdir", 9, na=360),
    u("wgustdir", 9, na=360),
    scaled("airtemp", 11, 10.0, na=-1024, signed=True),
    u("humidity", 7, na=101),
    scaled("dewpoint", 10, 10.0, na=501, signed=True),
    scaled("pressure", 9, 1.0, na=511, offset=799.0),
    u("pressuretend", 2, na=3),
    flag("visgreater"),
    scaled("visibility", 7, 10.0, na=127),
    scaled("waterlevel", 12, 100.0, na=4001, offset=-10.0),
    u("leveltrend", 2, na=3),
    scaled("cspeed", 8, 10.0, na=255),
    u("cdir", 9, na=360),
    scaled("cspeed2", 8, 10.0, na=255),
    u("cdir2", 9, na=360),
    u("cdepth2", 5, na=31),
    scaled("cspeed3", 8, 10.0, na=255),
    u("cdir3", 9, na=360),
    u("cdepth3", 5, na=31),
    scaled("waveheight", 8, 10.0, na=255),
    u("waveperiod", 6, na=63),
    u("wavedir", 9, na=360),
    scaled("swellheight", 8, 10.0, na=255),
    u("swellperiod", 6, na=63),
    u("swelldir", 9, na=360),
    u("seastate", 4, na=(13, 14, 15)),
    scaled("watertemp", 10, 10.0, na=501, signed=True),
    u("preciptype", 3, na=7),
    scaled("salinity", 9, 10.0, na=(510, 511)),
    u("ice", 2, na=3),
    spare(10),
)


# Payload classes

_PYTHON_TYPES = {
    Encoding.UNSIGNED: Optional[int],
    Encoding.SIGNED: Optional[int],
    Encoding.SCALED: Optional[float],
    Encoding.TEXT: Optional[str],
    Encoding.BOOLEAN: Optional[bool],
    Encoding.ENUM: Optional[int],
    Encoding.RAW: Optional[str],
}


def payload_fields(layouts: Sequence[Sequence[BitField]]) -> List[Tuple[str, object]]:
    """(attribute, type) pairs for the union of all layout variants"""
    seen: Dict[str, object] = {}
    for layout in layouts:
        for bit_field in layout:
            if bit_field.encoding is Encoding.SPARE or bit_field.name in seen:
                continue
            python_type = _PYTHON_TYPES[bit_field.encoding]
            if bit_field.convert is not None:
                python_type = Optional[float]
            seen[bit_field.name] = python_type
            if bit_field.legend is not None:
                seen[f"{bit_field.name}_text"] = Optional[str]
            if bit_field.encoding is Encoding.RAW:
                seen[f"{bit_field.name}_bits"] = Optional[int]
    return list(seen.items())


def make_payload_class(name: str, layouts, extra=(), doc: str = ""):
    """Build a dataclass whose attributes all default to None"""
    attributes = [
        (attr, python_type, field(default=None))
        for attr, python_type in payload_fields(layouts)
    ]
    attributes.extend(extra)
    cls = make_dataclass(name, attributes)
    cls.__module__ = __name__
    cls.__doc__ = doc or name
    return cls


# Attributes every AIS payload carries besides its bit fields
SENTENCE_ATTRIBUTES = (
    ("talker", Optional[str], field(default=None)),
    ("channel", Optional[str], field(default=None)),
    ("own_vessel", bool, field(default=False)),
)

MeteoHydrological = make_payload_class(
    "MeteoHydrological", (METEO_HYDRO,),
    doc="IMO236 meteorological and hydrological data (DAC 1, FID 11)",
)

MeteoHydrographic = make_payload_class(
    "MeteoHydrographic", (METEO_HYDRO_31,),
    doc="IMO289 meteorological and hydrographic data (DAC 1, FID 31)",
)

ApplicationData = Optional[Union[MeteoHydrological, MeteoHydrographic]]

PAYLOAD_CLASSES = {}
for _layout in LAYOUTS.values():
    if _layout.name in PAYLOAD_CLASSES:
        continue
    _extra = SENTENCE_ATTRIBUTES
    if _layout.name == "BinaryBroadcastMessage":
        _extra = (("application", ApplicationData, field(default=None)),) + _extra
    PAYLOAD_CLASSES[_layout.name] = make_payload_class(
        _layout.name, _layout.variants, _extra, _layout.doc)
