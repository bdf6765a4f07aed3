"""
GNSS and instrument sentence decoders

One decoder per formatter. Each checks the field count, then reads the
fields by position. Empty fields are None, never zero.

    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
     |    |      |          |          | |  |   |     |     |
     |    |      |          |          | |  |   |     |     +-- geoid separation
     |    |      |          |          | |  |   |     +-------- altitude
     |    |      |          |          | |  |   +-------------- HDOP
     |    |      |          |          | |  +------------------ satellites
     |    |      |          |          | +--------------------- fix quality
     |    |      |          +----------+----------------------- longitude
     |    |      +--------------------------------------------- latitude
     |    +---------------------------------------------------- UTC time
     +--------------------------------------------------------- talker + formatter
"""

import calendar
import datetime
import math
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from .errors import FieldError


# Payloads

@dataclass
class GGA:
    """Global positioning system fix data"""
    talker: str
    navigation_system: Optional[str] = None
    time: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    fix_quality: Optional[int] = None
    satellites: Optional[int] = None
    hdop: Optional[float] = None
    altitude: Optional[float] = None
    geoid_separation: Optional[float] = None
    dgps_age: Optional[float] = None
    dgps_station: Optional[str] = None


@dataclass
class RMC:
    """Recommended minimum specific GNSS data"""
    talker: str
    navigation_system: Optional[str] = None
    time: Optional[str] = None
    status: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    speed_knots: Optional[float] = None
    course: Optional[float] = None
    date: Optional[str] = None
    magnetic_variation: Optional[float] = None
    mode: Optional[str] = None
    nav_status: Optional[str] = None
    timestamp: Optional[float] = None


@dataclass
class GNS:
    """GNSS fix data"""
    talker: str
    navigation_system: Optional[str] = None
    time: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    mode: Optional[str] = None
    satellites: Optional[int] = None
    hdop: Optional[float] = None
    altitude: Optional[float] = None
    geoid_separation: Optional[float] = None
    dgps_age: Optional[float] = None
    dgps_station: Optional[str] = None
    nav_status: Optional[str] = None


@dataclass
class GSA:
    """GNSS DOP and active satellites"""
    talker: str
    navigation_system: Optional[str] = None
    selection_mode: Optional[str] = None
    fix_type: Optional[int] = None
    prns: List[int] = field(default_factory=list)
    pdop: Optional[float] = None
    hdop: Optional[float] = None
    vdop: Optional[float] = None
    system_id: Optional[int] = None


@dataclass
class Satellite:
    prn: Optional[int] = None
    elevation: Optional[int] = None
    azimuth: Optional[int] = None
    snr: Optional[int] = None


@dataclass
class GSV:
    """GNSS satellites in view"""
    talker: str
    navigation_system: Optional[str] = None
    total_messages: Optional[int] = None
    message_number: Optional[int] = None
    satellites_in_view: Optional[int] = None
    satellites: List[Satellite] = field(default_factory=list)
    signal_id: Optional[int] = None


@dataclass
class VTG:
    """Course over ground and ground speed"""
    talker: str
    navigation_system: Optional[str] = None
    course_true: Optional[float] = None
    course_magnetic: Optional[float] = None
    speed_knots: Optional[float] = None
    speed_kph: Optional[float] = None
    mode: Optional[str] = None


@dataclass
class GLL:
    """Geographic position, latitude/longitude"""
    talker: str
    navigation_system: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    time: Optional[str] = None
    status: Optional[str] = None
    mode: Optional[str] = None


@dataclass
class ZDA:
    """Time and date"""
    talker: str
    navigation_system: Optional[str] = None
    time: Optional[str] = None
    date: Optional[str] = None
    local_zone_hours: Optional[int] = None
    local_zone_minutes: Optional[int] = None
    timestamp: Optional[float] = None


@dataclass
class DTM:
    """Datum reference"""
    talker: str
    navigation_system: Optional[str] = None
    datum: Optional[str] = None
    subdivision: Optional[str] = None
    latitude_offset: Optional[float] = None   # minutes
    longitude_offset: Optional[float] = None  # minutes
    altitude_offset: Optional[float] = None
    reference_datum: Optional[str] = None


@dataclass
class HDT:
    """Heading, true"""
    talker: str
    navigation_system: Optional[str] = None
    heading: Optional[float] = None


@dataclass
class DPT:
    """Depth"""
    talker: str
    navigation_system: Optional[str] = None
    depth: Optional[float] = None
    offset: Optional[float] = None
    max_range: Optional[float] = None


@dataclass
class DBS:
    """Depth below surface"""
    talker: str
    navigation_system: Optional[str] = None
    depth_feet: Optional[float] = None
    depth_meters: Optional[float] = None
    depth_fathoms: Optional[float] = None


@dataclass
class MTW:
    """Water temperature"""
    talker: str
    navigation_system: Optional[str] = None
    temperature: Optional[float] = None  # degrees Celsius


@dataclass
class VHW:
    """Water speed and heading"""
    talker: str
    navigation_system: Optional[str] = None
    heading_true: Optional[float] = None
    heading_magnetic: Optional[float] = None
    speed_knots: Optional[float] = None
    speed_kph: Optional[float] = None


@dataclass
class MWV:
    """Wind speed and angle"""
    talker: str
    navigation_system: Optional[str] = None
    angle: Optional[float] = None
    reference: Optional[str] = None
    speed: Optional[float] = None
    speed_units: Optional[str] = None
    status: Optional[str] = None


@dataclass
class VBW:
    """Dual ground/water speed"""
    talker: str
    navigation_system: Optional[str] = None
    water_longitudinal: Optional[float] = None
    water_transverse: Optional[float] = None
    water_status: Optional[str] = None
    ground_longitudinal: Optional[float] = None
    ground_transverse: Optional[float] = None
    ground_status: Optional[str] = None
    stern_water_transverse: Optional[float] = None
    stern_water_status: Optional[str] = None
    stern_ground_transverse: Optional[float] = None
    stern_ground_status: Optional[str] = None


@dataclass
class MSS:
    """Beacon receiver status"""
    talker: str
    navigation_system: Optional[str] = None
    signal_strength: Optional[float] = None
    snr: Optional[float] = None
    frequency_khz: Optional[float] = None
    bit_rate: Optional[int] = None
    channel: Optional[int] = None


@dataclass
class STN:
    """Multiple data ID"""
    talker: str
    navigation_system: Optional[str] = None
    talker_id_number: Optional[int] = None


@dataclass
class ALM:
    """GPS almanac data"""
    talker: str
    navigation_system: Optional[str] = None
    total_messages: Optional[int] = None
    message_number: Optional[int] = None
    prn: Optional[int] = None
    week: Optional[int] = None
    health: Optional[int] = None
    eccentricity: Optional[int] = None
    reference_time: Optional[int] = None
    inclination: Optional[int] = None
    rate_of_right_ascension: Optional[int] = None
    root_semi_major_axis: Optional[int] = None
    argument_of_perigee: Optional[int] = None
    longitude_of_ascension_node: Optional[int] = None
    mean_anomaly: Optional[int] = None
    af0: Optional[int] = None
    af1: Optional[int] = None


# Field access


def _digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


# Plain decimal only: no exponents, nan, inf or digit separators
NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")
INTEGER = re.compile(r"[+-]?[0-9]+")
HEX_INTEGER = re.compile(r"[0-9A-Fa-f]+")
TIME = re.compile(r"[0-9]{6}(?:\.[0-9]*)?")

# Longest (d)ddmm part of a coordinate
MAX_COORDINATE_DIGITS = 5


# Satellite system by talker id
NAVIGATION_SYSTEMS = {
    "GP": "GPS",
    "GL": "GLONASS",
    "GA": "Galileo",
    "GB": "BeiDou",
    "BD": "BeiDou",
    "GI": "NavIC",
    "GQ": "QZSS",
    "GN": "Combination",
}

FAA_MODES = "ADEFMNPRS"
NAV_STATUSES = "SCUV"


class FieldReader:
    """Positional access to the fields of one sentence"""

    def __init__(self, sentence_type: str, fields: Sequence[str]):
        self.sentence_type = sentence_type
        self.fields = fields

    def error(self, index: int, name: str, problem: str) -> FieldError:
        value = self.fields[index] if index < len(self.fields) else ''
        return FieldError(
            f"{self.sentence_type}: {problem} in field {index + 1} ({name}): '{value}'"
        )

    def raw(self, index: int) -> Optional[str]:
        if index >= len(self.fields):
            return None
        return self.fields[index].strip() or None

    def text(self, index: int) -> Optional[str]:
        return self.raw(index)

    def number(self, index: int, name: str) -> Optional[float]:
        value = self.raw(index)
        if value is None:
            return None
        if not NUMBER.fullmatch(value):
            raise self.error(index, name, "invalid number")
        number = float(value)
        if not math.isfinite(number):
            raise self.error(index, name, "number out of range")
        return number

    def integer(self, index: int, name: str, base: int = 10) -> Optional[int]:
        value = self.raw(index)
        if value is None:
            return None
        pattern = HEX_INTEGER if base == 16 else INTEGER
        if not pattern.fullmatch(value):
            raise self.error(index, name, "invalid integer")
        try:
            return int(value, base)
        except ValueError:
            # over the interpreter's digit limit
            raise self.error(index, name, "invalid integer") from None

    def letter(self, index: int, name: str, allowed: str) -> Optional[str]:
        value = self.raw(index)
        if value is not None and (len(value) != 1 or value not in allowed):
            raise self.error(index, name, f"expected one of '{allowed}'")
        return value

    def units(self, index: int, name: str, expected: str):
        """Fixed units letter; empty is tolerated"""
        self.letter(index, name, expected)

    def time(self, index: int, name: str = "time") -> Optional[str]:
        """hhmmss(.ss) -> HH:MM:SS(.ss)"""
        value = self.raw(index)
        if value is None:
            return None
        if not TIME.fullmatch(value):
            raise self.error(index, name, "invalid time")
        hours, minutes = int(value[0:2]), int(value[2:4])
        seconds = float(value[4:])
        if hours > 23 or minutes > 59 or not 0 <= seconds < 61:
            raise self.error(index, name, "invalid time")
        return f"{value[0:2]}:{value[2:4]}:{value[4:]}"

    def date(self, index: int, name: str = "date") -> Optional[str]:
        """ddmmyy -> YYYY-MM-DD, two-digit years map to 1980-2079"""
        value = self.raw(index)
        if value is None:
            return None
        if len(value) != 6 or not _digits(value):
            raise self.error(index, name, "invalid date")
        day, month, year = int(value[0:2]), int(value[2:4]), int(value[4:6])
        year += 1900 if year >= 80 else 2000
        try:
            return datetime.date(year, month, day).isoformat()
        except ValueError:
            raise self.error(index, name, "invalid date") from None

    def coordinate(self, index: int, name: str, hemispheres: str,
                   max_degrees: int) -> Optional[float]:
        """(d)ddmm.mmmm plus hemisphere letter -> signed decimal degrees"""
        value = self.raw(index)
        hemisphere = self.raw(index + 1)
        if value is None:
            return None
        if hemisphere is None or hemisphere not in hemispheres:
            raise self.error(index + 1, f"{name} hemisphere", f"expected one of '{hemispheres}'")

        whole, _, fraction = value.partition('.')
        if not 2 <= len(whole) <= MAX_COORDINATE_DIGITS or not _digits(whole) \
                or (fraction and not _digits(fraction)):
            raise self.error(index, name, "invalid coordinate")
        degrees = int(whole[:-2] or 0)
        minutes = float(f"{whole[-2:]}.{fraction or 0}")
        if minutes >= 60 or degrees + minutes / 60 > max_degrees:
            raise self.error(index, name, "coordinate out of range")

        result = degrees + minutes / 60
        return -result if hemisphere == hemispheres[1] else result

    def latitude(self, index: int) -> Optional[float]:
        return self.coordinate(index, "latitude", "NS", 90)

    def longitude(self, index: int) -> Optional[float]:
        return self.coordinate(index, "longitude", "EW", 180)

    def signed(self, index: int, name: str, negative: str, positive: str) -> Optional[float]:
        """Value followed by a direction letter that gives its sign"""
        value = self.number(index, name)
        direction = self.letter(index + 1, f"{name} direction", positive + negative)
        if value is not None and direction == negative:
            return -value
        return value

    def mode(self, index: int) -> Optional[str]:
        return self.letter(index, "mode", FAA_MODES)


def navigation_system(talker: str) -> str:
    """GPS, GLONASS, ... for satellite talkers; Other for instruments"""
    return NAVIGATION_SYSTEMS.get(talker, "Other")


def unix_timestamp(date: Optional[str], time: Optional[str]) -> Optional[float]:
    """Seconds since the epoch for an ISO date and HH:MM:SS(.ss) time"""
    if date is None or time is None:
        return None
    year, month, day = (int(part) for part in date.split('-'))
    hours, minutes, seconds = time.split(':')
    whole = int(float(seconds))
    stamp = calendar.timegm((year, month, day, int(hours), int(minutes), whole, 0, 0, 0))
    return round(stamp + float(seconds) - whole, 3)


def _check_count(sentence_type: str, fields: Sequence[str], counts: Sequence[int]):
    if len(fields) not in counts:
        expected = ' or '.join(str(c) for c in counts)
        raise FieldError(
            f"{sentence_type}: expected {expected} fields, got {len(fields)}"
        )


# Decoders

def decode_gga(talker: str, fields: Sequence[str]) -> GGA:
    _check_count("GGA", fields, (14,))
    f = FieldReader("GGA", fields)
    quality = f.integer(5, "fix quality")
    if quality is not None and not 0 <= quality <= 8:
        raise f.error(5, "fix quality", "expected 0-8")
    f.units(9, "altitude units", "M")
    f.units(11, "geoid separation units", "M")
    return GGA(
        talker=talker,
        time=f.time(0),
        latitude=f.latitude(1),
        longitude=f.longitude(3),
        fix_quality=quality,
        satellites=f.integer(6, "satellites"),
        hdop=f.number(7, "hdop"),
        altitude=f.number(8, "altitude"),
        geoid_separation=f.number(10, "geoid separation"),
        dgps_age=f.number(12, "dgps age"),
        dgps_station=f.text(13),
    )


def decode_rmc(talker: str, fields: Sequence[str]) -> RMC:
    _check_count("RMC", fields, (11, 12, 13))
    f = FieldReader("RMC", fields)
    time = f.time(0)
    date = f.date(8)
    return RMC(
        talker=talker,
        time=time,
        status=f.letter(1, "status", "AV"),
        latitude=f.latitude(2),
        longitude=f.longitude(4),
        speed_knots=f.number(6, "speed"),
        course=f.number(7, "course"),
        date=date,
        magnetic_variation=f.signed(9, "magnetic variation", "W", "E"),
        mode=f.mode(11),
        nav_status=f.letter(12, "nav status", NAV_STATUSES),
        timestamp=unix_timestamp(date, time),
    )


def decode_gns(talker: str, fields: Sequence[str]) -> GNS:
    _check_count("GNS", fields, (12, 13))
    f = FieldReader("GNS", fields)
    mode = f.text(5)
    if mode is not None and any(c not in FAA_MODES for c in mode):
        raise f.error(5, "mode", f"expected letters from '{FAA_MODES}'")
    return GNS(
        talker=talker,
        time=f.time(0),
        latitude=f.latitude(1),
        longitude=f.longitude(3),
        mode=mode,
        satellites=f.integer(6, "satellites"),
        hdop=f.number(7, "hdop"),
        altitude=f.number(8, "altitude"),
        geoid_separation=f.number(9, "geoid separation"),
        dgps_age=f.number(10, "dgps age"),
        dgps_station=f.text(11),
        nav_status=f.letter(12, "nav status", NAV_STATUSES),
    )


def decode_gsa(talker: str, fields: Sequence[str]) -> GSA:
    _check_count("GSA", fields, (17, 18))
    f = FieldReader("GSA", fields)
    fix_type = f.integer(1, "fix type")
    if fix_type is not None and not 1 <= fix_type <= 3:
        raise f.error(1, "fix type", "expected 1-3")
    prns = [f.integer(i, "prn") for i in range(2, 14)]
    return GSA(
        talker=talker,
        selection_mode=f.letter(0, "selection mode", "MA"),
        fix_type=fix_type,
        prns=[prn for prn in prns if prn is not None],
        pdop=f.number(14, "pdop"),
        hdop=f.number(15, "hdop"),
        vdop=f.number(16, "vdop"),
        system_id=f.integer(17, "system id", 16),
    )


GSV_COUNTS = tuple(3 + 4 * n + extra for n in range(5) for extra in (0, 1))


def decode_gsv(talker: str, fields: Sequence[str]) -> GSV:
    _check_count("GSV", fields, GSV_COUNTS)
    f = FieldReader("GSV", fields)
    groups = (len(fields) - 3) // 4
    satellites = []
    for n in range(groups):
        base = 3 + 4 * n
        satellites.append(Satellite(
            prn=f.integer(base, "prn"),
            elevation=f.integer(base + 1, "elevation"),
            azimuth=f.integer(base + 2, "azimuth"),
            snr=f.integer(base + 3, "snr"),
        ))
    has_signal = (len(fields) - 3) % 4 == 1
    return GSV(
        talker=talker,
        total_messages=f.integer(0, "total messages"),
        message_number=f.integer(1, "message number"),
        satellites_in_view=f.integer(2, "satellites in view"),
        satellites=satellites,
        signal_id=f.integer(len(fields) - 1, "signal id", 16) if has_signal else None,
    )


def decode_vtg(talker: str, fields: Sequence[str]) -> VTG:
    _check_count("VTG", fields, (8, 9))
    f = FieldReader("VTG", fields)
    f.units(1, "true course reference", "T")
    f.units(3, "magnetic course reference", "M")
    f.units(5, "speed units", "N")
    f.units(7, "speed units", "K")
    return VTG(
        talker=talker,
        course_true=f.number(0, "true course"),
        course_magnetic=f.number(2, "magnetic course"),
        speed_knots=f.number(4, "speed knots"),
        speed_kph=f.number(6, "speed kph"),
        mode=f.mode(8),
    )


def decode_gll(talker: str, fields: Sequence[str]) -> GLL:
    _check_count("GLL", fields, (6, 7))
    f = FieldReader("GLL", fields)
    return GLL(
        talker=talker,
        latitude=f.latitude(0),
        longitude=f.longitude(2),
        time=f.time(4),
        status=f.letter(5, "status", "AV"),
        mode=f.mode(6),
    )


def decode_zda(talker: str, fields: Sequence[str]) -> ZDA:
    _check_count("ZDA", fields, (6,))
    f = FieldReader("ZDA", fields)
    time = f.time(0)
    day, month, year = (f.integer(i, name) for i, name in ((1, "day"), (2, "month"), (3, "year")))
    date = None
    if None not in (day, month, year):
        try:
            date = datetime.date(year, month, day).isoformat()
        except ValueError:
            raise f.error(1, "day", "invalid date") from None
    return ZDA(
        talker=talker,
        time=time,
        date=date,
        local_zone_hours=f.integer(4, "local zone hours"),
        local_zone_minutes=f.integer(5, "local zone minutes"),
        timestamp=unix_timestamp(date, time),
    )


def decode_dtm(talker: str, fields: Sequence[str]) -> DTM:
    _check_count("DTM", fields, (8,))
    f = FieldReader("DTM", fields)
    return DTM(
        talker=talker,
        datum=f.text(0),
        subdivision=f.text(1),
        latitude_offset=f.signed(2, "latitude offset", "S", "N"),
        longitude_offset=f.signed(4, "longitude offset", "W", "E"),
        altitude_offset=f.number(6, "altitude offset"),
        reference_datum=f.text(7),
    )


def decode_hdt(talker: str, fields: Sequence[str]) -> HDT:
    _check_count("HDT", fields, (2,))
    f = FieldReader("HDT", fields)
    f.units(1, "heading reference", "T")
    return HDT(talker=talker, heading=f.number(0, "heading"))


def decode_dpt(talker: str, fields: Sequence[str]) -> DPT:
    _check_count("DPT", fields, (2, 3))
    f = FieldReader("DPT", fields)
    return DPT(
        talker=talker,
        depth=f.number(0, "depth"),
        offset=f.number(1, "offset"),
        max_range=f.number(2, "max range"),
    )


def decode_dbs(talker: str, fields: Sequence[str]) -> DBS:
    _check_count("DBS", fields, (6,))
    f = FieldReader("DBS", fields)
    f.units(1, "feet units", "f")
    f.units(3, "meters units", "M")
    f.units(5, "fathoms units", "F")
    return DBS(
        talker=talker,
        depth_feet=f.number(0, "depth feet"),
        depth_meters=f.number(2, "depth meters"),
        depth_fathoms=f.number(4, "depth fathoms"),
    )


def decode_mtw(talker: str, fields: Sequence[str]) -> MTW:
    _check_count("MTW", fields, (2,))
    f = FieldReader("MTW", fields)
    f.units(1, "temperature units", "C")
    return MTW(talker=talker, temperature=f.number(0, "temperature"))


def decode_vhw(talker: str, fields: Sequence[str]) -> VHW:
    _check_count("VHW", fields, (8,))
    f = FieldReader("VHW", fields)
    f.units(1, "true heading reference", "T")
    f.units(3, "magnetic heading reference", "M")
    f.units(5, "speed units", "N")
    f.units(7, "speed units", "K")
    return VHW(
        talker=talker,
        heading_true=f.number(0, "true heading"),
        heading_magnetic=f.number(2, "magnetic heading"),
        speed_knots=f.number(4, "speed knots"),
        speed_kph=f.number(6, "speed kph"),
    )


def decode_mwv(talker: str, fields: Sequence[str]) -> MWV:
    _check_count("MWV", fields, (5,))
    f = FieldReader("MWV", fields)
    return MWV(
        talker=talker,
        angle=f.number(0, "wind angle"),
        reference=f.letter(1, "reference", "RT"),
        speed=f.number(2, "wind speed"),
        speed_units=f.letter(3, "speed units", "KMNS"),
        status=f.letter(4, "status", "AV"),
    )


def decode_vbw(talker: str, fields: Sequence[str]) -> VBW:
    _check_count("VBW", fields, (6, 10))
    f = FieldReader("VBW", fields)
    return VBW(
        talker=talker,
        water_longitudinal=f.number(0, "water longitudinal speed"),
        water_transverse=f.number(1, "water transverse speed"),
        water_status=f.letter(2, "water status", "AV"),
        ground_longitudinal=f.number(3, "ground longitudinal speed"),
        ground_transverse=f.number(4, "ground transverse speed"),
        ground_status=f.letter(5, "ground status", "AV"),
        stern_water_transverse=f.number(6, "stern water transverse speed"),
        stern_water_status=f.letter(7, "stern water status", "AV"),
        stern_ground_transverse=f.number(8, "stern ground transverse speed"),
        stern_ground_status=f.letter(9, "stern ground status", "AV"),
    )


def decode_mss(talker: str, fields: Sequence[str]) -> MSS:
    _check_count("MSS", fields, (5,))
    f = FieldReader("MSS", fields)
    return MSS(
        talker=talker,
        signal_strength=f.number(0, "signal strength"),
        snr=f.number(1, "snr"),
        frequency_khz=f.number(2, "beacon frequency"),
        bit_rate=f.integer(3, "bit rate"),
        channel=f.integer(4, "channel"),
    )


def decode_stn(talker: str, fields: Sequence[str]) -> STN:
    _check_count("STN", fields, (1,))
    f = FieldReader("STN", fields)
    return STN(talker=talker, talker_id_number=f.integer(0, "talker id number"))


def decode_alm(talker: str, fields: Sequence[str]) -> ALM:
    _check_count("ALM", fields, (15,))
    f = FieldReader("ALM", fields)
    return ALM(
        talker=talker,
        total_messages=f.integer(0, "total messages"),
        message_number=f.integer(1, "message number"),
        prn=f.integer(2, "prn"),
        week=f.integer(3, "week"),
        health=f.integer(4, "health", 16),
        eccentricity=f.integer(5, "eccentricity", 16),
        reference_time=f.integer(6, "reference time", 16),
        inclination=f.integer(7, "inclination", 16),
        rate_of_right_ascension=f.integer(8, "rate of right ascension", 16),
        root_semi_major_axis=f.integer(9, "root semi-major axis", 16),
        argument_of_perigee=f.integer(10, "argument of perigee", 16),
        longitude_of_ascension_node=f.integer(11, "longitude of ascension node", 16),
        mean_anomaly=f.integer(12, "mean anomaly", 16),
        af0=f.integer(13, "af0", 16),
        af1=f.integer(14, "af1", 16),
    )


GNSS_DECODERS: Dict[str, Callable[[str, Sequence[str]], object]] = {
    "GGA": decode_gga,
    "RMC": decode_rmc,
    "GNS": decode_gns,
    "GSA": decode_gsa,
    "GSV": decode_gsv,
    "VTG": decode_vtg,
    "GLL": decode_gll,
    "ZDA": decode_zda,
    "DTM": decode_dtm,
    "HDT": decode_hdt,
    "DPT": decode_dpt,
    "DBS": decode_dbs,
    "MTW": decode_mtw,
    "VHW": decode_vhw,
    "MWV": decode_mwv,
    "VBW": decode_vbw,
    "MSS": decode_mss,
    "STN": decode_stn,
    "ALM": decode_alm,
}

GNSS_PAYLOADS = (
    GGA, RMC, GNS, GSA, GSV, VTG, GLL, ZDA, DTM, HDT,
    DPT, DBS, MTW, VHW, MWV, VBW, MSS, STN, ALM,
)
