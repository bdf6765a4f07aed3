"""
AIS Binary Decoder

Turns the armored payload of a VDM/VDO sentence into a typed payload:

    payload chars --armor--> Bits --message type--> layout --BitCursor--> fields

A field that runs past the end of the bitstream is None, and so is every
field after it. Only a stream too short to hold the 6-bit message type
is an error.
"""

import logging
from typing import Any, Dict, Optional, Sequence

from .ais_layouts import (
    LAYOUTS,
    METEO_HYDRO,
    METEO_HYDRO_31,
    PAYLOAD_CLASSES,
    BitField,
    Encoding,
    MeteoHydrographic,
    MeteoHydrological,
)
from .bitstream import BitCursor, Bits
from .errors import TruncationError, UnknownMessageTypeError

logger = logging.getLogger(__name__)

# Type 8 application payloads with their own layout: (dac, fid) -> class
APPLICATIONS = {
    (1, 11): (METEO_HYDRO, MeteoHydrological),
    (1, 31): (METEO_HYDRO_31, MeteoHydrographic),
}

# Header size of a type 8 message: type, repeat, mmsi, spare, dac, fid
BINARY_BROADCAST_HEADER_BITS = 56


def read_field(cursor: BitCursor, bit_field: BitField, values: Dict[str, Any]):
    """Read one field into ``values``; spare bits are skipped"""
    encoding = bit_field.encoding

    if encoding is Encoding.SPARE:
        cursor.skip(bit_field.width)
        return

    width = bit_field.width
    if width == 0:
        width = max(0, cursor.remaining - bit_field.reserve)

    if encoding is Encoding.TEXT:
        values[bit_field.name] = cursor.read_text(width)
        return

    if encoding is Encoding.RAW:
        data = cursor.read_hex(width)
        values[bit_field.name] = data
        values[f"{bit_field.name}_bits"] = None if data is None else width
        return

    if bit_field.signed:
        raw = cursor.read_signed(width)
    else:
        raw = cursor.read_unsigned(width)

    if raw is None or raw in bit_field.not_available:
        values[bit_field.name] = None
        if bit_field.legend is not None:
            values[f"{bit_field.name}_text"] = None
        return

    if encoding is Encoding.BOOLEAN:
        values[bit_field.name] = bool(raw)
    elif encoding is Encoding.SCALED:
        value = raw / bit_field.scale + bit_field.offset
        values[bit_field.name] = round(value, 3) if bit_field.offset else value
    elif bit_field.convert is not None:
        values[bit_field.name] = bit_field.convert(raw)
    else:
        values[bit_field.name] = raw
        if bit_field.legend is not None:
            values[f"{bit_field.name}_text"] = bit_field.legend(raw)


def decode_fields(bits: Bits, layout: Sequence[BitField]) -> Dict[str, Any]:
    """Read every field of ``layout`` from the start of ``bits``"""
    cursor = BitCursor(bits)
    values: Dict[str, Any] = {}
    for bit_field in layout:
        read_field(cursor, bit_field, values)
    return values


def message_type_of(bits: Bits) -> int:
    message_type = bits.unsigned(0, 6)
    if message_type is None:
        raise TruncationError(
            f"AIS bitstream of {len(bits)} bits is too short for a message type"
        )
    return message_type


def decode_bits(
    bits: Bits,
    talker: Optional[str] = None,
    channel: Optional[str] = None,
    own_vessel: bool = False,
):
    """Decode a complete AIS bitstream into its payload dataclass"""
    message_type = message_type_of(bits)

    layout = LAYOUTS.get(message_type)
    if layout is None:
        raise UnknownMessageTypeError(message_type)

    values = decode_fields(bits, layout.layout_for(bits))
    values.update(talker=talker, channel=channel, own_vessel=own_vessel)

    if message_type == 8:
        values["application"] = _decode_application(bits, values)

    return PAYLOAD_CLASSES[layout.name](**values)


def decode_payload(
    payload: str,
    fill_bits: int = 0,
    talker: Optional[str] = None,
    channel: Optional[str] = None,
    own_vessel: bool = False,
):
    """Decode an armored payload string"""
    bits = Bits.from_payload(payload, fill_bits)
    return decode_bits(bits, talker, channel, own_vessel)


def _decode_application(bits: Bits, values: Dict[str, Any]):
    application = APPLICATIONS.get((values.get("dac"), values.get("fid")))
    if application is None:
        return None

    layout, payload_class = application
    data = bits.tail(BINARY_BROADCAST_HEADER_BITS)
    if len(data) == 0:
        return None

    logger.debug(f"Decoding DAC {values['dac']} FID {values['fid']} application data")
    return payload_class(**decode_fields(data, layout))
