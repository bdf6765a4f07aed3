"""
NMEA checksum helpers

The checksum is the XOR of every character between the frame start
(``$``, ``!`` or ``\\``) and the ``*``, written as two hex digits.
"""

from typing import Optional, Tuple


def nmea_checksum(data: str) -> int:
    """XOR of all character codes in ``data``"""
    checksum = 0
    for char in data:
        checksum ^= ord(char)
    return checksum


def format_checksum(data: str) -> str:
    """Checksum of ``data`` as two upper-case hex digits"""
    return f"{nmea_checksum(data):02X}"


def checksum_matches(data: str, expected: str) -> bool:
    """
    Compare the checksum of ``data`` against a two-hex-digit value.

    Case-insensitive. Anything that is not exactly two hex digits is a
    mismatch, never an exception.
    """
    if len(expected) != 2:
        return False
    try:
        return nmea_checksum(data) == int(expected, 16)
    except ValueError:
        return False


def split_checksum(body: str) -> Tuple[str, Optional[str]]:
    """
    Split ``data*HH`` into ``(data, "HH")``.

    Returns ``(body, None)`` when there is no ``*``.
    """
    star = body.rfind('*')
    if star < 0:
        return body, None
    return body[:star], body[star + 1:].strip()
