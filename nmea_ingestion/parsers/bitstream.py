"""
AIS six-bit armor and bit cursor

Each payload character carries 6 bits:
    value = ord(char) - 48, minus 8 more if that exceeds 40
so '0'..'W' -> 0..39 and '`'..'w' -> 40..63.

The bitstream is held as one Python int plus its length, which keeps
field extraction to a shift and a mask.

Reference: https://gpsd.gitlab.io/gpsd/AIVDM.html
"""

from typing import Optional

from .errors import FieldError

# Six-bit ASCII used inside AIS text fields
SIXBIT_ALPHABET = "@ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_ !\"#$%&'()*+,-./0123456789:;<=>?"

# Reverse armor table for encoding
ARMOR_ALPHABET = "0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVW`abcdefghijklmnopqrstuvw"


def armor_value(char: str) -> int:
    """Six-bit value of one armored payload character"""
    if char not in ARMOR_ALPHABET:
        raise FieldError(f"invalid AIS payload character '{char}'")
    value = ord(char) - 48
    if value > 40:
        value -= 8
    return value


def validate_payload(payload: str):
    """Raise FieldError on the first character outside the armor alphabet"""
    for char in payload:
        if char not in ARMOR_ALPHABET:
            raise FieldError(f"invalid AIS payload character '{char}'")


class Bits:
    """Immutable bitstream, most significant bit first"""

    __slots__ = ('value', 'length')

    def __init__(self, value: int, length: int):
        self.value = value
        self.length = length

    @classmethod
    def from_payload(cls, payload: str, fill_bits: int = 0) -> 'Bits':
        """
        Decode an armored payload.

        The result is 6 * len(payload) - fill_bits long. Fill bits
        beyond the payload length leave an empty stream.
        """
        if not 0 <= fill_bits <= 5:
            raise FieldError(f"fill bits must be 0-5, got {fill_bits}")

        # one base-2 conversion keeps long payloads linear
        digits = ''.join(f"{armor_value(char):06b}" for char in payload)
        value = int(digits, 2) if digits else 0

        length = len(digits)
        trimmed = min(fill_bits, length)
        return cls(value >> trimmed, length - trimmed)

    def __len__(self) -> int:
        return self.length

    def tail(self, start: int) -> 'Bits':
        """Bits from ``start`` to the end, as a new stream"""
        start = min(max(start, 0), self.length)
        length = self.length - start
        return Bits(self.value & ((1 << length) - 1), length)

    def unsigned(self, start: int, width: int) -> Optional[int]:
        """Unsigned field, or None when the range overruns the stream"""
        if width <= 0 or start < 0 or start + width > self.length:
            return None
        shift = self.length - start - width
        return (self.value >> shift) & ((1 << width) - 1)

    def signed(self, start: int, width: int) -> Optional[int]:
        """Two's complement field, or None when out of range"""
        value = self.unsigned(start, width)
        if value is None:
            return None
        if value & (1 << (width - 1)):
            value -= 1 << width
        return value

    def text(self, start: int, width: int) -> Optional[str]:
        """Six-bit text, trailing '@' padding and spaces removed"""
        if start + width > self.length:
            return None
        usable = width - width % 6
        if usable == 0:
            return None
        digits = f"{self.unsigned(start, usable):0{usable}b}"
        text = ''.join(
            SIXBIT_ALPHABET[int(digits[i:i + 6], 2)] for i in range(0, usable, 6)
        )
        at = text.find('@')
        if at >= 0:
            text = text[:at]
        return text.rstrip() or None

    def hex(self, start: int, width: int) -> Optional[str]:
        """Raw bits as hex, left aligned and zero padded to whole bytes"""
        value = self.unsigned(start, width)
        if value is None:
            return None if width > 0 else ""
        pad = (-width) % 8
        return f"{value << pad:0{(width + pad) // 4}x}"


class BitCursor:
    """
    Forward-only reader over Bits.

    Once a read runs past the end, the cursor is exhausted and every
    later read returns None as well.
    """

    def __init__(self, bits: Bits, position: int = 0):
        self.bits = bits
        self.position = position
        self.exhausted = False

    @property
    def remaining(self) -> int:
        return max(0, self.bits.length - self.position)

    def _take(self, width: int) -> Optional[int]:
        if self.exhausted or self.position + width > self.bits.length:
            self.exhausted = True
            self.position += width
            return None
        start = self.position
        self.position += width
        return start

    def read_unsigned(self, width: int) -> Optional[int]:
        start = self._take(width)
        return None if start is None else self.bits.unsigned(start, width)

    def read_signed(self, width: int) -> Optional[int]:
        start = self._take(width)
        return None if start is None else self.bits.signed(start, width)

    def read_text(self, width: int) -> Optional[str]:
        start = self._take(width)
        return None if start is None else self.bits.text(start, width)

    def read_hex(self, width: int) -> Optional[str]:
        start = self._take(width)
        return None if start is None else self.bits.hex(start, width)

    def skip(self, width: int):
        self._take(width)

    def peek_unsigned(self, offset: int, width: int) -> Optional[int]:
        """Read at an absolute offset without moving"""
        return self.bits.unsigned(offset, width)
