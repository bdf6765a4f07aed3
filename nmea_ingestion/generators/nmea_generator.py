"""
NMEA 0183 Sentence Builder

Builds valid NMEA 0183 sentences for tests and fixtures:
- 6-bit ASCII encoding
- Bit packing for AIS message types
- Checksum calculation
- Multi-sentence message generation
- NMEA 4.10 tag blocks

Everything is deterministic; the same inputs always give the same lines.
"""

from typing import List, Optional, Sequence, Tuple

from ..parsers.bitstream import ARMOR_ALPHABET, SIXBIT_ALPHABET
from ..parsers.checksum import format_checksum

# Payload characters per VDM sentence, as most transponders split them
MAX_PAYLOAD_CHARS = 60


class SentenceBuilder:
    """
    Build NMEA sentences bit by bit.

    Supports:
    - Any AIS message from (value, num_bits) tuples
    - Message Type 1/2/3: Class A Position Report
    - Message Type 5: Static and Voyage Related Data (2 sentences)
    - Message Type 18: Class B Position Report
    - GNSS sentences from plain fields
    """

    def __init__(self, talker: str = "AI"):
        self.talker = talker
        self.message_count = 0

    @staticmethod
    def pack_bits(values: Sequence[Tuple[int, int]]) -> List[int]:
        """
        Pack values into bit array.

        values: List of (value, num_bits) tuples
        """
        bits = []
        for value, num_bits in values:
            # Handle signed values
            if value < 0:
                value = value + (1 << num_bits)

            for i in range(num_bits - 1, -1, -1):
                bits.append((value >> i) & 1)

        return bits

    @staticmethod
    def encode_payload(bits: Sequence[int]) -> Tuple[str, int]:
        """
        Encode bit array to 6-bit ASCII payload.

        Returns (payload, fill_bits).
        """
        fill_bits = (6 - len(bits) % 6) % 6
        padded = list(bits) + [0] * fill_bits

        payload = []
        for i in range(0, len(padded), 6):
            value = 0
            for j in range(6):
                value = (value << 1) | padded[i + j]
            payload.append(ARMOR_ALPHABET[value])

        return ''.join(payload), fill_bits

    @staticmethod
    def encode_string(text: str, num_chars: int) -> List[int]:
        """
        Encode string to 6-bit ASCII bits, padded with '@'.
        """
        text = text.upper()[:num_chars].ljust(num_chars, '@')
        bits = []

        for char in text:
            value = SIXBIT_ALPHABET.find(char)
            if value < 0:
                value = 0

            for i in range(5, -1, -1):
                bits.append((value >> i) & 1)

        return bits

    @staticmethod
    def checksum(data: str) -> str:
        """Calculate NMEA checksum"""
        return format_checksum(data)

    def sentence(self, data: str, start: str = '$') -> str:
        """Frame sentence data with start character and checksum"""
        self.message_count += 1
        return f"{start}{data}*{self.checksum(data)}"

    def gnss(self, formatter: str, fields: Sequence[str], talker: str = "GP") -> str:
        """$<talker><formatter>,<fields>*HH"""
        return self.sentence(','.join([f"{talker}{formatter}", *fields]))

    def vdm(
        self,
        bits: Sequence[int],
        channel: str = 'A',
        sequence_id: Optional[int] = None,
        formatter: str = "VDM",
        max_chars: int = MAX_PAYLOAD_CHARS,
    ) -> List[str]:
        """
        Wrap an AIS bitstream in one or more VDM/VDO sentences.

        Fill bits are carried only by the last sentence.
        """
        payload, fill_bits = self.encode_payload(bits)
        chunks = [payload[i:i + max_chars] for i in range(0, len(payload), max_chars)] or [""]
        total = len(chunks)
        seq = "" if total == 1 and sequence_id is None else str(sequence_id or 0)

        sentences = []
        for number, chunk in enumerate(chunks, start=1):
            fill = fill_bits if number == total else 0
            data = f"{self.talker}{formatter},{total},{number},{seq},{channel},{chunk},{fill}"
            sentences.append(self.sentence(data, start='!'))

        return sentences

    @staticmethod
    def tag_block(fields: Sequence[Tuple[str, object]], checksum: bool = True) -> str:
        """\\c:1643588424,s:station*HH\\ from (code, value) pairs"""
        interior = ','.join(f"{code}:{value}" for code, value in fields)
        if checksum:
            interior = f"{interior}*{format_checksum(interior)}"
        return f"\\{interior}\\"

    def position_report(
        self,
        mmsi: int,
        latitude: float,
        longitude: float,
        speed: float = 0.0,
        course: float = 0.0,
        heading: int = 511,
        nav_status: int = 0,
        second: int = 60,
        message_type: int = 1,
    ) -> List[int]:
        """
        Type 1/2/3 Position Report (Class A).

        168 bits total.
        """
        return self.pack_bits([
            (message_type, 6),             # Message type
            (0, 2),                        # Repeat indicator
            (mmsi, 30),                    # MMSI
            (nav_status, 4),               # Navigation status
            (-128, 8),                     # Rate of turn (not available)
            (round(speed * 10), 10),       # Speed over ground
            (1, 1),                        # Position accuracy
            (round(longitude * 600000), 28),  # Longitude
            (round(latitude * 600000), 27),   # Latitude
            (round(course * 10), 12),      # Course over ground
            (heading, 9),                  # True heading
            (second, 6),                   # Time stamp
            (0, 2),                        # Maneuver indicator
            (0, 3),                        # Spare
            (1, 1),                        # RAIM flag
            (0, 19),                       # Radio status
        ])

    def static_voyage(
        self,
        mmsi: int,
        imo: int,
        callsign: str,
        name: str,
        ship_type: int,
        destination: str,
        to_bow: int = 100,
        to_stern: int = 50,
        to_port: int = 10,
        to_starboard: int = 10,
        draught: float = 8.5,
        eta: Tuple[int, int, int, int] = (6, 15, 12, 30),
    ) -> List[int]:
        """
        Type 5 Static and Voyage Data.

        424 bits total - requires 2 sentences.
        """
        month, day, hour, minute = eta
        bits = self.pack_bits([
            (5, 6),              # Message type
            (0, 2),              # Repeat indicator
            (mmsi, 30),          # MMSI
            (0, 2),              # AIS version
            (imo, 30),           # IMO number
        ])
        bits.extend(self.encode_string(callsign, 7))
        bits.extend(self.encode_string(name, 20))
        bits.extend(self.pack_bits([
            (ship_type, 8),      # Ship type
            (to_bow, 9),         # Dimension to bow
            (to_stern, 9),       # Dimension to stern
            (to_port, 6),        # Dimension to port
            (to_starboard, 6),   # Dimension to starboard
            (1, 4),              # Position fix type (GPS)
            (month, 4),          # ETA month
            (day, 5),            # ETA day
            (hour, 5),           # ETA hour
            (minute, 6),         # ETA minute
            (round(draught * 10), 8),  # Draught
        ]))
        bits.extend(self.encode_string(destination, 20))
        bits.extend(self.pack_bits([
            (0, 1),              # DTE
            (0, 1),              # Spare
        ]))
        return bits

    def class_b_position(
        self,
        mmsi: int,
        latitude: float,
        longitude: float,
        speed: float = 0.0,
        course: float = 0.0,
        heading: int = 511,
    ) -> List[int]:
        """
        Type 18 Class B Position Report.

        168 bits total.
        """
        return self.pack_bits([
            (18, 6),             # Message type
            (0, 2),              # Repeat indicator
            (mmsi, 30),          # MMSI
            (0, 8),              # Regional reserved
            (round(speed * 10), 10),  # Speed over ground
            (0, 1),              # Position accuracy
            (round(longitude * 600000), 28),  # Longitude
            (round(latitude * 600000), 27),   # Latitude
            (round(course * 10), 12),  # Course over ground
            (heading, 9),        # True heading
            (60, 6),             # Time stamp (not available)
            (0, 2),              # Regional reserved
            (1, 1),              # CS unit
            (0, 1),              # Display flag
            (1, 1),              # DSC flag
            (1, 1),              # Band flag
            (1, 1),              # Message 22 flag
            (0, 1),              # Assigned
            (0, 1),              # RAIM
            (0, 20),             # Radio status
        ])
