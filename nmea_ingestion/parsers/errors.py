"""
Decode errors raised inside the parsers.

Every error carries a ``kind`` used in ParseError records and in the
statistics. NMEAParser.parse_line converts them to data, so none of
these escape the engine.
"""


class DecodeError(ValueError):
    """Base class for per-line decode failures"""

    kind = "field"


class FrameError(DecodeError):
    """Line is not a recognizable sentence or tag block frame"""

    kind = "frame"


class ChecksumError(DecodeError):
    """Checksum present but wrong (strict mode only)"""

    kind = "checksum"


class FieldError(DecodeError):
    """Wrong field count, bad numeric literal or bad enumerated letter"""

    kind = "field"


class UnknownFormatterError(DecodeError):
    """Sentence formatter not in the supported set"""

    kind = "unknown_formatter"

    def __init__(self, formatter: str, address: str):
        super().__init__(f"unknown sentence formatter '{formatter}' ({address})")
        self.formatter = formatter
        self.address = address


class TruncationError(DecodeError):
    """AIS bitstream too short to carry a message type"""

    kind = "truncation"


class UnknownMessageTypeError(DecodeError):
    """AIS message type id outside the decoded set"""

    kind = "unknown_ais_type"

    def __init__(self, message_type: int):
        super().__init__(f"unsupported AIS message type {message_type}")
        self.message_type = message_type
