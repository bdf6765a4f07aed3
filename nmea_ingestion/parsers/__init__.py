"""
NMEA 0183 / 4.10 Parsers
Tag blocks, checksums, GNSS sentences and AIS binary payloads
"""

from .sentence_parser import MESSAGE_TYPES, NMEAParser, parse_sentence
from .errors import DecodeError

__all__ = ['NMEAParser', 'parse_sentence', 'MESSAGE_TYPES', 'DecodeError']
