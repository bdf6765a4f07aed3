"""
NMEA Sentence Generators
Build valid sentences for testing
"""

from .nmea_generator import SentenceBuilder

__all__ = ['SentenceBuilder']
