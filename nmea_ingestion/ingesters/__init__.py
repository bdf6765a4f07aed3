"""
NMEA Ingesters

Line-streaming pipeline and the Redis stream sink.
"""

from .file_ingester import NMEAFileIngester, expand_inputs, filter_errors
from .redis_sink import RedisRecordSink

__all__ = ['NMEAFileIngester', 'RedisRecordSink', 'expand_inputs', 'filter_errors']
