"""
Redis Stream Sink

Publishes decoded records to a Redis stream with XADD. Publish failures
are logged and counted; they never stop the pipeline.
"""

import logging
from typing import Optional

from ..schema import Record

logger = logging.getLogger(__name__)


class RedisRecordSink:
    """Append records to a capped Redis stream"""

    def __init__(self, redis_client, stream_name: str = "nmea:records", maxlen: int = 10000):
        self.redis = redis_client
        self.stream_name = stream_name
        self.maxlen = maxlen

        # Stats
        self.published = 0
        self.errors = 0

    @classmethod
    def from_url(cls, url: str, stream_name: str = "nmea:records", maxlen: int = 10000) -> 'RedisRecordSink':
        """Connect and PING. Raises redis.RedisError if the server is unreachable."""
        import redis

        client = redis.from_url(url, decode_responses=True)
        client.ping()
        logger.info(f"Connected to Redis at {url}")
        return cls(client, stream_name=stream_name, maxlen=maxlen)

    def publish(self, record: Record) -> Optional[str]:
        """Publish one record, returning the stream entry id"""
        try:
            entry_id = self.redis.xadd(
                self.stream_name,
                record.to_redis_dict(),
                maxlen=self.maxlen,
                approximate=True,
            )
            self.published += 1
            return entry_id
        except Exception as e:
            logger.error(f"Error publishing to Redis: {e}")
            self.errors += 1
            return None

    def close(self):
        close = getattr(self.redis, 'close', None)
        if close is not None:
            close()
