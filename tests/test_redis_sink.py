"""Tests for the Redis stream sink"""

import json

from nmea_ingestion.ingesters.redis_sink import RedisRecordSink

from .conftest import GGA_LINE, FakeRedis


class TestRedisRecordSink:
    """XADD publishing with failure counting"""

    def test_publish(self, parser, fake_redis):
        sink = RedisRecordSink(fake_redis, stream_name="test:records", maxlen=50)
        entry_id = sink.publish(parser.parse_line(GGA_LINE))

        assert entry_id == "1-0"
        assert sink.published == 1
        stream, fields, maxlen = fake_redis.entries[0]
        assert stream == "test:records"
        assert maxlen == 50
        assert fields["type"] == "GGA"
        assert fields["raw_sentence"] == GGA_LINE
        assert json.loads(fields["record"])["message"]["type"] == "GGA"

    def test_failures_are_counted_not_raised(self, parser):
        sink = RedisRecordSink(FakeRedis(fail=True))
        assert sink.publish(parser.parse_line(GGA_LINE)) is None
        assert sink.errors == 1
        assert sink.published == 0

    def test_close(self, fake_redis):
        RedisRecordSink(fake_redis).close()
        assert fake_redis.closed
