"""Tests for the multi-sentence AIS reassembly buffer"""

from nmea_ingestion.parsers.fragments import AisFragmentKey, FragmentBuffer


def key(sequence_id, channel="A", talker="AI"):
    return AisFragmentKey(channel=channel, talker=talker, sequence_id=sequence_id)


class TestFragmentBuffer:
    """Group completion, ordering and eviction"""

    def test_in_order_group_completes(self):
        buffer = FragmentBuffer()
        assert buffer.add(key(1), 3, 1, "aa", 1) == (None, 1)
        assert buffer.add(key(1), 3, 2, "bb", 2) == (None, 2)
        assert buffer.add(key(1), 3, 3, "cc", 3) == ("aabbcc", 3)
        assert len(buffer) == 0

    def test_out_of_order_fragment_drops_group(self):
        buffer = FragmentBuffer()
        buffer.add(key(1), 3, 1, "aa", 1)
        assert buffer.add(key(1), 3, 3, "cc", 2) == (None, 0)
        assert len(buffer) == 0

    def test_mismatched_total_drops_group(self):
        buffer = FragmentBuffer()
        buffer.add(key(1), 2, 1, "aa", 1)
        assert buffer.add(key(1), 3, 2, "bb", 2) == (None, 0)

    def test_restart_replaces_group(self):
        buffer = FragmentBuffer()
        buffer.add(key(1), 2, 1, "old", 1)
        buffer.add(key(1), 2, 1, "new", 2)
        assert buffer.add(key(1), 2, 2, "!", 3) == ("new!", 2)

    def test_interleaved_groups(self):
        buffer = FragmentBuffer()
        buffer.add(key(1), 2, 1, "a1", 1)
        buffer.add(key(2), 2, 1, "b1", 2)
        assert buffer.add(key(1), 2, 2, "a2", 3) == ("a1a2", 2)
        assert buffer.add(key(2), 2, 2, "b2", 4) == ("b1b2", 2)

    def test_capacity_evicts_oldest(self):
        buffer = FragmentBuffer(capacity=2)
        buffer.add(key(1), 2, 1, "a", 1)
        buffer.add(key(2), 2, 1, "b", 2)
        buffer.add(key(3), 2, 1, "c", 3)
        assert len(buffer) == 2
        assert buffer.evicted == 1
        assert buffer.add(key(1), 2, 2, "a", 4) == (None, 0)
        assert buffer.add(key(3), 2, 2, "c", 5) == ("cc", 2)

    def test_stale_groups_expire_by_line_count(self):
        buffer = FragmentBuffer(max_age_lines=10)
        buffer.add(key(1), 2, 1, "a", 1)
        assert buffer.add(key(1), 2, 2, "b", 12) == (None, 0)
        assert buffer.evicted == 1

    def test_group_within_age_completes(self):
        buffer = FragmentBuffer(max_age_lines=10)
        buffer.add(key(1), 2, 1, "a", 1)
        assert buffer.add(key(1), 2, 2, "b", 11) == ("ab", 2)

    def test_keys_distinguish_talker_and_channel(self):
        buffer = FragmentBuffer()
        buffer.add(key(1, talker="AI"), 2, 1, "a", 1)
        assert buffer.add(key(1, talker="BS"), 2, 2, "b", 2) == (None, 0)
        assert buffer.add(key(1, channel="B"), 2, 2, "b", 3) == (None, 0)
        assert buffer.add(key(1), 2, 2, "b", 4) == ("ab", 2)

    def test_clear(self):
        buffer = FragmentBuffer()
        buffer.add(key(None), 2, 1, "a", 1)
        buffer.clear()
        assert len(buffer) == 0
