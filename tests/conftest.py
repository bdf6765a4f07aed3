"""Shared fixtures for the nmea_ingestion tests"""

import pytest

from nmea_ingestion.generators.nmea_generator import SentenceBuilder
from nmea_ingestion.parsers.sentence_parser import NMEAParser

# Real-world lines with known decodes
TYPE1_LINE = "!AIVDM,1,1,,A,13HOI:0P0U0SG<hN`K>P6@TN00Sj,0*23"
TAGGED_TYPE3_LINE = "\\s:2573515,c:1643588424*09\\!BSVDM,1,1,,B,33mg@s0P@@Q@m58`2g;m:4Pb01q0,0*0B"
GGA_LINE = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"


class FakeRedis:
    """Records xadd calls; optionally fails every call"""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.entries = []
        self.closed = False

    def xadd(self, stream, fields, maxlen=None, approximate=True):
        if self.fail:
            raise ConnectionError("connection refused")
        self.entries.append((stream, fields, maxlen))
        return f"{len(self.entries)}-0"

    def ping(self):
        if self.fail:
            raise ConnectionError("connection refused")
        return True

    def close(self):
        self.closed = True


@pytest.fixture
def builder():
    return SentenceBuilder()


@pytest.fixture
def parser():
    return NMEAParser()


@pytest.fixture
def fake_redis():
    return FakeRedis()
