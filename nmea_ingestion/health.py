"""
Health Check

Self-test run by ``nmea-ingest --health-check``. Every probe returns
(ok, detail) and never raises.
"""

import json
import logging
import uuid
from typing import Callable, List, Optional, Tuple

from .parsers.sentence_parser import NMEAParser

logger = logging.getLogger(__name__)

KNOWN_GOOD_SENTENCE = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"

ProbeResult = Tuple[bool, str]


def check_parser() -> ProbeResult:
    record = NMEAParser().parse_line(KNOWN_GOOD_SENTENCE)
    if record.is_error or record.warnings:
        return False, f"known-good sentence rejected: {record.to_json()}"
    return True, record.message_type


def check_redis(redis_url: str) -> ProbeResult:
    try:
        import redis

        client = redis.from_url(redis_url, decode_responses=True)
        client.ping()
        client.close()
        return True, f"PING {redis_url}"
    except Exception as e:
        return False, f"{redis_url}: {e}"


def check_memory() -> ProbeResult:
    try:
        buffer = bytearray(1024 * 1024)
        size = len(buffer)
        del buffer
        return True, f"{size} bytes"
    except MemoryError as e:
        return False, f"allocation failed: {e}"


def check_serialization() -> ProbeResult:
    record = NMEAParser().parse_line(KNOWN_GOOD_SENTENCE)
    data = record.to_json_dict()
    if json.loads(record.to_json()) != data:
        return False, "JSON round trip changed the record"
    return True, "JSON round trip"


def check_uuid() -> ProbeResult:
    value = uuid.uuid4()
    return value.version == 4, str(value)


def run_health_check(redis_url: Optional[str] = None) -> bool:
    """Run all probes and log each result. True if all pass."""
    probes: List[Tuple[str, Callable[[], ProbeResult]]] = [
        ("parser", check_parser),
    ]
    if redis_url:
        probes.append(("redis", lambda: check_redis(redis_url)))
    else:
        logger.info("Health [redis]: skipped (no URL configured)")
    probes += [
        ("memory", check_memory),
        ("serialization", check_serialization),
        ("uuid", check_uuid),
    ]

    healthy = True
    for name, probe in probes:
        try:
            ok, detail = probe()
        except Exception as e:
            ok, detail = False, str(e)
        if ok:
            logger.info(f"Health [{name}]: OK ({detail})")
        else:
            logger.error(f"Health [{name}]: FAILED ({detail})")
            healthy = False

    return healthy
