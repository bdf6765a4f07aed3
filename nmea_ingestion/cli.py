"""
nmea-ingest command line

Usage:
    nmea-ingest -i 'logs/**/*.nmea' -o records.jsonl --stats
    cat feed.nmea | nmea-ingest -i - --skip-errors
    nmea-ingest --health-check
"""

import argparse
import logging
import sys
from typing import Iterable, Optional, Sequence, TextIO

from dotenv import load_dotenv

from .config import IngestSettings, get_redis_url
from .health import run_health_check
from .ingesters.file_ingester import NMEAFileIngester, expand_inputs, filter_errors
from .ingesters.redis_sink import RedisRecordSink
from .schema import Record
from .stats import RecordStats

logger = logging.getLogger(__name__)


def write_records(records: Iterable[Record], out: TextIO, pretty: bool = False) -> int:
    """Write records as JSON Lines (or indented blocks). Returns the count."""
    written = 0
    for record in records:
        out.write(record.to_json(pretty=pretty))
        out.write("\n\n" if pretty else "\n")
        written += 1
    return written


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nmea-ingest",
        description="Decode NMEA 0183 / AIS logs into JSON Lines records"
    )
    parser.add_argument(
        "-i", "--input",
        nargs="+",
        metavar="PATTERN",
        help="Input files or globs ('-' for stdin, .gz supported)"
    )
    parser.add_argument(
        "-o", "--output",
        default="-",
        help="Output file ('-' for stdout)"
    )
    parser.add_argument(
        "-p", "--pretty",
        action="store_true",
        help="Indented JSON output"
    )
    parser.add_argument(
        "-s", "--skip-errors",
        action="store_true",
        help="Drop records that failed to decode"
    )
    parser.add_argument(
        "-S", "--stats",
        action="store_true",
        help="Log statistics at the end"
    )
    parser.add_argument(
        "--strict-checksum",
        action="store_true",
        help="Treat checksum mismatches as errors"
    )
    parser.add_argument(
        "--no-reassembly",
        action="store_true",
        help="Emit multi-sentence AIS fragments without joining them"
    )
    parser.add_argument(
        "--redis-url",
        help="Publish records to this Redis server"
    )
    parser.add_argument(
        "--redis-stream",
        help="Redis stream name"
    )
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run the self-test and exit"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging"
    )
    return parser


def resolve_settings(args: argparse.Namespace) -> IngestSettings:
    """Environment settings with command line overrides applied"""
    config = IngestSettings()
    overrides = {}
    if args.pretty:
        overrides["pretty"] = True
    if args.skip_errors:
        overrides["skip_errors"] = True
    if args.strict_checksum:
        overrides["strict_checksum"] = True
    if args.no_reassembly:
        overrides["reassemble_fragments"] = False
    if args.redis_stream:
        overrides["redis_stream"] = args.redis_stream
    overrides["redis_url"] = args.redis_url or get_redis_url()
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    return config.model_copy(update=overrides)


def main(argv: Optional[Sequence[str]] = None):
    load_dotenv()

    parser = build_arg_parser()
    args = parser.parse_args(argv)
    config = resolve_settings(args)

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format='%(asctime)s - NMEA_INGEST - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    if args.health_check:
        healthy = run_health_check(config.redis_url or None)
        sys.exit(0 if healthy else 1)

    if not args.input:
        parser.error("-i/--input is required unless --health-check is given")

    sources = expand_inputs(args.input)
    if not sources:
        logger.error("No input files found")
        sys.exit(1)

    if args.output == "-":
        out = sys.stdout
    else:
        try:
            out = open(args.output, "w", encoding="utf-8")
        except OSError as e:
            logger.error(f"Could not open output {args.output}: {e}")
            sys.exit(1)

    sink = None
    if config.redis_url:
        try:
            sink = RedisRecordSink.from_url(
                config.redis_url,
                stream_name=config.redis_stream,
                maxlen=config.redis_maxlen,
            )
        except Exception as e:
            logger.error(f"Could not connect to Redis: {e}")
            if out is not sys.stdout:
                out.close()
            sys.exit(1)

    ingester = NMEAFileIngester(config)
    stats = RecordStats()

    records = stats.track(ingester.iter_records(sources))
    if config.skip_errors:
        records = filter_errors(records)

    try:
        for record in records:
            write_records([record], out, pretty=config.pretty)
            if sink is not None:
                sink.publish(record)
    except KeyboardInterrupt:
        ingester.stop()
        logger.info("Interrupted")
    finally:
        if out is not sys.stdout:
            out.close()
        else:
            out.flush()
        if sink is not None:
            sink.close()

    logger.info(
        f"Done: lines={ingester.lines_read}, records={ingester.records_emitted}, "
        f"errors={ingester.errors}, sources_failed={ingester.sources_failed}"
        + (f", published={sink.published}" if sink is not None else "")
    )

    if args.stats:
        stats.log_summary()

    sys.exit(0)


if __name__ == "__main__":
    main()
