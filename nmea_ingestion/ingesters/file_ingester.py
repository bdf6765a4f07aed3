"""
NMEA File Ingester

Streams NMEA logs line by line and yields one Record per non-blank line:
- Reads plain files, gzip files (.gz) and stdin ('-')
- Decodes each line with a per-source NMEAParser
- Turns I/O failures into a single ParseError per source

Usage:
    ingester = NMEAFileIngester()
    for record in ingester.iter_records(expand_inputs(["logs/*.nmea"])):
        ...
"""

import glob
import gzip
import io
import logging
import sys
import zlib
from typing import Iterable, Iterator, List, Optional, Sequence

from ..config import IngestSettings, settings as default_settings
from ..parsers.sentence_parser import NMEAParser
from ..schema import ParseError, RawLine, Record

logger = logging.getLogger(__name__)

STDIN = "-"

# Read failures that end a source, truncated and corrupt gzip included
READ_ERRORS = (OSError, EOFError, zlib.error)


def expand_inputs(patterns: Sequence[str]) -> List[str]:
    """
    Resolve input patterns to an ordered list of sources.

    Each glob is expanded recursively and sorted. '-' is kept as stdin.
    A pattern that matches nothing is dropped with a warning.
    """
    sources = []
    for pattern in patterns:
        if pattern == STDIN:
            sources.append(STDIN)
            continue
        matches = sorted(glob.glob(pattern, recursive=True))
        if not matches:
            logger.warning(f"No input matches '{pattern}'")
        sources.extend(matches)
    return sources


def filter_errors(records: Iterable[Record]) -> Iterator[Record]:
    """Drop ParseError records"""
    return (record for record in records if not record.is_error)


class NMEAFileIngester:
    """
    Pull-based NMEA decoding pipeline.

    Sources are processed one at a time and lazily; nothing is read
    ahead of the line being decoded.
    """

    def __init__(self, config: Optional[IngestSettings] = None):
        self.config = config or default_settings
        self.running = False

        # Stats
        self.lines_read = 0
        self.records_emitted = 0
        self.errors = 0
        self.sources_failed = 0

    def _new_parser(self) -> NMEAParser:
        return NMEAParser(
            strict_checksum=self.config.strict_checksum,
            reassemble_fragments=self.config.reassemble_fragments,
            fragment_buffer_size=self.config.fragment_buffer_size,
            fragment_max_age_lines=self.config.fragment_max_age_lines,
        )

    def _open(self, source: str):
        if source == STDIN:
            return io.TextIOWrapper(sys.stdin.buffer, encoding='utf-8', errors='replace')
        if source.endswith('.gz'):
            return gzip.open(source, 'rt', encoding='utf-8', errors='replace')
        return open(source, 'r', encoding='utf-8', errors='replace')

    def read_lines(self, source: str) -> Iterator[RawLine]:
        """Yield non-blank lines of one source, numbered from 1"""
        f = self._open(source)
        try:
            for line_number, line in enumerate(f, start=1):
                text = line.strip()
                if text:
                    yield RawLine(text=text, source_file=source, line_number=line_number)
        finally:
            if source == STDIN:
                # leave the process stdin open
                f.detach()
            else:
                f.close()

    def _io_error(self, source: str, error: Exception, line_number: int) -> Record:
        self.sources_failed += 1
        logger.error(f"Error reading {source}: {error}")
        return Record(
            raw_sentence="",
            message=ParseError(
                raw_sentence="",
                error=f"{source}: {error}",
                line_number=line_number,
                file=source,
                kind="io",
            ),
        )

    def iter_records(self, sources: Iterable[str]) -> Iterator[Record]:
        """Decode every line of every source, in order"""
        self.running = True

        try:
            for source in sources:
                if not self.running:
                    break

                logger.info(f"Reading {source}")
                parser = self._new_parser()
                line_number = 0

                try:
                    for raw in self.read_lines(source):
                        if not self.running:
                            logger.info("Ingester stopped")
                            break
                        line_number = raw.line_number
                        self.lines_read += 1
                        record = parser.parse_line(raw.text, raw.line_number, raw.source_file)
                        yield self._emit(record)
                except READ_ERRORS as e:
                    yield self._emit(self._io_error(source, e, line_number))
                    continue

                if parser.fragments.evicted:
                    logger.debug(f"{source}: {parser.fragments.evicted} incomplete AIS groups dropped")
                logger.info(f"Finished {source} ({line_number} lines)")
        finally:
            self.running = False

    def _emit(self, record: Record) -> Record:
        self.records_emitted += 1
        if record.is_error:
            self.errors += 1
        return record

    def stop(self):
        """Stop before the next line"""
        self.running = False
