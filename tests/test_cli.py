"""Tests for the nmea-ingest command line"""

import json
import logging

import pytest

from nmea_ingestion import cli
from nmea_ingestion.ingesters.redis_sink import RedisRecordSink

from .conftest import GGA_LINE, TYPE1_LINE, FakeRedis


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("REDIS_URL", "NMEA_REDIS_URL", "NMEA_SKIP_ERRORS", "NMEA_PRETTY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def feed(tmp_path):
    path = tmp_path / "feed.nmea"
    path.write_text("\n".join([GGA_LINE, "$GPXXX,bad", TYPE1_LINE]) + "\n", encoding="utf-8")
    return str(path)


def run(argv):
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    return exc.value.code


class TestMain:
    """End-to-end runs"""

    def test_json_lines_to_stdout(self, feed, capsys):
        assert run(["-i", feed]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert [json.loads(line)["message"]["type"] for line in lines] == [
            "GGA", "ParseError", "PositionReport",
        ]

    def test_skip_errors(self, feed, capsys):
        assert run(["-i", feed, "--skip-errors"]) == 0
        types = [json.loads(line)["message"]["type"] for line in capsys.readouterr().out.splitlines()]
        assert "ParseError" not in types
        assert len(types) == 2

    def test_output_file_and_pretty(self, feed, tmp_path):
        out = tmp_path / "records.json"
        assert run(["-i", feed, "-o", str(out), "-p"]) == 0
        blocks = [b for b in out.read_text(encoding="utf-8").split("\n\n") if b.strip()]
        assert len(blocks) == 3
        assert json.loads(blocks[0])["message"]["type"] == "GGA"

    def test_strict_checksum_flag(self, feed, capsys):
        run(["-i", feed, "--strict-checksum"])
        last = json.loads(capsys.readouterr().out.splitlines()[-1])
        assert last["message"]["data"]["kind"] == "checksum"

    def test_stats(self, feed, capsys, caplog):
        with caplog.at_level(logging.INFO):
            assert run(["-i", feed, "-S"]) == 0
        assert "Stats: total=3" in caplog.text

    def test_no_inputs_found(self, tmp_path):
        assert run(["-i", str(tmp_path / "nothing*.nmea")]) == 1

    def test_unwritable_output(self, feed, tmp_path, caplog):
        out = tmp_path / "missing-dir" / "records.json"
        assert run(["-i", feed, "-o", str(out)]) == 1
        assert "Could not open output" in caplog.text

    def test_input_required(self):
        assert run([]) == 2

    def test_health_check(self):
        assert run(["--health-check"]) == 0

    def test_redis_publishing(self, feed, monkeypatch, capsys):
        fake = FakeRedis()
        monkeypatch.setattr(
            RedisRecordSink, "from_url",
            classmethod(lambda cls, url, stream_name, maxlen: cls(fake, stream_name, maxlen)),
        )
        assert run(["-i", feed, "--redis-url", "redis://example:6379", "--redis-stream", "ais"]) == 0
        assert len(fake.entries) == 3
        assert {entry[0] for entry in fake.entries} == {"ais"}
        assert fake.closed

    def test_redis_unreachable(self, feed, monkeypatch):
        def refuse(cls, url, stream_name, maxlen):
            raise ConnectionError("refused")

        monkeypatch.setattr(RedisRecordSink, "from_url", classmethod(refuse))
        assert run(["-i", feed, "--redis-url", "redis://example:6379"]) == 1


class TestResolveSettings:
    """Command line overrides on top of environment settings"""

    def test_flags_override(self):
        args = cli.build_arg_parser().parse_args(["-i", "x", "--no-reassembly", "-s", "-v"])
        config = cli.resolve_settings(args)
        assert config.reassemble_fragments is False
        assert config.skip_errors is True
        assert config.log_level == "DEBUG"
        assert config.redis_url == ""

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("NMEA_PRETTY", "true")
        monkeypatch.setenv("REDIS_URL", "redis://env:6379")
        config = cli.resolve_settings(cli.build_arg_parser().parse_args(["-i", "x"]))
        assert config.pretty is True
        assert config.redis_url == "redis://env:6379"
