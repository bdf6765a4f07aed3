"""
NMEA Ingestion Configuration

All settings loaded from environment variables (NMEA_ prefix) with
sensible defaults. Command line flags override them.
"""

import os

from pydantic import Field
from pydantic_settings import BaseSettings


class IngestSettings(BaseSettings):
    """Ingestion configuration."""

    # Output
    skip_errors: bool = Field(
        default=False,
        description="Drop ParseError records from the output"
    )
    pretty: bool = Field(
        default=False,
        description="Indented JSON with a blank line between records"
    )

    # Decoder policy
    strict_checksum: bool = Field(
        default=False,
        description="Reject sentences whose checksum does not match"
    )
    reassemble_fragments: bool = Field(
        default=True,
        description="Join multi-sentence AIS messages before decoding"
    )
    fragment_buffer_size: int = Field(
        default=64,
        description="Max incomplete AIS groups held per source"
    )
    fragment_max_age_lines: int = Field(
        default=100,
        description="Input lines after which an incomplete group is dropped"
    )

    # Redis stream sink (empty URL = disabled)
    redis_url: str = Field(
        default="",
        description="Redis connection URL"
    )
    redis_stream: str = Field(
        default="nmea:records",
        description="Stream that receives decoded records"
    )
    redis_maxlen: int = Field(
        default=10000,
        description="Approximate stream length cap"
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level"
    )

    class Config:
        env_file = ".env"
        env_prefix = "NMEA_"
        extra = "ignore"


# Global settings instance
settings = IngestSettings()


def get_redis_url() -> str:
    """Get Redis URL, preferring env var."""
    return os.getenv("REDIS_URL", settings.redis_url)
