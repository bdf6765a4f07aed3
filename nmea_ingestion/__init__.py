"""
NMEA Ingestion

Decodes NMEA 0183 / 4.10 telemetry (GNSS sentences and AIS VDM/VDO
payloads) into structured JSON Lines records.
"""

__version__ = "0.1.0"
