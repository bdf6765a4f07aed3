"""Allow ``python -m nmea_ingestion``"""

from .cli import main

if __name__ == "__main__":
    main()
