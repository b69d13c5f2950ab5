"""FT8 message unpacking, callsign hashing, duplicate suppression and spot reporting."""

__version__ = "0.1.0"