"""
YP Bank transaction record codec.

Reads and writes transaction records as delimited text (CSV), key/value
block text (TXT) and framed binary (BIN).
"""

__version__ = "0.1.0"
