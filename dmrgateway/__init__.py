"""Building blocks for a DMR network gateway: constants, sync, timing, buffers, hashing and UDP."""

__version__ = "0.1.0"