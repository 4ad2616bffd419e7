"""Transaction messages, validation and canonical sign bytes for a DEX chain."""

__version__ = "0.1.0"