"""Ordinal theory primitives: sats, heights, epochs, inscriptions and index storage formats."""

__version__ = "0.1.0"