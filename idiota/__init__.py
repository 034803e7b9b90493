"""Compact 64-bit identifiers of a UNIX timestamp and a random part, with base36 helpers."""

__version__ = "1.0.0"
__all__ = ["base36", "id"]