"""Decode and encode bencoded text as native Python values."""

__version__ = "0.1.0"
__all__ = ["decoder", "encoder", "stack"]