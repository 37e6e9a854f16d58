"""Character, string, byte-buffer and arena helpers for a small POSIX-like shell."""

__version__ = "0.1.0"