"""Composable parsers for binary numbers, numeric text and parser sequences."""

__version__ = "0.1.0"

__all__ = ["errors", "sequence", "bigendian", "littleendian", "numbers"]