"""
Label Track Converter.

Converts bookmark exports into per-file label tracks bundled in a zip
archive.
"""

__version__ = "1.0.0"
