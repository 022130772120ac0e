"""
Reader environment.

Holds the reader-macro table: single-character prefixes and the symbol
each one expands to. Built once per environment and read-only afterward,
so one environment can be shared by any number of reads.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .lexer.tokens import DELIMITERS


DEFAULT_READER_MACROS = {
    "'": 'quote',
    '@': 'deref',
}


class ReaderEnvironment:
    """State shared by all reads in one session."""

    def __init__(self, reader_macros: Optional[Dict[str, str]] = None):
        if reader_macros is None:
            reader_macros = DEFAULT_READER_MACROS
        for prefix in reader_macros:
            if len(prefix) != 1:
                raise ValueError(f"Reader macro prefix must be one character: {prefix!r}")
            if prefix in DELIMITERS or prefix.isalnum() or prefix.isspace():
                raise ValueError(f"Reader macro prefix cannot be {prefix!r}")
        self._reader_macros = MappingProxyType(dict(reader_macros))

    @property
    def reader_macros(self) -> Mapping[str, str]:
        return self._reader_macros

    def reader_macro(self, prefix: str) -> Optional[str]:
        """Return the symbol name a prefix expands to, or None."""
        return self._reader_macros.get(prefix)

    def __repr__(self):
        return f"ReaderEnvironment({dict(self._reader_macros)!r})"
