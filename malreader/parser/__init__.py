"""Reader - Builds values from tokens."""

from .parser import Reader, read_str

__all__ = ['Reader', 'read_str']
