"""
malreader - Reader for a small Lisp-like syntax.

Turns one line of text into a nested value (read_str) and renders values
back to text (render).
"""

from .environment import ReaderEnvironment
from .errors import ReaderError
from .parser import read_str
from .printer import render

__version__ = "0.1.0"
__author__ = "malreader Project"

__all__ = ['ReaderEnvironment', 'ReaderError', 'read_str', 'render']
