"""
Lexer - Splits reader input into lexemes.

Recognizes, in priority order:
- ~@ (splice-unquote)
- Single punctuation / reader-macro characters: [ ] { } ( ) ' ` ~ ^ @
- Strings, possibly unterminated (validated by the classifier)
- ; line comments
- Bare runs of anything else (atoms)

Whitespace and commas separate lexemes. No bracket depth is tracked here;
nesting is the reader's job.
"""

import re
from typing import List, Tuple

from ..errors import LexingFailure


LEXEME_PATTERN = r"""[\s,]*(~@|[\[\]{}()'`~^@]|"(?:\\.|[^\\"])*"?|;.*|[^\s\[\]{}('"`,;)]*)"""


class Lexer:
    """Scans one line of reader input."""

    def __init__(self, source: str, pattern: str = LEXEME_PATTERN):
        self.source = source
        self.pattern = pattern

    def compile(self) -> 're.Pattern':
        """Compile the scanning pattern."""
        try:
            return re.compile(self.pattern)
        except re.error as e:
            raise LexingFailure(f"Cannot build scanner: {e}") from e

    def scan(self) -> List[Tuple[str, int]]:
        """Return (lexeme, column) pairs; columns are 1-based."""
        scanner = self.compile()
        text = self.source.strip()
        # Columns refer to the untrimmed source
        offset = len(self.source) - len(self.source.lstrip()) + 1

        lexemes = []
        for match in scanner.finditer(text):
            lexeme = match.group(1)
            if lexeme:
                lexemes.append((lexeme, match.start(1) + offset))
        return lexemes

    def tokenize(self) -> List[str]:
        """Return the lexemes without position information."""
        return [lexeme for lexeme, _ in self.scan()]


def tokenize(source: str) -> List[str]:
    """Convenience function to split source into lexemes."""
    return Lexer(source).tokenize()
