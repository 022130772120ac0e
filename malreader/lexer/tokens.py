"""
Token classifier - Turns lexemes into typed tokens.

Classification is purely lexical: each lexeme is looked at on its own,
first match wins.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from ..errors import IllegalToken, IllegalString, IllegalSymbol, IllegalNumber
from ..values import (
    MalNil, MalBoolean, MalInteger, MalString, MalKeyword, MalSymbol,
    INTEGER_MAX,
)


class TokenType(Enum):
    """Reader token types."""
    # Delimiters
    LPAREN = auto()        # (
    RPAREN = auto()        # )
    LBRACKET = auto()      # [
    RBRACKET = auto()      # ]

    # Prefix from the reader-macro table, value is the symbol name
    READER_MACRO = auto()  # ' @

    # Atom, value is a MalValue
    DATA = auto()


@dataclass
class Token:
    """Represents a single token."""
    type: TokenType
    value: Any
    column: Optional[int] = None
    lexeme: Optional[str] = None

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r})"


DELIMITERS = {
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    '[': TokenType.LBRACKET,
    ']': TokenType.RBRACKET,
}

# Each read gets its own instance
LITERALS = {
    'nil': MalNil,
    'true': lambda: MalBoolean(True),
    'false': lambda: MalBoolean(False),
}

DIGITS = '0123456789'


def is_terminated_string(text: str) -> bool:
    """True if text is a quoted string whose closing quote is not escaped."""
    if len(text) < 2 or not text.endswith('"'):
        return False
    body = text[1:-1]
    return (len(body) - len(body.rstrip('\\'))) % 2 == 0


def is_decimal(text: str) -> bool:
    """True if text is a non-empty run of ASCII decimal digits."""
    return bool(text) and all(ch in DIGITS for ch in text)


def classify(lexeme: str, env=None, column: Optional[int] = None) -> Token:
    """Map one lexeme to a token.

    Args:
        lexeme: Non-empty lexeme from the lexer
        env: ReaderEnvironment whose reader-macro table is consulted first
        column: Position of the lexeme, carried into the token and errors
    """
    if env is not None:
        macro = env.reader_macro(lexeme)
        if macro is not None:
            return Token(TokenType.READER_MACRO, macro, column, lexeme)

    if lexeme in DELIMITERS:
        return Token(DELIMITERS[lexeme], lexeme, column, lexeme)
    if lexeme in LITERALS:
        return Token(TokenType.DATA, LITERALS[lexeme](), column, lexeme)

    # Keyword
    if lexeme.startswith(':'):
        if lexeme.startswith('::'):
            raise IllegalToken(f"Illegal token: {lexeme}", lexeme, column)
        return Token(TokenType.DATA, MalKeyword(lexeme), column, lexeme)

    # Integer
    if is_decimal(lexeme):
        value = int(lexeme)
        if value > INTEGER_MAX:
            raise IllegalNumber(f"Integer out of range: {lexeme}", lexeme, column)
        return Token(TokenType.DATA, MalInteger(value), column, lexeme)

    # String
    if lexeme.startswith('"'):
        if not is_terminated_string(lexeme):
            raise IllegalString(f"Unterminated string: {lexeme}", lexeme, column)
        return Token(TokenType.DATA, MalString(lexeme), column, lexeme)

    # Symbol
    if '"' in lexeme:
        raise IllegalSymbol(f"Illegal symbol: {lexeme}", lexeme, column)
    if lexeme[0] in DIGITS:
        raise IllegalSymbol(f"Symbol cannot start with a digit: {lexeme}", lexeme, column)
    return Token(TokenType.DATA, MalSymbol(lexeme), column, lexeme)


def classify_all(lexemes: List[Tuple[str, int]], env=None) -> List[Token]:
    """Classify (lexeme, column) pairs, dropping comments."""
    tokens = []
    for lexeme, column in lexemes:
        if lexeme.startswith(';'):
            continue
        tokens.append(classify(lexeme, env, column))
    return tokens
