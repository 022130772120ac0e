"""
Reader - Builds values from classified tokens.

A cursor walks an immutable token list. Containers are read in a single
loop over an explicit stack of open containers, which records the closer
each one expects, so a closer of the wrong kind is reported instead of
silently ending the innermost container. Nesting is bounded by max_depth.
"""

from typing import Callable, List, Optional, Tuple

from ..errors import (
    EmptyInput, MismatchedDelimiter, NestingTooDeep, UnexpectedToken,
    UnterminatedList,
)
from ..environment import ReaderEnvironment
from ..lexer import Lexer, Token, TokenType, classify_all
from ..values import MalValue, MalList, MalVector, MalSymbol


OPENERS = {
    TokenType.LPAREN: (TokenType.RPAREN, MalList),
    TokenType.LBRACKET: (TokenType.RBRACKET, MalVector),
}

# Containers and reader macros that may be open at once
MAX_DEPTH = 128

CLOSERS = {
    TokenType.RPAREN: ')',
    TokenType.RBRACKET: ']',
}


class Reader:
    """Reads forms from a token list."""

    def __init__(self, tokens: List[Token], max_depth: int = MAX_DEPTH):
        self.tokens = tokens
        self.pos = 0
        self.max_depth = max_depth
        self.open_containers: List[Token] = []

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def peek(self) -> Token:
        """Return the token at the cursor without consuming it."""
        if self.at_end():
            self.unterminated()
        return self.tokens[self.pos]

    def advance(self) -> Token:
        """Consume and return the token at the cursor."""
        token = self.peek()
        self.pos += 1
        return token

    def unterminated(self):
        if self.open_containers:
            opener = self.open_containers[-1]
            raise UnterminatedList(
                f"Expected '{CLOSERS[OPENERS[opener.type][0]]}', got EOF",
                opener.value, opener.column)
        raise UnterminatedList("Expected a form, got EOF")

    def read_form(self) -> MalValue:
        """Read one complete form starting at the cursor.

        Open containers and pending reader macros are kept on an explicit
        stack; each entry is (token, items), with items None for a macro.
        """
        stack: List[Tuple[Token, Optional[list]]] = []
        self.open_containers = []

        while True:
            token = self.advance()

            if token.type in OPENERS or token.type == TokenType.READER_MACRO:
                if len(stack) >= self.max_depth:
                    raise NestingTooDeep(
                        f"Forms nested deeper than {self.max_depth} levels",
                        token.lexeme, token.column)
                if token.type in OPENERS:
                    stack.append((token, []))
                    self.open_containers.append(token)
                else:
                    stack.append((token, None))
                continue

            if token.type in CLOSERS:
                if not stack or stack[-1][1] is None:
                    raise UnexpectedToken(f"Unexpected '{token.value}'",
                                          token.value, token.column)
                opener, items = stack[-1]
                closer, container = OPENERS[opener.type]
                if token.type != closer:
                    raise MismatchedDelimiter(
                        f"Expected '{CLOSERS[closer]}' to close '{opener.value}', "
                        f"got '{token.value}'",
                        token.value, token.column)
                stack.pop()
                self.open_containers.pop()
                value = container(items)
            else:
                value = self.read_atom(token)

            # Hand the finished form to whatever is waiting for it
            while stack:
                pending, items = stack[-1]
                if items is not None:
                    items.append(value)
                    break
                # 'x reads as (quote x)
                stack.pop()
                value = MalList([MalSymbol(pending.value), value])
            else:
                return value

    def read_atom(self, token: Token) -> MalValue:
        return token.value

    def read_list(self) -> MalList:
        """Read a list; the cursor must be on its opening parenthesis."""
        token = self.peek()
        if token.type != TokenType.LPAREN:
            raise UnexpectedToken(f"Expected '(', got {token.lexeme!r}",
                                  token.lexeme, token.column)
        return self.read_form()

    def read_vector(self) -> MalVector:
        """Read a vector; the cursor must be on its opening bracket."""
        token = self.peek()
        if token.type != TokenType.LBRACKET:
            raise UnexpectedToken(f"Expected '[', got {token.lexeme!r}",
                                  token.lexeme, token.column)
        return self.read_form()


def read_str(text: str, env: Optional[ReaderEnvironment] = None,
             log: Optional[Callable[[str], None]] = None,
             max_depth: int = MAX_DEPTH) -> MalValue:
    """Read the first form in text.

    Args:
        text: One line of input
        env: Environment supplying the reader-macro table
        log: Optional callable receiving trace messages
        max_depth: Deepest nesting accepted before NestingTooDeep

    Raises:
        ReaderError: If the text holds no complete, well-formed form
    """
    if env is None:
        env = ReaderEnvironment()

    lexemes = Lexer(text).scan()
    if log:
        log(f"lexemes: {[lexeme for lexeme, _ in lexemes]}")

    tokens = classify_all(lexemes, env)
    if log:
        log(f"tokens: {tokens}")
    if not tokens:
        raise EmptyInput("No form to read")

    reader = Reader(tokens, max_depth)
    value = reader.read_form()
    if log:
        log(f"value: {value!r}")
        if not reader.at_end():
            log(f"ignoring {len(tokens) - reader.pos} trailing token(s)")
    return value
