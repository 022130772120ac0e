"""Reader lexer - Splits input into lexemes and classifies them."""

from .lexer import Lexer, tokenize
from .tokens import Token, TokenType, classify, classify_all

__all__ = ['Lexer', 'tokenize', 'Token', 'TokenType', 'classify', 'classify_all']
