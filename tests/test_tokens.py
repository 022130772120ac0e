"""Tests for the token classifier."""

import pytest

from malreader.errors import (
    IllegalToken, IllegalString, IllegalSymbol, IllegalNumber, ReaderError,
)
from malreader.lexer import Lexer, TokenType, classify, classify_all
from malreader.values import (
    MalNil, MalBoolean, MalInteger, MalString, MalKeyword, MalSymbol,
    INTEGER_MAX,
)


class TestDelimiters:

    @pytest.mark.parametrize("lexeme,token_type", [
        ("(", TokenType.LPAREN),
        (")", TokenType.RPAREN),
        ("[", TokenType.LBRACKET),
        ("]", TokenType.RBRACKET),
    ])
    def test_structural_tokens(self, lexeme, token_type):
        assert classify(lexeme).type == token_type

    def test_braces_are_symbols(self):
        token = classify("{")
        assert token.type == TokenType.DATA
        assert token.value == MalSymbol("{")


class TestLiterals:

    def test_nil(self):
        assert classify("nil").value == MalNil()

    def test_booleans(self):
        assert classify("true").value == MalBoolean(True)
        assert classify("false").value == MalBoolean(False)

    def test_literal_prefix_is_a_symbol(self):
        assert classify("nil?").value == MalSymbol("nil?")


class TestKeywords:

    def test_keyword(self):
        assert classify(":foo").value == MalKeyword(":foo")

    def test_double_colon_is_illegal(self):
        with pytest.raises(IllegalToken):
            classify("::bad")


class TestIntegers:

    def test_integer(self):
        assert classify("42").value == MalInteger(42)

    def test_largest_integer(self):
        assert classify(str(INTEGER_MAX)).value == MalInteger(INTEGER_MAX)

    def test_overflow_is_a_reader_error(self):
        with pytest.raises(IllegalNumber) as exc_info:
            classify(str(INTEGER_MAX + 1), column=3)
        assert isinstance(exc_info.value, ReaderError)
        assert exc_info.value.column == 3

    def test_non_ascii_digits_are_not_integers(self):
        # Arabic-Indic digits pass str.isdigit but are not decimal literals
        assert classify("٣٤").value == MalSymbol("٣٤")


class TestStrings:

    def test_string_keeps_quotes(self):
        assert classify('"hi"').value == MalString('"hi"')

    def test_empty_string(self):
        assert classify('""').value == MalString('""')

    def test_escapes_are_not_interpreted(self):
        assert classify(r'"a\nb"').value == MalString(r'"a\nb"')

    @pytest.mark.parametrize("lexeme", ['"', '"abc', r'"abc\"'])
    def test_unterminated(self, lexeme):
        with pytest.raises(IllegalString):
            classify(lexeme)


class TestSymbols:

    def test_symbol(self):
        assert classify("+").value == MalSymbol("+")

    def test_digit_led_symbol_is_illegal(self):
        with pytest.raises(IllegalSymbol):
            classify("1abc")

    def test_quote_inside_symbol_is_illegal(self):
        with pytest.raises(IllegalSymbol):
            classify('ab"c')


class TestReaderMacros:

    def test_prefix_from_table(self, env):
        token = classify("'", env)
        assert token.type == TokenType.READER_MACRO
        assert token.value == "quote"

    def test_without_environment_prefix_is_a_symbol(self):
        assert classify("'").value == MalSymbol("'")

    def test_unlisted_prefix_is_a_symbol(self, env):
        assert classify("~", env).value == MalSymbol("~")


class TestClassifyAll:

    def test_comments_are_dropped(self, env):
        tokens = classify_all(Lexer("(a) ; note").scan(), env)
        assert [t.type for t in tokens] == \
            [TokenType.LPAREN, TokenType.DATA, TokenType.RPAREN]

    def test_columns_are_carried(self, env):
        tokens = classify_all(Lexer(" (a)").scan(), env)
        assert [t.column for t in tokens] == [2, 3, 4]


class TestFreshValues:

    def test_literals_are_new_each_time(self):
        assert classify("nil").value is not classify("nil").value
        assert classify("false").value is not classify("false").value
