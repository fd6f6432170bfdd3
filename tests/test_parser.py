import pytest

from intcalc.common import ParseError
from intcalc.expr import Expr
from intcalc.lexer import Token, tokenize
from intcalc.parser import Cursor, parse, parse_expr, precedence


def parse_expression(input):
    tokens = tokenize(input)
    return parse(tokens)


def num(i):
    return Expr('numeral', i)


def test_precedence_table():
    assert precedence(Token('+')) == precedence(Token('-')) == 10
    assert precedence(Token('*')) == precedence(Token('/')) == 20

    for t in [Token('numeral', 1), Token('('), Token(')'), Token('eof')]:
        assert precedence(t) == -1


def test_product_binds_tighter():
    e = parse_expression("2+3*4")

    assert e == Expr('+', num(2), Expr('*', num(3), num(4)))


def test_left_associative():
    e = parse_expression("10-3-2")

    assert e == Expr('-', Expr('-', num(10), num(3)), num(2))


def test_mixed_chain():
    e = parse_expression("1+2*3*4-5")

    expected = Expr('-', Expr('+', num(1), Expr('*', Expr('*', num(2), num(3)), num(4))), num(5))

    assert e == expected


def test_parens():
    e = parse_expression("(2+3)*4")

    assert e == Expr('*', Expr('+', num(2), num(3)), num(4))


def test_negate():
    e = parse_expression("-5+7")

    assert e == Expr('+', Expr('negate', num(5)), num(7))


@pytest.mark.parametrize("code, message", [
    ("(1+2", "unmatched left parenthesis"),
    ("-(1+2)", "can't negate anything but a numeral."),
    ("--1", "can't negate anything but a numeral."),
    ("*2", "only negation, parens, or numerals are primary expressions"),
    ("1+", "only negation, parens, or numerals are primary expressions"),
    ("", "only negation, parens, or numerals are primary expressions"),
    ("1 2", "unexpected token: numeral"),
    ("(1))", "unexpected token: )"),
])
def test_parse_errors(code, message):
    with pytest.raises(ParseError) as e:
        parse_expression(code)

    assert str(e.value) == message


def test_no_tokens():
    with pytest.raises(ParseError, match="no tokens"):
        parse([])


def test_no_more_tokens():
    with pytest.raises(ParseError, match="no more tokens"):
        parse([Token('numeral', 1), Token('+'), Token('numeral', 2)])


def test_parse_expr_reads_a_prefix():
    cursor = Cursor(tokenize("1+2 3"))

    e = parse_expr(cursor)

    assert e == Expr('+', num(1), num(2))
    assert cursor.peek() == Token('numeral', 3)
