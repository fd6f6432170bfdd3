from .common import ParseError, trace
from .expr import Expr


GRAMMAR = """
expr: primary, { binop, primary }
binop: '+' | '-' | '*' | '/'
primary:
  | '-', 'numeral'
  | '(', expr, ')'
  | 'numeral'
"""


PRECEDENCE = {
    '+': 10,
    '-': 10,
    '*': 20,
    '/': 20,
}


def precedence(token):
    return PRECEDENCE.get(token.type, -1)


class Cursor:
    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0

    def peek(self):
        if self.pos >= len(self.tokens):
            raise ParseError("no more tokens")

        return self.tokens[self.pos]

    def consume(self):
        token = self.peek()
        self.pos += 1
        return token

    def __repr__(self):
        return f"Cursor({self.pos}/{len(self.tokens)})"


@trace
def parse_numeral(cursor):
    token = cursor.peek()
    if token.type != 'numeral':
        raise ParseError("expected a numeral")

    cursor.consume()

    return Expr('numeral', token.value)


@trace
def parse_paren(cursor):
    cursor.consume()

    # same as parse_expr, one frame less per nesting level
    expr = parse_binop_rhs(cursor, 0, parse_primary(cursor))

    if cursor.peek().type != ')':
        raise ParseError("unmatched left parenthesis")
    cursor.consume()

    return expr


@trace
def parse_negate(cursor):
    cursor.consume()

    if cursor.peek().type != 'numeral':
        raise ParseError("can't negate anything but a numeral.")

    return Expr('negate', parse_numeral(cursor))


@trace
def parse_primary(cursor):
    next = cursor.peek()

    if next.type == '-':
        return parse_negate(cursor)

    if next.type == 'numeral':
        return parse_numeral(cursor)

    if next.type == '(':
        return parse_paren(cursor)

    raise ParseError("only negation, parens, or numerals are primary expressions")


@trace
def parse_binop_rhs(cursor, min_prec, left):
    while True:
        prec = precedence(cursor.peek())
        if prec < min_prec:
            return left

        op = cursor.consume().type
        right = parse_primary(cursor)

        # a tighter operator after rhs takes rhs as its left operand
        if precedence(cursor.peek()) > prec:
            right = parse_binop_rhs(cursor, prec + 1, right)

        left = Expr(op, left, right)


@trace
def parse_expr(cursor):
    left = parse_primary(cursor)
    return parse_binop_rhs(cursor, 0, left)


def parse(tokens):
    if not tokens:
        raise ParseError("no tokens")

    cursor = Cursor(tokens)
    try:
        root = parse_expr(cursor)
    except RecursionError:
        raise ParseError("expression too deeply nested") from None

    if cursor.peek().type != 'eof':
        raise ParseError(f"unexpected token: {cursor.peek().type}")

    return root
