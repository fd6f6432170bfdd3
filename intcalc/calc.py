from .common import CalcError
from .lexer import tokenize
from .parser import parse


class Result:
    def __init__(self, value=None, error=None, tokens=None, expr=None):
        self.value = value
        self.error = error
        self.tokens = tokens
        self.expr = expr

    @property
    def ok(self):
        return self.error is None

    def __str__(self):
        if self.error is not None:
            return str(self.error)
        return str(self.value)

    def __repr__(self):
        if self.error is not None:
            return f"Result(error={self.error!r})"
        return f"Result(value={self.value})"


def evaluate(line):
    """Tokenize, parse and evaluate a single line.

    Faults are captured in the returned Result rather than raised, so a
    bad line never affects the next one.
    """
    tokens = None
    expr = None
    try:
        tokens = tokenize(line)
        expr = parse(tokens)
        value = expr.eval()
    except CalcError as e:
        return Result(error=e, tokens=tokens, expr=expr)

    return Result(value=value, tokens=tokens, expr=expr)
