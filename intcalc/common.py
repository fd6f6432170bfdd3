import os
import sys
from functools import wraps

TRACE = os.environ.get('INTCALC_TRACE', '') not in ('', '0')

INT64_MIN = -2**63
INT64_MAX = 2**63 - 1

depth = 0


def trace(f):
    if not TRACE:
        return f

    @wraps(f)
    def wrapper(*args, **kwargs):
        global depth

        print(f"{'  '*depth}{f.__name__} <- {args} {kwargs}", file=sys.stderr)
        depth += 1

        try:
            ret = f(*args, **kwargs)
        finally:
            depth -= 1

        print(f"{'  '*depth}{f.__name__} -> {ret}", file=sys.stderr)

        return ret

    return wrapper


class CalcError(Exception):
    pass


class ParseError(CalcError):
    pass


class EvalError(CalcError):
    pass
