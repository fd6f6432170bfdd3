from .common import INT64_MIN, INT64_MAX, trace
import re


OPERATORS = {'+', '-', '*', '/', '(', ')'}


class Token:
    def __init__(self, type, value=None):
        self.type = type
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))

    def __repr__(self):
        if self.value is None:
            return f"Token('{self.type}')"
        return f"Token('{self.type}', {self.value})"


def tok_numeral(s):
    token = ""
    while len(s) > 0 and re.match('[0-9]', s[0]):
        token += s[0]
        s = s[1:]

    value = int(token)
    if not INT64_MIN <= value <= INT64_MAX:
        # out of range literals are dropped, not reported
        return None, s

    return Token('numeral', value), s


@trace
def tokenize(s):
    # ' ': skip
    # [-+*/()]: \0
    # 'numeral': [0-9]+ (must fit in 64 bits)
    # 'eof': appended once at the end
    # anything else is ignored

    tokens = []

    while len(s) > 0:
        if s[0] == ' ':
            s = s[1:]
            continue

        if s[0] in OPERATORS:
            t, s = s[0], s[1:]
            tokens.append(Token(t))
            continue

        if re.match('[0-9]', s[0]):
            token, s = tok_numeral(s)
            if token is not None:
                tokens.append(token)
            continue

        s = s[1:]

    tokens.append(Token('eof'))

    return tokens
