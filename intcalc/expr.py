from .common import INT64_MIN, INT64_MAX, EvalError, trace
import subprocess


def divide(x, y):
    if y == 0:
        raise EvalError("division by zero")

    # integer division truncates toward zero
    q = abs(x) // abs(y)
    if (x < 0) != (y < 0):
        return -q
    return q


BINOPS = {
    '+': lambda x, y: x + y,
    '-': lambda x, y: x - y,
    '*': lambda x, y: x * y,
    '/': divide,
}


@trace
def binop_reduce(type, left, right):
    value = BINOPS[type](left, right)

    if not INT64_MIN <= value <= INT64_MAX:
        raise EvalError("integer overflow")

    return value


class Expr:
    ID = 0

    def __init__(self, type, left, right=None):
        self.type = type
        self.left = left
        self.right = right
        self.id = Expr.ID
        Expr.ID += 1

    def eval(self):
        # post-order walk with an explicit stack, so long chains such as
        # 1+1+...+1 do not hit the recursion limit
        values = []
        stack = [(self, False)]

        while stack:
            node, visited = stack.pop()

            if node.type == 'numeral':
                values.append(node.left)

            elif node.type not in BINOPS and node.type != 'negate':
                raise EvalError(f"unknown expression type: {node.type}")

            elif not visited:
                stack.append((node, True))
                if node.right is not None:
                    stack.append((node.right, False))
                stack.append((node.left, False))

            elif node.type == 'negate':
                values.append(values.pop() * -1)

            else:
                right = values.pop()
                left = values.pop()
                values.append(binop_reduce(node.type, left, right))

        return values.pop()

    def __eq__(self, other):
        if not isinstance(other, Expr):
            return NotImplemented
        return (self.type, self.left, self.right) == (other.type, other.left, other.right)

    def __str__(self):
        if self.type == 'numeral':
            return str(self.left)

        if self.type == 'negate':
            return f"-{self.left}"

        return f"{self.left} {self.type} {self.right}"

    def __repr__(self):
        return f"Expr({self.type}, {self.left!r}, {self.right!r})"


def draw_tree(root):
    lines = ["graph {"]

    queue = [root]
    while queue:
        n = queue.pop()
        if n.type == 'numeral':
            lines.append(f'v{n.id}[label="{n.left}"];')

        elif n.type == 'negate':
            lines.append(f'v{n.id}[label="neg"];')

        else:
            lines.append(f'v{n.id}[label="{n.type}"];')

        for m in (n.left, n.right):
            if not isinstance(m, Expr):
                continue

            lines.append(f'v{n.id} -- v{m.id};')
            queue.append(m)

    lines.append("}")

    return "\n".join(lines) + "\n"


def render_tree(root, fname="tree"):
    with open(f"{fname}.dot", 'w') as f:
        f.write(draw_tree(root))

    subprocess.run(["dot", "-Tsvg", f"-o{fname}.svg", f"{fname}.dot"], check=True)

    return f"{fname}.svg"
