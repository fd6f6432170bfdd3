#!/usr/bin/env python3

import re
import sys
import argparse
import subprocess

from . import common


# a leading '-' followed by something an expression can start with
NEGATED_INPUT = re.compile(r'-+[0-9( ]')


def run_line(line, args, prefix=''):
    # imported late so --trace is set before the traced modules load
    from .calc import evaluate

    result = evaluate(line)
    if args.tokens:
        print(result.tokens)

    if result.ok:
        print(f'{prefix}{result}')
    elif common.TRACE:
        import traceback

        traceback.print_exception(result.error)
    else:
        print(f'Error: {result}')

    return result


def repl(args):
    results = []
    while True:
        try:
            line = input('> ')
        except EOFError:
            print()
            break

        if not line.strip():
            continue

        results.append(run_line(line, args, prefix='= '))

    return results


def _main(args):
    if args.file is not None:
        with open(args.file) as f:
            lines = f.read().splitlines()
    elif len(args.input) > 0:
        lines = args.input
    elif not sys.stdin.isatty():
        lines = sys.stdin.read().splitlines()
    else:
        return repl(args)

    results = []
    for line in lines:
        if not line.strip():
            continue
        results.append(run_line(line, args))

    return results


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    argp = argparse.ArgumentParser(prog='intcalc')
    argp.add_argument('input', nargs='*')
    argp.add_argument('-f', '--file', type=str)
    argp.add_argument('--ast', action='store_true')
    argp.add_argument('--tokens', action='store_true')
    argp.add_argument('--trace', action='store_true')
    args, extra = argp.parse_known_args(argv)

    # argparse takes lines such as -5+7 for unknown options
    for a in extra:
        if a.startswith('-') and not NEGATED_INPUT.match(a):
            argp.error(f"unrecognized arguments: {a}")

    inputs = set(args.input) | set(extra)
    args.input = [a for a in argv if a in inputs]

    if args.trace:
        common.TRACE = True

    results = _main(args)

    if args.ast and results and results[-1].expr is not None:
        from .expr import render_tree

        svg = render_tree(results[-1].expr, "ast")
        subprocess.run(["xdg-open", svg])

    if all(r.ok for r in results):
        return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())
