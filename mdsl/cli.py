"""Command line entry: lex and parse a program, then print its syntax tree."""

from __future__ import annotations

import argparse
import sys
from pprint import pformat
from typing import Optional, Sequence

from mdsl.lexer import lex_with_errors
from mdsl.parser import ParseError, parse_source

SAMPLE = """
            // this is a line comment
            1 + 3 = 4;
            var x = 0;
            val y = 4.20;
            if(x == y){ "!mann"; }
        """


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Lex and parse a file (or the built-in sample) and print the result."""
    arg_parser = argparse.ArgumentParser(
        prog="mdsl", description="Lex and parse a program and print its syntax tree."
    )
    arg_parser.add_argument(
        "path", nargs="?", help="source file to read; a built-in sample when omitted"
    )
    args = arg_parser.parse_args(argv)

    if args.path is None:
        source = SAMPLE
    else:
        with open(args.path, encoding="utf-8") as handle:
            source = handle.read()

    print(f"Input: {source}")
    result = lex_with_errors(source)
    for error in result.errors:
        print(repr(error), file=sys.stderr)
    if result.errors:
        return 1

    try:
        ast = parse_source(result.tokens)
    except ParseError as exc:
        print(f"Parse error: {exc}", file=sys.stderr)
        return 1

    print(f"AST: {pformat(ast)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())