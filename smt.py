# Copyright (C) 2022 Matthew Marting
# SPDX-License-Identifier: GPL-3.0-or-later

import argparse
import sys

from propositional import ParseError, handle, tokenize

__all__ = ["USAGE", "main"]

USAGE = "usage: smt <filename>"


def main(argv=None):
    ap = argparse.ArgumentParser(prog="smt", usage=USAGE[len("usage: ") :])
    ap.add_argument("filename")
    args = ap.parse_args(argv)

    try:
        with open(args.filename, encoding="utf-8") as f:
            contents = f.read()
    except (OSError, UnicodeDecodeError):
        print(f"Problem reading {args.filename}", file=sys.stderr)
        return 1

    try:
        for i, token in enumerate(tokenize(contents)):
            print(f"{i}: {token!s}")
    except ParseError as e:
        handle(e, args.filename)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
