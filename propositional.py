# Copyright (C) 2022 Matthew Marting
# SPDX-License-Identifier: GPL-3.0-or-later

from collections import namedtuple
from enum import Enum
import regex as re

from combinators import (
    choice,
    end_of_input,
    literal_char,
    many,
    optional,
    pattern,
    sequence,
    transform,
    whitespace,
)

__all__ = [
    "ParseError",
    "ParseSyntaxError",
    "ParseTrailingSyntaxError",
    "handle",
    "TokenIdentifier",
    "Token",
    "LiteralExpression",
    "NotExpression",
    "AndExpression",
    "OrExpression",
    "token_parser",
    "token",
    "leading_tokens",
    "tokens",
    "tokenize",
]

newline = re.compile("\\n|\\r\\n|\\r")


class ParseError(RuntimeError):
    def __init__(self, *args, text, remainder, **kwargs):
        super().__init__(*args, **kwargs)
        self.text = text
        self.remainder = remainder
        self.offset = len(text) - len(remainder)
        lines = newline.split(text[: self.offset])
        self.line_number = len(lines) - 1
        self.column = len(lines[-1])


class ParseSyntaxError(ParseError):
    pass


class ParseTrailingSyntaxError(ParseSyntaxError):
    def __init__(self, *, expected, **kwargs):
        super().__init__(f"unexpected input: {expected}", **kwargs)
        self.expected = expected


def error_str(source_file, line_number, column, message):
    return f"{source_file}:{line_number + 1}:{column + 1}: {message}"


def handle(e, source_file):
    print(error_str(source_file, e.line_number, e.column, f"error: {e}"))
    lines = newline.split(e.text)
    print(lines[e.line_number])
    print(f"{' ' * e.column}^")


class TokenIdentifier(namedtuple("_TokenIdentifier", ("description", "append_match")), Enum):
    def __new__(cls, description, append_match=True):
        obj = super().__new__(cls, description, append_match)
        obj._value_ = len(cls.__members__) + 1
        return obj

    def __str__(self):
        return self.description

    OR = "`|'", False
    AND = "`&'", False
    NOT = "`~'", False
    LEFT_PARENTHESIS = "`('", False
    RIGHT_PARENTHESIS = "`)'", False
    IDENTIFIER = "identifier"


symbols = {
    TokenIdentifier.OR: "|",
    TokenIdentifier.AND: "&",
    TokenIdentifier.NOT: "~",
    TokenIdentifier.LEFT_PARENTHESIS: "(",
    TokenIdentifier.RIGHT_PARENTHESIS: ")",
}

identifier_pattern = re.compile("\\p{XID_Start}\\p{XID_Continue}*")


class Token(namedtuple("_Token", ("identifier", "text"))):
    def __str__(self):
        if self.identifier.append_match:
            return f"{self.identifier!s} `{self.text}'"
        return str(self.identifier)


class LiteralExpression(namedtuple("_LiteralExpression", ("identifier",))):
    def __str__(self):
        return self.identifier


class NotExpression(namedtuple("_NotExpression", ("a",))):
    def __str__(self):
        return f"not({self.a})"


class AndExpression(namedtuple("_AndExpression", ("a", "b"))):
    def __str__(self):
        return f"and({self.a}, {self.b})"


class OrExpression(namedtuple("_OrExpression", ("a", "b"))):
    def __str__(self):
        return f"or({self.a}, {self.b})"


def token_parser(token_identifier):
    if token_identifier is TokenIdentifier.IDENTIFIER:
        parser = pattern(identifier_pattern, str(token_identifier))
    else:
        parser = literal_char(symbols[token_identifier])
    return transform(parser, lambda text: Token(token_identifier, text))


def token():
    return transform(
        sequence(
            [
                optional(whitespace()),
                choice([token_parser(token_identifier) for token_identifier in TokenIdentifier]),
            ]
        ),
        lambda values: values[1],
    )


def leading_tokens():
    return transform(sequence([many(token()), optional(whitespace())]), lambda values: values[0])


def tokens():
    return transform(sequence([leading_tokens(), end_of_input()]), lambda values: values[0])


def tokenize(s):
    outcome, remainder = leading_tokens()(s)
    end, _ = end_of_input()(remainder)
    if not end.is_success():
        failure, _ = token()(remainder)
        raise ParseTrailingSyntaxError(expected=failure.message, text=s, remainder=remainder)
    return outcome.value
