# Copyright (C) 2022 Matthew Marting
# SPDX-License-Identifier: GPL-3.0-or-later

from collections import namedtuple
import regex as re

__all__ = [
    "Success",
    "Failure",
    "Parser",
    "ForwardParser",
    "whitespace",
    "literal_string",
    "literal_char",
    "pattern",
    "end_of_input",
    "sequence",
    "choice",
    "transform",
    "optional",
    "many",
    "forward",
]


class Outcome:
    def __eq__(self, other):
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__, tuple(self)))

    def __repr__(self):
        return f"{type(self).__name__}({self[0]!r})"


class Success(Outcome, namedtuple("_Success", ("value",))):
    def is_success(self):
        return True


class Failure(Outcome, namedtuple("_Failure", ("message",))):
    def is_success(self):
        return False

    def __str__(self):
        return self.message


class Parser(namedtuple("_Parser", ("parse",))):
    def __call__(self, s):
        return self.parse(s)


def whitespace():
    def parse_whitespace(s):
        rest = s.lstrip()
        if len(rest) < len(s):
            return Success(()), rest
        return Failure(f"Expected whitespace in {s}"), s

    return Parser(parse_whitespace)


def literal_string(s_match):
    def parse_string(s):
        if s.startswith(s_match):
            return Success(s_match), s[len(s_match) :]
        return Failure(f"Expected {s_match} in {s}"), s

    return Parser(parse_string)


def literal_char(c):
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")

    def parse_char(s):
        if s[:1] == c:
            return Success(c), s[1:]
        return Failure(f"Expected {c} in {s}"), s

    return Parser(parse_char)


def pattern(expression, description=None):
    compiled = re.compile(expression) if isinstance(expression, str) else expression
    if description is None:
        description = compiled.pattern

    def parse_pattern(s):
        match = compiled.match(s)
        if match:
            return Success(match.group()), s[match.end() :]
        return Failure(f"Expected {description} in {s}"), s

    return Parser(parse_pattern)


def end_of_input():
    def parse_end(s):
        if not s:
            return Success(()), s
        return Failure(f"Expected end of input in {s}"), s

    return Parser(parse_end)


def sequence(parsers):
    parsers = tuple(parsers)

    def parse_sequence(s):
        values = []
        rest = s
        for parser in parsers:
            outcome, remainder = parser(rest)
            if not outcome.is_success():
                return outcome, s
            values.append(outcome.value)
            rest = remainder
        return Success(values), rest

    return Parser(parse_sequence)


def choice(parsers):
    parsers = tuple(parsers)

    def parse_choice(s):
        result = None
        for parser in parsers:
            result = parser(s)
            if result[0].is_success():
                break
        if result is None:
            return Failure("no alternatives available"), s
        return result

    return Parser(parse_choice)


def transform(parser, function):
    def parse_transform(s):
        outcome, remainder = parser(s)
        if outcome.is_success():
            return Success(function(outcome.value)), remainder
        return outcome, remainder

    return Parser(parse_transform)


def optional(parser, default=None):
    def parse_optional(s):
        outcome, remainder = parser(s)
        if outcome.is_success():
            return outcome, remainder
        return Success(default), s

    return Parser(parse_optional)


def many(parser):
    def parse_many(s):
        values = []
        rest = s
        while True:
            outcome, remainder = parser(rest)
            if not outcome.is_success():
                break
            values.append(outcome.value)
            # an empty match would repeat forever
            if len(remainder) == len(rest):
                break
            rest = remainder
        return Success(values), rest

    return Parser(parse_many)


class ForwardParser(Parser):
    def __new__(cls):
        cell = []

        def parse_forward(s):
            if not cell:
                raise RuntimeError("forward parser applied before it was defined")
            return cell[0](s)

        obj = super().__new__(cls, parse_forward)
        obj.cell = cell
        return obj

    def define(self, parser):
        if self.cell:
            raise RuntimeError("forward parser already defined")
        self.cell.append(parser)
        return self


def forward():
    return ForwardParser()
