# xrpex -- Ratio Partitioned Monitors for xrandr
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Small parser combinators that thread the remaining input explicitly.

A parser is any callable taking the input text and returning a
``(remaining, value)`` pair. It signals a mismatch by raising ParseError,
which lets enclosing combinators backtrack, or ParseFailure, which no
combinator recovers from.
"""

import re

from .errors import ParseError, ParseFailure

U32_MAX = 2 ** 32 - 1

_DIGITS = re.compile(r'[0-9]+')


def char(expected):
    def parser(text):
        if text[:1] == expected:
            return text[1:], expected
        raise ParseError(text, 'Char')
    return parser


def unsigned(text):
    """Base 10 unsigned 32 bit integer, no sign, no whitespace."""
    m = _DIGITS.match(text)
    if not m:
        raise ParseError(text, 'Digit')
    digits = m.group(0).lstrip("0") or "0"
    # int() refuses strings past sys.get_int_max_str_digits()
    if len(digits) > len(str(U32_MAX)) or int(digits) > U32_MAX:
        raise ParseFailure(text, 'TooLarge')
    return text[m.end():], int(digits)


def positive(text):
    remaining, value = unsigned(text)
    if value == 0:
        raise ParseFailure(text, 'Zero')
    return remaining, value


def optional(parser):
    def wrapped(text):
        try:
            return parser(text)
        except ParseFailure:
            raise
        except ParseError:
            return text, None
    return wrapped


def separated_list_m_n(min_count, max_count, sep, element):
    """Parse between min_count and max_count elements separated by sep.

    max_count may be None for no upper bound. Parsing stops as soon as
    max_count elements were read, even if another separator follows. With
    min_count == 0 a first element that does not match yields an empty list.
    A separator that is not followed by an element is left unconsumed.
    """
    if max_count is not None and min_count > max_count:
        raise ValueError("min_count %d exceeds max_count %d" % (min_count, max_count))

    def parser(text):
        if max_count == 0:
            return text, []

        try:
            text, head = element(text)
        except ParseFailure:
            raise
        except ParseError:
            if min_count == 0:
                return text, []
            raise

        values = [head]
        while max_count is None or len(values) < max_count:
            try:
                rest, _ = sep(text)
                rest, value = element(rest)
            except ParseFailure:
                raise
            except ParseError:
                if len(values) < min_count:
                    raise ParseError(text, 'ManyMN')
                break
            if len(rest) == len(text):
                # neither separator nor element consumed anything
                raise ParseFailure(text, 'SeparatedList')
            values.append(value)
            text = rest
        return text, values

    return parser


def all_consuming(parser):
    def wrapped(text):
        remaining, value = parser(text)
        if remaining:
            raise ParseError(remaining, 'Eof')
        return remaining, value
    return wrapped


def parse_all(parser, text):
    """Run parser over the whole of text and return only the parsed value."""
    _, value = all_consuming(parser)(text)
    return value
