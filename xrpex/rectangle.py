# xrpex -- Ratio Partitioned Monitors for xrandr
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Axis aligned boxes of a fixed number of dimensions, written ``1920x1080``."""

from .parsing import char, parse_all, positive, separated_list_m_n


class HyperRectangle:

    def __init__(self, lengths):
        self.lengths = tuple(lengths)
        if not self.lengths:
            raise ValueError("0-dimensional HyperRectangles are not supported")

    def __repr__(self):
        return '<%s %s>' % (type(self).__name__, self)

    def __str__(self):
        return "x".join(str(l) for l in self.lengths)

    def __eq__(self, other):
        if not isinstance(other, HyperRectangle):
            return NotImplemented
        return self.lengths == other.lengths

    def __hash__(self):
        return hash(self.lengths)

    def __getitem__(self, axis):
        return self.lengths[axis]

    def __iter__(self):
        return iter(self.lengths)

    @property
    def dimensions(self):
        return len(self.lengths)

    @classmethod
    def parser(cls, dimensions):
        """Build a parser for exactly `dimensions` positive lengths."""
        if dimensions < 1:
            raise ValueError("0-dimensional HyperRectangles are not supported")
        lengths_parser = separated_list_m_n(dimensions, dimensions, char('x'), positive)

        def parser(text):
            text, lengths = lengths_parser(text)
            return text, cls(lengths)
        return parser

    @classmethod
    def parse(cls, text, dimensions=2):
        return parse_all(cls.parser(dimensions), text)
