# xrpex -- Ratio Partitioned Monitors for xrandr
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Sums of addends along a single axis, e.g. ``1+2`` or ``1++3``.

An empty field between two ``+`` stands for an unknown addend. All unknowns
of one sum are solved to the same value once the length of the axis and the
scale of a ratio unit are known.
"""

import logging
from collections import namedtuple

from .divides import divide
from .errors import DimensionSumEvaluationError, DoesNotDivide
from .parsing import char, optional, parse_all, separated_list_m_n, unsigned

log = logging.getLogger('xrpex')

AddendWithOffset = namedtuple('AddendWithOffset', ['addend', 'offset'])


class DimensionSum:
    """Solved sum: every addend is known."""

    def __init__(self, addends):
        self.addends = tuple(addends)

    def __repr__(self):
        return '<%s %s>' % (type(self).__name__, self)

    def __str__(self):
        return "+".join(str(a) for a in self.addends)

    def __eq__(self, other):
        if not isinstance(other, DimensionSum):
            return NotImplemented
        return self.addends == other.addends

    def __hash__(self):
        return hash(self.addends)

    def __len__(self):
        return len(self.addends)

    def __mul__(self, factor):
        return DimensionSum(a * factor for a in self.addends)

    def sum(self):
        return sum(self.addends)

    def iter_with_offsets(self):
        """Yield (addend, offset) pairs; offset is the sum of all preceding addends."""
        offset = 0
        for addend in self.addends:
            yield AddendWithOffset(addend, offset)
            offset += addend


class IndeterminateDimensionSum:
    """Parsed sum whose addends are ints or None for unknowns."""

    def __init__(self, addends):
        self.addends = tuple(addends)
        if not self.addends:
            raise ValueError("a dimension sum needs at least one addend")

    def __repr__(self):
        return '<%s %r>' % (type(self).__name__, str(self))

    def __str__(self):
        return "+".join("" if a is None else str(a) for a in self.addends)

    def __eq__(self, other):
        if not isinstance(other, IndeterminateDimensionSum):
            return NotImplemented
        return self.addends == other.addends

    def __hash__(self):
        return hash(self.addends)

    def __len__(self):
        return len(self.addends)

    def __mul__(self, factor):
        return IndeterminateDimensionSum(
            None if a is None else a * factor for a in self.addends)

    @classmethod
    def parser(cls, text):
        text, values = separated_list_m_n(1, None, char('+'), optional(unsigned))(text)
        return text, cls(values)

    @classmethod
    def parse(cls, text):
        return parse_all(cls.parser, text)

    def count_unknowns(self):
        return sum(1 for a in self.addends if a is None)

    def sum_knowns(self):
        return sum(a for a in self.addends if a is not None)

    def infer_scale(self, length):
        """Scale implied by length if every addend is known, otherwise None.

        Raises DoesNotDivide if the known addends do not divide length.
        """
        if self.count_unknowns():
            return None
        return divide(length, self.sum_knowns())

    def evaluate(self, length, scale=1):
        """Solve the unknowns for an axis of the given length.

        length is in pixels, scale is the number of pixels per ratio unit.
        Every unknown takes the same value, chosen so that the addends fill
        length / scale units.
        """
        unknowns = self.count_unknowns()
        try:
            total = divide(length, scale)
            if not unknowns:
                return DimensionSum(self.addends)
            total_unknown = total - self.sum_knowns()
            if total_unknown < 0:
                raise DimensionSumEvaluationError(
                    "known addends of %s exceed the total of %d units" % (self, total))
            solution = divide(total_unknown, unknowns)
        except DoesNotDivide as e:
            raise DimensionSumEvaluationError(
                "unable to split %d pixels at scale %d into %s: %s" % (length, scale, self, e),
                cause=e,
            ) from e

        log.debug("solved %s at length %d, scale %d: unknown = %d",
                  self, length, scale, solution)
        return DimensionSum(solution if a is None else a for a in self.addends)
