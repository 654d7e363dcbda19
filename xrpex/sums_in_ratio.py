# xrpex -- Ratio Partitioned Monitors for xrandr
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Ratio expressions: one dimension sum per axis, separated by ``:``.

``1+2:3`` splits a 2D rectangle into a left third and a right two thirds,
both spanning the full height. Evaluating an expression against a rectangle
yields the solved sums plus a scale in pixels per ratio unit; the
partitions of the solved sums are the grid cells in ratio units.
"""

import itertools
import logging
from functools import reduce
from math import gcd

from .dimension_sum import IndeterminateDimensionSum
from .errors import (
    DimensionSumEvaluationError, DimensionSumSolveError, DoesNotDivide,
    ScaleInferenceError, UnequalScales,
)
from .parsing import char, parse_all, separated_list_m_n

log = logging.getLogger('xrpex')


class Partition:
    """One grid cell: position and size per axis, in ratio units."""

    def __init__(self, position, size):
        self.position = tuple(position)
        self.size = tuple(size)

    def __repr__(self):
        return '<%s at %r size %r>' % (type(self).__name__, self.position, self.size)

    def __eq__(self, other):
        if not isinstance(other, Partition):
            return NotImplemented
        return (self.position, self.size) == (other.position, other.size)

    def __hash__(self):
        return hash((self.position, self.size))

    def scaled(self, scale):
        return Partition((p * scale for p in self.position), (s * scale for s in self.size))


class PartitionSequence:
    """Every cell of a solved ratio, axis 0 varying slowest.

    Iterating is lazy and may be repeated; each pass yields the same cells.
    """

    def __init__(self, sums):
        self._sums = sums

    def __len__(self):
        return reduce(lambda count, s: count * len(s), self._sums, 1)

    def __iter__(self):
        per_axis = [list(s.iter_with_offsets()) for s in self._sums]
        for combination in itertools.product(*per_axis):
            yield Partition(
                (c.offset for c in combination),
                (c.addend for c in combination),
            )


class SumsInRatio:

    def __init__(self, sums):
        self.sums = tuple(sums)

    def __repr__(self):
        return '<%s %s>' % (type(self).__name__, ":".join(str(s) for s in self.sums))

    def __eq__(self, other):
        if not isinstance(other, SumsInRatio):
            return NotImplemented
        return self.sums == other.sums

    def __hash__(self):
        return hash(self.sums)

    @property
    def dimensions(self):
        return len(self.sums)

    def partitions(self):
        return PartitionSequence(self.sums)


class IndeterminateSumsInRatio:

    def __init__(self, sums):
        self.sums = tuple(sums)
        if not self.sums:
            raise ValueError("0-dimensional SumsInRatio are not supported")

    def __repr__(self):
        return '<%s %r>' % (type(self).__name__, str(self))

    def __str__(self):
        return ":".join(str(s) for s in self.sums)

    def __eq__(self, other):
        if not isinstance(other, IndeterminateSumsInRatio):
            return NotImplemented
        return self.sums == other.sums

    def __hash__(self):
        return hash(self.sums)

    @property
    def dimensions(self):
        return len(self.sums)

    @classmethod
    def parser(cls, dimensions):
        if dimensions < 1:
            raise ValueError("0-dimensional SumsInRatio are not supported")
        sums_parser = separated_list_m_n(
            dimensions, dimensions, char(':'), IndeterminateDimensionSum.parser)

        def parser(text):
            text, sums = sums_parser(text)
            return text, cls(sums)
        return parser

    @classmethod
    def parse(cls, text, dimensions=2):
        return parse_all(cls.parser(dimensions), text)

    def _base_scale(self, rectangle):
        inferred = set()
        for axis, (dim_sum, length) in enumerate(zip(self.sums, rectangle)):
            try:
                scale = dim_sum.infer_scale(length)
            except DoesNotDivide as e:
                raise ScaleInferenceError(axis, e) from e
            if scale is not None:
                inferred.add(scale)

        log.debug("inferred scales for %s on %s: %s", self, rectangle, sorted(inferred))
        if not inferred:
            return 1
        if len(inferred) > 1:
            raise UnequalScales(inferred)
        return inferred.pop()

    def evaluate(self, rectangle):
        """Solve against rectangle, returning (SumsInRatio, scale).

        The scale is the largest number of pixels per ratio unit that divides
        every length of rectangle and the scale implied by the fully known
        axes. Known addends are multiplied up so their ratios are kept.
        """
        if rectangle.dimensions != self.dimensions:
            raise ValueError("cannot evaluate a %d-dimensional ratio on a %d-dimensional rectangle"
                             % (self.dimensions, rectangle.dimensions))

        base_scale = self._base_scale(rectangle)
        scale = reduce(gcd, rectangle, base_scale)
        scale_factor = base_scale // scale
        log.debug("base scale %d, scale %d, scale factor %d", base_scale, scale, scale_factor)

        solved = []
        for axis, (dim_sum, length) in enumerate(zip(self.sums, rectangle)):
            try:
                solved.append((dim_sum * scale_factor).evaluate(length, scale))
            except DimensionSumEvaluationError as e:
                raise DimensionSumSolveError(axis, e) from e

        return SumsInRatio(solved), scale
