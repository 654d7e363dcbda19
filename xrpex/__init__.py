# xrpex -- Ratio Partitioned Monitors for xrandr
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Split rectangles, and xrandr monitors, into grids given by integer ratios."""

from .errors import (
    ApplyError, DimensionSumEvaluationError, DimensionSumSolveError, DoesNotDivide,
    NoSuchMonitor, ParseError, ParseFailure, ScaleInferenceError,
    SumsInRatioEvaluationError, UnequalScales, UnsupportedXRandR, XRandRError, XrpexError,
)
from .rectangle import HyperRectangle
from .sums_in_ratio import (
    IndeterminateSumsInRatio, Partition, PartitionSequence, SumsInRatio,
)

__version__ = '0.1.0'

Rpex = IndeterminateSumsInRatio
