# xrpex -- Ratio Partitioned Monitors for xrandr
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Exception hierarchy shared by the parser, the solver and the xrandr glue."""


class XrpexError(Exception):
    pass


class ParseError(XrpexError):
    """Input did not match; a caller may backtrack and try something else."""

    def __init__(self, remaining, code):
        self.remaining = remaining
        self.code = code
        super().__init__("parse error %s at %r" % (code, remaining))


class ParseFailure(ParseError):
    """Input is malformed beyond recovery; combinators never backtrack past it."""


class DoesNotDivide(XrpexError):

    def __init__(self, divisor, dividend):
        self.divisor = divisor
        self.dividend = dividend
        super().__init__("%d does not divide %d" % (divisor, dividend))


class DimensionSumEvaluationError(XrpexError):

    def __init__(self, message, cause=None):
        self.cause = cause
        super().__init__(message)


class SumsInRatioEvaluationError(XrpexError):
    pass


class UnequalScales(SumsInRatioEvaluationError):

    def __init__(self, scales):
        self.scales = frozenset(scales)
        super().__init__(
            "inferred scales from dimensions are unequal: {%s}" %
            ", ".join(str(s) for s in sorted(self.scales)))


class ScaleInferenceError(SumsInRatioEvaluationError):

    def __init__(self, axis, cause):
        self.axis = axis
        self.cause = cause
        super().__init__("division error occurred on axis %d: %s" % (axis, cause))


class DimensionSumSolveError(SumsInRatioEvaluationError):

    def __init__(self, axis, cause):
        self.axis = axis
        self.cause = cause
        super().__init__("unable to evaluate dimension sum on axis %d: %s" % (axis, cause))


class XRandRError(XrpexError):

    def __init__(self, status, stderr):
        self.status = status
        self.stderr = stderr
        super().__init__("XRandR returned error code %d: %s" % (status, stderr.strip()))


class NoSuchMonitor(XrpexError):

    def __init__(self, name):
        self.name = name
        super().__init__("unable to find monitor with name %r" % name)


class ApplyError(XrpexError):

    def __init__(self, monitor_name, cause):
        self.monitor_name = monitor_name
        self.cause = cause
        super().__init__("failed to evaluate ratio for monitor %s: %s" % (monitor_name, cause))


class UnsupportedXRandR(XrpexError):
    pass
