# xrpex -- Ratio Partitioned Monitors for xrandr
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Exact integer division."""

from .errors import DoesNotDivide


def divide(dividend, divisor):
    """Return dividend / divisor, raising DoesNotDivide unless it is exact.

    Nothing is ever rounded; a zero divisor divides nothing.
    """
    if divisor == 0 or dividend % divisor != 0:
        raise DoesNotDivide(divisor, dividend)
    return dividend // divisor
