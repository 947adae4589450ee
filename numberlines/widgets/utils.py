"""
Pixel geometry for drawing numberlines. Everything here works in the reference frame of the drawable part of a line:
x = 0 is where the line starts (i.e. after the left margin), x = width is where it ends.

Nothing in here draws; the widgets do that.
"""

from numberlines.constants import MARGIN_LEFT, MARGIN_RIGHT
from numberlines.ranges import project
from numberlines.ticks import ticks_for_range


def drawable_width(total_width):
    """
    >>> drawable_width(280)
    200
    >>> drawable_width(50)
    0
    """
    return max(0, total_width - MARGIN_LEFT - MARGIN_RIGHT)


def tick_marks(domain, width, fractional=False):
    """
    A list of (x, label) for the ticks of a line showing `domain` over `width` pixels.

    >>> tick_marks((0, 1), 400, fractional=True)
    [(0.0, '0'), (100.0, '1/4'), (200.0, '1/2'), (300.0, '3/4'), (400.0, '1')]
    """
    ticks = ticks_for_range(domain, fractional)
    return [(project(domain, (0, width), v), label) for v, label in zip(ticks.values, ticks.labels)]


def brush_extent(selection, overview_domain, width):
    """
    The pixel extent of the brush for `selection`; clipped to the line.

    >>> brush_extent((-10, 10), (-100, 100), 200)
    (90.0, 110.0)
    >>> brush_extent((50, 150), (-100, 100), 200)
    (150.0, 200)
    """
    x0 = project(overview_domain, (0, width), selection[0])
    x1 = project(overview_domain, (0, width), selection[1])
    return max(0, x0), min(width, x1)
