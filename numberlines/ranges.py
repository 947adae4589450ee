"""
Pure operations on ranges in value-space.

A Range is an ordered pair (lo, hi). At rest `lo < hi` holds; intermediate results (e.g. the result of an overly
aggressive zoom, or of a clamp) may violate this, which is why `clamp` refuses to return such a range, and why
`is_valid` exists.

Pixel ranges are plain (p0, p1) pairs; the operations below that take a pixel range implement a linear scale between
the two spaces, like D3's `scaleLinear`.
"""

from collections import namedtuple
from math import exp

from numberlines.utils import all_finite


Range = namedtuple('Range', ('lo', 'hi'))


class DegenerateRangeError(ValueError):
    """A computed range collapsed (lo >= hi)."""
    pass


def span(r):
    lo, hi = r
    return hi - lo


def is_valid(r):
    """
    >>> is_valid(Range(0, 1))
    True
    >>> is_valid(Range(1, 1))
    False
    >>> is_valid(Range(0, float('inf')))
    False
    >>> is_valid(None)
    False
    """
    if r is None:
        return False
    lo, hi = r
    return all_finite(lo, hi) and lo < hi


def ordered(r):
    """
    >>> ordered(Range(10, -10))
    Range(lo=-10, hi=10)
    >>> ordered((1, 2))
    Range(lo=1, hi=2)
    """
    lo, hi = r
    if hi < lo:
        return Range(hi, lo)
    return Range(lo, hi)


def contains(outer, inner):
    """
    >>> contains(Range(0, 10), Range(2, 3))
    True
    >>> contains(Range(0, 10), Range(0, 10))
    True
    >>> contains(Range(0, 10), Range(-1, 3))
    False
    """
    return outer[0] <= inner[0] and inner[1] <= outer[1]


def hull(a, b):
    """The smallest range that contains both `a` and `b`.

    >>> hull(Range(-5, 5), Range(-10, 10))
    Range(lo=-10, hi=10)
    >>> hull(Range(0, 100), Range(10, 20))
    Range(lo=0, hi=100)
    """
    return Range(min(a[0], b[0]), max(a[1], b[1]))


def clamp(r, bounds):
    """
    Intersects `r` with `bounds`.

    >>> clamp(Range(-5, 15), Range(0, 10))
    Range(lo=0, hi=10)
    >>> clamp(Range(2, 3), Range(0, 10))
    Range(lo=2, hi=3)

    If nothing (or a single point) remains, there is no meaningful range to return; what to do instead is up to the
    caller:
    >>> clamp(Range(11, 12), Range(0, 10))
    Traceback (most recent call last):
    ...
    numberlines.ranges.DegenerateRangeError: Range(lo=11, hi=12) does not overlap Range(lo=0, hi=10)
    """
    lo = max(r[0], bounds[0])
    hi = min(r[1], bounds[1])
    if not lo < hi:
        raise DegenerateRangeError("%s does not overlap %s" % (Range(*r), Range(*bounds)))
    return Range(lo, hi)


def invert(domain, pixel_range, px):
    """
    The value at pixel position `px`, given that `domain` is spread out over `pixel_range`.

    >>> invert(Range(-100, 100), (0, 200), 50)
    -50.0
    >>> invert(Range(-100, 100), (0, 200), 100)
    0.0
    """
    d0, d1 = domain
    p0, p1 = pixel_range
    return d0 + (px - p0) * (d1 - d0) / (p1 - p0)


def project(domain, pixel_range, value):
    """
    The inverse of `invert`: the pixel position of `value`.

    >>> project(Range(-100, 100), (0, 200), -10)
    90.0
    """
    d0, d1 = domain
    p0, p1 = pixel_range
    return p0 + (value - d0) * (p1 - p0) / (d1 - d0)


def pixel_delta_to_value(domain, width, pixel_delta):
    """
    The distance in value-space that corresponds with moving `pixel_delta` pixels.

    >>> pixel_delta_to_value(Range(-100, 100), 400, 10)
    5.0
    """
    return pixel_delta * span(domain) / width


def shift(r, delta):
    """
    >>> shift(Range(0, 10), -2.5)
    Range(lo=-2.5, hi=7.5)
    """
    return Range(r[0] + delta, r[1] + delta)


def zoom_factor(wheel_delta, sensitivity):
    """
    Positive deltas (a wheel rolled towards the user, i.e. "scrolling down") produce factors larger than 1, which widen
    the range (zoom out); negative deltas zoom in.

    >>> zoom_factor(0, 0.0005)
    1.0
    >>> zoom_factor(100, 0.0005) > 1
    True
    >>> zoom_factor(-100, 0.0005) < 1
    True
    """
    return exp(wheel_delta * sensitivity)


def zoom_about(r, pivot, factor):
    """
    Scales `r` by `factor`, keeping `pivot` in place.

    >>> zoom_about(Range(-100, 100), 0, 0.5)
    Range(lo=-50.0, hi=50.0)

    The pivot is where the pointer is; it stays in the same relative position:
    >>> zoom_about(Range(0, 8), 8, 0.5)
    Range(lo=4.0, hi=8.0)
    """
    lo, hi = r
    return Range(pivot + (lo - pivot) * factor, pivot + (hi - pivot) * factor)


def pad(r, factor):
    """
    Widens `r` by `factor` times its span on both sides.

    >>> pad(Range(0, 8), 0.25)
    Range(lo=-2.0, hi=10.0)
    """
    lo, hi = r
    s = hi - lo
    return Range(lo - s * factor, hi + s * factor)


def unpad(padded, factor):
    """
    The inverse of `pad`: the padded span is (1 + 2 * factor) times the original span.

    >>> unpad(Range(-2.0, 10.0), 0.25)
    Range(lo=0.0, hi=8.0)
    """
    lo, hi = padded
    s = (hi - lo) / (1 + 2 * factor)
    return Range(lo + s * factor, hi - s * factor)
