"""
Tick placement for numberlines, preferably at "nice" fractions.

For a given range we look for a denominator d such that the fractions n/d which fall inside the range form a pleasant
number of ticks. Denominators are tried in a fixed order of preference; the first one that yields a tick count inside
the window [min_ticks, max_ticks] wins. If none does (the range is e.g. too wide for any fraction to be useful, or so
narrow that even the finest denominator is too coarse), we relax: the denominator that yields the most ticks without
exceeding max_ticks * relaxed_factor is taken. If even that fails, we fall back to decimal ticks.
"""

from collections import namedtuple
from fractions import Fraction
from math import ceil, floor, isfinite, log10

from numberlines.constants import DENOMINATORS, MIN_TICKS, MAX_TICKS, RELAXED_FACTOR

# lo * d and hi * d are computed in floating point; 0.7 * 10 is not quite 7. We don't want to lose ticks to that.
EPSILON = 1e-9

Ticks = namedtuple('Ticks', ('values', 'labels', 'denominator'))


def numerator_bounds(r, denominator):
    lo, hi = r
    return ceil(lo * denominator - EPSILON), floor(hi * denominator + EPSILON)


def count_ticks(r, denominator):
    """
    >>> count_ticks((0, 1), 4)
    5
    >>> count_ticks((0.3, 0.7), 10)
    5
    >>> count_ticks((0.1, 0.2), 2)
    0
    """
    first, last = numerator_bounds(r, denominator)
    return max(0, last - first + 1)


def choose_denominator(r, denominators=DENOMINATORS, min_ticks=MIN_TICKS, max_ticks=MAX_TICKS,
                       relaxed_factor=RELAXED_FACTOR):
    """
    >>> choose_denominator((0, 1))
    4
    >>> choose_denominator((0, 3))
    2

    Nothing fits the window for a very narrow range, but the finest denominator still gives us something:
    >>> choose_denominator((0, 0.01))
    100

    Wide ranges are not served by fractions at all:
    >>> choose_denominator((-10, 10)) is None
    True
    """
    for d in denominators:
        if min_ticks <= count_ticks(r, d) <= max_ticks:
            return d

    ceiling = floor(max_ticks * relaxed_factor)
    best, best_count = None, 0
    for d in denominators:
        c = count_ticks(r, d)
        if best_count < c <= ceiling:
            best, best_count = d, c

    return best


def format_fraction(numerator, denominator, mixed=True):
    """
    >>> format_fraction(0, 5)
    '0'
    >>> format_fraction(8, 4)
    '2'
    >>> format_fraction(-3, 3)
    '-1'
    >>> format_fraction(2, 4)
    '1/2'
    >>> format_fraction(-6, 4)
    '-1 1/2'
    >>> format_fraction(-6, 4, mixed=False)
    '-3/2'
    """
    f = Fraction(numerator, denominator)
    if f == 0:
        return "0"

    if f.denominator == 1:
        return str(f.numerator)

    sign = "-" if f < 0 else ""
    n, d = abs(f.numerator), f.denominator

    if mixed and n > d:
        whole, rest = divmod(n, d)
        return "%s%d %d/%d" % (sign, whole, rest, d)

    return "%s%d/%d" % (sign, n, d)


def nice_step(raw_step):
    """
    Rounds raw_step to a "nice" step: 1, 2, 2.5, 5, 10 × 10^k

    >>> nice_step(22.2)
    20.0
    >>> nice_step(0.07)
    0.05
    """
    if raw_step <= 0 or not isfinite(raw_step):
        return 1.0
    exponent = floor(log10(raw_step))
    f = raw_step / (10 ** exponent)
    best = min([1.0, 2.0, 2.5, 5.0, 10.0], key=lambda c: abs(c - f))
    return best * (10 ** exponent)


def _trim_float(x, digits=12):
    # Avoids 1.2000000000000002 artifacts
    return float("%.*g" % (digits, x))


def format_decimal(x):
    """
    >>> format_decimal(-0.0)
    '0'
    >>> format_decimal(-80.0)
    '-80'
    >>> format_decimal(2.5)
    '2.5'
    """
    if x == 0:
        return "0"
    return "%.12g" % x


def decimal_ticks(r, target_count=(MIN_TICKS + MAX_TICKS) // 2):
    """
    >>> decimal_ticks((-100, 100)).labels
    ['-100', '-80', '-60', '-40', '-20', '0', '20', '40', '60', '80', '100']
    """
    lo, hi = r
    step = nice_step((hi - lo) / max(target_count - 1, 1))
    first, last = ceil(lo / step - EPSILON), floor(hi / step + EPSILON)

    values = [_trim_float(i * step) for i in range(first, last + 1)]
    return Ticks(values, [format_decimal(v) for v in values], None)


def fraction_ticks(r, denominator, mixed=True):
    """
    >>> fraction_ticks((-1.5, 0), 3).labels
    ['-1 1/3', '-1', '-2/3', '-1/3', '0']
    """
    first, last = numerator_bounds(r, denominator)
    numerators = range(first, last + 1)
    return Ticks(
        [n / denominator for n in numerators],
        [format_fraction(n, denominator, mixed) for n in numerators],
        denominator)


def ticks_for_range(r, fractional=True, denominators=DENOMINATORS, min_ticks=MIN_TICKS, max_ticks=MAX_TICKS,
                    relaxed_factor=RELAXED_FACTOR, mixed=True):
    """
    >>> ticks_for_range((0, 1)).labels
    ['0', '1/4', '1/2', '3/4', '1']
    >>> ticks_for_range((0, 1), fractional=False).labels
    ['0', '0.1', '0.2', '0.3', '0.4', '0.5', '0.6', '0.7', '0.8', '0.9', '1']
    >>> ticks_for_range((-10, 10)).denominator is None
    True
    """
    if fractional:
        d = choose_denominator(r, denominators, min_ticks, max_ticks, relaxed_factor)
        if d is not None:
            return fraction_ticks(r, d, mixed)

    return decimal_ticks(r, (min_ticks + max_ticks) // 2)
