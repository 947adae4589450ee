from math import isfinite


def _type_names(type_):
    if isinstance(type_, tuple):
        return " or ".join(t.__name__ for t in type_)
    return type_.__name__


def pmts(v, type_, extra_information=""):
    """
    Poor man's type system: asserts that `v` is an instance of `type_` (a type, or a tuple of types).

    >>> pmts(1.5, (int, float))
    >>> pmts("1.5", (int, float), "a pixel position")
    Traceback (most recent call last):
    ...
    AssertionError: str given where int or float was required (a pixel position)
    """
    assert isinstance(v, type_), "%s given where %s was required%s" % (
        type(v).__name__, _type_names(type_), " (%s)" % extra_information if extra_information else "")


def pmts_or_none(v, type_, extra_information=""):
    """Poor man's type system; value may be None"""
    if v is not None:
        pmts(v, type_, extra_information)


def all_finite(*numbers):
    """
    >>> all_finite(1, 2.5, -3)
    True
    >>> all_finite(1, float('nan'))
    False
    >>> all_finite(float('-inf'))
    False

    Things that are not numbers at all are not finite either:
    >>> all_finite(None)
    False
    """
    for n in numbers:
        if not isinstance(n, (int, float)) or not isfinite(n):
            return False
    return True
