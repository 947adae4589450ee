from numberlines.constants import PADDING_FACTOR, SENSITIVITY
from numberlines.gestures.clef import OVERVIEW, Brush, Pan, Wheel
from numberlines.gestures.structure import BrushOrigin
from numberlines.linked.clef import RestoreSelection, SetDetailDomain, SetOverviewDomain, SetSelection
from numberlines.ranges import (
    DegenerateRangeError,
    Range,
    clamp,
    invert,
    pixel_delta_to_value,
    shift,
    unpad,
    zoom_about,
    zoom_factor,
)
from numberlines.utils import all_finite


class InvalidGestureInput(ValueError):
    """The gesture cannot be turned into a meaningful change, e.g. because of non-finite or out-of-bounds pixels."""
    pass


def _width(geometry, line):
    width = geometry.width_for(line)
    if not all_finite(width) or width <= 0:
        raise InvalidGestureInput("No usable width for the %s line: %s" % (line, width))
    return width


def _finite(*numbers):
    if not all_finite(*numbers):
        raise InvalidGestureInput("Not a finite number: %s" % (numbers,))


def interpret_wheel(gesture, structure, geometry, padding_factor=PADDING_FACTOR, sensitivity=SENSITIVITY):
    width = _width(geometry, gesture.line)
    _finite(gesture.pixel_position, gesture.delta)

    if not 0 <= gesture.pixel_position <= width:
        raise InvalidGestureInput("Pixel position %s outside [0, %s]" % (gesture.pixel_position, width))

    try:
        factor = zoom_factor(gesture.delta, sensitivity)
    except OverflowError:
        raise InvalidGestureInput("Wheel delta %s zooms out beyond any usable range" % gesture.delta)

    if factor == 0:
        raise InvalidGestureInput("Wheel delta %s zooms in beyond any usable range" % gesture.delta)

    if gesture.line == OVERVIEW:
        # The pivot is taken from the present overview; the enforcer deals with any selection that ends up outside it
        domain = structure.overview_domain
        pivot = invert(domain, (0, width), gesture.pixel_position)
        return SetOverviewDomain(zoom_about(domain, pivot, factor), gesture.origin)

    # The detail line is zoomed in terms of what it displays, i.e. including the padding
    displayed = structure.detail_display_domain(padding_factor)
    pivot = invert(displayed, (0, width), gesture.pixel_position)
    zoomed = zoom_about(displayed, pivot, factor)
    return SetDetailDomain(unpad(zoomed, padding_factor), gesture.origin)


def interpret_pan(gesture, structure, geometry, padding_factor=PADDING_FACTOR):
    width = _width(geometry, gesture.line)
    _finite(gesture.pixel_delta)

    if gesture.line == OVERVIEW:
        domain = structure.overview_domain
        return SetOverviewDomain(
            shift(domain, -pixel_delta_to_value(domain, width, gesture.pixel_delta)), gesture.origin)

    displayed = structure.detail_display_domain(padding_factor)
    shifted = shift(displayed, -pixel_delta_to_value(displayed, width, gesture.pixel_delta))
    return SetDetailDomain(unpad(shifted, padding_factor), gesture.origin)


def interpret_brush(gesture, structure, geometry, brush_origin=None):
    """
    Turns a brush on the overview into a fresh selection; a cleared (or empty) brush restores what was selected before
    the brush gesture started.
    """
    if brush_origin is None:
        brush_origin = BrushOrigin(structure.selection, structure.detail_domain)

    restore = RestoreSelection(brush_origin.selection, brush_origin.detail_domain, gesture.origin)

    if gesture.pixel_range is None:
        return restore

    width = _width(geometry, OVERVIEW)
    _finite(*gesture.pixel_range)

    domain = structure.overview_domain
    p0, p1 = sorted(gesture.pixel_range)
    selected = Range(invert(domain, (0, width), p0), invert(domain, (0, width), p1))

    try:
        return SetSelection(clamp(selected, domain), gesture.origin)
    except DegenerateRangeError:
        return restore


def interpret_gesture(gesture, structure, geometry, brush_origin=None, padding_factor=PADDING_FACTOR,
                      sensitivity=SENSITIVITY):
    """Returns the LinkedNote for `gesture`, or raises InvalidGestureInput."""

    if isinstance(gesture, Wheel):
        return interpret_wheel(gesture, structure, geometry, padding_factor, sensitivity)

    elif isinstance(gesture, Pan):
        return interpret_pan(gesture, structure, geometry, padding_factor)

    elif isinstance(gesture, Brush):
        return interpret_brush(gesture, structure, geometry, brush_origin)

    raise Exception("Illegal gesture (programming error): %s" % gesture)
