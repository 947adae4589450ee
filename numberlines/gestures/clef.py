from numberlines.linked.clef import ORIGINS, PROGRAMMATIC, USER
from numberlines.utils import pmts

OVERVIEW = 'overview'
DETAIL = 'detail'

LINES = (OVERVIEW, DETAIL)

# Brush phases
START = 0
MOVE = 1
END = 2


class Gesture(object):
    def __init__(self, origin):
        assert origin in ORIGINS, "Unknown origin %s" % origin
        self.origin = origin


class Wheel(Gesture):
    def __init__(self, line, pixel_position, delta, origin=USER):
        """`delta` follows the DOM's convention: positive when the wheel is rolled towards the user."""
        super(Wheel, self).__init__(origin)
        assert line in LINES
        self.line = line
        self.pixel_position = pixel_position
        self.delta = delta

    def __repr__(self):
        return "Wheel(%s, %s, %s)" % (self.line, self.pixel_position, self.delta)


class Pan(Gesture):
    def __init__(self, line, pixel_delta, origin=USER):
        """`pixel_delta` is positive when dragging to the right; the content follows the pointer."""
        super(Pan, self).__init__(origin)
        assert line in LINES
        self.line = line
        self.pixel_delta = pixel_delta

    def __repr__(self):
        return "Pan(%s, %s)" % (self.line, self.pixel_delta)


class Brush(Gesture):
    def __init__(self, phase, pixel_range=None, origin=USER):
        """Brushing only happens on the overview. A `pixel_range` of None means the brush was cleared (e.g. a click
        without dragging), which cancels the gesture."""
        super(Brush, self).__init__(origin)
        assert phase in (START, MOVE, END)
        if pixel_range is not None:
            pmts(pixel_range, tuple)
        self.phase = phase
        self.pixel_range = pixel_range

    def __repr__(self):
        return "Brush(%s, %s)" % (["START", "MOVE", "END"][self.phase], self.pixel_range)


class Resize(Gesture):
    def __init__(self, line, width, origin=PROGRAMMATIC):
        super(Resize, self).__init__(origin)
        assert line in LINES
        self.line = line
        self.width = width

    def __repr__(self):
        return "Resize(%s, %s)" % (self.line, self.width)


class ResetRequest(Gesture):
    def __init__(self, origin=USER):
        super(ResetRequest, self).__init__(origin)

    def __repr__(self):
        return "ResetRequest()"
