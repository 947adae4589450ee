from numberlines.gestures.clef import DETAIL, OVERVIEW


class LinesGeometry(object):
    def __init__(self, overview_width, detail_width):
        """The widths, in pixels, of the drawable part (i.e. without margins) of both lines."""
        self.overview_width = overview_width
        self.detail_width = detail_width

    def __repr__(self):
        return "LinesGeometry(%s, %s)" % (self.overview_width, self.detail_width)

    def width_for(self, line):
        if line == OVERVIEW:
            return self.overview_width
        if line == DETAIL:
            return self.detail_width
        raise Exception("Unknown line (programming error): %s" % line)

    def with_width(self, line, width):
        if line == OVERVIEW:
            return LinesGeometry(width, self.detail_width)
        if line == DETAIL:
            return LinesGeometry(self.overview_width, width)
        raise Exception("Unknown line (programming error): %s" % line)


class BrushOrigin(object):
    def __init__(self, selection, detail_domain):
        """What was selected (and how the detail line was zoomed) when a brush gesture started; restored if the
        gesture is cancelled."""
        self.selection = selection
        self.detail_domain = detail_domain

    def __repr__(self):
        return "BrushOrigin(%s, %s)" % (self.selection, self.detail_domain)
