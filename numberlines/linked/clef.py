from numberlines.ranges import Range
from numberlines.utils import pmts, pmts_or_none

# Origins; the difference matters for whoever receives the resulting change: changes with a USER origin are the direct
# consequence of input; PROGRAMMATIC changes are replays of state we already had (e.g. after a resize) or otherwise not
# caused by the user, and must not be treated as new input.
USER = 0
PROGRAMMATIC = 1

ORIGINS = (USER, PROGRAMMATIC)


class LinkedNote(object):
    def __init__(self, origin=USER):
        assert origin in ORIGINS, "Unknown origin %s" % origin
        self.origin = origin


class SetOverviewDomain(LinkedNote):
    def __init__(self, domain, origin=USER):
        super(SetOverviewDomain, self).__init__(origin)
        pmts(domain, Range)
        self.domain = domain

    def __repr__(self):
        return "SetOverviewDomain(%s)" % (self.domain,)


class SetSelection(LinkedNote):
    """A fresh selection on the overview; discards any independent zoom of the detail line."""

    def __init__(self, selection, origin=USER):
        super(SetSelection, self).__init__(origin)
        pmts(selection, Range)
        self.selection = selection

    def __repr__(self):
        return "SetSelection(%s)" % (self.selection,)


class RestoreSelection(LinkedNote):
    def __init__(self, selection, detail_domain, origin=USER):
        """Brings back a selection (and the detail zoom that went with it) from before a brush gesture; used when such
        a gesture is cancelled."""
        super(RestoreSelection, self).__init__(origin)
        pmts(selection, Range)
        pmts_or_none(detail_domain, Range)
        self.selection = selection
        self.detail_domain = detail_domain

    def __repr__(self):
        return "RestoreSelection(%s, %s)" % (self.selection, self.detail_domain)


class SetDetailDomain(LinkedNote):
    def __init__(self, domain, origin=USER):
        super(SetDetailDomain, self).__init__(origin)
        pmts(domain, Range)
        self.domain = domain

    def __repr__(self):
        return "SetDetailDomain(%s)" % (self.domain,)


class Reset(LinkedNote):
    def __init__(self, structure, origin=USER):
        super(Reset, self).__init__(origin)
        self.structure = structure

    def __repr__(self):
        return "Reset(%s)" % (self.structure,)


class Replay(LinkedNote):
    """No change in value-space; used to have the present state broadcast again."""

    def __init__(self, origin=PROGRAMMATIC):
        super(Replay, self).__init__(origin)

    def __repr__(self):
        return "Replay()"
