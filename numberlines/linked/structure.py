from collections import namedtuple

from numberlines.ranges import Range, pad
from numberlines.utils import all_finite, pmts, pmts_or_none


class LinkedStructure(namedtuple('LinkedStructure', ('overview_domain', 'selection', 'detail_domain'))):
    """
    `overview_domain`: the range shown on the overview line.
    `selection`: the range marked (brushed) on the overview line; what the detail line shows by default.
    `detail_domain`: an independent zoom of the detail line, or None if the detail line simply follows the selection.

    LinkedStructures cannot be changed once constructed; changes are expressed by constructing new ones.
    """
    __slots__ = ()

    def __new__(cls, overview_domain, selection, detail_domain=None):
        pmts(overview_domain, Range)
        pmts(selection, Range)
        pmts_or_none(detail_domain, Range)
        return super(LinkedStructure, cls).__new__(cls, overview_domain, selection, detail_domain)

    def __repr__(self):
        return "LinkedStructure(%s, %s, %s)" % (self.overview_domain, self.selection, self.detail_domain)

    def detail_source(self):
        """The core range of the detail line: the independent zoom if there is one, the selection otherwise."""
        if self.detail_domain is not None:
            return self.detail_domain
        return self.selection

    def detail_display_domain(self, padding_factor):
        return pad(self.detail_source(), padding_factor)

    def is_finite(self):
        ranges = [self.overview_domain, self.selection] + ([] if self.detail_domain is None else [self.detail_domain])
        return all(all_finite(*r) for r in ranges)


# What the store hands out to its consumers after each change: the new (enforced) structure, and the origin of the
# change that led to it.
Snapshot = namedtuple('Snapshot', ('structure', 'origin'))
