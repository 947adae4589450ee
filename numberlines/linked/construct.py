from numberlines.linked.clef import (
    Replay,
    Reset,
    RestoreSelection,
    SetDetailDomain,
    SetOverviewDomain,
    SetSelection,
)
from numberlines.linked.structure import LinkedStructure
from numberlines.ranges import DegenerateRangeError, clamp, hull, ordered


def enforce(structure):
    """
    Restores the containment constraints between overview, selection and detail domain. Applying it to its own output
    changes nothing.

    >>> from numberlines.ranges import Range

    The overview may never be narrower than the selection:
    >>> enforce(LinkedStructure(Range(-5.0, 5.0), Range(-10, 10)))
    LinkedStructure(Range(lo=-10, hi=10), Range(lo=-10, hi=10), None)

    The detail domain is kept inside the overview, and the selection follows it:
    >>> enforce(LinkedStructure(Range(0, 10), Range(2, 3), Range(5, 12)))
    LinkedStructure(Range(lo=0, hi=10), Range(lo=5, hi=10), Range(lo=5, hi=10))

    If nothing of the detail domain remains inside the overview, the detail line is zoomed out to the full overview:
    >>> enforce(LinkedStructure(Range(0, 10), Range(2, 3), Range(11, 12)))
    LinkedStructure(Range(lo=0, hi=10), Range(lo=0, hi=10), Range(lo=0, hi=10))

    A selection without width is replaced by the full overview:
    >>> enforce(LinkedStructure(Range(0, 10), Range(3, 3)))
    LinkedStructure(Range(lo=0, hi=10), Range(lo=0, hi=10), None)
    """
    overview_domain = hull(ordered(structure.overview_domain), ordered(structure.selection))
    selection = ordered(structure.selection)
    if not selection.lo < selection.hi:
        selection = overview_domain

    detail_domain = structure.detail_domain

    if detail_domain is not None:
        try:
            detail_domain = clamp(ordered(detail_domain), overview_domain)
        except DegenerateRangeError:
            detail_domain = overview_domain

        # The brush on the overview shows what the detail line shows
        selection = detail_domain

    return LinkedStructure(overview_domain, selection, detail_domain)


def play_linked_note(note, structure):
    """Plays a single note; the result is not enforced yet (see `enforce`)."""

    if isinstance(note, SetOverviewDomain):
        return LinkedStructure(note.domain, structure.selection, structure.detail_domain)

    elif isinstance(note, SetSelection):
        # A fresh selection discards any independent zoom of the detail line
        return LinkedStructure(structure.overview_domain, note.selection, None)

    elif isinstance(note, RestoreSelection):
        return LinkedStructure(structure.overview_domain, note.selection, note.detail_domain)

    elif isinstance(note, SetDetailDomain):
        # The selection is left stale here; enforcement brings it in line with the detail domain
        return LinkedStructure(structure.overview_domain, structure.selection, note.domain)

    elif isinstance(note, Reset):
        return note.structure

    elif isinstance(note, Replay):
        return structure

    raise Exception("Illegal note (programming error): %s" % note)
