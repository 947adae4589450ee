"""
The `numberlines` package keeps a set of linked numberlines consistent: an overview line, a selection (brush) on that
overview, and a detail line that shows the selection, or an independent zoom of it.

The main design challenge is that there are several competing sources of truth. The user may zoom the overview such
that it no longer contains the selection; the user may zoom the detail line beyond what the overview shows; the user
may draw a new selection while the detail line is independently zoomed. The approach is the following:

* All state lives in a single store (`linked.store`); nothing else writes to it.
* Every change to that state is expressed as a note (`linked.clef`), played on the present structure by a pure function
  (`linked.construct`); after each such play the containment constraints are enforced before anyone gets to see the
  result.
* Raw input (wheel, drag, brush, resize) is expressed in pixels; gesture interpretation (`gestures`) is the translation
  from pixels to notes in value-space. Each gesture carries its origin, such that changes we caused ourselves (e.g. by
  replaying the state after a resize) are not mistaken for user input.
"""
