"""
The linked state of the numberlines: the overview domain, the selection on it, and the (optional) independent zoom of
the detail line.

Three sources of truth compete here. The overview is zoomed by the user, the selection is drawn by the user, and the
detail line may be zoomed independently by the user too. The rule is that none of these may contradict each other once
a change has been fully applied:

* The overview always contains the selection; if a zoom of the overview would cut off part of the selection, the
  overview is widened again.

* The detail domain (if any) is always inside the overview; and when there is a detail domain, the selection follows
  it, such that the brush on the overview shows what the detail line shows.

* A fresh selection on the overview discards any independent zoom of the detail line.

The first two rules are enforced after each change (`construct.enforce`); the third is part of playing a selection
note.
"""
