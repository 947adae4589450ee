"""
Gestures are raw input on one of the numberlines, expressed in pixels: a wheel turned over a line, a drag along it, a
brush drawn on the overview. Interpreting a gesture means translating it into a note on the linked state
(`numberlines.linked.clef`), in value-space, using the present state and the pixel geometry of the lines.

The pixel geometry is not part of the linked state: resizing a line changes how pixels map to values, but never the
values themselves.
"""
