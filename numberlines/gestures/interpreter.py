import logging

from numberlines.constants import BRUSH_CONTINUOUS, PADDING_FACTOR, SENSITIVITY
from numberlines.gestures.clef import END, MOVE, START, Brush, Resize, ResetRequest
from numberlines.gestures.construct import InvalidGestureInput, interpret_gesture
from numberlines.gestures.structure import BrushOrigin, LinesGeometry
from numberlines.linked.clef import PROGRAMMATIC, USER
from numberlines.utils import all_finite

logger = logging.getLogger(__name__)


class GestureInterpreter(object):
    """
    Receives gestures (e.g. over a Channel that the widgets send on) and plays the resulting notes on the store.

    Gestures that the user did not cause are ignored: they are echoes of changes that were already made, and acting on
    them would lead to an endless back-and-forth between the store and its receivers.
    """

    def __init__(self, store, geometry=None, brush_continuous=BRUSH_CONTINUOUS, padding_factor=PADDING_FACTOR,
                 sensitivity=SENSITIVITY):
        self.store = store
        self.geometry = geometry if geometry is not None else LinesGeometry(0, 0)
        self.brush_continuous = brush_continuous
        self.padding_factor = padding_factor
        self.sensitivity = sensitivity

        self.brush_origin = None

        self.structure = store.snapshot().structure
        store.connect(self.receive_snapshot)

    def receive_snapshot(self, snapshot):
        self.structure = snapshot.structure

    def receive(self, gesture):
        if isinstance(gesture, Resize):
            self._resize(gesture)
            return

        if gesture.origin != USER:
            logger.debug("Ignored %s: not caused by the user", gesture)
            return

        if isinstance(gesture, ResetRequest):
            self.brush_origin = None
            self.store.reset(gesture.origin)
            return

        if isinstance(gesture, Brush):
            if gesture.phase == START:
                self.brush_origin = BrushOrigin(self.structure.selection, self.structure.detail_domain)
                return

            if gesture.phase == MOVE and not self.brush_continuous:
                return

        try:
            note = interpret_gesture(
                gesture, self.structure, self.geometry, self.brush_origin, self.padding_factor, self.sensitivity)
        except InvalidGestureInput as e:
            logger.debug("Dropped %s: %s", gesture, e)
            return
        finally:
            if isinstance(gesture, Brush) and gesture.phase == END:
                self.brush_origin = None

        logger.debug("%s -> %s", gesture, note)
        self.store.play(note)

    def _resize(self, gesture):
        if not all_finite(gesture.width) or gesture.width < 0:
            logger.debug("Dropped %s: not a usable width", gesture)
            return

        self.geometry = self.geometry.with_width(gesture.line, gesture.width)

        # The values are unchanged, but their pixel positions are not; have everybody redraw.
        self.store.replay(PROGRAMMATIC)
