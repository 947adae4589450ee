import logging
from collections import deque
from functools import partial

from numberlines.channel import Channel
from numberlines.constants import INITIAL_OVERVIEW_DOMAIN, INITIAL_SELECTION
from numberlines.linked.clef import PROGRAMMATIC, USER, Replay, Reset
from numberlines.linked.construct import enforce, play_linked_note
from numberlines.linked.structure import LinkedStructure, Snapshot
from numberlines.ranges import Range

logger = logging.getLogger(__name__)


def initial_structure():
    return LinkedStructure(Range(*INITIAL_OVERVIEW_DOMAIN), Range(*INITIAL_SELECTION), None)


class LinkedStore(object):
    """
    The single owner of the linked state. All changes go through `mutate`, which applies the change, enforces the
    containment constraints, and only then tells the connected receivers about the new state.

    Receivers are called synchronously; if a receiver requests a change of its own while being told about one, that
    change is applied only after all receivers have been told about the present one.
    """

    def __init__(self, initial=None):
        self.initial = enforce(initial if initial is not None else initial_structure())
        self.structure = self.initial
        self.channel = Channel()

        self._pending = deque()
        self._mutating = False

    def connect(self, receiver):
        # receiver :: function that takes a Snapshot
        self.channel.connect(receiver)

    def disconnect(self, receiver):
        self.channel.disconnect(receiver)

    def snapshot(self, origin=PROGRAMMATIC):
        return Snapshot(self.structure, origin)

    def mutate(self, fn, origin=USER):
        """`fn` takes the present LinkedStructure and returns a new one; returning None means: no change."""
        self._pending.append((fn, origin))
        if self._mutating:
            return

        self._mutating = True
        try:
            while self._pending:
                self._apply(*self._pending.popleft())
        finally:
            self._pending.clear()
            self._mutating = False

    def _apply(self, fn, origin):
        proposed = fn(self.structure)

        if proposed is None:
            return

        if not proposed.is_finite():
            logger.debug("Dropped mutation with non-finite result: %s", proposed)
            return

        self.structure = enforce(proposed)
        logger.debug("Linked state (origin %s): %s", origin, self.structure)

        self.channel.broadcast(Snapshot(self.structure, origin))

    def play(self, note):
        self.mutate(partial(play_linked_note, note), note.origin)

    def reset(self, origin=USER):
        # A single mutation for all three ranges; receivers never see a partially reset state.
        self.play(Reset(self.initial, origin))

    def replay(self, origin=PROGRAMMATIC):
        self.play(Replay(origin))
