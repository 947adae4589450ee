import unittest

from numberlines.linked.clef import (
    PROGRAMMATIC,
    USER,
    RestoreSelection,
    SetDetailDomain,
    SetOverviewDomain,
    SetSelection,
)
from numberlines.linked.construct import enforce, play_linked_note
from numberlines.linked.store import LinkedStore, initial_structure
from numberlines.linked.structure import LinkedStructure
from numberlines.ranges import Range, contains, is_valid, zoom_about

STRUCTURES = [
    LinkedStructure(Range(-100, 100), Range(-10, 10)),
    LinkedStructure(Range(-5, 5), Range(-10, 10)),
    LinkedStructure(Range(0, 10), Range(2, 3), Range(11, 12)),
    LinkedStructure(Range(0, 10), Range(2, 3), Range(-5, 5)),
    LinkedStructure(Range(0, 10), Range(20, 30), Range(25, 26)),
    LinkedStructure(Range(10, 0), Range(3, 2)),
    LinkedStructure(Range(0, 10), Range(2, 3), Range(8, 1)),
    LinkedStructure(Range(0, 0), Range(1, 1), Range(1, 1)),
    LinkedStructure(Range(0, 10), Range(3, 3)),
    LinkedStructure(Range(-1e-9, 1e-9), Range(0.5, 1.5), Range(1.5, 1.5)),
]


class Recorder(object):
    def __init__(self, store):
        self.snapshots = []
        store.connect(self.receive)

    def receive(self, data):
        self.snapshots.append(data)


class EnforceTestCase(unittest.TestCase):

    def test_idempotence(self):
        for s in STRUCTURES:
            with self.subTest(s=s):
                once = enforce(s)
                self.assertEqual(once, enforce(once))

    def test_containment(self):
        for s in STRUCTURES:
            with self.subTest(s=s):
                enforced = enforce(s)
                self.assertTrue(contains(enforced.overview_domain, enforced.selection))
                if enforced.detail_domain is not None:
                    self.assertTrue(contains(enforced.overview_domain, enforced.detail_domain))
                    self.assertEqual(enforced.detail_domain, enforced.selection)

    def test_degenerate_clamp_falls_back_to_overview(self):
        enforced = enforce(LinkedStructure(Range(0, 10), Range(2, 3), Range(11, 12)))
        self.assertEqual(Range(0, 10), enforced.overview_domain)
        self.assertEqual(Range(0, 10), enforced.detail_domain)
        self.assertEqual(Range(0, 10), enforced.selection)

    def test_degenerate_selection_falls_back_to_overview(self):
        enforced = enforce(LinkedStructure(Range(0, 10), Range(3, 3)))
        self.assertEqual(Range(0, 10), enforced.overview_domain)
        self.assertEqual(Range(0, 10), enforced.selection)
        self.assertIsNone(enforced.detail_domain)

    def test_structures_are_immutable(self):
        structure = initial_structure()
        with self.assertRaises(AttributeError):
            structure.selection = Range(0, 1)
        self.assertEqual(Range(-10, 10), structure.selection)

    def test_overview_zoom_is_widened_to_contain_selection(self):
        structure = initial_structure()
        self.assertEqual(Range(-100, 100), structure.overview_domain)
        self.assertEqual(Range(-10, 10), structure.selection)

        zoomed = play_linked_note(SetOverviewDomain(zoom_about(structure.overview_domain, 0, 0.05)), structure)

        # before enforcement, the overview is narrower than the selection
        self.assertAlmostEqual(-5, zoomed.overview_domain.lo)
        self.assertAlmostEqual(5, zoomed.overview_domain.hi)

        self.assertEqual(Range(-10, 10), enforce(zoomed).overview_domain)

    def test_overview_zoom_that_keeps_the_selection(self):
        structure = initial_structure()
        zoomed = enforce(play_linked_note(SetOverviewDomain(zoom_about(structure.overview_domain, 0, 0.5)), structure))
        self.assertEqual(Range(-50, 50), zoomed.overview_domain)
        self.assertEqual(Range(-10, 10), zoomed.selection)


class PlayTestCase(unittest.TestCase):

    def test_selection_clears_detail_domain(self):
        structure = LinkedStructure(Range(-100, 100), Range(0.5, 1.5), Range(0.5, 1.5))
        played = play_linked_note(SetSelection(Range(-20, 20)), structure)
        self.assertIsNone(played.detail_domain)
        self.assertEqual(Range(-20, 20), played.selection)

    def test_detail_domain_leaves_selection_stale_until_enforced(self):
        structure = LinkedStructure(Range(-100, 100), Range(0, 2))
        played = play_linked_note(SetDetailDomain(Range(0.2, 0.8)), structure)
        self.assertEqual(Range(0, 2), played.selection)
        self.assertEqual(Range(0.2, 0.8), enforce(played).selection)

    def test_restore_selection(self):
        structure = LinkedStructure(Range(-100, 100), Range(-20, 20))
        played = play_linked_note(RestoreSelection(Range(0, 2), Range(0.5, 1)), structure)
        self.assertEqual(Range(0, 2), played.selection)
        self.assertEqual(Range(0.5, 1), played.detail_domain)

    def test_illegal_note(self):
        with self.assertRaises(Exception):
            play_linked_note("not a note", initial_structure())


class StoreTestCase(unittest.TestCase):

    def test_degenerate_selection_never_reaches_receivers(self):
        store = LinkedStore()
        recorder = Recorder(store)

        store.play(SetSelection(Range(3, 3)))

        self.assertEqual(1, len(recorder.snapshots))
        selection = recorder.snapshots[0].structure.selection
        self.assertTrue(selection.lo < selection.hi)
        self.assertEqual(Range(-100, 100), selection)

    def test_initial_state_is_enforced(self):
        store = LinkedStore(LinkedStructure(Range(-5, 5), Range(-10, 10)))
        self.assertEqual(Range(-10, 10), store.structure.overview_domain)

    def test_detail_zoom_resyncs_selection(self):
        store = LinkedStore(LinkedStructure(Range(-100, 100), Range(0, 2)))
        recorder = Recorder(store)

        store.play(SetDetailDomain(Range(0.2, 0.8)))

        self.assertEqual(1, len(recorder.snapshots))
        snapshot = recorder.snapshots[0]
        self.assertEqual(Range(0.2, 0.8), snapshot.structure.selection)
        self.assertEqual(Range(0.2, 0.8), snapshot.structure.detail_domain)
        self.assertEqual(USER, snapshot.origin)

    def test_receivers_only_see_enforced_state(self):
        store = LinkedStore()
        recorder = Recorder(store)

        store.play(SetOverviewDomain(Range(-1, 1)))
        store.play(SetDetailDomain(Range(50, 60)))
        store.mutate(lambda s: LinkedStructure(Range(3, -3), s.selection, Range(0, 1)))

        for snapshot in recorder.snapshots:
            self.assertEqual(enforce(snapshot.structure), snapshot.structure)
            self.assertTrue(is_valid(snapshot.structure.overview_domain))

    def test_non_finite_mutations_are_dropped(self):
        store = LinkedStore()
        recorder = Recorder(store)
        before = store.structure

        store.play(SetOverviewDomain(Range(float('nan'), 1)))
        store.play(SetDetailDomain(Range(0, float('inf'))))
        store.mutate(lambda s: None)

        self.assertEqual([], recorder.snapshots)
        self.assertEqual(before, store.structure)

    def test_reset_is_a_single_broadcast(self):
        store = LinkedStore()
        store.play(SetOverviewDomain(Range(-1000, 1000)))
        store.play(SetDetailDomain(Range(1, 2)))

        recorder = Recorder(store)
        store.reset()

        self.assertEqual(1, len(recorder.snapshots))
        self.assertEqual(initial_structure(), recorder.snapshots[0].structure)

    def test_replay(self):
        store = LinkedStore()
        recorder = Recorder(store)

        store.replay()

        self.assertEqual(1, len(recorder.snapshots))
        self.assertEqual(PROGRAMMATIC, recorder.snapshots[0].origin)
        self.assertEqual(store.structure, recorder.snapshots[0].structure)

    def test_disconnected_receivers_hear_nothing(self):
        store = LinkedStore()
        recorder = Recorder(store)
        store.disconnect(recorder.receive)

        store.play(SetOverviewDomain(Range(-50, 50)))

        self.assertEqual([], recorder.snapshots)

    def test_mutations_while_broadcasting_are_queued(self):
        store = LinkedStore()
        seen = []

        def meddler(snapshot):
            seen.append(('meddler', snapshot.structure.overview_domain))
            if snapshot.origin == USER:
                store.play(SetOverviewDomain(Range(-200, 200), origin=PROGRAMMATIC))

        def observer(snapshot):
            seen.append(('observer', snapshot.structure.overview_domain))

        store.connect(meddler)
        store.connect(observer)

        store.play(SetOverviewDomain(Range(-50, 50)))

        self.assertEqual([
            ('meddler', Range(-50, 50)),
            ('observer', Range(-50, 50)),
            ('meddler', Range(-200, 200)),
            ('observer', Range(-200, 200)),
        ], seen)


if __name__ == '__main__':
    unittest.main()
