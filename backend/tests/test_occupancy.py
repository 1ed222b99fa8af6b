from timetable_merge.services.occupancy import OccupancyIndex, SlotOccupancy


def test_unseen_slot_is_available():
    index = OccupancyIndex()
    assert index.is_available("Mon-P1", "Alice", "R1", "G1")
    assert "Mon-P1" not in index
    assert len(index) == 0


def test_each_resource_dimension_blocks_independently():
    index = OccupancyIndex()
    index.commit("Mon-P1", "Alice", "R1", "G1")

    assert not index.is_available("Mon-P1", "Alice", "", "")
    assert not index.is_available("Mon-P1", "", "R1", "")
    assert not index.is_available("Mon-P1", "", "", "G1")
    assert index.is_available("Mon-P1", "Bob", "R2", "G2")
    assert index.is_available("Mon-P2", "Alice", "R1", "G1")


def test_identities_are_trimmed_and_empty_ones_ignored():
    index = OccupancyIndex()
    index.commit("Tue-P3", "  Alice ", "", None)

    assert not index.is_available("Tue-P3", "Alice", None, None)
    assert index.is_available("Tue-P3", "", "   ", None)
    assert index.occupancy("Tue-P3") == SlotOccupancy(teachers=frozenset({"Alice"}))


def test_commit_is_idempotent_and_creates_entries_lazily():
    index = OccupancyIndex()
    index.commit("Wed-P2", "Alice", "R1", "G1")
    index.commit("Wed-P2", "Alice", "R1", "G1")
    index.commit("Wed-P2", "Bob", "", "")

    occupancy = index.occupancy("Wed-P2")
    assert occupancy.teachers == frozenset({"Alice", "Bob"})
    assert occupancy.rooms == frozenset({"R1"})
    assert occupancy.groups == frozenset({"G1"})
    assert len(index) == 1


def test_occupancy_snapshot_is_detached_from_index():
    index = OccupancyIndex()
    index.commit("Thu-P1", "Alice", "", "")
    snapshot = index.occupancy("Thu-P1")
    index.commit("Thu-P1", "Bob", "", "")

    assert snapshot.teachers == frozenset({"Alice"})
    assert index.occupancy("Fri-P6") == SlotOccupancy()
