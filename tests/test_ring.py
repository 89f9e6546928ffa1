from earclip.ring import VertexRing


def test_initial_neighbours_wrap_around():
    ring = VertexRing(5)
    assert ring.next(4) == 0
    assert ring.prev(0) == 4
    assert ring.next(2) == 3
    assert ring.prev(2) == 1
    assert len(ring) == 5
    assert list(ring) == [0, 1, 2, 3, 4]


def test_remove_skips_vertex():
    ring = VertexRing(5)
    ring.remove(2)
    assert ring.next(1) == 3
    assert ring.prev(3) == 1
    assert 2 not in ring
    assert 1 in ring
    assert len(ring) == 4
    assert list(ring) == [0, 1, 3, 4]


def test_remove_head_moves_iteration_start():
    ring = VertexRing(4)
    ring.remove(0)
    assert ring.head == 1
    assert list(ring) == [1, 2, 3]
    assert ring.prev(1) == 3
    assert ring.next(3) == 1


def test_shrinks_to_single_cycle():
    ring = VertexRing(6)
    for i in (1, 3, 5):
        ring.remove(i)
    assert list(ring) == [0, 2, 4]
    assert [ring.next(i) for i in (0, 2, 4)] == [2, 4, 0]
    assert [ring.prev(i) for i in (0, 2, 4)] == [4, 0, 2]


def test_remove_everything():
    ring = VertexRing(3)
    for i in range(3):
        ring.remove(i)
    assert len(ring) == 0
    assert ring.head is None
    assert list(ring) == []


def test_membership_out_of_range():
    ring = VertexRing(3)
    assert 3 not in ring
    assert -1 not in ring
