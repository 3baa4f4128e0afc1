import pytest

from amrneighbors.vertex import ProteinVertex


def _vertex(key, *edges):
    vertex = ProteinVertex(key)
    for edge in edges:
        vertex.add_edge(edge)
    return vertex


def test_new_vertex_has_no_edges():
    vertex = ProteinVertex(5)
    assert vertex.key == 5
    assert vertex.edge_keys == []


def test_add_edge_records_keys_in_order():
    vertex = _vertex(0, 7, 2, 9)
    assert vertex.edge_keys == [7, 2, 9]


def test_edge_mask_marks_exactly_the_edges():
    vertex = _vertex(0, 1, 4)
    mask = vertex.edge_mask(6)
    assert len(mask) == 6
    assert [i for i, flag in enumerate(mask) if flag] == [1, 4]


def test_edge_mask_without_edges_is_all_false():
    assert ProteinVertex(3).edge_mask(4) == [False, False, False, False]


def test_edge_mask_rejects_key_beyond_length():
    vertex = _vertex(0, 5)
    with pytest.raises(IndexError):
        vertex.edge_mask(5)


def test_keep_edges_drops_missing_and_renumbers():
    vertex = _vertex(0, 2, 5, 8)
    vertex.keep_edges({5: 0, 8: 1, 9: 2})
    assert vertex.edge_keys == [0, 1]


def test_keep_edges_orders_by_new_key():
    vertex = _vertex(0, 3, 6)
    vertex.keep_edges({6: 0, 3: 1})
    assert vertex.edge_keys == [0, 1]
    assert vertex.edge_mask(2) == [True, True]


def test_keep_edges_with_empty_map_removes_everything():
    vertex = _vertex(0, 1, 2)
    vertex.keep_edges({})
    assert vertex.edge_keys == []


def test_repr_shows_key_and_edge_count():
    assert repr(_vertex(4, 1, 2)) == "ProteinVertex(key=4, edges=2)"