"""Vertices of the protein graph: one per protein, with its edge keys."""

from __future__ import annotations

from collections.abc import Mapping


class ProteinVertex:
    """A protein in the graph together with the keys of the edges touching it."""

    __slots__ = ("key", "edge_keys")

    def __init__(self, key: int) -> None:
        self.key = key
        self.edge_keys: list[int] = []

    def add_edge(self, edge_key: int) -> None:
        """Record that the edge with ``edge_key`` touches this vertex."""
        self.edge_keys.append(edge_key)

    def keep_edges(self, key_map: Mapping[int, int]) -> None:
        """Keep only edges named in ``key_map`` and renumber them.

        ``key_map`` maps an edge's current key to its new key.  The kept keys
        are stored once each, in ascending order of their new keys.
        """
        self.edge_keys = sorted({key_map[key] for key in self.edge_keys if key in key_map})

    def edge_mask(self, length: int) -> list[bool]:
        """Return a list of ``length`` flags, True where an edge touches this vertex."""
        mask = [False] * length
        for key in self.edge_keys:
            if not 0 <= key < length:
                raise IndexError(f"edge key {key} is outside a mask of length {length}")
            mask[key] = True
        return mask

    def __repr__(self) -> str:
        return f"ProteinVertex(key={self.key!r}, edges={len(self.edge_keys)})"