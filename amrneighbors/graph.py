"""The protein graph: proteins joined by edges for every 5-mer they share."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations

from amrneighbors.edge import KmerEdge, merge_edges
from amrneighbors.protein import Protein
from amrneighbors.vertex import ProteinVertex

_log = logging.getLogger(__name__)


def edge_count_prefix_sum(kmer_freq: Iterable[int]) -> list[int]:
    """Return running totals of the edges each k-mer contributes.

    A k-mer held by ``f`` proteins contributes one edge per pair of them,
    ``f * (f - 1) / 2`` in all.
    """
    counts = []
    for freq in kmer_freq:
        if freq < 0:
            raise ValueError(f"k-mer frequency cannot be negative, got {freq}")
        counts.append(freq * (freq - 1) // 2)
    return list(accumulate(counts))


class Graph:
    """Proteins as vertices, with one edge per shared k-mer per protein pair."""

    def __init__(self, kmer_freq: Sequence[int], proteins: Sequence[Protein]) -> None:
        self.kmer_freq = list(kmer_freq)
        self.proteins = list(proteins)

        holders: list[list[int]] = [[] for _ in self.kmer_freq]
        for index, protein in enumerate(self.proteins):
            for key in sorted(set(protein.hash_keys)):
                if not 0 <= key < len(holders):
                    raise ValueError(
                        f"protein {protein.identifier!r} has k-mer key {key}, "
                        f"but only {len(holders)} k-mers are known"
                    )
                holders[key].append(index)

        for key, (freq, owners) in enumerate(zip(self.kmer_freq, holders)):
            if len(owners) != freq:
                raise ValueError(
                    f"k-mer {key} is listed with frequency {freq} "
                    f"but is held by {len(owners)} proteins"
                )

        totals = edge_count_prefix_sum(self.kmer_freq)
        _log.info("Number of 5mers found in at least two proteins: %d", len(holders))
        _log.info("Number of total edges: %d", totals[-1] if totals else 0)

        self.vertices = [ProteinVertex(index) for index in range(len(self.proteins))]
        self.edges: list[KmerEdge] = []
        for key, owners in enumerate(holders):
            for first, second in combinations(owners, 2):
                edge = KmerEdge(key)
                edge.add_vertex(first)
                edge.add_vertex(second)
                edge_key = len(self.edges)
                self.edges.append(edge)
                self.vertices[first].add_edge(edge_key)
                self.vertices[second].add_edge(edge_key)

    def _keep(self, kept: Sequence[int]) -> None:
        key_map = {old: new for new, old in enumerate(kept)}
        self.edges = [self.edges[old] for old in kept]
        for vertex in self.vertices:
            vertex.keep_edges(key_map)
        _log.info("Number of edges now: %d", len(self.edges))

    def remove_uninteresting_edges(self) -> None:
        """Drop every edge whose two proteins share the same AMR class."""
        kept = []
        for key, edge in enumerate(self.edges):
            first, second = edge.vertices
            if self.proteins[first].amr_class() != self.proteins[second].amr_class():
                kept.append(key)
        self._keep(kept)

    def combine_edges(self) -> None:
        """Merge all edges joining the same two vertices into one group edge."""
        kept = []
        replacements: dict[int, KmerEdge] = {}
        for key, edge in enumerate(self.edges):
            first, second = edge.vertices
            first_edges = self.vertices[first].edge_keys
            second_edges = self.vertices[second].edge_keys
            if len(first_edges) == 1 or len(second_edges) == 1:
                kept.append(key)
                continue
            touching_first = set(first_edges)
            partners = sorted(other for other in second_edges if other in touching_first)
            if partners and partners[0] < key:
                continue
            if len(partners) > 1:
                replacements[key] = merge_edges(self.edges[other] for other in partners)
            kept.append(key)
        for key, merged in replacements.items():
            self.edges[key] = merged
        self._keep(kept)

    def protein_pair(self, edge: KmerEdge) -> tuple[Protein, Protein]:
        """Return the two proteins joined by a merged group edge."""
        if not edge.is_group():
            raise ValueError("protein pairs are only available for group edges")
        first, second = edge.vertices
        return self.proteins[first], self.proteins[second]

    def __repr__(self) -> str:
        return f"Graph(edges={self.edges!r}, vertices={self.vertices!r})"