"""Edges of the protein graph: pairs of proteins linked by shared 5-mers."""

from __future__ import annotations

from collections.abc import Iterable


class EdgeError(Exception):
    """Raised when an edge is given more vertices than it can hold."""


class KmerEdge:
    """An edge joining two protein vertices through one or more shared k-mers.

    A fresh edge carries a single k-mer key and receives its two vertices one
    at a time.  Edges joining the same two vertices can be merged into a
    group edge that carries all of their k-mers.
    """

    __slots__ = ("kmers", "_vertices", "_group")

    def __init__(self, kmer: int) -> None:
        self.kmers: list[int] = [kmer]
        self._vertices: list[int] = []
        self._group = False

    @property
    def vertices(self) -> tuple[int, ...]:
        """The keys of the vertices added so far, in the order they were added."""
        return tuple(self._vertices)

    def add_vertex(self, vertex_key: int) -> None:
        """Attach a vertex to this edge; an edge holds at most two."""
        if self._group:
            raise EdgeError("cannot add a vertex to a group edge")
        if len(self._vertices) >= 2:
            raise EdgeError(
                f"edge for k-mer {self.kmers[0]} already joins vertices "
                f"{self._vertices[0]} and {self._vertices[1]}"
            )
        self._vertices.append(vertex_key)

    def is_group(self) -> bool:
        """Return True if this edge was produced by merging other edges."""
        return self._group

    def __repr__(self) -> str:
        if self._group:
            return f"KmerEdgeGroup(kmers={self.kmers!r}, vertices={self.vertices!r})"
        return f"KmerEdge(kmer={self.kmers[0]!r}, vertices={self.vertices!r})"


def merge_edges(edges: Iterable[KmerEdge]) -> KmerEdge:
    """Combine edges into one group edge.

    The group carries the k-mers of every edge, in order, and the vertices
    of the first edge.
    """
    edges = list(edges)
    if not edges:
        raise ValueError("cannot merge an empty collection of edges")
    first = edges[0]
    merged = KmerEdge(first.kmers[0])
    merged.kmers = [kmer for edge in edges for kmer in edge.kmers]
    merged._vertices = list(first._vertices)
    merged._group = True
    return merged