"""Counting shared 5-mers across proteins and indexing the repeated ones."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from amrneighbors.protein import Protein


class KmerIndex:
    """A dense, collision-free mapping of a fixed set of k-mers to 0..n-1."""

    def __init__(self, kmers: Iterable[int]) -> None:
        self._keys = {kmer: key for key, kmer in enumerate(sorted(set(kmers)))}

    def hash(self, kmer: int) -> int:
        """Return the dense key of ``kmer``; raise KeyError if it is not indexed."""
        return self._keys[kmer]

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, kmer: object) -> bool:
        return kmer in self._keys


def count_kmer_presence(proteins: Iterable[Protein]) -> dict[int, int]:
    """Map each 5-mer to the number of proteins containing it, ordered by 5-mer."""
    counts: Counter[int] = Counter()
    for protein in proteins:
        counts.update(set(protein.five_mers))
    return dict(sorted(counts.items()))


def prepare_proteins(proteins: Sequence[Protein]) -> tuple[list[int], KmerIndex]:
    """Strip 5-mers seen in only one protein and key the rest.

    Every protein's 5-mers are reduced to those shared with another protein
    and its hash keys are set.  Returns the number of proteins holding each
    key, indexed by key, together with the index of shared 5-mers.
    """
    presence = count_kmer_presence(proteins)
    unique = {kmer for kmer, count in presence.items() if count == 1}
    index = KmerIndex(kmer for kmer, count in presence.items() if count > 1)

    kmer_freq = [0] * len(index)
    for protein in proteins:
        protein.remove_unique_five_mers(unique)
        protein.assign_hash_keys(index)
        for key in protein.hash_keys:
            kmer_freq[key] += 1
    return kmer_freq, index