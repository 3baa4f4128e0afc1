"""Protein records and their 5-mers encoded as base-21 integers."""

from __future__ import annotations

import os
import random
from collections.abc import Collection, Iterator
from dataclasses import dataclass, field
from typing import Protocol

AMINO_ACIDS = "CSTAGPDEQNHRKMILVWYF*"
_BASE = len(AMINO_ACIDS)
_K = 5
_LIMIT = _BASE**_K


class _Index(Protocol):
    def hash(self, kmer: int) -> int: ...


def amino_acid_index(residue: str) -> int:
    """Return the code of a residue; anything unrecognised maps to '*'."""
    position = AMINO_ACIDS.find(residue) if len(residue) == 1 else -1
    return position if position >= 0 else _BASE - 1


def encode_five_mer(residues: str) -> int:
    """Encode five residues as one integer, first residue most significant."""
    if len(residues) != _K:
        raise ValueError(f"a 5-mer needs exactly 5 residues, got {len(residues)}")
    value = 0
    for residue in residues:
        value = value * _BASE + amino_acid_index(residue)
    return value


def decode_five_mer(five_mer: int) -> str:
    """Turn an encoded 5-mer back into its residue letters."""
    if not 0 <= five_mer < _LIMIT:
        raise ValueError(f"{five_mer} is not an encoded 5-mer")
    letters = []
    for _ in range(_K):
        five_mer, digit = divmod(five_mer, _BASE)
        letters.append(AMINO_ACIDS[digit])
    return "".join(reversed(letters))


def _window_count(sequence: str) -> int:
    if len(sequence) < _K:
        raise ValueError(f"sequence of length {len(sequence)} has no 5-mers")
    return len(sequence) - _K + 1


def _all_five_mers(sequence: str) -> list[int]:
    return [
        encode_five_mer(sequence[start : start + _K])
        for start in range(_window_count(sequence))
    ]


def sample_five_mers(sequence: str, rng: random.Random) -> list[int]:
    """Encode a random tenth of the 5-mer windows of ``sequence``."""
    windows = _window_count(sequence)
    starts = rng.sample(range(windows), windows // 10)
    return [encode_five_mer(sequence[start : start + _K]) for start in starts]


@dataclass
class Protein:
    """A protein with its 5-mers and the dense keys of its shared 5-mers."""

    identifier: str
    sequence: str
    five_mers: list[int] = field(init=False)
    hash_keys: list[int] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        self.five_mers = _all_five_mers(self.sequence)

    def __repr__(self) -> str:
        decoded = [decode_five_mer(kmer) for kmer in self.five_mers]
        return f"Protein(id={self.identifier!r}, five_mers={decoded!r})"

    def amr_class(self) -> str:
        """Return the fourth '|'-separated field of the identifier."""
        parts = self.identifier.split("|")
        if parts[-1] == "":
            parts.pop()
        if len(parts) < 4:
            raise ValueError(f"identifier {self.identifier!r} has no AMR class field")
        return parts[3]

    def remove_unique_five_mers(self, unique: Collection[int]) -> None:
        """Drop every 5-mer that is found in ``unique``."""
        self.five_mers = [kmer for kmer in self.five_mers if kmer not in unique]

    def assign_hash_keys(self, index: _Index) -> None:
        """Record the distinct keys of this protein's 5-mers, in first-seen order."""
        seen: dict[int, None] = {}
        for kmer in self.five_mers:
            seen.setdefault(index.hash(kmer))
        self.hash_keys = list(seen)


def _parse_records(lines: Iterator[str]) -> Iterator[tuple[str, str]]:
    identifier: str | None = None
    chunks: list[str] = []
    for line in lines:
        line = line.strip()
        if not line:
            continue
        if line.startswith(">"):
            if identifier is not None:
                yield identifier, "".join(chunks)
            header = line[1:].split()
            identifier = header[0] if header else ""
            chunks = []
        elif identifier is None:
            raise ValueError("FASTA input must start with a '>' header line")
        else:
            chunks.append(line)
    if identifier is not None:
        yield identifier, "".join(chunks)


def read_fasta(path: str | os.PathLike[str]) -> Iterator[Protein]:
    """Yield a Protein for each record of a FASTA file."""
    with open(path, encoding="utf-8") as handle:
        for identifier, sequence in _parse_records(iter(handle)):
            yield Protein(identifier, sequence)