"""BLOSUM62 substitution scores for the twenty standard amino acids."""

from __future__ import annotations

_ORDER = "CSTAGPDEQNHRKMILVWYF"

# Lower triangle of the matrix, one row per residue in _ORDER.
_ROWS: tuple[tuple[int, ...], ...] = (
    (9,),
    (-1, 4),
    (-1, 1, 5),
    (0, 1, 0, 4),
    (-3, 0, -2, 0, 6),
    (-3, -1, -1, -1, -2, 7),
    (-3, 0, -1, -2, -1, -1, 6),
    (-4, 0, -1, -1, -2, -1, 2, 5),
    (-3, 0, -1, -1, -2, -1, 0, 2, 5),
    (-3, 1, 0, -2, 0, -2, 1, 0, 0, 6),
    (-3, -1, -2, -2, -2, -2, -1, 0, 0, 1, 8),
    (-3, -1, -1, -1, -2, -2, -2, 0, 1, 0, 0, 5),
    (-3, 0, -1, -1, -2, -1, -1, 1, 1, 0, -1, 2, 5),
    (-1, -1, -1, -1, -3, -2, -3, -2, 0, -2, -2, -1, -1, 5),
    (-1, -2, -1, -1, -4, -3, -3, -3, -3, -3, -3, -3, -3, 1, 4),
    (-1, -2, -1, -1, -4, -3, -4, -3, -2, -3, -3, -2, -2, 2, 2, 4),
    (-1, -2, 0, 0, -3, -2, -3, -2, -2, -3, -3, -3, -2, 1, 3, 1, 4),
    (-2, -3, -2, -3, -2, -4, -4, -3, -2, -4, -2, -3, -3, -1, -3, -2, -3, 11),
    (-2, -2, -2, -2, -3, -3, -3, -2, -1, -2, 2, -2, -2, -1, -1, -1, -1, 2, 7),
    (-2, -2, -2, -2, -3, -4, -3, -3, -3, -3, -1, -3, -3, 0, 0, 0, -1, 1, 3, 6),
)


def _build_scores() -> dict[tuple[str, str], int]:
    scores: dict[tuple[str, str], int] = {}
    for row_residue, row in zip(_ORDER, _ROWS):
        for col_residue, score in zip(_ORDER, row):
            scores[row_residue, col_residue] = score
            scores[col_residue, row_residue] = score
    return scores


_SCORES = _build_scores()


def blosum62_score(a: str, b: str) -> int:
    """Return the BLOSUM62 score for substituting residue ``a`` with ``b``."""
    key = (a.upper(), b.upper())
    try:
        return _SCORES[key]
    except KeyError:
        raise ValueError(f"no BLOSUM62 score for residues {a!r} and {b!r}") from None