"""Aligning linked protein pairs with DIAMOND and collecting the hits."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path

from amrneighbors.graph import Graph
from amrneighbors.protein import Protein

_log = logging.getLogger(__name__)

HEADER = (
    "query id\tquery length\tsubject id\tsubject length\t"
    "query alignment start\tquery alignment end\t"
    "subject alignment start\tsubject alignment end\t"
    "alignment length\tpercent identity\tevalue\tbit score\n"
)

_OUTPUT_FIELDS = (
    "qseqid", "qlen", "sseqid", "slen", "qstart", "qend",
    "sstart", "send", "length", "pident", "evalue", "bitscore",
)


def fasta_text(identifier: str, sequence: str) -> str:
    """Return a single FASTA record with no trailing newline."""
    return f">{identifier}\n{sequence}"


def accession(identifier: str) -> str:
    """Return the part of an identifier before its first '|'."""
    head, separator, _ = identifier.partition("|")
    if not separator:
        raise ValueError(f"identifier {identifier!r} has no '|' separator")
    return head


def align_pair(
    edge_key: int,
    reference: Protein,
    query: Protein,
    fasta_dir: str | os.PathLike[str],
    db_dir: str | os.PathLike[str],
) -> bytes:
    """Align ``query`` against ``reference`` with DIAMOND blastp.

    Writes one FASTA file per protein and a DIAMOND database for the
    reference, then returns the tabular output of the alignment.
    """
    fasta_dir = Path(fasta_dir)
    db_dir = Path(db_dir)

    ref_file = fasta_dir / f"{edge_key}_{accession(reference.identifier)}.fasta"
    ref_file.write_text(fasta_text(reference.identifier, reference.sequence), encoding="utf-8")

    ref_db = db_dir / f"{edge_key}_{accession(reference.identifier)}"
    subprocess.run(
        ["diamond", "makedb", "--in", str(ref_file), "--db", str(ref_db)],
        capture_output=True,
        check=False,
    )

    query_file = fasta_dir / f"{edge_key}_{accession(query.identifier)}.fasta"
    query_file.write_text(fasta_text(query.identifier, query.sequence), encoding="utf-8")

    completed = subprocess.run(
        [
            "diamond", "blastp",
            "--db", str(ref_db),
            "--query", str(query_file),
            "--outfmt", "6", *_OUTPUT_FIELDS,
        ],
        capture_output=True,
        check=False,
    )
    return completed.stdout


def align_and_output_pairs(
    graph: Graph,
    workdir: str | os.PathLike[str] = ".",
    output_path: str | os.PathLike[str] = "blastp_output.tsv",
    min_shared_kmers: int = 10,
) -> Path:
    """Align every protein pair sharing more than ``min_shared_kmers`` k-mers.

    Scratch FASTA files and databases go under ``workdir``; the combined
    hits, headed by a column line, are written to ``output_path``.
    """
    workdir = Path(workdir)
    fasta_dir = workdir / "fasta_files"
    db_dir = workdir / "db_files"
    for directory in (fasta_dir, db_dir):
        shutil.rmtree(directory, ignore_errors=True)
        directory.mkdir(parents=True)

    chunks = [HEADER.encode("utf-8")]
    for edge_key, edge in enumerate(graph.edges):
        if len(edge.kmers) <= min_shared_kmers:
            continue
        reference, query = graph.protein_pair(edge)
        _log.info(
            "Cross-checking: reference protein %s, query protein %s, kmers in common %d",
            reference.identifier,
            query.identifier,
            len(edge.kmers),
        )
        chunks.append(align_pair(edge_key, reference, query, fasta_dir, db_dir))

    output = Path(output_path)
    output.write_bytes(b"".join(chunks))
    return output