import subprocess
from unittest import mock

import pytest

from amrneighbors.alignment import (
    HEADER,
    accession,
    align_and_output_pairs,
    align_pair,
    fasta_text,
)
from amrneighbors.counting import prepare_proteins
from amrneighbors.graph import Graph
from amrneighbors.protein import Protein

SHARED = "ACDEFGHIKLMNPQRSTVWY"


def _completed(stdout=b""):
    def runner(args, **kwargs):
        return subprocess.CompletedProcess(args, 0, stdout=stdout, stderr=b"")

    return runner


def _graph(second_class="classB"):
    proteins = [
        Protein("REF1|a|b|classA", SHARED),
        Protein(f"QRY2|a|b|{second_class}", SHARED),
    ]
    kmer_freq, _ = prepare_proteins(proteins)
    graph = Graph(kmer_freq, proteins)
    graph.remove_uninteresting_edges()
    graph.combine_edges()
    return graph


def test_fasta_text_layout():
    assert fasta_text("id1", "MKV") == ">id1\nMKV"


def test_accession_takes_first_field():
    assert accession("REF1|x|y|z") == "REF1"


def test_accession_requires_separator():
    with pytest.raises(ValueError):
        accession("nobar")


def test_align_pair_writes_files_and_returns_output(tmp_path):
    fasta_dir = tmp_path / "fasta"
    db_dir = tmp_path / "db"
    fasta_dir.mkdir()
    db_dir.mkdir()
    reference = Protein("REF1|a|b|c", SHARED)
    query = Protein("QRY2|a|b|d", SHARED)
    with mock.patch(
        "amrneighbors.alignment.subprocess.run", side_effect=_completed(b"hit\n")
    ) as run:
        result = align_pair(7, reference, query, fasta_dir, db_dir)

    assert result == b"hit\n"
    ref_file = fasta_dir / "7_REF1.fasta"
    query_file = fasta_dir / "7_QRY2.fasta"
    assert ref_file.read_text() == fasta_text(reference.identifier, SHARED)
    assert query_file.read_text() == fasta_text(query.identifier, SHARED)

    assert run.call_count == 2
    makedb_args = run.call_args_list[0].args[0]
    assert makedb_args[:2] == ["diamond", "makedb"]
    assert makedb_args[3] == str(ref_file)
    assert makedb_args[5] == str(db_dir / "7_REF1")
    blastp_args = run.call_args_list[1].args[0]
    assert blastp_args[:2] == ["diamond", "blastp"]
    assert str(query_file) in blastp_args
    assert "bitscore" in blastp_args


def test_align_and_output_pairs_collects_hits(tmp_path):
    graph = _graph()
    output = tmp_path / "out.tsv"
    with mock.patch(
        "amrneighbors.alignment.subprocess.run", side_effect=_completed(b"row\n")
    ) as run:
        written = align_and_output_pairs(graph, tmp_path, output)

    assert written == output
    assert run.call_count == 2
    assert output.read_bytes() == HEADER.encode() + b"row\n"
    assert (tmp_path / "fasta_files").is_dir()
    assert (tmp_path / "db_files").is_dir()


def test_threshold_skips_pairs(tmp_path):
    graph = _graph()
    output = tmp_path / "out.tsv"
    shared = len(graph.edges[0].kmers)
    with mock.patch(
        "amrneighbors.alignment.subprocess.run", side_effect=_completed(b"row\n")
    ) as run:
        align_and_output_pairs(graph, tmp_path, output, min_shared_kmers=shared)

    assert run.call_count == 0
    assert output.read_text() == HEADER


def test_scratch_directories_are_reset(tmp_path):
    stale = tmp_path / "fasta_files" / "stale.fasta"
    stale.parent.mkdir()
    stale.write_text(">old\nA")
    graph = _graph(second_class="classA")
    with mock.patch(
        "amrneighbors.alignment.subprocess.run", side_effect=_completed()
    ) as run:
        align_and_output_pairs(graph, tmp_path, tmp_path / "out.tsv")

    assert not stale.exists()
    assert run.call_count == 0
    assert graph.edges == []