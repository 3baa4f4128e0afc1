"""Command line entry point: build the protein graph and align linked pairs."""

from __future__ import annotations

import argparse
import logging
import os
import time

from amrneighbors.alignment import align_and_output_pairs
from amrneighbors.counting import prepare_proteins
from amrneighbors.graph import Graph
from amrneighbors.protein import read_fasta

_log = logging.getLogger(__name__)


def run(path: str | os.PathLike[str], threads: int) -> Graph:
    """Build and refine the graph for a FASTA file, then align its linked pairs.

    ``threads`` must be a positive worker count.  Output goes to
    ``blastp_output.tsv`` in the current directory.
    """
    if threads < 1:
        raise ValueError(f"thread count must be positive, got {threads}")

    proteins = list(read_fasta(path))
    _log.info("Read %d proteins", len(proteins))

    kmer_freq, _ = prepare_proteins(proteins)
    _log.info("Found shared k-mers")

    start = time.perf_counter()
    graph = Graph(kmer_freq, proteins)
    _log.info("Graph construction time: %f seconds", time.perf_counter() - start)

    start = time.perf_counter()
    graph.remove_uninteresting_edges()
    graph.combine_edges()
    _log.info("Graph refinement time: %f seconds", time.perf_counter() - start)

    align_and_output_pairs(graph)
    return graph


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the pipeline and print the refined graph."""
    parser = argparse.ArgumentParser(
        description="Link proteins by shared 5-mers and align pairs of differing AMR class."
    )
    parser.add_argument("input", help="FASTA file of proteins")
    parser.add_argument("threads", type=int, help="number of worker threads")
    args = parser.parse_args(argv)

    if args.threads < 1:
        parser.error("threads must be a positive integer")
    if not os.path.isfile(args.input):
        parser.error("input argument should refer to an existing fasta file")

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    graph = run(args.input, args.threads)
    print(f"Graph right now:\n{graph!r}")
    return 0