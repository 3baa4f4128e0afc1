# amrneighbors

`amrneighbors` looks for pairs of proteins in a FASTA file that share many
5-mers but carry different antimicrobial-resistance (AMR) classes. It
aligns each such pair with DIAMOND and writes the results to a table.

## How it works

1. Every protein in the input FASTA file is split into its overlapping 5-mers.
   Each 5-mer is encoded as a base-21 integer over the alphabet
   `CSTAGPDEQNHRKMILVWYF*`. Any residue outside that alphabet counts as `*`.
   A sequence shorter than five residues is rejected with `ValueError`.
2. A 5-mer that appears in only one protein is dropped. Every remaining
   5-mer gets a dense key.
3. A graph is built. Each protein is a vertex. For every 5-mer shared by
   *n* proteins there is one edge for each of the *n(n-1)/2* pairs of
   those proteins.
4. An edge is removed if its two proteins have the same AMR class. The AMR
   class is the fourth `|`-separated field of the FASTA identifier.
5. Edges that join the same two proteins are merged into one group edge
   that holds all their shared 5-mers.
6. Every pair that shares more than ten 5-mers is aligned with
   `diamond makedb` and `diamond blastp`. The tabular hits are written to
   `blastp_output.tsv` under a header line.

## Requirements

- Python 3.10 or later.
- The `diamond` executable on your `PATH`.

## Installation

```
pip install .
```

## Usage

```
amrneighbors proteins.fasta 8
```

The first argument is the input FASTA file. The second is a thread count,
which must be a positive integer.

The command writes its working files and the output into the current
directory:

- `fasta_files/` holds one single-record FASTA file for each protein in
  each aligned pair.
- `db_files/` holds the DIAMOND databases.
- `blastp_output.tsv` holds the alignment results.

Both directories are removed and created afresh on each run. Progress is
logged to standard error, and the refined graph is printed to standard
output.

## Library use

The same steps are available from Python:

```python
from amrneighbors.protein import read_fasta
from amrneighbors.counting import prepare_proteins
from amrneighbors.graph import Graph
from amrneighbors.alignment import align_and_output_pairs

proteins = list(read_fasta("proteins.fasta"))
kmer_freq, index = prepare_proteins(proteins)
graph = Graph(kmer_freq, proteins)
graph.remove_uninteresting_edges()
graph.combine_edges()
align_and_output_pairs(graph, ".", "blastp_output.tsv", 10)
```

`amrneighbors.cli.run(path, threads)` runs the whole process in one call
and returns the refined `Graph`.

Other pieces:

- `amrneighbors.protein`: `Protein`, `encode_five_mer`, `decode_five_mer`,
  `amino_acid_index`, and `sample_five_mers`, which encodes a random tenth
  of a sequence's 5-mer windows.
- `amrneighbors.counting`: `count_kmer_presence` and `KmerIndex`.
- `amrneighbors.edge`: `KmerEdge`, `merge_edges` and `EdgeError`.
- `amrneighbors.vertex`: `ProteinVertex`.
- `amrneighbors.graph`: `Graph` and `edge_count_prefix_sum`.
- `amrneighbors.alignment`: `align_pair`, `fasta_text` and `accession`.
- `amrneighbors.blosum`: `blosum62_score(a, b)` gives the BLOSUM62 score for
  two of the twenty standard amino acids. Nothing else in the package
  uses it.

## Limitations

- All work runs in a single thread. The thread count is checked to be
  positive but does not change how the work is done.
- The package does no alignment of its own; it depends on the external
  `diamond` program, and the exit status of `diamond` is not checked.