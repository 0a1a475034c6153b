"""
SEQMRF
==================

This package builds pairwise Markov Random Fields whose nodes are positions
within a set of biological sequences.  Each position is linked to its
immediate successor in the same sequence, and the weight of every link is
assigned by a pluggable potential policy, so that alternative potentials can
be substituted without touching graph construction.  The resulting graph is
meant to be handed to inference or scoring routines, which live outside this
package.

The top level modules expose the following key components:

``models``
    The graph data model: :class:`NodeKey`, :class:`MRFEdge` and the
    adjacency-based :class:`MRF` with DataFrame and sparse-matrix exports.

``potentials``
    Potential policies (constant, character match, dinucleotide table) and
    the registry that resolves them by name.

``builder``
    :func:`build_mrf`, the linear-chain construction routine.

``functions``
    Integer encoding of sequences and JIT-compiled bulk kernels.

``io``
    Reading and writing sequences in FASTA format.

``api``
    Configuration objects and single-call entry points.

``cli``
    Command line interface building a graph from a FASTA file.
"""

from seqmrf.api import BuildConfig, build_from_sequences, create_config, run_build, summarize_mrf
from seqmrf.builder import build_mrf
from seqmrf.models import MRF, MRFEdge, NodeKey
from seqmrf.potentials import ConstantPotential, DinucleotidePotential, MatchPotential, constant_potential

__all__ = [
    "BuildConfig",
    "ConstantPotential",
    "DinucleotidePotential",
    "MRF",
    "MRFEdge",
    "MatchPotential",
    "NodeKey",
    "build_from_sequences",
    "build_mrf",
    "constant_potential",
    "create_config",
    "run_build",
    "summarize_mrf",
]
