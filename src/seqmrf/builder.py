"""
builder
=======

Construction of a linear-chain MRF from an ordered collection of sequences.

Every position that has a successor in its own sequence gets one directed
edge to that successor.  The edge potential comes from an injected policy
(see :mod:`seqmrf.potentials`); traversal is identical whatever the policy.
Sequences are independent of one another, so their chains can be computed
in parallel and merged by sequence index without key collisions.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np
from joblib import Parallel, delayed

from seqmrf.functions import chain_edge_offsets
from seqmrf.models import MRF, Adjacency, MRFEdge, NodeKey
from seqmrf.potentials import PotentialFn, constant_potential
from seqmrf.ragged import offsets_from_lengths

ChainEdge = Tuple[NodeKey, NodeKey, MRFEdge]


def chain_edges(sequence_index: int, sequence: str, potential: PotentialFn) -> List[ChainEdge]:
    """Return the ``(source, target, edge)`` triples of one sequence's chain."""
    # saturating: empty and single-character sequences have no edges
    n_edges = max(len(sequence) - 1, 0)

    edges = []
    for i in range(n_edges):
        node_a = NodeKey(sequence_index, i)
        node_b = NodeKey(sequence_index, i + 1)
        edge = MRFEdge(potential=float(potential(sequence_index, i, i + 1, sequence)))
        edges.append((node_a, node_b, edge))
    return edges


def build_mrf(
    sequences: Sequence[str],
    potential: Optional[PotentialFn] = None,
    symmetric: bool = False,
    n_jobs: int = 1,
) -> MRF:
    """
    Build a pairwise MRF linking each sequence position to its successor.

    Parameters
    ----------
    sequences : sequence of str
        Ordered input sequences. Content is only seen by the potential policy.
    potential : callable, optional
        Policy ``(sequence_index, position_i, position_j, sequence) -> float``.
        Defaults to the constant 1.0 policy.
    symmetric : bool
        Also insert the reverse entry ``(s, i + 1) -> (s, i)`` for every edge.
        Off by default, in which case edges only point to increasing positions.
    n_jobs : int
        Number of joblib workers used to compute sequence chains. 1 runs serially.

    Returns
    -------
    MRF
        Freshly allocated graph owned by the caller.
    """
    logger = logging.getLogger(__name__)
    policy = potential if potential is not None else constant_potential

    if n_jobs == 1 or len(sequences) < 2:
        chains = [chain_edges(seq_id, seq, policy) for seq_id, seq in enumerate(sequences)]
    else:
        chains = Parallel(n_jobs=n_jobs, backend="loky")(
            delayed(chain_edges)(seq_id, seq, policy) for seq_id, seq in enumerate(sequences)
        )

    adjacency: Adjacency = {}
    for chain in chains:
        for node_a, node_b, edge in chain:
            adjacency.setdefault(node_a, []).append((node_b, edge))
            if symmetric:
                adjacency.setdefault(node_b, []).append((node_a, edge))

    mrf = MRF(adjacency=adjacency, symmetric=symmetric)
    logger.debug(
        f"Built MRF from {len(sequences)} sequence(s): {mrf.num_nodes} node(s), {mrf.num_edges} edge(s), "
        f"policy={policy!r}, symmetric={symmetric}"
    )
    return mrf


def expected_edge_count(sequences: Sequence[str]) -> int:
    """Number of forward edges a chain over these sequences holds: sum of max(len - 1, 0)."""
    offsets = offsets_from_lengths(np.array([len(seq) for seq in sequences], dtype=np.int64))
    return int(chain_edge_offsets(offsets)[-1])
