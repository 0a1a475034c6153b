"""
models
======

Data model of the sequence Markov Random Field.

Nodes are positions within sequences and are identified by :class:`NodeKey`.
They are never materialized on their own: they only exist as keys and
neighbor entries of the adjacency mapping held by :class:`MRF`.  Each
adjacency entry pairs a neighbor with an :class:`MRFEdge` carrying the
potential assigned by the builder.

The graph is built once by :func:`seqmrf.builder.build_mrf` and is treated as
read-only afterwards.  Export helpers turn it into a pandas DataFrame or a
scipy sparse matrix for downstream consumers.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field as dc_field
from typing import Dict, Iterator, List, Tuple

import numpy as np
import pandas as pd
from scipy import sparse

from seqmrf.ragged import offsets_from_lengths

EDGE_COLUMNS = ["source_sequence", "source_position", "target_sequence", "target_position", "potential"]


@dataclass(frozen=True, order=True)
class NodeKey:
    """Position ``position_index`` of sequence ``sequence_index``."""

    sequence_index: int
    position_index: int

    def successor(self) -> NodeKey:
        """Return the next position in the same sequence."""
        return NodeKey(self.sequence_index, self.position_index + 1)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.sequence_index, self.position_index)


@dataclass(frozen=True)
class MRFEdge:
    """Edge attribute: the pairwise potential between two nodes."""

    potential: float


Adjacency = Dict[NodeKey, List[Tuple[NodeKey, MRFEdge]]]


@dataclass(frozen=True)
class MRF:
    """Pairwise Markov Random Field stored as an adjacency mapping.

    Attributes
    ----------
    adjacency : dict
        Maps each source node to the ordered list of ``(neighbor, edge)``
        pairs leaving it.  Only nodes with at least one outgoing edge are keys.
    symmetric : bool
        True when the reverse entry of every edge was inserted as well.
    """

    adjacency: Adjacency = dc_field(default_factory=dict, hash=False)
    symmetric: bool = False

    def __len__(self) -> int:
        return len(self.adjacency)

    def __contains__(self, node: object) -> bool:
        return node in self.adjacency

    @property
    def num_nodes(self) -> int:
        """Number of nodes with outgoing edges."""
        return len(self.adjacency)

    @property
    def num_edges(self) -> int:
        """Total number of adjacency entries."""
        return sum(len(edges) for edges in self.adjacency.values())

    def nodes(self):
        """Return the source nodes in insertion order."""
        return self.adjacency.keys()

    def neighbors(self, node: NodeKey) -> Tuple[Tuple[NodeKey, MRFEdge], ...]:
        """Return the ``(neighbor, edge)`` pairs of a node, empty for unknown nodes."""
        return tuple(self.adjacency.get(node, ()))

    def edges(self) -> Iterator[Tuple[NodeKey, NodeKey, MRFEdge]]:
        """Iterate over ``(source, target, edge)`` in insertion order."""
        for source, pairs in self.adjacency.items():
            for target, edge in pairs:
                yield source, target, edge

    def potentials(self) -> np.ndarray:
        """Return all edge potentials in edge order."""
        return np.fromiter((edge.potential for _, _, edge in self.edges()), dtype=np.float64, count=self.num_edges)

    def to_dataframe(self) -> pd.DataFrame:
        """Return one row per edge with source, target and potential columns."""
        records = [
            (src.sequence_index, src.position_index, dst.sequence_index, dst.position_index, edge.potential)
            for src, dst, edge in self.edges()
        ]
        return pd.DataFrame(records, columns=EDGE_COLUMNS)

    def to_sparse(self, lengths) -> sparse.csr_matrix:
        """Return the potentials as an (N, N) CSR matrix.

        ``lengths`` holds the length of every input sequence; node ``(s, i)``
        maps to row/column ``offsets[s] + i`` where ``offsets`` are the
        cumulative lengths.
        """
        offsets = offsets_from_lengths(lengths)
        n_total = int(offsets[-1])
        n_seq = offsets.size - 1

        rows = np.empty(self.num_edges, dtype=np.int64)
        cols = np.empty(self.num_edges, dtype=np.int64)
        values = np.empty(self.num_edges, dtype=np.float64)

        for k, (src, dst, edge) in enumerate(self.edges()):
            for node in (src, dst):
                s, i = node.as_tuple()
                if s >= n_seq or i >= offsets[s + 1] - offsets[s]:
                    raise ValueError(f"Node {node.as_tuple()} lies outside the given sequence lengths")
            rows[k] = offsets[src.sequence_index] + src.position_index
            cols[k] = offsets[dst.sequence_index] + dst.position_index
            values[k] = edge.potential

        return sparse.csr_matrix((values, (rows, cols)), shape=(n_total, n_total))
