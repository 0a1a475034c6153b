from typing import Sequence

import numpy as np
from numba import njit

from seqmrf.ragged import RaggedData, offsets_from_lengths

ALPHABET_SIZE = 5

_TRANS_TABLE = bytearray([4] * 256)
for _char, _code in zip(b"ACGTacgt", [0, 1, 2, 3] * 2, strict=False):
    _TRANS_TABLE[_char] = _code


def encode_char(char: str) -> int:
    """Return the integer code of a single character (A/C/G/T -> 0..3, other -> 4)."""
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")
    code = ord(char)
    return _TRANS_TABLE[code] if code < 256 else 4


def encode_sequences(sequences: Sequence[str]) -> RaggedData:
    """Integer-encode a list of strings into RaggedData (int8 codes)."""
    # errors="replace" keeps one byte per character so positions stay aligned
    joined = "".join(sequences).encode("ascii", errors="replace").translate(_TRANS_TABLE)
    offsets = offsets_from_lengths([len(seq) for seq in sequences])

    if not joined:
        return RaggedData(np.empty(0, dtype=np.int8), offsets)

    data = np.frombuffer(joined, dtype=np.int8).copy()
    return RaggedData(data, offsets)


@njit(cache=True)
def chain_edge_offsets(offsets):
    """Compute per-sequence edge offsets of a linear chain (JIT-compiled).

    A sequence of length L contributes max(L - 1, 0) edges.
    """
    n_seq = len(offsets) - 1
    edge_offsets = np.zeros(n_seq + 1, dtype=np.int64)
    for i in range(n_seq):
        seq_len = offsets[i + 1] - offsets[i]
        n_edges = 0
        if seq_len > 1:
            n_edges = seq_len - 1
        edge_offsets[i + 1] = edge_offsets[i] + n_edges
    return edge_offsets


@njit(cache=True)
def _dinucleotide_counts_jit(data, offsets):
    """Count adjacent code pairs within each sequence."""
    counts = np.zeros((5, 5), dtype=np.float64)
    n_seq = len(offsets) - 1
    for i in range(n_seq):
        start = offsets[i]
        stop = offsets[i + 1]
        for k in range(start, stop - 1):
            counts[data[k], data[k + 1]] += 1.0
    return counts


def dinucleotide_counts(sequences: RaggedData) -> np.ndarray:
    """Return a (5, 5) matrix of adjacent pair counts, never crossing sequence boundaries."""
    if sequences.total_elements() == 0:
        return np.zeros((ALPHABET_SIZE, ALPHABET_SIZE), dtype=np.float64)
    return _dinucleotide_counts_jit(sequences.data, sequences.offsets)


def pair_log_odds(counts: np.ndarray, pseudocount: float = 0.25) -> np.ndarray:
    """Convert pair counts to log-odds against the product of marginal frequencies."""
    if pseudocount <= 0:
        raise ValueError(f"pseudocount must be positive, got {pseudocount}")

    smoothed = counts + pseudocount
    joint = smoothed / smoothed.sum()
    left = joint.sum(axis=1, keepdims=True)
    right = joint.sum(axis=0, keepdims=True)
    return np.log(joint / (left * right))
