from typing import List

import numpy as np


class RaggedData:
    """
    Flattened storage for a batch of variable-length sequences.

    Sequences are concatenated into a single ``data`` array and delimited by
    ``offsets`` so that sequence ``i`` occupies ``data[offsets[i]:offsets[i + 1]]``.
    The same offsets double as the node index layout of an MRF: node ``(s, i)``
    lives at flat position ``offsets[s] + i``.
    """

    def __init__(self, data: np.ndarray, offsets: np.ndarray):
        """Initialize the RaggedData object."""
        self.data = data
        self.offsets = offsets

    def get_length(self, i: int) -> int:
        """Return the length of the i-th sequence."""
        return int(self.offsets[i + 1] - self.offsets[i])

    def get_slice(self, i: int) -> np.ndarray:
        """Return a slice of data for the i-th sequence (view)."""
        return self.data[self.offsets[i] : self.offsets[i + 1]]

    def lengths(self) -> np.ndarray:
        """Return the lengths of all sequences."""
        return np.diff(self.offsets)

    def total_elements(self) -> int:
        """Return the total number of elements across all sequences."""
        return self.data.size

    @property
    def num_sequences(self) -> int:
        """Return the number of sequences."""
        return self.offsets.size - 1


def offsets_from_lengths(lengths) -> np.ndarray:
    """Build an offsets array (length n + 1) from per-sequence lengths."""
    lengths = np.asarray(lengths, dtype=np.int64)
    offsets = np.zeros(lengths.size + 1, dtype=np.int64)
    offsets[1:] = np.cumsum(lengths)
    return offsets


def ragged_from_list(data_list: List[np.ndarray], dtype=None) -> RaggedData:
    """Create RaggedData from a list of numpy arrays."""
    if len(data_list) == 0:
        return RaggedData(np.empty(0, dtype=dtype if dtype else np.int8), np.zeros(1, dtype=np.int64))

    if dtype is None:
        dtype = data_list[0].dtype

    offsets = offsets_from_lengths([len(arr) for arr in data_list])

    data = np.empty(offsets[-1], dtype=dtype)
    for i, arr in enumerate(data_list):
        data[offsets[i] : offsets[i + 1]] = arr

    return RaggedData(data, offsets)
