"""
Potential policies
==================

A potential policy decides the weight of the edge between two adjacent
positions.  Any callable with the signature::

    policy(sequence_index, position_i, position_j, sequence) -> float

can be passed to :func:`seqmrf.builder.build_mrf`.  The builder never looks at
sequence content itself, so swapping the policy never touches traversal.

Named policies are kept in a registry so that configuration objects and the
command line can refer to them by key.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np

from seqmrf.functions import ALPHABET_SIZE, dinucleotide_counts, encode_char, encode_sequences, pair_log_odds

PotentialFn = Callable[[int, int, int, str], float]


class PotentialRegistry:
    """Registry for potential policies using decorator pattern."""

    def __init__(self):
        """Initialize registry state."""
        self._policies: Dict[str, type] = {}

    def register(self, key: str):
        """Decorator to register a potential policy class."""

        def decorator(policy_cls):
            """Store a policy class in the registry."""
            self._policies[key] = policy_cls
            logging.getLogger(__name__).info(f"Registered potential policy: {key} -> {policy_cls.__name__}")
            return policy_cls

        return decorator

    def get(self, key: str) -> type:
        """Get policy class by key."""
        if key not in self._policies:
            available = list(self._policies.keys())
            raise ValueError(f"Potential policy '{key}' not found. Available: {available}")
        return self._policies[key]

    def available(self) -> List[str]:
        return list(self._policies.keys())


registry = PotentialRegistry()


def create_potential(name: str, sequences: Optional[Sequence[str]] = None, **kwargs) -> PotentialFn:
    """Factory function resolving a registered policy by name."""
    policy_cls = registry.get(name)
    return policy_cls.create(sequences, kwargs)


@registry.register("constant")
class ConstantPotential:
    """Assigns the same potential to every edge."""

    def __init__(self, value: float = 1.0):
        self.value = float(value)

    def __call__(self, sequence_index: int, position_i: int, position_j: int, sequence: str) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"ConstantPotential(value={self.value})"

    @classmethod
    def create(cls, sequences: Optional[Sequence[str]], kwargs: dict) -> ConstantPotential:
        return cls(kwargs.get("value", 1.0))


constant_potential = ConstantPotential(1.0)


@registry.register("match")
class MatchPotential:
    """Rewards adjacent positions holding the same character (case-insensitive)."""

    def __init__(self, match: float = 1.0, mismatch: float = 0.5):
        self.match = float(match)
        self.mismatch = float(mismatch)

    def __call__(self, sequence_index: int, position_i: int, position_j: int, sequence: str) -> float:
        if sequence[position_i].upper() == sequence[position_j].upper():
            return self.match
        return self.mismatch

    def __repr__(self) -> str:
        return f"MatchPotential(match={self.match}, mismatch={self.mismatch})"

    @classmethod
    def create(cls, sequences: Optional[Sequence[str]], kwargs: dict) -> MatchPotential:
        return cls(kwargs.get("match", 1.0), kwargs.get("mismatch", 0.5))


@registry.register("dinucleotide")
class DinucleotidePotential:
    """
    Looks up the potential of a character pair in a (5, 5) table.

    Rows and columns are indexed by nucleotide code: A, C, G, T and a fifth
    slot for any other character.

    Parameters
    ----------
    table : np.ndarray
        Potential of every ordered pair of codes.
    """

    def __init__(self, table: np.ndarray):
        table = np.asarray(table, dtype=np.float64)
        if table.shape != (ALPHABET_SIZE, ALPHABET_SIZE):
            raise ValueError(f"Dinucleotide table must have shape (5, 5), got {table.shape}")
        self.table = table

    def __call__(self, sequence_index: int, position_i: int, position_j: int, sequence: str) -> float:
        return float(self.table[encode_char(sequence[position_i]), encode_char(sequence[position_j])])

    @classmethod
    def from_sequences(cls, sequences: Sequence[str], pseudocount: float = 0.25) -> DinucleotidePotential:
        """Learn the table from adjacent pair frequencies of the given sequences.

        Each entry is the odds ratio of the observed pair frequency against the
        product of the marginal frequencies, so independent pairs score 1.0.
        """
        counts = dinucleotide_counts(encode_sequences(sequences))
        logger = logging.getLogger(__name__)
        logger.debug(f"Learning dinucleotide potentials from {int(counts.sum())} adjacent pair(s)")
        return cls(np.exp(pair_log_odds(counts, pseudocount)))

    @classmethod
    def create(cls, sequences: Optional[Sequence[str]], kwargs: dict) -> DinucleotidePotential:
        if "table" in kwargs:
            return cls(kwargs["table"])
        if sequences is None:
            raise ValueError("Dinucleotide potential requires sequences or an explicit table")
        return cls.from_sequences(sequences, pseudocount=kwargs.get("pseudocount", 0.25))
