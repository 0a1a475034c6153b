"""High-level public API for MRF construction."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from seqmrf.builder import build_mrf
from seqmrf.io import read_fasta
from seqmrf.models import MRF
from seqmrf.potentials import PotentialFn, create_potential

SequenceRef = Union[Sequence[str], str, Path]
PotentialRef = Union[str, PotentialFn]


@dataclass
class BuildConfig:
    """Unified configuration object for library usage."""

    sequences: SequenceRef
    potential: PotentialRef = "constant"
    potential_kwargs: Dict[str, Any] = field(default_factory=dict)
    symmetric: bool = False
    n_jobs: int = 1


def create_config(
    sequences: SequenceRef,
    potential: PotentialRef = "constant",
    symmetric: bool = False,
    n_jobs: int = 1,
    potential_kwargs: Optional[Dict[str, Any]] = None,
    **kwargs,
) -> BuildConfig:
    """Build a unified MRF construction config.

    Extra keyword arguments are forwarded to the potential policy factory.
    """

    if n_jobs == 0:
        raise ValueError("n_jobs must be a positive number of workers or negative for all cores, got 0")
    if potential_kwargs is not None and kwargs:
        raise ValueError("Use either 'potential_kwargs' or policy kwargs, not both.")

    return BuildConfig(
        sequences=sequences,
        potential=potential,
        potential_kwargs=potential_kwargs or dict(kwargs),
        symmetric=symmetric,
        n_jobs=n_jobs,
    )


def build_from_sequences(
    sequences: SequenceRef,
    potential: PotentialRef = "constant",
    symmetric: bool = False,
    n_jobs: int = 1,
    potential_kwargs: Optional[Dict[str, Any]] = None,
    **kwargs,
) -> MRF:
    """Single-call entry point for MRF construction."""

    config = create_config(
        sequences=sequences,
        potential=potential,
        symmetric=symmetric,
        n_jobs=n_jobs,
        potential_kwargs=potential_kwargs,
        **kwargs,
    )
    return run_build(config)


def run_build(config: BuildConfig) -> MRF:
    """Execute MRF construction using the unified config."""

    sequences = resolve_sequences(config.sequences)
    policy = _resolve_potential(config.potential, sequences, config.potential_kwargs)
    return build_mrf(sequences, potential=policy, symmetric=config.symmetric, n_jobs=config.n_jobs)


def resolve_sequences(source: SequenceRef) -> List[str]:
    """Resolve a sequence source to an ordered list of strings."""

    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"Sequence file not found: {path}")
        return read_fasta(path)
    if isinstance(source, (list, tuple)):
        if not all(isinstance(seq, str) for seq in source):
            raise TypeError("All sequences must be strings")
        return list(source)
    raise TypeError(f"Unsupported sequence source type: {type(source)!r}")


def _resolve_potential(potential: PotentialRef, sequences: List[str], kwargs: Dict[str, Any]) -> PotentialFn:
    """Convert a potential reference to a policy callable."""

    if isinstance(potential, str):
        return create_potential(potential, sequences, **kwargs)
    if callable(potential):
        return potential
    raise TypeError(f"Unsupported potential reference type: {type(potential)!r}")


def summarize_mrf(mrf: MRF, max_nodes: int = 5) -> dict:
    """Return a JSON-serializable summary with a preview of the first nodes."""

    preview = []
    for node in list(mrf.nodes())[: max(max_nodes, 0)]:
        preview.append(
            {
                "node": list(node.as_tuple()),
                "edges": [
                    {"neighbor": list(neighbor.as_tuple()), "potential": edge.potential}
                    for neighbor, edge in mrf.neighbors(node)
                ],
            }
        )

    return {
        "nodes": mrf.num_nodes,
        "edges": mrf.num_edges,
        "symmetric": mrf.symmetric,
        "preview": preview,
    }
