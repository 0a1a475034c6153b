from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List


def read_fasta(path: str | Path) -> List[str]:
    """Read a FASTA file and return its sequences as strings, in file order."""
    if not os.path.isfile(path):
        raise FileNotFoundError(f"File {path} not found")

    sequences: List[str] = []

    with open(path, "r") as handle:
        current_parts: List[str] = []
        in_record = False
        for line in handle:
            line = line.strip()
            if not line:
                continue
            if line.startswith(">"):
                if in_record:
                    sequences.append("".join(current_parts))
                current_parts = []
                in_record = True
            else:
                current_parts.append(line)
                in_record = True

        if in_record:
            sequences.append("".join(current_parts))

    logger = logging.getLogger(__name__)
    logger.info(f"Read {len(sequences)} sequence(s) from {path}")
    return sequences


def write_fasta(sequences: Iterable[str], path: str | Path) -> None:
    """Write sequences to a FASTA file with their index as header."""
    with open(path, "w") as out:
        for idx, seq in enumerate(sequences):
            out.write(f">{idx}\n")
            out.write(f"{seq}\n")
