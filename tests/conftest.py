"""
Pytest configuration and common fixtures for seqmrf tests.
"""
import tempfile
from pathlib import Path

import pytest

from seqmrf.io import write_fasta


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_sequences():
    """Small mixed-length batch including degenerate sequences."""
    return ["ACGT", "", "G", "TTAGC", "AC"]


@pytest.fixture
def fasta_path(temp_dir, sample_sequences):
    """FASTA file holding the sample sequences."""
    path = temp_dir / "reads.fasta"
    write_fasta(sample_sequences, path)
    return path
