"""
Integration tests for the seqmrf command line interface.

These tests run the CLI in a subprocess against FASTA files written to a
temporary directory and check the JSON summary printed to stdout.
"""

import json
import subprocess
import sys

import pytest

from seqmrf.io import write_fasta


def run_cli(cmd: list[str]) -> subprocess.CompletedProcess:
    """Run CLI through current Python env to avoid global PATH contamination."""
    args = cmd[1:] if cmd and cmd[0] == "seqmrf" else cmd
    return subprocess.run([sys.executable, "-m", "seqmrf.cli", *args], capture_output=True, text=True)


@pytest.fixture
def two_reads(temp_dir):
    """FASTA with one two-letter and one single-letter read."""
    path = temp_dir / "reads.fasta"
    write_fasta(["AC", "G"], path)
    return path


def test_build_constant(two_reads):
    """Test build with the default constant policy"""
    result = run_cli(["seqmrf", "build", str(two_reads)])
    assert result.returncode == 0, f"Command failed with stderr: {result.stderr}"

    output = json.loads(result.stdout)
    expected_keys = ["sequences", "nodes", "edges", "symmetric", "preview"]
    for key in expected_keys:
        assert key in output, f"Missing key '{key}' in output"

    assert output["sequences"] == 2
    assert output["nodes"] == 1
    assert output["edges"] == 1
    assert output["preview"] == [{"node": [0, 0], "edges": [{"neighbor": [0, 1], "potential": 1.0}]}]


def test_build_symmetric_verbose(fasta_path):
    """Test build with reverse entries and verbose logging"""
    result = run_cli(["seqmrf", "build", str(fasta_path), "--symmetric", "--show", "2", "-v"])
    assert result.returncode == 0, f"Command failed with stderr: {result.stderr}"

    output = json.loads(result.stdout)
    assert output["symmetric"] is True
    assert output["edges"] == 16
    assert len(output["preview"]) == 2
    assert "Constructed MRF" in result.stderr


def test_build_match_policy(temp_dir):
    """Test build with the match policy and custom weights"""
    path = temp_dir / "reads.fasta"
    write_fasta(["AAC"], path)

    result = run_cli(["seqmrf", "build", str(path), "--potential", "match", "--match", "2.0", "--mismatch", "0.1"])
    assert result.returncode == 0, f"Command failed with stderr: {result.stderr}"

    output = json.loads(result.stdout)
    potentials = [node["edges"][0]["potential"] for node in output["preview"]]
    assert potentials == [2.0, 0.1]


def test_build_dinucleotide_policy(fasta_path):
    """Test build with learned dinucleotide potentials"""
    result = run_cli(["seqmrf", "build", str(fasta_path), "--potential", "dinucleotide", "--show", "0"])
    assert result.returncode == 0, f"Command failed with stderr: {result.stderr}"

    output = json.loads(result.stdout)
    assert output["edges"] == 8
    assert output["preview"] == []


def test_build_missing_fasta(temp_dir):
    """Test that a missing input file fails"""
    result = run_cli(["seqmrf", "build", str(temp_dir / "absent.fasta")])
    assert result.returncode == 1


def test_build_unknown_potential(two_reads):
    """Test that unknown policies are rejected by the parser"""
    result = run_cli(["seqmrf", "build", str(two_reads), "--potential", "long-range"])
    assert result.returncode != 0


def test_list_potentials():
    """Test listing registered policies"""
    result = run_cli(["seqmrf", "potentials"])
    assert result.returncode == 0, f"Command failed with stderr: {result.stderr}"

    assert set(json.loads(result.stdout)) >= {"constant", "match", "dinucleotide"}


def test_no_arguments_prints_help():
    """Test that running without arguments exits with usage"""
    result = run_cli([])
    assert result.returncode == 1
    assert "usage" in result.stderr.lower()
