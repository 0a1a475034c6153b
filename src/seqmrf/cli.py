import argparse
import json
import logging
import os
import sys
from typing import Any, Dict

from seqmrf.api import create_config, resolve_sequences, run_build, summarize_mrf
from seqmrf.potentials import registry as potential_registry


def setup_logging(verbose: bool):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    if verbose:
        logging.getLogger("numba").setLevel(logging.WARNING)


def create_arg_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        description="SEQMRF: Build a pairwise Markov Random Field over positions of biological sequences",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
 Examples:
   # Linear-chain MRF with constant potentials
   seqmrf build reads.fasta

   # Potentials learned from adjacent pair frequencies, reverse edges included
   seqmrf build reads.fasta --potential dinucleotide --pseudocount 0.5 --symmetric

   # Character-match potentials, preview of 10 nodes, 4 workers
   seqmrf build reads.fasta --potential match --match 2.0 --mismatch 0.1 \\
     --show 10 --jobs 4 -v

   # List registered potential policies
   seqmrf potentials
         """,
    )

    subparsers = parser.add_subparsers(dest="mode", help="Operation mode", required=True)

    build_parser = subparsers.add_parser("build", help="Build an MRF from a FASTA file and print a JSON summary.")
    build_parser.add_argument("fasta", help="Path to a FASTA file containing the input sequences.")

    potential_group = build_parser.add_argument_group("Potential Options")
    potential_group.add_argument(
        "--potential",
        choices=potential_registry.available(),
        default="constant",
        help="Policy assigning a potential to each edge. (default: %(default)s)",
    )
    potential_group.add_argument(
        "--value",
        type=float,
        default=1.0,
        help="Potential of every edge for the constant policy. (default: %(default)s)",
    )
    potential_group.add_argument(
        "--match",
        type=float,
        default=1.0,
        help="Potential between identical adjacent characters for the match policy. (default: %(default)s)",
    )
    potential_group.add_argument(
        "--mismatch",
        type=float,
        default=0.5,
        help="Potential between different adjacent characters for the match policy. (default: %(default)s)",
    )
    potential_group.add_argument(
        "--pseudocount",
        type=float,
        default=0.25,
        help="Pseudocount added to pair counts for the dinucleotide policy. (default: %(default)s)",
    )

    graph_group = build_parser.add_argument_group("Graph Options")
    graph_group.add_argument(
        "--symmetric",
        action="store_true",
        help="Also insert the reverse entry of every edge so neighbors can be looked up in both directions.",
    )
    graph_group.add_argument(
        "--show",
        type=int,
        default=5,
        help="Number of nodes listed in the summary preview. (default: %(default)s)",
    )

    technical_group = build_parser.add_argument_group("Technical Options")
    technical_group.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging to standard output for detailed execution tracking.",
    )
    technical_group.add_argument(
        "--jobs",
        type=int,
        default=1,
        help="Number of parallel jobs to run. Set to -1 to use all available CPU cores. (default: %(default)s)",
    )

    subparsers.add_parser("potentials", help="List registered potential policies.")

    return parser


def validate_inputs(args) -> None:
    """Validate command line arguments."""
    logger = logging.getLogger(__name__)

    if args.mode == "build":
        if not os.path.exists(args.fasta):
            logger.error(f"FASTA file not found: {args.fasta}")
            sys.exit(1)
        if args.jobs == 0:
            logger.error("--jobs must be non-zero")
            sys.exit(1)
        if args.show < 0:
            logger.error("--show must be non-negative")
            sys.exit(1)
        if args.pseudocount <= 0:
            logger.error("--pseudocount must be positive")
            sys.exit(1)


def map_args_to_potential_kwargs(args) -> Dict[str, Any]:
    """Map CLI arguments to potential policy keyword arguments."""
    kwargs = {}

    if args.potential == "constant":
        kwargs["value"] = getattr(args, "value", 1.0)
    elif args.potential == "match":
        kwargs.update({"match": getattr(args, "match", 1.0), "mismatch": getattr(args, "mismatch", 0.5)})
    elif args.potential == "dinucleotide":
        kwargs["pseudocount"] = getattr(args, "pseudocount", 0.25)

    return kwargs


def main_cli():
    """Main CLI entry point."""
    parser = create_arg_parser()

    if len(sys.argv) == 1:
        parser.print_help(sys.stderr)
        sys.exit(1)

    args = parser.parse_args()

    if args.mode == "potentials":
        print(json.dumps(potential_registry.available()))
        return

    setup_logging(args.verbose)
    validate_inputs(args)

    logger = logging.getLogger(__name__)
    if args.verbose:
        logger.info("=" * 60)
        logger.info("SEQMRF - Build Mode")
        logger.info("=" * 60)
        logger.info(f"Sequences: {args.fasta}")
        logger.info(f"Potential: {args.potential}")
        logger.info(f"Symmetric: {args.symmetric}")
        logger.info("=" * 60)

    try:
        sequences = resolve_sequences(args.fasta)
        config = create_config(
            sequences=sequences,
            potential=args.potential,
            symmetric=args.symmetric,
            n_jobs=args.jobs,
            potential_kwargs=map_args_to_potential_kwargs(args),
        )
        mrf = run_build(config)

        result = {"sequences": len(sequences), **summarize_mrf(mrf, max_nodes=args.show)}
        logger.info(f"Constructed MRF with {mrf.num_nodes} nodes")
        print(json.dumps(result))

    except Exception as e:
        print(f"ERROR: MRF construction failed: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main_cli()
