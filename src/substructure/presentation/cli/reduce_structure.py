"""Command-line interface for extracting substructures."""

import argparse
import logging
import os
import re
import sys
from typing import List, Optional

from Bio.PDB.PDBExceptions import PDBConstructionException
from tqdm import tqdm

from ...core.domain.errors import SubstructureError
from ...core.domain.models.substructure_identifier import SubstructureIdentifier
from ...core.services.ligand_proximity import DEFAULT_LIGAND_PROXIMITY_CUTOFF
from ...core.services.structure_reducer import StructureReducer
from ...infrastructure.adapters.biopython_adapter import write_structure
from ...infrastructure.repositories.structure_repository import StructureRepository

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._,+-]")

# Failures that abort one identifier of a batch, not the whole run
_PER_IDENTIFIER_ERRORS = (SubstructureError, PDBConstructionException, OSError, ValueError)


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Set up console and optional file logging."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Extract chains and residue ranges from structures"
    )
    parser.add_argument(
        "identifiers",
        nargs="+",
        help="Substructure identifiers, e.g. 3iek.A_17-28,A_56-294",
    )
    parser.add_argument(
        "--data-dir", default="structures", help="Directory holding full structures"
    )
    parser.add_argument(
        "--output-dir", default=".", help="Directory for reduced structures"
    )
    parser.add_argument(
        "--cutoff",
        type=float,
        default=DEFAULT_LIGAND_PROXIMITY_CUTOFF,
        help="Distance cutoff for attaching nearby ligands (Angstroms)",
    )
    parser.add_argument(
        "--format",
        choices=["pdb", "cif"],
        default="pdb",
        help="Output file format",
    )
    parser.add_argument(
        "--no-fetch",
        action="store_true",
        help="Do not download entries missing from the data directory",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--log-file", help="Also write log messages to this file")
    return parser


def output_path(output_dir: str, identifier: SubstructureIdentifier, file_format: str) -> str:
    """Build the output file path for an identifier."""
    stem = _UNSAFE_FILENAME_CHARS.sub("_", str(identifier))
    return os.path.join(output_dir, f"{stem}.{file_format}")


def reduce_identifier(
    text: str,
    repository: StructureRepository,
    output_dir: str,
    cutoff: float,
    file_format: str,
) -> str:
    """
    Reduce one identifier and write the result.

    Returns:
        Path of the written file
    """
    identifier = SubstructureIdentifier.parse(text)
    full = identifier.load_structure(repository)
    if full is None:
        raise SubstructureError(f"No entry code in identifier {text}")

    reduced = StructureReducer(identifier, cutoff=cutoff).reduce(full)
    path = output_path(output_dir, identifier, file_format)
    write_structure(reduced, path, file_format)
    logger.info(f"Wrote {identifier} to {path}")
    return path


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for substructure extraction CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    repository = StructureRepository(args.data_dir, fetch=not args.no_fetch)
    os.makedirs(args.output_dir, exist_ok=True)

    failed = 0
    for text in tqdm(args.identifiers, desc="Reducing", disable=len(args.identifiers) < 2):
        try:
            reduce_identifier(
                text, repository, args.output_dir, args.cutoff, args.format
            )
        except _PER_IDENTIFIER_ERRORS as e:
            logger.error(f"Failed to reduce {text}: {e}")
            failed += 1

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
