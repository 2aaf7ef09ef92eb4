#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyAME command-line interface

Commands:

1. **json**      Convert a mass table to JSON on standard output
2. **hdf5**      Convert a mass table to a columnar HDF5 file
3. **download**  Download the AME2020 mass table from the IAEA AMDC

Usage
-----
::

    # Fetch the table, then convert it
    python -m pyame.cli download --out data/mass.mas20
    python -m pyame.cli json data/mass.mas20 > ame2020.json
    python -m pyame.cli hdf5 data/mass.mas20 ame2020.h5 --overwrite

Every command fails as a whole on the first unreadable data line.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pyame.exceptions import PyAMEError

logger = logging.getLogger("pyame.cli")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_json(args) -> int:
    """Write the nuclides of a mass table to stdout as pretty JSON."""
    from pyame.converters.serialize import dump_json
    from pyame.readers.ame import AMEReader

    nuclides = AMEReader().read(args.file)
    dump_json(nuclides, sys.stdout, indent=args.indent)
    logger.debug("Converted %d nuclides from %s", len(nuclides), args.file)
    return 0


def cmd_hdf5(args) -> int:
    """Write the nuclides of a mass table to an HDF5 file."""
    from pyame.converters.hdf5 import create_hdf5

    count = create_hdf5(args.file, args.output, overwrite=args.overwrite)
    print(f"{args.file} -> {args.output}: {count} nuclides")
    return 0


def cmd_download(args) -> int:
    """Download the AME2020 mass table."""
    from pyame.io.download import download_mass_table

    path = download_mass_table(args.out)
    print(f"Downloaded {path}")
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="pyame",
        description="Convert AME2020 atomic mass tables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
    python -m pyame.cli download                           # ./mass.mas20
    python -m pyame.cli json mass.mas20 > ame2020.json     # JSON to stdout
    python -m pyame.cli hdf5 mass.mas20 ame2020.h5         # columnar HDF5
""",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    sub = parser.add_subparsers(dest="command", help="Command to run")

    p_json = sub.add_parser("json", help="Convert a mass table to JSON on stdout")
    p_json.add_argument("file", type=Path, help="File to read from")
    p_json.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)",
    )

    p_hdf5 = sub.add_parser("hdf5", help="Convert a mass table to HDF5")
    p_hdf5.add_argument("file", type=Path, help="File to read from")
    p_hdf5.add_argument("output", type=Path, help="HDF5 file to write")
    p_hdf5.add_argument(
        "--overwrite",
        action="store_true",
        help="Overwrite an existing output file",
    )

    p_dl = sub.add_parser("download", help="Download the AME2020 mass table")
    p_dl.add_argument(
        "--out", "-o",
        type=Path,
        default=None,
        help="Destination file (default: ./mass.mas20)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "json": cmd_json,
        "hdf5": cmd_hdf5,
        "download": cmd_download,
    }

    try:
        return commands[args.command](args)
    except PyAMEError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
