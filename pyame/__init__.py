#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyAME - Python library for reading AME2020 atomic mass tables

Parse the fixed-column ``mass.mas20`` file of the Atomic Mass Evaluation
2020 into typed records, one per nuclide, and convert them to JSON or HDF5.

Pipeline
--------
1. **Download** the mass table from the IAEA AMDC:
   ``python -m pyame.cli download``

2. **JSON** (pretty-printed, on standard output):
   ``python -m pyame.cli json mass.mas20``

3. **HDF5** (columnar, one dataset per field):
   ``python -m pyame.cli hdf5 mass.mas20 ame2020.h5``

Modules
-------
readers
    Lazy line scanner and file reader.
models
    Frozen dataclass records returned by the readers.
converters
    JSON mapping and HDF5 export.
io
    Mass-table downloader.
utils
    Fixed-column field extraction.

Examples
--------
>>> from pyame import AMEReader
>>> nuclides = AMEReader().read("mass.mas20")
>>> nuclides[0].n, nuclides[0].z, nuclides[0].element
(1, 0, 'n')

Streaming, skipping lines that fail to parse:

>>> from pyame import AMEError, NuclideIter
>>> with open("mass.mas20", "rb") as fh:
...     heavy = [
...         nuc for nuc in NuclideIter(fh)
...         if not isinstance(nuc, AMEError) and nuc.z > 82
...     ]
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Melek Derman"

from pyame.models.records import Nuclide, Value
from pyame.readers.ame import AMEReader, NuclideIter, ReadState, read_nuclides
from pyame.exceptions import (
    PyAMEError,
    AMEError,
    IoError,
    IoErrorKind,
    ParseIntError,
    ParseFloatError,
    TooShortLineError,
    StrIndexError,
    FileFormatError,
    SerializationError,
    ConversionError,
    DownloadError,
)

__all__ = [
    # Version
    "__version__",
    # Models
    "Nuclide",
    "Value",
    # Readers
    "AMEReader",
    "NuclideIter",
    "ReadState",
    "read_nuclides",
    # Exceptions
    "PyAMEError",
    "AMEError",
    "IoError",
    "IoErrorKind",
    "ParseIntError",
    "ParseFloatError",
    "TooShortLineError",
    "StrIndexError",
    "FileFormatError",
    "SerializationError",
    "ConversionError",
    "DownloadError",
]
