#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Abstract base class for mass-table readers

Every concrete reader inherits from :class:`BaseReader` and implements
:meth:`read`, which returns the list of
:class:`~pyame.models.records.Nuclide` models found in a file, and
:meth:`iter`, which streams them.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path

from pyame.exceptions import AMEError
from pyame.models.records import Nuclide

logger = logging.getLogger(__name__)


class BaseReader(ABC):
    """Abstract base for file-path based mass-table readers

    Notes
    -----
    Readers must never call serialization or HDF5 writing functions;
    that is the responsibility of the converter layer.  The dependency
    direction is::

        utils ← models ← readers ← converters
    """

    @abstractmethod
    def read(self, path: Path | str, *, strict: bool = True) -> list[Nuclide]:
        """Parse a whole file and return its nuclides in file order

        Parameters
        ----------
        path : Path | str
            Filesystem path to the mass table.
        strict : bool, optional
            If ``True`` (default), raise the first per-line error;
            otherwise skip failing lines.

        Returns
        -------
        list[Nuclide]

        Raises
        ------
        FileFormatError
            If *path* is not a readable file.
        AMEError
            When *strict*, the first per-line read or parse error.
        """
        ...

    @abstractmethod
    def iter(self, path: Path | str) -> Iterator[Nuclide | AMEError]:
        """Lazily yield one item per data line of a file

        Parameters
        ----------
        path : Path | str
            Filesystem path to the mass table.

        Yields
        ------
        Nuclide | AMEError
            A parsed record, or the error for that line.

        Raises
        ------
        FileFormatError
            If *path* is not a readable file.
        """
        ...
