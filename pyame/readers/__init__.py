#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Readers for AME2020 mass tables

* :class:`~pyame.readers.ame.NuclideIter` : lazy scanner over any line
  source, yielding one item per data line.
* :class:`~pyame.readers.ame.AMEReader` : file-path reader built on it,
  sharing the :class:`~pyame.readers.base.BaseReader` interface.
* :func:`~pyame.readers.ame.read_nuclides` : collect a line source into a
  list, stopping at the first error.
"""

from __future__ import annotations

from pyame.readers.ame import AMEReader, NuclideIter, ReadState, read_nuclides

__all__ = ["AMEReader", "NuclideIter", "ReadState", "read_nuclides"]
