#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed dataclass models for AME2020 parsed data

Both models are frozen ``dataclasses`` carrying plain scalars.  They are
the sole output format of the reader layer and the sole input format
accepted by the converter layer.
"""

from __future__ import annotations

from pyame.models.records import Nuclide, Value

__all__ = ["Nuclide", "Value"]
