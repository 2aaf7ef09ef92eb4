#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
I/O utilities for fetching the AME2020 mass table from the IAEA AMDC

See :mod:`pyame.io.download`.
"""

from __future__ import annotations
