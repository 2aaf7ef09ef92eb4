#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared utilities for fixed-column parsing

This sub-package centralises the stateless column extraction and numeric
conversion helpers so that the record scanner only deals with line
classification.
"""

from __future__ import annotations
