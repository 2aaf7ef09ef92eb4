#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Converters for parsed nuclide tables

* :mod:`~pyame.converters.serialize`
    Dict / JSON mapping of :class:`Value` and :class:`Nuclide`.
* :func:`~pyame.converters.hdf5.create_hdf5`
    Columnar HDF5 export.  Imported lazily so that JSON users do not need
    ``h5py``.
"""

from __future__ import annotations

from pyame.converters.serialize import (
    dump_json,
    dumps_json,
    load_json,
    loads_json,
    nuclide_from_dict,
    nuclide_to_dict,
    value_from_dict,
    value_to_dict,
)

__all__ = [
    "dump_json",
    "dumps_json",
    "load_json",
    "loads_json",
    "nuclide_from_dict",
    "nuclide_to_dict",
    "value_from_dict",
    "value_to_dict",
]
