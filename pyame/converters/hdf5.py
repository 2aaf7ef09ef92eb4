#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
HDF5 export of AME2020 nuclide tables

Writes a columnar layout: one dataset per scalar field, and one group per
:class:`~pyame.models.records.Value` quantity holding ``mean``,
``uncertainty`` and ``is_estimated`` arrays aligned with the ``n`` / ``z``
columns.

HDF5 Layout
-----------
::

    /metadata/source                       original file name
    /metadata/count                        number of nuclides
    /nuclides/n, z, a                      int64
    /nuclides/element                      variable-length UTF-8 strings
    /nuclides/mass_excess/                 mean, uncertainty, is_estimated (keV)
    /nuclides/binding_energy_per_nucleon/  mean, uncertainty, is_estimated (keV)
    /nuclides/beta_decay_energy/           mean, uncertainty, is_estimated, present (keV)
    /nuclides/atomic_mass/                 mean, uncertainty, is_estimated (u)

Absent beta-decay energies are stored as NaN with ``present == False``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import numpy as np

try:
    import h5py
except ImportError as _exc:  # pragma: no cover
    raise ImportError(
        "The 'h5py' package is required by the HDF5 converter.  "
        "Install it with: pip install h5py"
    ) from _exc

from pyame.exceptions import ConversionError
from pyame.models.records import Nuclide, Value
from pyame.readers.ame import AMEReader

logger = logging.getLogger(__name__)

QUANTITY_UNITS: dict[str, str] = {
    "mass_excess": "keV",
    "binding_energy_per_nucleon": "keV",
    "beta_decay_energy": "keV",
    "atomic_mass": "u",
}
"""Units attribute written on each quantity's ``mean`` / ``uncertainty``."""

_MISSING = Value(mean=float("nan"), uncertainty=float("nan"))


# ---------------------------------------------------------------------------
# Internal writers
# ---------------------------------------------------------------------------

def _create_value_group(
    parent: h5py.Group,
    name: str,
    values: Sequence[Value],
    units: str,
) -> h5py.Group:
    """Write aligned ``mean`` / ``uncertainty`` / ``is_estimated`` arrays

    Parameters
    ----------
    parent : h5py.Group
        Parent group.
    name : str
        Name of the new group.
    values : Sequence[Value]
        One value per nuclide.
    units : str
        Physical units stored as ``ds.attrs["units"]``.

    Returns
    -------
    h5py.Group
        The created group.
    """
    grp = parent.create_group(name)
    mean = grp.create_dataset("mean", data=np.array([v.mean for v in values], dtype="f8"))
    mean.attrs["units"] = units
    unc = grp.create_dataset("uncertainty", data=np.array([v.uncertainty for v in values], dtype="f8"))
    unc.attrs["units"] = units
    grp.create_dataset("is_estimated", data=np.array([v.is_estimated for v in values], dtype=bool))
    return grp


def write_nuclides(
    h5f: h5py.File,
    nuclides: Sequence[Nuclide],
    *,
    source: str = "",
) -> None:
    """Write a nuclide table into an open HDF5 file

    Parameters
    ----------
    h5f : h5py.File
        Open HDF5 file handle (write mode).
    nuclides : Sequence[Nuclide]
        Records to write; their order is kept.
    source : str, optional
        Name of the file the records came from, stored as metadata.
    """
    meta = h5f.create_group("metadata")
    meta.create_dataset("source", data=source, dtype=h5py.string_dtype(encoding="utf-8"))
    meta.create_dataset("count", data=np.int64(len(nuclides)))

    root = h5f.create_group("nuclides")
    n = np.array([nuc.n for nuc in nuclides], dtype="i8")
    z = np.array([nuc.z for nuc in nuclides], dtype="i8")
    root.create_dataset("n", data=n)
    root.create_dataset("z", data=z)
    root.create_dataset("a", data=n + z)
    root.create_dataset(
        "element",
        data=np.array([nuc.element for nuc in nuclides], dtype=object),
        dtype=h5py.string_dtype(encoding="utf-8"),
    )

    _create_value_group(
        root, "mass_excess",
        [nuc.mass_excess for nuc in nuclides],
        QUANTITY_UNITS["mass_excess"],
    )
    _create_value_group(
        root, "binding_energy_per_nucleon",
        [nuc.binding_energy_per_nucleon for nuc in nuclides],
        QUANTITY_UNITS["binding_energy_per_nucleon"],
    )
    beta = _create_value_group(
        root, "beta_decay_energy",
        [nuc.beta_decay_energy or _MISSING for nuc in nuclides],
        QUANTITY_UNITS["beta_decay_energy"],
    )
    beta.create_dataset(
        "present",
        data=np.array([nuc.beta_decay_energy is not None for nuc in nuclides], dtype=bool),
    )
    _create_value_group(
        root, "atomic_mass",
        [nuc.atomic_mass for nuc in nuclides],
        QUANTITY_UNITS["atomic_mass"],
    )

    logger.debug("Wrote %d nuclides to HDF5", len(nuclides))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def create_hdf5(
    source_path: Path | str,
    output_path: Path | str,
    *,
    overwrite: bool = False,
) -> int:
    """Parse an AME2020 file and write it as HDF5

    Parameters
    ----------
    source_path : Path | str
        Path to the ``mass.mas20`` file.
    output_path : Path | str
        Path for the output HDF5 file.  Parent directories are created.
    overwrite : bool, optional
        Overwrite an existing file.  Default ``False``.

    Returns
    -------
    int
        Number of nuclides written.

    Raises
    ------
    FileFormatError
        If *source_path* is not a file.
    AMEError
        The first per-line error of the source.
    ConversionError
        If the output exists and *overwrite* is ``False``, or writing
        fails.

    Examples
    --------
    >>> create_hdf5("mass.mas20", "ame2020.h5")
    3558
    """
    src = Path(source_path)
    out = Path(output_path)
    if out.exists() and not overwrite:
        raise ConversionError(f"Output file {out} already exists and overwrite=False.")

    nuclides = AMEReader().read(src)

    out.parent.mkdir(parents=True, exist_ok=True)
    try:
        mode = "w" if overwrite else "w-"
        with h5py.File(str(out), mode) as h5f:
            write_nuclides(h5f, nuclides, source=src.name)
    except Exception as exc:
        raise ConversionError(f"Failed to write HDF5 {out}: {exc}") from exc

    logger.info("Wrote %d nuclides to %s", len(nuclides), out)
    return len(nuclides)
