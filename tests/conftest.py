#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared pytest fixtures for PyAME tests

Provides a fixed-column line builder and synthetic ``mass.mas20``-like
files for testing the field extractor, the scanner, and the converters
without requiring the real AME2020 data file.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from pyame.models.records import Nuclide, Value
from pyame.utils.parsing import (
    BETA_COLUMNS,
    BETA_FLAG_COLUMNS,
    BETA_UNC_COLUMNS,
    BINDING_COLUMNS,
    BINDING_UNC_COLUMNS,
    ELEMENT_COLUMNS,
    MASS_EXCESS_COLUMNS,
    MASS_EXCESS_UNC_COLUMNS,
    MASS_FRAC_COLUMNS,
    MASS_FRAC_UNC_START,
    MASS_INT_COLUMNS,
    N_COLUMNS,
    Z_COLUMNS,
)

# Neutron row as printed in mass.mas20
NEUTRON_LINE = (
    "0  1    1    0    1  n         8071.31806     0.00044       0.0        0.0"
    "     B-    782.3470     0.0004    1 008664.91590     0.00047"
)

PREAMBLE = [
    "1    a0dsskgw",
    "                     A T O M I C   M A S S   A D J U S T M E N T",
    "  This is one file out of a series of 3 files published in:",
    "    format    :  a1,i3,i5,i5,i5,1x,a3,a4,1x,f14.6,f12.6,f13.5,1x,f10.5,1x,a2,f13.5,f11.5,1x,i3,1x,f13.6,f12.6",
    "                 cc NZ  N  Z  A    el  o     mass  unc binding unc     B  beta  unc    atomic_mass   unc",
]

HEADERS = [
    "1    N-Z    N    Z   A  EL    O     MASS EXCESS(keV)     BINDING ENERGY/A (keV)"
    "      BETA-DECAY ENERGY(keV)      ATOMIC MASS(micro-u)",
    "                                                                                 "
    "                                                           ",
]


def make_line(
    n: str = "1",
    z: str = "0",
    element: str = "n",
    mass_excess: tuple[str, str] = ("8071.31806", "0.00044"),
    binding: tuple[str, str] = ("0.0", "0.0"),
    beta: tuple[str, str] | None = ("782.3470", "0.0004"),
    mass_int: str = "1",
    mass_frac: tuple[str, str] = ("008664.91590", "0.00047"),
    prefix: str = "0",
) -> str:
    """Assemble a data line, right-justifying each field in its columns"""
    cols = [" "] * MASS_FRAC_UNC_START

    def put(columns: tuple[int, int], text: str) -> None:
        start, stop = columns
        assert len(text) <= stop - start, f"{text!r} does not fit {columns}"
        cols[start:stop] = text.rjust(stop - start)

    cols[0] = prefix
    put(N_COLUMNS, n)
    put(Z_COLUMNS, z)
    put(ELEMENT_COLUMNS, element)
    put(MASS_EXCESS_COLUMNS, mass_excess[0])
    put(MASS_EXCESS_UNC_COLUMNS, mass_excess[1])
    put(BINDING_COLUMNS, binding[0])
    put(BINDING_UNC_COLUMNS, binding[1])
    if beta is None:
        put(BETA_FLAG_COLUMNS, "*")
    else:
        put(BETA_COLUMNS, beta[0])
        put(BETA_UNC_COLUMNS, beta[1])
    put(MASS_INT_COLUMNS, mass_int)
    put(MASS_FRAC_COLUMNS, mass_frac[0])
    return "".join(cols) + mass_frac[1].rjust(11)


HYDROGEN_LINE = make_line(
    n="0", z="1", element="H",
    mass_excess=("7288.971064", "0.000013"),
    beta=None,
    mass_frac=("007825.031898", "0.000014"),
    prefix=" ",
)

DEUTERIUM_LINE = make_line(
    n="1", z="1", element="H",
    mass_excess=("13135.722895", "0.000015"),
    binding=("1112.2831", "0.0002"),
    beta=None,
    mass_int="2",
    mass_frac=("014101.777844", "0.000015"),
)

LITHIUM3_LINE = make_line(
    n="0", z="3", element="Li",
    mass_excess=("28670#", "2000#"),
    binding=("-2267#", "667#"),
    beta=None,
    mass_int="3",
    mass_frac=("030780#", "2147#"),
    prefix=" ",
)

DATA_LINES = [NEUTRON_LINE, HYDROGEN_LINE, DEUTERIUM_LINE, LITHIUM3_LINE]


def as_file_text(lines: list[str]) -> str:
    return "\n".join(lines) + "\n"


@pytest.fixture
def neutron() -> Nuclide:
    """The neutron record parsed from :data:`NEUTRON_LINE`"""
    return Nuclide(
        n=1,
        z=0,
        element="n",
        mass_excess=Value(8071.31806, 0.00044),
        binding_energy_per_nucleon=Value(0.0, 0.0),
        beta_decay_energy=Value(782.347, 0.0004),
        atomic_mass=Value(1.0 + 8664.91590e-6, 0.00047e-6),
    )


@pytest.fixture
def sample_nuclides(neutron: Nuclide) -> list[Nuclide]:
    """A small in-memory table, including absent and estimated values"""
    return [
        neutron,
        Nuclide(
            n=0,
            z=1,
            element="H",
            mass_excess=Value(7288.971064, 0.000013),
            binding_energy_per_nucleon=Value(0.0, 0.0),
            beta_decay_energy=None,
            atomic_mass=Value(1.007825031898, 1.4e-11),
        ),
        Nuclide(
            n=0,
            z=3,
            element="Li",
            mass_excess=Value(28670.0, 2000.0, is_estimated=True),
            binding_energy_per_nucleon=Value(-2267.0, 667.0, is_estimated=True),
            beta_decay_energy=None,
            atomic_mass=Value(3.030780, 2147e-6, is_estimated=True),
        ),
    ]


@pytest.fixture
def mass_table(tmp_path: Path) -> Path:
    """A complete synthetic ``mass.mas20`` with four data lines"""
    path = tmp_path / "mass.mas20"
    path.write_text(as_file_text(PREAMBLE + HEADERS + DATA_LINES), encoding="utf-8")
    return path


@pytest.fixture
def broken_table(tmp_path: Path) -> Path:
    """A ``mass.mas20`` whose second data line is truncated"""
    path = tmp_path / "broken.mas20"
    lines = PREAMBLE + HEADERS + [NEUTRON_LINE, HYDROGEN_LINE[:60], DEUTERIUM_LINE]
    path.write_text(as_file_text(lines), encoding="utf-8")
    return path
