#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed dataclass models for parsed AME2020 mass-table rows

Both models are frozen dataclasses carrying plain Python scalars.  Their
field annotations carry :mod:`pydantic` constraints (unsigned 32-bit N and
Z, symbols of at most three characters, strict numbers) which the
converters apply when rebuilding records from dicts or JSON; direct
construction does not validate.  Models are the sole output of the reader
layer and the sole input accepted by the converter layer.

Hierarchy
---------
::

    Value     mean / uncertainty pair with an "estimated" flag
    Nuclide   one row of the mass table

Units
-----
* Mass excess, binding energy per nucleon and beta-decay energy are in
  **keV**.
* Atomic mass is in **u** (unified atomic mass units), already rescaled
  from the micro-u representation used by the file.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from pydantic import Field, Strict, StringConstraints

ELEMENT_MAX_LENGTH: int = 3
"""Maximum length of an element symbol, fixed by the column width."""

U32_MAX: int = (1 << 32) - 1
"""Largest neutron or proton number a record can hold."""

# Field constraints enforced when records are built from dicts or JSON
Real = Annotated[float, Strict()]
Flag = Annotated[bool, Strict()]
UInt32 = Annotated[int, Strict(), Field(ge=0, le=U32_MAX)]
Symbol = Annotated[str, StringConstraints(strict=True, max_length=ELEMENT_MAX_LENGTH)]


@dataclass(frozen=True)
class Value:
    """A measured or estimated quantity with its uncertainty

    Values compare by :attr:`mean` only.  The ordering is partial: every
    comparison involving a NaN mean is ``False``.  Equality, on the other
    hand, is field-wise.

    Parameters
    ----------
    mean : float
        Central value.
    uncertainty : float
        One-sigma uncertainty, same units as *mean*.
    is_estimated : bool, optional
        ``True`` when the evaluation marked the value as non-experimental
        (``#`` in place of the decimal point).  Default ``False``.
    """

    mean: Real
    uncertainty: Real
    is_estimated: Flag = False

    def __lt__(self, other: Value) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.mean < other.mean

    def __le__(self, other: Value) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.mean <= other.mean

    def __gt__(self, other: Value) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.mean > other.mean

    def __ge__(self, other: Value) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.mean >= other.mean


@dataclass(frozen=True)
class Nuclide:
    """One row of the AME2020 mass table

    Instances are produced by :class:`~pyame.readers.ame.NuclideIter` and
    consumed by the converters in :mod:`pyame.converters`.

    Parameters
    ----------
    n : int
        Neutron number.
    z : int
        Proton number.
    element : str
        Chemical symbol, at most three characters.
    mass_excess : Value
        Difference between the atomic mass and the mass number (keV).
    binding_energy_per_nucleon : Value
        Binding energy divided by A (keV).
    beta_decay_energy : Value | None
        Beta-decay energy (keV), ``None`` when not applicable.
    atomic_mass : Value
        Atomic mass (u).

    Examples
    --------
    >>> from pyame.utils.parsing import parse_nuclide
    >>> nuc = parse_nuclide(line)
    >>> nuc.n, nuc.z, nuc.element
    (1, 0, 'n')
    """

    n: UInt32
    z: UInt32
    element: Symbol
    mass_excess: Value
    binding_energy_per_nucleon: Value
    beta_decay_energy: Value | None
    atomic_mass: Value

    def __post_init__(self) -> None:
        assert len(self.element) <= ELEMENT_MAX_LENGTH, (
            f"element symbol {self.element!r} exceeds {ELEMENT_MAX_LENGTH} characters"
        )

    @property
    def a(self) -> int:
        """Mass number A = N + Z."""
        return self.n + self.z
