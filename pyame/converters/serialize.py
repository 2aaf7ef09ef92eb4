#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Dict and JSON mapping for :class:`Value` and :class:`Nuclide`

Keys are the dataclass attribute names.  ``is_estimated`` is written only
when it is ``True`` and read as ``False`` when missing;
``beta_decay_energy`` is written as ``null`` when absent and read as
``None`` when ``null`` or missing.  Unknown keys are ignored on read.

Example document::

    [
      {
        "n": 1,
        "z": 0,
        "element": "n",
        "mass_excess": {"mean": 8071.31806, "uncertainty": 0.00044},
        "binding_energy_per_nucleon": {"mean": 0.0, "uncertainty": 0.0},
        "beta_decay_energy": {"mean": 782.347, "uncertainty": 0.0004},
        "atomic_mass": {"mean": 1.0086649159, "uncertainty": 4.7e-10}
      }
    ]

Every malformed input raises :class:`~pyame.exceptions.SerializationError`.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from typing import IO, Annotated, Any

from pydantic import BeforeValidator, TypeAdapter, ValidationError

from pyame.exceptions import SerializationError
from pyame.models.records import Nuclide, Value

logger = logging.getLogger(__name__)


def _default_beta(data: Any) -> Any:
    # a missing beta-decay energy reads as not applicable
    if isinstance(data, Mapping) and "beta_decay_energy" not in data:
        return {**data, "beta_decay_energy": None}
    return data


_NuclideInput = Annotated[Nuclide, BeforeValidator(_default_beta)]

_VALUE_ADAPTER: TypeAdapter[Value] = TypeAdapter(Value)
_NUCLIDE_ADAPTER: TypeAdapter[Nuclide] = TypeAdapter(_NuclideInput)
_TABLE_ADAPTER: TypeAdapter[list[Nuclide]] = TypeAdapter(list[_NuclideInput])


def _error_message(exc: ValidationError, where: str) -> str:
    """Render the first validation error as ``<where><location>: <reason>``"""
    err = exc.errors()[0]
    loc = "".join(f"[{part}]" if isinstance(part, int) else f".{part}" for part in err["loc"])
    return f"{where}{loc}: {err['msg']}"


# ---------------------------------------------------------------------------
# To plain Python
# ---------------------------------------------------------------------------

def value_to_dict(value: Value) -> dict[str, Any]:
    """Return the dict form of *value*, omitting a false ``is_estimated``"""
    return _VALUE_ADAPTER.dump_python(value, exclude_defaults=True)


def nuclide_to_dict(nuclide: Nuclide) -> dict[str, Any]:
    """Return the dict form of *nuclide*, keys in attribute order"""
    return _NUCLIDE_ADAPTER.dump_python(nuclide, exclude_defaults=True)


# ---------------------------------------------------------------------------
# From plain Python
# ---------------------------------------------------------------------------

def value_from_dict(data: Any, where: str = "value") -> Value:
    """Build a :class:`Value` from its dict form

    Raises
    ------
    SerializationError
        If *data* is not a mapping, or a field is missing or mistyped.
    """
    try:
        return _VALUE_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise SerializationError(_error_message(exc, where)) from exc


def nuclide_from_dict(data: Any, where: str = "nuclide") -> Nuclide:
    """Build a :class:`Nuclide` from its dict form

    Raises
    ------
    SerializationError
        If *data* is not a mapping, or a field is missing, mistyped, or
        out of range.
    """
    try:
        return _NUCLIDE_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise SerializationError(_error_message(exc, where)) from exc


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

def dumps_json(nuclides: Iterable[Nuclide], *, indent: int | None = 2) -> str:
    """Serialize nuclides to a JSON array string

    Non-finite floats are written as ``NaN`` / ``Infinity``, which
    :func:`loads_json` reads back.
    """
    records = _TABLE_ADAPTER.dump_python(list(nuclides), exclude_defaults=True)
    return json.dumps(records, indent=indent)


def dump_json(nuclides: Iterable[Nuclide], fp: IO[str], *, indent: int | None = 2) -> None:
    """Write nuclides to *fp* as a JSON array

    Parameters
    ----------
    nuclides : Iterable[Nuclide]
        Records to write, in order.
    fp : IO[str]
        Text stream opened for writing.
    indent : int | None, optional
        Indentation passed to :func:`json.dump`.  Default 2 (pretty).
    """
    records = _TABLE_ADAPTER.dump_python(list(nuclides), exclude_defaults=True)
    json.dump(records, fp, indent=indent)
    fp.write("\n")
    logger.debug("Wrote %d nuclides as JSON", len(records))


def loads_json(text: str | bytes) -> list[Nuclide]:
    """Parse a JSON array of nuclides

    Parameters
    ----------
    text : str | bytes
        JSON document.  ``bytes`` may be UTF-8, UTF-16 or UTF-32.

    Returns
    -------
    list[Nuclide]

    Raises
    ------
    SerializationError
        If *text* is not valid JSON, not an array, or any element is not
        a valid nuclide.
    """
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise SerializationError(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise SerializationError(f"Expected a JSON array, got {type(data).__name__}")
    try:
        return _TABLE_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise SerializationError(_error_message(exc, "")) from exc


def load_json(fp: IO[str] | IO[bytes]) -> list[Nuclide]:
    """Read a JSON array of nuclides from a text or binary stream"""
    return loads_json(fp.read())
