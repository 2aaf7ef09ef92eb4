#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
AME2020 mass-table downloader

Downloads the non-rounded AME2020 mass table from the IAEA Atomic Mass
Data Center mirror.

Data Sources
------------
* ``https://www-nds.iaea.org/amdc/ame2020/mass_1.mas20.txt``

Examples
--------
>>> from pyame.io.download import download_mass_table
>>> download_mass_table()                    # writes ./mass.mas20
>>> download_mass_table("data/mass.mas20")
"""

from __future__ import annotations

import logging
from pathlib import Path

from pyame.exceptions import DownloadError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Source metadata
# ---------------------------------------------------------------------------

AME2020_MASS_URL: str = "https://www-nds.iaea.org/amdc/ame2020/mass_1.mas20.txt"
"""Non-rounded AME2020 mass table (the ``mass.mas20`` format)."""

DEFAULT_FILENAME: str = "mass.mas20"
"""File name used when no output path is given."""

REQUEST_TIMEOUT: int = 60
"""Seconds to wait for the server before giving up."""

CHUNK_SIZE: int = 8192


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def download_mass_table(
    out_path: Path | str | None = None,
    *,
    url: str = AME2020_MASS_URL,
) -> Path:
    """Download the AME2020 mass table

    Parameters
    ----------
    out_path : Path | str | None, optional
        Destination file.  Defaults to ``./mass.mas20``.  Parent
        directories are created.
    url : str, optional
        Source URL.  Defaults to :data:`AME2020_MASS_URL`.

    Returns
    -------
    Path
        Path of the written file.

    Raises
    ------
    DownloadError
        If ``requests`` is missing, the request fails, or the file cannot
        be written.
    """
    try:
        import requests
    except ImportError as exc:
        raise DownloadError(
            "Download requires 'requests'.  Install with: pip install requests"
        ) from exc

    dst = Path(out_path) if out_path is not None else Path(DEFAULT_FILENAME)
    dst.parent.mkdir(parents=True, exist_ok=True)

    logger.info("Downloading AME2020 mass table from %s", url)
    n_bytes = 0
    try:
        with requests.get(url, stream=True, timeout=REQUEST_TIMEOUT) as resp:
            resp.raise_for_status()
            with open(dst, "wb") as f:
                for chunk in resp.iter_content(CHUNK_SIZE):
                    f.write(chunk)
                    n_bytes += len(chunk)
    except requests.RequestException as exc:
        raise DownloadError(f"Failed to download {url}: {exc}") from exc
    except OSError as exc:
        raise DownloadError(f"Failed to write {dst}: {exc}") from exc

    logger.info("Downloaded %d bytes to %s", n_bytes, dst)
    return dst
