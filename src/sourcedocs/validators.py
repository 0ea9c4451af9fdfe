"""Documentation coverage checks."""

from __future__ import annotations

from typing import Iterable

from .comment import debug_info
from .config import Config
from .models import DebugInfo, DocRecord


def summarize(infos: Iterable[DebugInfo]) -> tuple[float, list[str]]:
    """Compute coverage and undocumented names from debug records.

    Returns:
        (coverage, names) where coverage is between 0.0 and 1.0 (1.0 for
        no records) and names are the undocumented symbols in input order
    """
    infos = list(infos)
    missing = [info.name for info in infos if not info.is_documented]
    if not infos:
        return 1.0, missing
    return (len(infos) - len(missing)) / len(infos), missing


def undocumented(
    records: Iterable[DocRecord], config: Config | None = None
) -> list[str]:
    """Return the names of records with an empty comment, in input order."""
    return summarize(debug_info(record, config) for record in records)[1]


def compute_coverage(
    records: Iterable[DocRecord], config: Config | None = None
) -> float:
    """Compute the documented fraction of ``records``, 1.0 when there are none."""
    return summarize(debug_info(record, config) for record in records)[0]
