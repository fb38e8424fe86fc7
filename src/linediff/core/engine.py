"""Top-level diff entry point: split, normalize, guard, build the LCS table, reconstruct"""

import logging
from typing import Optional

from linediff.core.errors import ResourceLimitExceeded
from linediff.core.lcs import build_lcs, reconstruct
from linediff.core.models import DiffOperation, NormalizationConfig
from linediff.core.normalize import normalize_lines


logger = logging.getLogger(__name__)

DEFAULT_WARN_CELLS = 1_000_000


def split_lines(text: str) -> list[str]:
    """Split on '\\n' only; the empty string has no lines, so '\\n'.join() round-trips."""
    return text.split("\n") if text else []


def compute_diff(
    left_text: str,
    right_text: str,
    config: Optional[NormalizationConfig] = None,
    max_cells: Optional[int] = None,
    warn_cells: int = DEFAULT_WARN_CELLS,
    ) -> list[DiffOperation]:
    """Return the line-level edit script turning left_text into right_text.

    max_cells bounds the LCS table size (m * n); exceeding it raises
    ResourceLimitExceeded before any table is allocated. None or 0 disables
    the check.
    """
    config = config or NormalizationConfig()
    lines_a, lines_b = split_lines(left_text), split_lines(right_text)
    cells = len(lines_a) * len(lines_b)

    if max_cells and cells > max_cells:
        raise ResourceLimitExceeded(len(lines_a), len(lines_b), max_cells)
    if warn_cells and cells > warn_cells:
        logger.warning("Large comparison: %d x %d lines (%d table cells)", len(lines_a), len(lines_b), cells)
    logger.debug(
        "Comparing %d vs %d lines (ignore_whitespace=%s, ignore_case=%s)",
        len(lines_a), len(lines_b), config.ignore_whitespace, config.ignore_case,
    )

    norm_a, norm_b = normalize_lines(lines_a, config), normalize_lines(lines_b, config)
    table = build_lcs(norm_a, norm_b)
    ops = reconstruct(lines_a, lines_b, norm_a, norm_b, table)

    logger.debug("LCS length %d, %d operations", table[-1][-1], len(ops))
    return ops
