"""Boundary orchestration: read two text sources, diff them, export to a sink"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from linediff.core.engine import DEFAULT_WARN_CELLS, compute_diff
from linediff.core.export import export_diff, export_filename
from linediff.core.models import DiffOperation, DiffStats, ExportFormat, NormalizationConfig
from linediff.core.stats import compute_stats
from linediff.util.fs import TextSink, TextSource


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Comparison:
    """A finished comparison: both inputs with their names, the operations and stats."""
    left_name:  str
    right_name: str
    left_text:  str
    right_text: str
    diff:       list[DiffOperation] = field(default_factory=list)
    stats:      DiffStats = field(default_factory=DiffStats)

    @property
    def identical(self) -> bool:
        return self.stats.additions == 0 and self.stats.deletions == 0 and self.stats.modifications == 0


def compare(
    left: TextSource,
    right: TextSource,
    config: Optional[NormalizationConfig] = None,
    max_cells: Optional[int] = None,
    warn_cells: int = DEFAULT_WARN_CELLS,
    ) -> Comparison:
    """Read both sources and diff them. Source errors propagate before any diffing."""
    left_text, right_text = left.read(), right.read()
    ops = compute_diff(left_text, right_text, config, max_cells=max_cells, warn_cells=warn_cells)
    stats = compute_stats(ops)
    logger.info(
        "Compared %s vs %s: +%d -%d (%d lines)",
        left.name, right.name, stats.additions, stats.deletions, stats.total,
    )
    return Comparison(left.name, right.name, left_text, right_text, ops, stats)


def export_comparison(
    comparison: Comparison,
    fmt: ExportFormat,
    sink: TextSink,
    context_lines: int = 3,
    show_line_numbers: bool = True,
    timestamp: Optional[datetime] = None,
    ) -> Path | str:
    """Serialize comparison as fmt and hand it to sink under the suggested filename."""
    # one clock reading for both the document and its filename
    timestamp = timestamp or datetime.now(timezone.utc)
    content = export_diff(
        fmt, comparison.diff,
        left_text=comparison.left_text, right_text=comparison.right_text,
        left_name=comparison.left_name, right_name=comparison.right_name,
        context_lines=context_lines, show_line_numbers=show_line_numbers,
        timestamp=timestamp,
    )
    return sink.write(content, export_filename(fmt, timestamp))
