"""Export serializers: unified patch, standalone HTML report, and JSON document"""

import html
import json
from datetime import datetime, timezone
from typing import Optional

from linediff.core.models import ChangeKind, DiffOperation, DiffStats, ExportFormat
from linediff.core.stats import chunk, chunk_header, compute_stats


PATCH_PREFIX = {ChangeKind.added: "+", ChangeKind.removed: "-", ChangeKind.unchanged: " "}

HTML_STYLE = """\
        body { font-family: monospace; margin: 20px; }
        .diff-container { border: 1px solid #ddd; }
        .diff-header { background: #f5f5f5; padding: 10px; font-weight: bold; }
        .diff-line { padding: 2px 5px; white-space: pre-wrap; }
        .added { background: #d4edda; }
        .removed { background: #f8d7da; }
        .unchanged { background: #fff; }
        .line-number { color: #666; margin-right: 10px; }
"""


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _iso(ts: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a 'Z' suffix."""
    return ts.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def export_patch(
    ops: list[DiffOperation],
    left_name: str = "Original",
    right_name: str = "Modified",
    context_lines: int = 3,
    ) -> str:
    """Render ops as a unified-diff style patch with one @@ block per chunk."""
    parts = [f"--- {left_name}\n", f"+++ {right_name}\n"]
    for hunk in chunk(ops, context_lines):
        left_start, left_count, right_start, right_count = chunk_header(hunk)
        parts.append(f"@@ -{left_start},{left_count} +{right_start},{right_count} @@\n")
        parts.extend(f"{PATCH_PREFIX[op.kind]}{op.content}\n" for op in hunk if op.kind in PATCH_PREFIX)
    return "".join(parts)


def export_html(
    ops: list[DiffOperation],
    left_name: str = "Original",
    right_name: str = "Modified",
    show_line_numbers: bool = True,
    ) -> str:
    """Render ops as a self-contained HTML page, one classed div per line."""
    title = f"{html.escape(left_name)} vs {html.escape(right_name)}"
    lines = []
    for op in ops:
        number = ""
        if show_line_numbers:
            number = (
                f'<span class="line-number">'
                f'{op.left_line_number or ""}:{op.right_line_number or ""}</span>'
            )
        lines.append(f'<div class="diff-line {op.kind.value}">{number}{html.escape(op.content, quote=False)}</div>')

    return (
        "<!DOCTYPE html>\n<html>\n<head>\n"
        f"    <title>Diff: {title}</title>\n"
        f"    <style>\n{HTML_STYLE}    </style>\n"
        "</head>\n<body>\n"
        '    <div class="diff-container">\n'
        f'        <div class="diff-header">{title}</div>'
        + "".join(lines)
        + "    </div>\n</body>\n</html>"
    )


def export_json(
    left_text: str,
    right_text: str,
    ops: list[DiffOperation],
    stats: Optional[DiffStats] = None,
    left_name: str = "Original",
    right_name: str = "Modified",
    timestamp: Optional[datetime] = None,
    ) -> str:
    """Bundle both inputs, the operations and the stats into a pretty-printed JSON document.

    Keys appear in the order timestamp, files, diff, stats. When both names
    are equal the right text replaces the left one under that key.
    """
    stats = stats or compute_stats(ops)
    document = {
        "timestamp": _iso(timestamp or _utc_now()),
        "files": {left_name: left_text, right_name: right_text},
        "diff": [op.as_json() for op in ops],
        "stats": stats.model_dump(),
    }
    return json.dumps(document, indent=2, ensure_ascii=False)


def export_filename(fmt: ExportFormat, timestamp: Optional[datetime] = None) -> str:
    """Suggested download name, e.g. 'diff-2024-05-01.patch'."""
    ts = (timestamp or _utc_now()).astimezone(timezone.utc)
    return f"diff-{ts.date().isoformat()}.{ExportFormat(fmt).value}"


def export_diff(
    fmt: ExportFormat,
    ops: list[DiffOperation],
    left_text: str = "",
    right_text: str = "",
    left_name: str = "Original",
    right_name: str = "Modified",
    context_lines: int = 3,
    show_line_numbers: bool = True,
    timestamp: Optional[datetime] = None,
    ) -> str:
    """Dispatch to the exporter for fmt."""
    fmt = ExportFormat(fmt)
    if fmt == ExportFormat.patch:
        return export_patch(ops, left_name, right_name, context_lines)
    if fmt == ExportFormat.html:
        return export_html(ops, left_name, right_name, show_line_numbers)
    return export_json(left_text, right_text, ops, compute_stats(ops), left_name, right_name, timestamp)
