"""Plain-text views of a diff for terminal output: unified, split, and summary line"""

from typing import Optional

from linediff.core.models import ChangeKind, DiffOperation, DiffStats
from linediff.core.stats import chunk


PREFIX = {ChangeKind.added: "+", ChangeKind.removed: "-", ChangeKind.modified: "~"}
GAP = "..."


def _num(n: Optional[int], width: int) -> str:
    return str(n).rjust(width) if n else " " * width


def _number_width(ops: list[DiffOperation]) -> int:
    top = max((max(op.left_line_number or 0, op.right_line_number or 0) for op in ops), default=0)
    return max(len(str(top)), 1)


def _unified_rows(ops: list[DiffOperation], show_line_numbers: bool, width: int) -> list[str]:
    rows = []
    for op in ops:
        prefix = PREFIX.get(op.kind, " ")
        if show_line_numbers:
            rows.append(f"{_num(op.left_line_number, width)} {_num(op.right_line_number, width)} {prefix} {op.content}")
        else:
            rows.append(f"{prefix} {op.content}")
    return rows


def render_unified(
    ops: list[DiffOperation],
    show_line_numbers: bool = True,
    context_lines: Optional[int] = None,
    ) -> str:
    """One row per operation with optional left/right number columns.

    With context_lines set only the chunks around changes are shown,
    separated by a '...' row.
    """
    width = _number_width(ops)
    if context_lines is None:
        return "\n".join(_unified_rows(ops, show_line_numbers, width))

    blocks = ["\n".join(_unified_rows(hunk, show_line_numbers, width)) for hunk in chunk(ops, context_lines)]
    return f"\n{GAP}\n".join(blocks)


def _split_pairs(ops: list[DiffOperation]) -> list[tuple[Optional[DiffOperation], Optional[DiffOperation]]]:
    """Pair each run of removals with the additions that follow it, row by row."""
    pairs = []
    removed: list[DiffOperation] = []
    added: list[DiffOperation] = []

    def _flush():
        for k in range(max(len(removed), len(added))):
            pairs.append((
                removed[k] if k < len(removed) else None,
                added[k] if k < len(added) else None,
            ))
        removed.clear()
        added.clear()

    for op in ops:
        if op.kind == ChangeKind.removed:
            if added:
                _flush()
            removed.append(op)
        elif op.kind == ChangeKind.added:
            added.append(op)
        else:
            _flush()
            pairs.append((op, op))
    _flush()
    return pairs


def render_split(
    ops: list[DiffOperation],
    width: int = 80,
    show_line_numbers: bool = True,
    context_lines: Optional[int] = None,
    ) -> str:
    """Side-by-side view: left column shows the original, right column the modified text.

    context_lines limits the view to chunks the same way render_unified does.
    """
    num_width = _number_width(ops)
    column = max((width - 3) // 2, 10)

    def _cell(op: Optional[DiffOperation], line_number: Optional[int]) -> str:
        if op is None:
            return " " * column
        prefix = PREFIX.get(op.kind, " ")
        text = f"{prefix} {op.content}"
        if show_line_numbers:
            text = f"{_num(line_number, num_width)} {text}"
        return text[:column].ljust(column)

    def _rows(window: list[DiffOperation]) -> str:
        rows = []
        for left, right in _split_pairs(window):
            left_cell = _cell(left, left.left_line_number if left else None)
            right_cell = _cell(right, right.right_line_number if right else None)
            rows.append(f"{left_cell} | {right_cell}".rstrip())
        return "\n".join(rows)

    if context_lines is None:
        return _rows(ops)
    return f"\n{GAP}\n".join(_rows(hunk) for hunk in chunk(ops, context_lines))


def render_summary(stats: DiffStats) -> str:
    """Compact summary, e.g. '4 lines compared, +1, -1'."""
    parts = [f"{stats.total} lines compared"]
    if stats.additions:
        parts.append(f"+{stats.additions}")
    if stats.deletions:
        parts.append(f"-{stats.deletions}")
    if stats.modifications:
        parts.append(f"~{stats.modifications}")
    return ", ".join(parts)
