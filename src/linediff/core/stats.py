"""Diff statistics and grouping of operations into context-bounded chunks"""

from linediff.core.models import ChangeKind, Chunk, DiffOperation, DiffStats


def compute_stats(ops: list[DiffOperation]) -> DiffStats:
    """Count operations by kind. total is the number of operations, not source lines."""
    counts = {ChangeKind.added: 0, ChangeKind.removed: 0, ChangeKind.modified: 0}
    for op in ops:
        if op.kind in counts:
            counts[op.kind] += 1
    return DiffStats(
        additions=counts[ChangeKind.added],
        deletions=counts[ChangeKind.removed],
        modifications=counts[ChangeKind.modified],
        total=len(ops),
    )


def _tail(ops: list[DiffOperation], n: int) -> list[DiffOperation]:
    """Last n items; ops[-0:] would return the whole list."""
    return ops[len(ops) - n:] if n > 0 else []


def chunk(ops: list[DiffOperation], context_lines: int = 3) -> list[Chunk]:
    """Group ops into chunks of changes padded with up to context_lines unchanged lines.

    Changes separated by at most 2 * context_lines unchanged lines share a
    chunk; longer unchanged runs close the open chunk. A diff without changes
    produces no chunks.
    """
    if context_lines < 0:
        raise ValueError(f"context_lines must be >= 0, got {context_lines}")

    chunks: list[Chunk] = []
    current: Chunk = []
    buffer: list[DiffOperation] = []

    for op in ops:
        if op.kind == ChangeKind.unchanged:
            buffer.append(op)
            if current and len(buffer) > context_lines * 2:
                current.extend(buffer[:context_lines])
                chunks.append(current)
                current = []
                buffer = _tail(buffer, context_lines)
        else:
            # seed a fresh chunk with leading context; an open one takes the whole gap
            current.extend(buffer if current else _tail(buffer, context_lines))
            current.append(op)
            buffer = []

    if current:
        current.extend(buffer[:context_lines])
        chunks.append(current)

    return chunks


def chunk_header(hunk: Chunk) -> tuple[int, int, int, int]:
    """Return (left_start, left_count, right_start, right_count) for a chunk.

    Starts are taken from the first operation that carries a number on that
    side, defaulting to 1.
    """
    left_start = next((op.left_line_number for op in hunk if op.left_line_number), 1)
    right_start = next((op.right_line_number for op in hunk if op.right_line_number), 1)
    left_count = sum(1 for op in hunk if op.kind in (ChangeKind.unchanged, ChangeKind.removed))
    right_count = sum(1 for op in hunk if op.kind in (ChangeKind.unchanged, ChangeKind.added))
    return left_start, left_count, right_start, right_count
