"""Unit tests for core/render.py"""

from linediff.core.engine import compute_diff
from linediff.core.models import DiffStats
from linediff.core.render import render_split, render_summary, render_unified


ORIGINAL = "line1\nline2\nline3"
MODIFIED = "line1\nline2modified\nline3"


def test_render_unified_with_line_numbers():
    ops = compute_diff(ORIGINAL, MODIFIED)
    assert render_unified(ops).split("\n") == [
        "1 1   line1",
        "2   - line2",
        "  2 + line2modified",
        "3 3   line3",
    ]


def test_render_unified_without_line_numbers():
    ops = compute_diff(ORIGINAL, MODIFIED)
    assert render_unified(ops, show_line_numbers=False).split("\n") == [
        "  line1",
        "- line2",
        "+ line2modified",
        "  line3",
    ]


def test_render_unified_pads_number_columns():
    ops = compute_diff("\n".join(str(n) for n in range(1, 12)), "\n".join(str(n) for n in range(1, 11)))
    rows = render_unified(ops).split("\n")
    assert rows[0] == " 1  1   1"
    assert rows[-1] == "11    - 11"


def test_render_unified_with_context_shows_gaps():
    middle = ["1", "2", "3", "4", "5"]
    ops = compute_diff("\n".join(["x", *middle, "y"]), "\n".join(["X", *middle, "Y"]))
    rows = render_unified(ops, show_line_numbers=False, context_lines=2).split("\n")
    assert rows == ["- x", "+ X", "  1", "  2", "...", "  4", "  5", "- y", "+ Y"]


def test_render_unified_context_without_changes_is_empty():
    assert render_unified(compute_diff("a", "a"), context_lines=3) == ""


def test_render_split_pairs_removals_with_additions():
    ops = compute_diff(ORIGINAL, MODIFIED)
    rows = render_split(ops, width=60, show_line_numbers=False)
    lines = rows.split("\n")
    assert len(lines) == 3
    assert all(" | " in line for line in lines)
    left, right = lines[1].split(" | ")
    assert left.strip() == "- line2"
    assert right.strip() == "+ line2modified"


def test_render_split_unpaired_rows():
    ops = compute_diff("a\nb", "a")
    lines = render_split(ops, width=40, show_line_numbers=True).split("\n")
    assert lines[0].startswith("1   a")
    assert lines[1].startswith("2 - b")
    assert lines[1].endswith("|")


def test_render_summary():
    assert render_summary(DiffStats(additions=1, deletions=1, total=4)) == "4 lines compared, +1, -1"
    assert render_summary(DiffStats(total=2)) == "2 lines compared"
    assert render_summary(DiffStats(modifications=2, total=2)) == "2 lines compared, ~2"


def test_render_split_with_context_shows_gaps():
    middle = ["1", "2", "3", "4", "5"]
    ops = compute_diff("\n".join(["x", *middle, "y"]), "\n".join(["X", *middle, "Y"]))
    rows = [row.rstrip() for row in render_split(ops, width=40, show_line_numbers=False, context_lines=2).split("\n")]
    assert "..." in rows
    assert not any(row.startswith("  3") for row in rows)
    assert rows[0].startswith("- x") and rows[0].endswith("+ X")
    assert rows[-1].startswith("- y") and rows[-1].endswith("+ Y")


def test_render_split_context_without_changes_is_empty():
    assert render_split(compute_diff("a", "a"), context_lines=3) == ""
