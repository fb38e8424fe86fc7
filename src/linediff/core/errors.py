"""Exception types raised by the diff engine and its boundary layer"""


class LineDiffError(Exception):
    """Base class for all linediff errors."""


class ResourceLimitExceeded(LineDiffError):
    """Raised before building an LCS table larger than the configured cell limit."""

    def __init__(self, left_lines: int, right_lines: int, max_cells: int):
        self.left_lines = left_lines
        self.right_lines = right_lines
        self.max_cells = max_cells
        super().__init__(
            f"Comparison of {left_lines} x {right_lines} lines needs "
            f"{left_lines * right_lines} table cells (limit {max_cells})"
        )


class UnsupportedContentError(LineDiffError):
    """Raised by a text source when its content is binary or not valid UTF-8."""
