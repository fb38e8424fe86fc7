"""Data models for line diff results: operations, stats, and normalization options"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ChangeKind(str, Enum):
    """Kind of a single line operation. `modified` is reserved and never emitted."""
    unchanged = "unchanged"
    added = "added"
    removed = "removed"
    modified = "modified"


class ExportFormat(str, Enum):
    """Serialization formats supported by the exporters"""
    patch = "patch"
    html = "html"
    json = "json"


class NormalizationConfig(BaseModel):
    """Comparison options applied to both sides before lines are compared."""
    model_config = ConfigDict(frozen=True)

    ignore_whitespace: bool = False
    ignore_case:       bool = False


class DiffOperation(BaseModel):
    """One line of the edit script, carrying the original (unnormalized) text.

    Serialized with the field names of the exported JSON document
    (`type`, `lineNumber1`, `lineNumber2`, `content`).
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind:              ChangeKind    = Field(..., alias="type")
    left_line_number:  Optional[int] = Field(default=None, alias="lineNumber1", ge=1)
    right_line_number: Optional[int] = Field(default=None, alias="lineNumber2", ge=1)
    content:           str

    def as_json(self) -> dict:
        """Return the JSON-ready dict, omitting absent line numbers."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class DiffStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    additions:     int = 0
    deletions:     int = 0
    modifications: int = 0
    total:         int = 0


Chunk = list[DiffOperation]
