"""Text sources and sinks for the boundary layer, plus file size formatting"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from linediff.core.errors import UnsupportedContentError


logger = logging.getLogger(__name__)

SIZE_UNITS = ["Bytes", "KB", "MB", "GB"]


class TextSource(Protocol):
    """Anything that can supply one side of a comparison."""
    name: str

    def read(self) -> str: ...


class TextSink(Protocol):
    """Anything that can receive an exported diff under a suggested name."""

    def write(self, content: str, suggested_name: str) -> Path | str: ...


@dataclass(frozen=True)
class StringSource:
    text: str
    name: str = "Original"

    def read(self) -> str:
        return self.text


@dataclass(frozen=True)
class FileSource:
    """Reads a UTF-8 text file; binary or undecodable content is rejected."""
    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def size(self) -> int:
        return self.path.stat().st_size

    def read(self) -> str:
        data = self.path.read_bytes()
        if b"\x00" in data:
            raise UnsupportedContentError(f"{self.path}: binary content is not supported")
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise UnsupportedContentError(f"{self.path}: not valid UTF-8 text ({e.reason})") from e
        logger.debug("Read %s (%s)", self.path, format_file_size(len(data)))
        return text


@dataclass(frozen=True)
class DirectorySink:
    """Writes exports into a directory, creating it if needed."""
    directory: Path

    def write(self, content: str, suggested_name: str) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / suggested_name
        path.write_text(content, encoding="utf-8")
        logger.info("Wrote %s", path)
        return path


def format_file_size(size: int) -> str:
    """Human-readable byte count, e.g. '0 Bytes', '1.5 KB', '2 MB'."""
    if size <= 0:
        return "0 Bytes"
    i = 0
    while size >= 1024 ** (i + 1) and i < len(SIZE_UNITS) - 1:
        i += 1
    value = size / 1024 ** i
    return f"{value:.2f}".rstrip("0").rstrip(".") + f" {SIZE_UNITS[i]}"
