"""Line canonicalization applied before comparison"""

import re

from linediff.core.models import NormalizationConfig


WHITESPACE_RE = re.compile(r'\s+')


def normalize(line: str, config: NormalizationConfig) -> str:
    """Return the comparison key for line: collapse whitespace first, then case-fold."""
    if config.ignore_whitespace:
        line = WHITESPACE_RE.sub(' ', line).strip()
    if config.ignore_case:
        line = line.lower()
    return line


def normalize_lines(lines: list[str], config: NormalizationConfig) -> list[str]:
    """Normalize every line; returns lines unchanged (as a new list) when no option is set."""
    if not (config.ignore_whitespace or config.ignore_case):
        return list(lines)
    return [normalize(line, config) for line in lines]
