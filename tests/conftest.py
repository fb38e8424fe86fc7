"""Root test configuration: environment isolation and shared sample texts"""

import os

import pytest


ORIGINAL = "line1\nline2\nline3"
MODIFIED = "line1\nline2modified\nline3"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop LINEDIFF_* variables from the developer's shell so settings start from defaults."""
    for name in list(os.environ):
        if name.startswith("LINEDIFF_"):
            monkeypatch.delenv(name)


@pytest.fixture(name="sample_files")
def sample_files_fixture(tmp_path):
    """Write the original/modified sample pair to disk and return their paths."""
    left = tmp_path / "original.txt"
    right = tmp_path / "modified.txt"
    left.write_text(ORIGINAL, encoding="utf-8")
    right.write_text(MODIFIED, encoding="utf-8")
    return left, right
