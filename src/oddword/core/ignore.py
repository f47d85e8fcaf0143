# src/oddword/core/ignore.py
from typing import List
import pathspec
from oddword.config import DEFAULT_IGNORE_PATTERNS, DEFAULT_INCLUDE_PATTERNS


def _build_spec(lines: List[str]) -> pathspec.PathSpec:
    return pathspec.PathSpec.from_lines("gitwildmatch", lines)


def load_ignore_spec() -> pathspec.PathSpec:
    """
    Builds the PathSpec of directory entries that are never visited:
    hidden entries (names starting with '.').
    """
    return _build_spec(DEFAULT_IGNORE_PATTERNS)


def load_include_spec() -> pathspec.PathSpec:
    """Builds the PathSpec a file found during directory recursion must match."""
    return _build_spec(DEFAULT_INCLUDE_PATTERNS)


def is_entry_ignored(name: str, spec: pathspec.PathSpec) -> bool:
    # Only the bare entry name is matched, never the full path, so a
    # hidden parent given on the command line does not hide its children.
    return spec.match_file(name)


def is_entry_included(name: str, spec: pathspec.PathSpec) -> bool:
    return spec.match_file(name)
