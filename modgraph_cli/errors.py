"""Exceptions raised by graph construction and path extraction."""

from __future__ import annotations


class ModGraphError(Exception):
    """Base exception for modgraph operations."""
    pass


class MalformedLineError(ModGraphError):
    """Raised when a non-empty edge-list line is not exactly two words."""

    def __init__(self, line: str, line_number: int = 0):
        self.line = line
        self.line_number = line_number
        self.word_count = len(line.split())
        super().__init__(
            f"expected 2 words in line, but got {self.word_count}: {line}"
        )


class TargetNotFoundError(ModGraphError):
    """Raised when a path target was never mentioned in the edge list."""

    def __init__(self, target: str):
        self.target = target
        super().__init__(f'"{target}" does not exist in dependency graph')
