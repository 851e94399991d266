"""
Segment data models

Unclassified pieces of raw document text produced by the segmenter.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Separator:
    """A line consisting exactly of the separator token"""


@dataclass(frozen=True)
class Directive:
    """
    A single '!command argument ...' line

    Attributes:
        line: Full text of the line, including the leading '!'
    """
    line: str

    @property
    def name(self) -> str:
        """Command name without the leading '!' (e.g., 'include')"""
        return self.line[1:].split(" ", 1)[0]

    @property
    def arguments(self) -> str:
        """Everything after the command name and its following space"""
        parts = self.line[1:].split(" ", 1)
        return parts[1] if len(parts) > 1 else ""


@dataclass(frozen=True)
class Prose:
    """A maximal run of lines that are neither separators nor directives"""
    text: str


Segment = Union[Separator, Directive, Prose]
