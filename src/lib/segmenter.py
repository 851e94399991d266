"""
Segmenter: split raw document text into separator, directive and prose segments

Two line shapes are special, and only when they occupy a whole line:
    - the separator token on its own (``---``)
    - a directive: ``!`` + command name, one space, a first argument, then
      anything up to the end of the line (``!include intro.md``)

Everything between special lines becomes one Prose segment. Blank stretches
are dropped.

Example:
    >>> segment("Intro\\n---\\n!header Title\\nBody")
    [Prose(text='Intro'), Separator(), Directive(line='!header Title'), Prose(text='Body')]
"""

import re
from typing import List, Optional, Pattern

from ..config import appsettings
from ..models.segments import Directive, Prose, Segment, Separator

DIRECTIVE_PATTERN = r"^!\S+ \S+.*$"


def pattern_make(separator: str) -> Pattern[str]:
    """
    Build the line-anchored pattern recognising separator and directive lines

    Group 'separator' matches a separator line, group 'directive' a directive
    line. ``.`` never crosses a newline, so each match is a single line.

    Raises:
        ValueError: If the separator is empty or contains whitespace
    """
    if not separator or any(ch.isspace() for ch in separator):
        raise ValueError(f"invalid separator token: {separator!r}")
    return re.compile(
        rf"(?P<separator>^{re.escape(separator)}$)|(?P<directive>{DIRECTIVE_PATTERN})",
        re.MULTILINE,
    )


def newlines_normalize(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF"""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def prose_make(chunk: str) -> Optional[Prose]:
    """Prose segment for a chunk between special lines, or None if it is blank"""
    if not chunk.strip():
        return None
    return Prose(text=chunk.strip("\n"))


def segment(text: str, separator: Optional[str] = None) -> List[Segment]:
    """
    Split text into an ordered list of segments

    Args:
        text: Raw document text
        separator: Slide separator token (defaults to appsettings.separator)

    Returns:
        Segments in document order
    """
    pattern = pattern_make(separator if separator is not None else appsettings.separator)
    source = newlines_normalize(text)

    segments: List[Segment] = []
    position = 0

    for match in pattern.finditer(source):
        prose = prose_make(source[position:match.start()])
        if prose is not None:
            segments.append(prose)

        if match.group("separator") is not None:
            segments.append(Separator())
        else:
            segments.append(Directive(line=match.group("directive")))

        position = match.end()

    prose = prose_make(source[position:])
    if prose is not None:
        segments.append(prose)

    return segments
