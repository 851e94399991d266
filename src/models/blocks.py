"""
Block data models

Typed content blocks produced by the classifier and grouped into slides by
the partitioner. Each variant is a frozen dataclass carrying a class-level
``type`` tag that names it in serialised output.

Example:
    >>> Header(content="Title").type
    'header'
    >>> block_toDict(Code(content="print(1)", filename="/tmp/a.py", lang="python", runner="python"))
    {'type': 'code', 'content': 'print(1)', 'filename': '/tmp/a.py', 'lang': 'python', 'runner': 'python'}
"""

import json
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Dict, List, Tuple, Union


@dataclass(frozen=True)
class Html:
    """Prose rendered to HTML by the markdown converter"""
    type: ClassVar[str] = "html"
    content: str


@dataclass(frozen=True)
class Code:
    """
    Code sample loaded from an external file

    Attributes:
        content: Text of the loaded file
        filename: Absolute path the sample was read from
        lang: Language used for display/highlighting
        runner: Program used to execute the sample
    """
    type: ClassVar[str] = "code"
    content: str
    filename: str
    lang: str
    runner: str


@dataclass(frozen=True)
class Header:
    type: ClassVar[str] = "header"
    content: str


@dataclass(frozen=True)
class Footer:
    type: ClassVar[str] = "footer"
    content: str


@dataclass(frozen=True)
class Comment:
    type: ClassVar[str] = "comment"
    content: str


@dataclass(frozen=True)
class CustomCss:
    type: ClassVar[str] = "custom_css"
    content: str


@dataclass(frozen=True)
class SlideBackground:
    type: ClassVar[str] = "slide_background"
    content: str


@dataclass(frozen=True)
class GlobalBackground:
    type: ClassVar[str] = "global_background"
    content: str


@dataclass(frozen=True)
class SlideClasses:
    """CSS classes applied to the enclosing slide, in source order"""
    type: ClassVar[str] = "slide_classes"
    content: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Error:
    """User-facing diagnostic shown in place of the content that failed"""
    type: ClassVar[str] = "error"
    content: str


@dataclass(frozen=True)
class SeparatorBlock:
    """
    Slide break marker

    Only exists between classification and partitioning; never part of a
    returned slide.
    """
    type: ClassVar[str] = "separator"


Block = Union[
    Html,
    Code,
    Header,
    Footer,
    Comment,
    CustomCss,
    SlideBackground,
    GlobalBackground,
    SlideClasses,
    Error,
]

# Classifier output: blocks plus the slide break markers still to be consumed
ClassifiedBlock = Union[Block, SeparatorBlock]

Slide = List[Block]
ParseResult = List[Slide]


def block_toDict(block: Block) -> Dict[str, Any]:
    """
    Convert a block to a plain dict with its ``type`` tag first

    Args:
        block: Any block variant

    Returns:
        Dict suitable for JSON serialisation
    """
    result: Dict[str, Any] = {"type": block.type}
    for f in fields(block):
        value = getattr(block, f.name)
        result[f.name] = list(value) if isinstance(value, (list, tuple)) else value
    return result


def slides_toJSON(slides: ParseResult, indent: int = 2) -> str:
    """Serialise a parse result as a JSON list of lists of block dicts"""
    return json.dumps(
        [[block_toDict(block) for block in slide] for slide in slides],
        indent=indent,
        ensure_ascii=False,
    )
