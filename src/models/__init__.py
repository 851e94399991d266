"""
Models package for prexent

Contains data structures and type definitions for the parsing pipeline.
"""

from .state import ProgramState, pipeline
from .directives import DirectiveSpec, DirectiveCategory
from .segments import Segment, Separator, Directive, Prose
from .blocks import (
    Block,
    ClassifiedBlock,
    Code,
    Comment,
    CustomCss,
    Error,
    Footer,
    GlobalBackground,
    Header,
    Html,
    ParseResult,
    SeparatorBlock,
    Slide,
    SlideBackground,
    SlideClasses,
    block_toDict,
    slides_toJSON,
)

__all__ = [
    "ProgramState",
    "pipeline",
    "DirectiveSpec",
    "DirectiveCategory",
    "Segment",
    "Separator",
    "Directive",
    "Prose",
    "Block",
    "ClassifiedBlock",
    "Code",
    "Comment",
    "CustomCss",
    "Error",
    "Footer",
    "GlobalBackground",
    "Header",
    "Html",
    "ParseResult",
    "SeparatorBlock",
    "Slide",
    "SlideBackground",
    "SlideClasses",
    "block_toDict",
    "slides_toJSON",
]
