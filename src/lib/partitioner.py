"""
Slide partitioner

Splits the flat, include-expanded block list into slides at separator
markers. Empty slides (from leading, trailing or doubled separators) are
dropped; the order of the remaining slides is preserved.
"""

from typing import Iterable, List

from ..models.blocks import ClassifiedBlock, ParseResult, SeparatorBlock, Slide


def partition(blocks: Iterable[ClassifiedBlock]) -> ParseResult:
    """
    Group blocks into slides

    Example:
        >>> from prexent.models.blocks import Html
        >>> partition([SeparatorBlock(), Html('a'), SeparatorBlock(), SeparatorBlock(), Html('b')])
        [[Html(content='a')], [Html(content='b')]]
    """
    slides: ParseResult = []
    current: Slide = []

    for block in blocks:
        if isinstance(block, SeparatorBlock):
            slides.append(current)
            current = []
        else:
            current.append(block)
    slides.append(current)

    return [slide for slide in slides if slide]


def flatten(slides: ParseResult) -> List[ClassifiedBlock]:
    """Join slides back into one block list with a separator between each pair"""
    blocks: List[ClassifiedBlock] = []
    for index, slide in enumerate(slides):
        if index:
            blocks.append(SeparatorBlock())
        blocks.extend(slide)
    return blocks
