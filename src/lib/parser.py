"""
Parser for prexent markdown decks

Transforms a markdown document with '!' directives into a list of slides,
each a list of typed blocks.

The parser operates in three phases:
1. Segmenting: split text into separator, directive and prose segments
2. Classifying: turn each segment into blocks, expanding '!include' in place
3. Partitioning: split the flat block list into slides at separators

Only a failure to read the root document short-circuits: the result is then
a single slide holding a single Error block. Every other problem is embedded
as an Error block where it occurred and the rest of the deck still parses.

Example:
    >>> slides = Parser().text_parse("Intro\\n---\\n!header Title\\nBody")
    >>> len(slides)
    2
    >>> slides[1][0]
    Header(content='Title')
"""

from typing import Optional

from ..config import AppSettings, appsettings
from ..models.blocks import Error, ParseResult
from .classifier import Classifier
from .converter import MarkdownConverter
from .directives import DirectiveRegistry
from .loader import FileLoadError, TextLoader
from .log import LOG
from .partitioner import partition


class Parser:
    """
    Parse driver

    Args:
        loader: Reads the root document and anything it includes
        converter: Renders prose to HTML
        settings: Parser configuration (defaults to appsettings)
        registry: Optional DirectiveRegistry for directive dispatch
    """

    def __init__(
        self,
        loader: Optional[TextLoader] = None,
        converter: Optional[MarkdownConverter] = None,
        settings: Optional[AppSettings] = None,
        registry: Optional[DirectiveRegistry] = None,
    ):
        self.settings = settings or appsettings
        self.loader = loader or TextLoader(encoding=self.settings.file_encoding)
        self.classifier = Classifier(
            loader=self.loader,
            converter=converter,
            settings=self.settings,
            registry=registry,
        )

    def parse(self, path: str) -> ParseResult:
        """
        Parse the document at path into slides

        Args:
            path: Root document, absolute or relative to the current directory

        Returns:
            Slides in document order. If the root document cannot be read,
            a single slide containing a single Error block.
        """
        try:
            text = self.loader.load(path)
        except FileLoadError as e:
            LOG(f"Root document unreadable: {e.message}", level=1)
            return [[Error(content=e.message)]]

        LOG(f"Read {len(text)} characters from {path}", level=2)
        return self.text_parse(text)

    def text_parse(self, text: str) -> ParseResult:
        """Parse document text that is already in memory"""
        blocks = self.classifier.text_classify(text)
        slides = partition(blocks)
        LOG(f"Partitioned {len(blocks)} blocks into {len(slides)} slides", level=2)
        return slides


def parse(path: str) -> ParseResult:
    """Parse the document at path using the default loader, converter and settings"""
    return Parser().parse(path)
