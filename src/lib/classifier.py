"""
Chunk classifier: turn segments into typed blocks

Separators pass through as markers, prose is rendered to HTML, and directive
lines are dispatched through the DirectiveRegistry. '!include' loads another
document, segments it and classifies every piece, splicing the resulting
blocks in place of the directive.

Failures never raise out of classify(): a missing file, a malformed
directive, rejected markdown or an include nested too deeply each become an
Error block at the point where the content would have been.
"""

from typing import Iterator, List, Optional, Tuple, Union

from ..config import AppSettings, appsettings
from ..models.blocks import ClassifiedBlock, Code, Error, Html, SeparatorBlock
from ..models.segments import Directive, Prose, Segment, Separator
from .converter import ConversionError, MarkdownConverter
from .directives import DirectiveRegistry
from .loader import FileLoadError, TextLoader, path_absolute
from .log import LOG
from .segmenter import segment

INCLUDE_DIRECTIVE = "include"


def path_resolve(argument: str) -> str:
    """
    Resolve a directive argument to an absolute path

    Only the first whitespace-delimited token is used, so paths containing
    spaces are cut at the first space.

    Example:
        >>> path_resolve('  /decks/intro.md trailing words')
        '/decks/intro.md'
    """
    tokens = argument.strip().split()
    return path_absolute(tokens[0] if tokens else "")


class Classifier:
    """
    Maps segments to blocks

    Args:
        loader: Reads included documents and code samples
        converter: Renders prose to HTML
        settings: Defaults for '!code' and the include depth bound
        registry: Directive dispatch table
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
        self.converter = converter or MarkdownConverter(extensions=self.settings.markdown_extensions)
        self.registry = registry or DirectiveRegistry()

    def classify(self, chunk: Segment, depth: int = 0) -> List[ClassifiedBlock]:
        """
        Classify one segment

        Args:
            chunk: Segment produced by segment()
            depth: Number of '!include' directives enclosing this segment

        Returns:
            Blocks in document order; exactly one block unless the segment
            is an include that expanded
        """
        if isinstance(chunk, Separator):
            return [SeparatorBlock()]
        if isinstance(chunk, Prose):
            return [self.prose_classify(chunk.text)]
        if isinstance(chunk, Directive):
            return self.directive_classify(chunk, depth)
        raise TypeError(f"not a segment: {chunk!r}")

    def segments_classify(self, segments: List[Segment], depth: int = 0) -> List[ClassifiedBlock]:
        """
        Classify segments in order and concatenate their blocks

        Includes are expanded on an explicit stack of segment iterators, so
        include nesting never grows the Python call stack.
        """
        blocks: List[ClassifiedBlock] = []
        pending: List[Tuple[Iterator[Segment], int]] = [(iter(segments), depth)]

        while pending:
            chunks, level = pending[-1]
            chunk = next(chunks, None)
            if chunk is None:
                pending.pop()
                continue

            if isinstance(chunk, Directive) and chunk.name == INCLUDE_DIRECTIVE:
                opened = self.include_open(chunk.arguments, level)
                if isinstance(opened, Error):
                    blocks.append(opened)
                else:
                    pending.append((iter(opened), level + 1))
                continue

            blocks.extend(self.classify(chunk, level))

        return blocks

    def text_classify(self, text: str, depth: int = 0) -> List[ClassifiedBlock]:
        """Segment raw text and classify the result"""
        segments = segment(text, separator=self.settings.separator)
        LOG(f"Segmented {len(segments)} chunks at include depth {depth}", level=3)
        return self.segments_classify(segments, depth)

    def prose_classify(self, text: str) -> ClassifiedBlock:
        """Render prose, or report the converter's messages"""
        try:
            return Html(content=self.converter.render(text))
        except ConversionError as e:
            LOG(f"Markdown conversion failed: {e}", level=2)
            return Error(content="; ".join(e.messages))

    def directive_classify(self, directive: Directive, depth: int) -> List[ClassifiedBlock]:
        """Dispatch a directive line to its registered handler"""
        handler = self.registry.get(directive.name)
        if handler is None:
            LOG(f"Unknown directive: {directive.line}", level=2)
            return [Error(content=f"wrong command {directive.line}")]
        return handler(directive.arguments, self, depth)

    def code_classify(self, tokens: List[str]) -> ClassifiedBlock:
        """
        Build a code block from '!code' argument tokens

        Accepted forms are ``[path]`` (configured default language and
        runner) and ``[path, lang, runner]``.
        """
        if len(tokens) == 1:
            tokens = [tokens[0], self.settings.default_code_lang, self.settings.default_code_runner]

        if len(tokens) != 3:
            return Error(content=f"invalid code parameters {' '.join(tokens)}")

        fname, lang, runner = tokens
        path = path_resolve(fname)
        try:
            content = self.loader.load(path)
        except FileLoadError:
            LOG(f"Code file not found: {path}", level=2)
            return Error(content=f"Code file not found: {path}")

        return Code(content=content, filename=path, lang=lang, runner=runner)

    def include_classify(self, argument: str, depth: int) -> List[ClassifiedBlock]:
        """
        Expand '!include' into the blocks of the included document

        Args:
            argument: Raw argument text after '!include '
            depth: Include nesting of the directive itself

        Returns:
            Blocks of the included document, or a single Error block
        """
        opened = self.include_open(argument, depth)
        if isinstance(opened, Error):
            return [opened]
        return self.segments_classify(opened, depth + 1)

    def include_open(self, argument: str, depth: int) -> Union[Error, List[Segment]]:
        """
        Load and segment an included document

        Returns:
            Segments of the included document, or the Error block to emit
            when the depth bound is reached or the file cannot be read
        """
        path = path_resolve(argument)

        if depth >= self.settings.max_include_depth:
            LOG(f"Include depth limit reached at {path}", level=2)
            return Error(content=f"Include depth limit ({self.settings.max_include_depth}) exceeded: {path}")

        try:
            text = self.loader.load(path)
        except FileLoadError:
            LOG(f"Included file not found: {path}", level=2)
            return Error(content=f"Included file not found: {path}")

        LOG(f"Including {path} at depth {depth + 1}", level=2)
        return segment(text, separator=self.settings.separator)
