"""
Markdown to HTML conversion for prose segments

Wraps Python-Markdown behind a single render() call. Fenced code blocks are
highlighted by the codehilite extension, which uses Pygments.
"""

from typing import List, Optional

import markdown

from ..config import appsettings


class ConversionError(Exception):
    """
    Raised when prose cannot be converted to HTML

    Attributes:
        messages: Human-readable error messages
    """

    def __init__(self, messages: List[str]):
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))


class MarkdownConverter:
    """
    Markdown to HTML converter

    Example:
        >>> MarkdownConverter(extensions=[]).render('Intro')
        '<p>Intro</p>'
    """

    def __init__(self, extensions: Optional[List[str]] = None):
        self.extensions = (
            list(extensions) if extensions is not None else list(appsettings.markdown_extensions)
        )

    def render(self, text: str) -> str:
        """
        Render markdown text to HTML

        Args:
            text: Markdown source

        Returns:
            Rendered HTML

        Raises:
            ConversionError: If the markdown library rejects the input or
                             one of the configured extensions cannot be loaded
        """
        try:
            return markdown.markdown(text, extensions=self.extensions)
        except ImportError as e:
            raise ConversionError([f"markdown extension unavailable: {e}"]) from e
        except ValueError as e:
            raise ConversionError([f"markdown conversion failed: {e}"]) from e
