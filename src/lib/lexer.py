"""
Custom Pygments lexer for prexent decks

Highlights prexent source when it is shown inside a presentation, e.g. in a
fenced ```prexent block rendered through the codehilite extension. The
lexer is registered as a Pygments plugin (see pyproject.toml), so
get_lexer_by_name('prexent') finds it once the package is installed.

Token types:
- Keyword.Declaration: Embedding directives (!include, !code)
- Name.Tag: Metadata directives (!header, !footer, !comment)
- Name.Decorator: Styling directives (!custom_css, !*_background, !slide_classes)
- Generic.Error: Any other '!name arg' line
- Punctuation: The '---' slide separator and the leading '!'
- String: Directive arguments
- Text: Markdown prose
"""

from pygments.lexer import RegexLexer, bygroups
from pygments.token import (
    Text,
    Punctuation,
    Name,
    String,
    Keyword,
    Generic,
    Whitespace,
)


class PrexentLexer(RegexLexer):
    """
    Lexer for prexent markdown decks

    Example:
        !include intro.md
        ---
        !header Welcome

    Tokens:
        ! → Punctuation
        include → Keyword.Declaration
        intro.md → String
        --- → Punctuation
    """

    name = 'Prexent'
    aliases = ['prexent']
    filenames = ['*.prexent.md']

    tokens = {
        'root': [
            # Slide separator
            (r'^---$', Punctuation),

            # Embedding directives
            (r'^(!)(include|code)( )(.*)$',
             bygroups(Punctuation, Keyword.Declaration, Whitespace, String)),

            # Metadata directives
            (r'^(!)(header|footer|comment)( )(.*)$',
             bygroups(Punctuation, Name.Tag, Whitespace, String)),

            # Styling directives
            (r'^(!)(custom_css|global_background|slide_background|slide_classes)( )(.*)$',
             bygroups(Punctuation, Name.Decorator, Whitespace, String)),

            # Unknown directive shape
            (r'^(!)(\S+)( )(\S+.*)$',
             bygroups(Punctuation, Generic.Error, Whitespace, String)),

            # Everything else is markdown prose
            (r'[^\n]+', Text),
            (r'\n', Whitespace),
        ],
    }


def get_lexer() -> PrexentLexer:
    """
    Get the PrexentLexer instance

    Returns:
        PrexentLexer instance ready for use with Pygments
    """
    return PrexentLexer()
