"""
Directive implementations for prexent

Each directive turns the arguments of a '!command ...' line into blocks.
Uses DirectiveSpec for metadata and dispatch.
"""

from typing import Any, Callable, Dict, List, Optional

from ..models.blocks import (
    ClassifiedBlock,
    Comment,
    CustomCss,
    Footer,
    GlobalBackground,
    Header,
    SlideBackground,
    SlideClasses,
)
from ..models.directives import DirectiveSpec, DirectiveCategory

Handler = Callable[[str, Any, int], List[ClassifiedBlock]]


def tokens_split(arguments: str) -> List[str]:
    """Split directive arguments on runs of whitespace"""
    return arguments.split()


class DirectiveRegistry:
    """
    Registry of directive specifications and handlers

    Maps command names to DirectiveSpec objects containing metadata
    and classification handlers. Handlers are called as
    ``handler(arguments, classifier, depth)``.
    """

    def __init__(self) -> None:
        """Initialize the directive registry and register all built-in directives"""
        self.specs: Dict[str, DirectiveSpec] = {}
        self.embedDirectives_register()
        self.metadataDirectives_register()
        self.stylingDirectives_register()

    def register(self, spec: DirectiveSpec) -> None:
        """Register a directive specification"""
        self.specs[spec.name] = spec

    def get(self, name: str) -> Optional[Handler]:
        """
        Get directive handler by name

        Names are case-sensitive.

        Returns:
            Handler function or None if not found
        """
        spec = self.spec_get(name)
        return spec.handler if spec else None

    def spec_get(self, name: str) -> Optional[DirectiveSpec]:
        """Get full directive specification by name"""
        return self.specs.get(name)

    def directives_listByCategory(self, category: DirectiveCategory) -> list[DirectiveSpec]:
        """Get all directives in a category"""
        return [spec for spec in self.specs.values() if spec.category == category]

    def embedDirectives_register(self) -> None:
        """Register directives that pull in other files"""

        def include_handler(arguments: str, classifier: Any, depth: int) -> List[ClassifiedBlock]:
            """Handle !include - splice in the blocks of another document"""
            return classifier.include_classify(arguments, depth)

        def code_handler(arguments: str, classifier: Any, depth: int) -> List[ClassifiedBlock]:
            """Handle !code - load an external code sample"""
            return [classifier.code_classify(tokens_split(arguments))]

        self.register(DirectiveSpec(
            name='include',
            category=DirectiveCategory.EMBED,
            description='Insert another markdown file in place',
            handler=include_handler,
            examples=['!include <path>']
        ))

        self.register(DirectiveSpec(
            name='code',
            category=DirectiveCategory.EMBED,
            description='Show a code sample loaded from a file',
            handler=code_handler,
            examples=['!code <path> [<lang> <runner>]']
        ))

    def metadataDirectives_register(self) -> None:
        """Register free-text directives (all arguments joined by one space)"""

        def make_text_handler(block_type: type) -> Handler:
            """Factory for handlers that keep the whole argument text"""
            def handler(arguments: str, classifier: Any, depth: int) -> List[ClassifiedBlock]:
                return [block_type(content=" ".join(tokens_split(arguments)))]
            return handler

        text_specs = [
            ('header', Header, 'Slide header text', ['!header <text...>']),
            ('footer', Footer, 'Slide footer text', ['!footer <text...>']),
            ('comment', Comment, 'Speaker comment, not shown on the slide', ['!comment <text...>']),
        ]

        for name, block_type, desc, examples in text_specs:
            self.register(DirectiveSpec(
                name=name,
                category=DirectiveCategory.METADATA,
                description=desc,
                handler=make_text_handler(block_type),
                examples=examples
            ))

    def stylingDirectives_register(self) -> None:
        """Register styling directives"""

        def make_token_handler(block_type: type) -> Handler:
            """Factory for handlers that keep only the first argument token"""
            def handler(arguments: str, classifier: Any, depth: int) -> List[ClassifiedBlock]:
                # Extra tokens are ignored
                tokens = tokens_split(arguments)
                return [block_type(content=tokens[0] if tokens else "")]
            return handler

        token_specs = [
            ('custom_css', CustomCss, 'Stylesheet added to the presentation', ['!custom_css <token>']),
            ('global_background', GlobalBackground, 'Background for every slide', ['!global_background <token>']),
            ('slide_background', SlideBackground, 'Background for this slide', ['!slide_background <token>']),
        ]

        for name, block_type, desc, examples in token_specs:
            self.register(DirectiveSpec(
                name=name,
                category=DirectiveCategory.STYLING,
                description=desc,
                handler=make_token_handler(block_type),
                examples=examples
            ))

        def slide_classes_handler(arguments: str, classifier: Any, depth: int) -> List[ClassifiedBlock]:
            """Handle !slide_classes - keep every token"""
            return [SlideClasses(content=tuple(tokens_split(arguments)))]

        self.register(DirectiveSpec(
            name='slide_classes',
            category=DirectiveCategory.STYLING,
            description='CSS classes for this slide',
            handler=slide_classes_handler,
            examples=['!slide_classes <token...>']
        ))
