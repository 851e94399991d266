"""
Directive specification and metadata models

Defines the structure and categories of prexent '!' directives for
dispatch, documentation generation, and registry management.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Callable, List


class DirectiveCategory(Enum):
    """
    Categories of prexent directives

    Used for organization and documentation generation.
    """
    EMBED = "embed"          # !include, !code
    METADATA = "metadata"    # !header, !footer, !comment
    STYLING = "styling"      # !custom_css, !*_background, !slide_classes


@dataclass
class DirectiveSpec:
    """
    Specification for a prexent directive

    Defines metadata and the classification handler for a directive.
    Used by DirectiveRegistry to dispatch directive lines.

    Attributes:
        name: Command name (without leading '!')
        category: Category for organization
        description: Human-readable description
        handler: Classification function (arguments, classifier, depth) -> List[Block]
        examples: Example usage strings
    """
    name: str
    category: DirectiveCategory
    description: str
    handler: Callable
    examples: List[str] = field(default_factory=list)

    def usage(self) -> str:
        """One-line usage summary, e.g. '!header <text...> - Slide header'"""
        example = self.examples[0] if self.examples else f"!{self.name}"
        return f"{example} - {self.description}"
