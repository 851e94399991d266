"""
prexent - markdown slide deck parser

Turns a markdown document with '!' directives into slides of typed blocks.
"""

__version__ = "1.0.0"

from .parser import Parser, parse
from .classifier import Classifier
from .directives import DirectiveRegistry
from .log import LOG, state_connectToLogger

__all__ = ["Parser", "parse", "Classifier", "DirectiveRegistry", "LOG", "state_connectToLogger", "__version__"]
