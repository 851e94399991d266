"""
prexent - markdown slide deck parser

Turns a markdown document with '!' directives (include, code, header, ...)
into an ordered list of slides, each a list of typed blocks ready for
rendering.
"""

__version__ = "1.0.0"

from .lib import Parser, parse, DirectiveRegistry, LOG, state_connectToLogger

__all__ = ["Parser", "parse", "DirectiveRegistry", "LOG", "state_connectToLogger", "__version__"]
