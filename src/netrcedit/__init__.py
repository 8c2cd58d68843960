"""
netrcedit - Lossless netrc editor

Reads, queries and rewrites .netrc credential files while keeping every
comment, blank line and odd bit of whitespace exactly where it was.
"""

__version__ = "0.1.0"

from .core import lexer, parser, netrc, store
from .core.errors import EncryptionError, NetrcError, NetrcParseError
from .core.netrc import Entry, Netrc
from .core.parser import parse
from .core.store import load, save

__all__ = [
    "lexer",
    "parser",
    "netrc",
    "store",
    "Entry",
    "Netrc",
    "NetrcError",
    "NetrcParseError",
    "EncryptionError",
    "parse",
    "load",
    "save",
]
