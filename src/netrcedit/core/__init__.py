"""
netrcedit core modules.

Includes:
- lexer: Lossless fragment tokenizer
- parser: Groups fragments into machine entries
- netrc: Entry and Netrc document model
- store: Loading and saving, with .gpg support
- gpg: GnuPG pipe-through collaborator
- config: Path and tool resolution from the environment
- errors: Exception types
"""

from . import errors
from . import lexer
from . import netrc
from . import parser
from . import gpg
from . import config
from . import store

__all__ = [
    "errors",
    "lexer",
    "netrc",
    "parser",
    "gpg",
    "config",
    "store",
]
