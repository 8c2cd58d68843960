"""
Groups a fragment stream into a Netrc document.

Everything before the first `machine`/`default` keyword is preamble. Each
keyword opens an entry that owns every fragment up to the next keyword.
"""

from typing import Iterable, Optional

from .errors import NetrcParseError
from .lexer import Source, tokenize
from .netrc import DEFAULT, KEYWORDS, MACHINE, Entry, Netrc


NAME_OFFSET = 2


def group(fragments: Iterable[str], path: Optional[str] = None) -> Netrc:
    """
    Partition fragments into preamble and entries in a single pass.

    Args:
        fragments: Fragment stream from the lexer
        path: File the fragments came from, used in error messages

    Returns:
        Netrc document owning every fragment

    Raises:
        NetrcParseError: If a `machine` keyword has no name after it
    """
    netrc = Netrc(path)
    entry = None
    lineno = 1
    entry_lineno = 1

    for fragment in fragments:
        if fragment in KEYWORDS:
            _check_named(entry, path, entry_lineno)
            entry = Entry(is_default=fragment == DEFAULT)
            if entry.is_default:
                entry.name = DEFAULT
            netrc.entries.append(entry)
            entry_lineno = lineno

        if entry is None:
            netrc.preamble.append(fragment)
        else:
            entry.fragments.append(fragment)
            if not entry.is_default and len(entry.fragments) == NAME_OFFSET + 1:
                entry.name = fragment

        lineno += fragment.count("\n")

    _check_named(entry, path, entry_lineno)
    return netrc


def _check_named(entry: Optional[Entry], path: Optional[str], lineno: int) -> None:
    if entry is None or entry.is_default or entry.name is not None:
        return
    raise NetrcParseError(f"'{MACHINE}' is not followed by a machine name", path, lineno)


def parse(source: Source, path: Optional[str] = None) -> Netrc:
    """
    Parse netrc content into a document.

    Args:
        source: Text, raw bytes, or a readable file object
        path: File the content came from

    Returns:
        Netrc document
    """
    return group(tokenize(source), path)
