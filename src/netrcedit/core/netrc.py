"""
In-place editable netrc document.

A Netrc owns a preamble and an ordered list of entries. Each Entry owns the
fragments it was parsed from, and reads them as 4-fragment records:
    key, separator, value, separator-or-terminator
Edits replace single fragments, so everything else renders exactly as it
was read.
"""

from typing import Iterator, List, NamedTuple, Optional, Tuple

from .errors import NetrcError
from .lexer import COMMENT_CHAR, encode, is_comment, write


MACHINE = "machine"
DEFAULT = "default"
KEYWORDS = (MACHINE, DEFAULT)

NAMED_HEADER_SIZE = 4
DEFAULT_HEADER_SIZE = 2
RECORD_SIZE = 4

INDENT = "  "
SEPARATOR = " "
TERMINATOR = "\n"


def check_word(what: str, text: str) -> None:
    """
    Reject text that would not read back as a single word.

    Raises:
        NetrcError: If text is empty, holds whitespace, starts a comment,
            or is an entry keyword
    """
    if not text or any(char.isspace() for char in text):
        raise NetrcError(f"{what} must be a single non-empty word: {text!r}")
    if text.startswith(COMMENT_CHAR):
        raise NetrcError(f"{what} must not start with '{COMMENT_CHAR}': {text!r}")
    if text in KEYWORDS:
        raise NetrcError(f"{what} must not be the keyword '{text}'")


class Record(NamedTuple):
    """A key/value pair located at `index` in its entry's fragments."""
    index: int
    key: str
    value: str


class Entry:
    """A `machine` or `default` clause and the fragments it owns."""

    def __init__(self, name: Optional[str] = None, is_default: bool = False,
                 fragments: Optional[List[str]] = None):
        self.name = name
        self.is_default = is_default
        self.fragments: List[str] = fragments if fragments is not None else []

    def __repr__(self):
        kind = DEFAULT if self.is_default else MACHINE
        return f"Entry({kind}, {self.name!r}, {len(self.fragments)} fragments)"

    @property
    def header_size(self) -> int:
        return DEFAULT_HEADER_SIZE if self.is_default else NAMED_HEADER_SIZE

    def records(self) -> Iterator[Record]:
        """
        Iterate over the key/value records after the header.

        A trailing stride too short to hold a key, separator and value is
        not a record.
        """
        fragments = self.fragments
        for i in range(self.header_size, len(fragments) - 2, RECORD_SIZE):
            yield Record(i, fragments[i], fragments[i + 2])

    def _find(self, key: str) -> Optional[Record]:
        for record in self.records():
            if record.key == key:
                return record
        return None

    def get(self, key: str) -> Optional[str]:
        """
        Get the value of the first record with this key.

        Returns:
            The value, or None if the entry has no such key
        """
        record = self._find(key)
        return record.value if record else None

    def set(self, key: str, value: str) -> None:
        """
        Set a key, touching only its value fragment.

        Missing keys are appended as "  key value\\n" whatever the file's
        own indentation style is.

        Raises:
            NetrcError: If key or value is not a single word
        """
        check_word("key", key)
        check_word("value", value)
        record = self._find(key)
        if record:
            self.fragments[record.index + 2] = value
            return
        self._append_record(key, value)

    def _append_record(self, key: str, value: str) -> None:
        fragments = self.fragments
        if fragments and is_comment(fragments[-1]) and not fragments[-1].endswith(TERMINATOR):
            fragments[-1] += TERMINATOR

        # The indent is the separator slot that precedes the new key
        if fragments and fragments[-1][-1:].isspace():
            fragments[-1] += INDENT
        else:
            fragments.append(INDENT)
        fragments.extend([key, SEPARATOR, value, TERMINATOR])

    def keys(self) -> List[str]:
        return [record.key for record in self.records()]

    def items(self) -> List[Tuple[str, str]]:
        return [(record.key, record.value) for record in self.records()]

    def __getitem__(self, key: str) -> str:
        record = self._find(key)
        if record is None:
            raise KeyError(key)
        return record.value

    def __setitem__(self, key: str, value: str) -> None:
        self.set(key, value)

    def __contains__(self, key: str) -> bool:
        return self._find(key) is not None

    def render(self) -> str:
        return write(self.fragments)


class Netrc:
    """
    A parsed netrc file.

    Render order is always: preamble fragments, then each entry's fragments
    in list order.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.preamble: List[str] = []
        self.entries: List[Entry] = []

    def __repr__(self):
        return f"Netrc({self.path!r}, {len(self.entries)} entries)"

    def machine(self, name: str, login: Optional[str] = None) -> Optional[Entry]:
        """
        Find an entry by machine name.

        Args:
            name: Machine hostname, or "default" for the default entry
            login: If given, only an entry with this login matches

        Returns:
            The first matching Entry, or None
        """
        for entry in self.entries:
            if entry.name != name:
                continue
            if login is None or entry.get("login") == login:
                return entry
        return None

    def machines(self) -> List[Entry]:
        return list(self.entries)

    @property
    def default(self) -> Optional[Entry]:
        for entry in self.entries:
            if entry.is_default:
                return entry
        return None

    def add_machine(self, name: str, login: str, password: str) -> Entry:
        """
        Add a machine, or reset an existing one, with login and password.

        An existing entry loses all of its previous fragments, so edit it
        with Entry.set when its formatting should be kept.
        The name "default" adds or resets the default entry.

        Returns:
            The created or reset Entry

        Raises:
            NetrcError: If name, login or password is not a single word
        """
        is_default = name == DEFAULT
        if not is_default:
            check_word("machine name", name)
        check_word("login", login)
        check_word("password", password)

        entry = self.machine(name)
        if entry is None:
            self._terminate_last_fragment()
            entry = Entry()
            self.entries.append(entry)

        entry.name = name
        entry.is_default = is_default
        if is_default:
            entry.fragments = [DEFAULT, TERMINATOR]
        else:
            entry.fragments = [MACHINE, SEPARATOR, name, TERMINATOR]
        entry.set("login", login)
        entry.set("password", password)
        return entry

    def _terminate_last_fragment(self) -> None:
        # A new keyword must not fuse with a trailing word or comment
        owner = None
        for fragments in [self.preamble] + [entry.fragments for entry in self.entries]:
            if fragments:
                owner = fragments
        if owner is None or owner[-1].endswith(TERMINATOR):
            return
        if is_comment(owner[-1]) or owner[-1][-1].isspace():
            owner[-1] += TERMINATOR
        else:
            owner.append(TERMINATOR)

    def remove_machine(self, name: str) -> int:
        """
        Remove every entry with this machine name.

        Returns:
            Number of entries removed
        """
        kept = [entry for entry in self.entries if entry.name != name]
        removed = len(self.entries) - len(kept)
        self.entries = kept
        return removed

    def render(self) -> str:
        """Render the document back to text without any reformatting."""
        parts = [write(self.preamble)]
        parts.extend(entry.render() for entry in self.entries)
        return "".join(parts)

    def to_bytes(self) -> bytes:
        return encode(self.render())

    def __str__(self):
        return self.render()

    def save(self, path: Optional[str] = None, crypter=None) -> None:
        """
        Write the document to disk.

        Args:
            path: Target path, defaults to the path the document was loaded from
            crypter: Encryption collaborator for .gpg paths
        """
        from .store import save

        target = path or self.path
        if target is None:
            raise NetrcError("netrc document has no path to save to")
        save(self, target, crypter=crypter)
