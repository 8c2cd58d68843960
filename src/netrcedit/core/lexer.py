"""
Lossless netrc lexer with byte-perfect round-trip guarantee.

The lexer splits netrc content into a flat stream of string fragments:
whitespace runs, words, and whole comment lines. The constraint is:
    write(tokenize(file)) == file (byte-identical)

Comment fragments swallow the whitespace that follows their line terminator,
so a single comment between two words fills one separator slot. Adjacent
comment lines are separate fragments.
"""

import codecs
import io
from enum import Enum
from typing import IO, Iterable, Iterator, Union


DEFAULT_CHUNK_SIZE = 8192
ENCODING = "utf-8"
# Undecodable bytes map to lone surrogates and back, so any input round-trips
ERRORS = "surrogateescape"
COMMENT_CHAR = "#"

Source = Union[str, bytes, bytearray, IO]


class State(Enum):
    """What kind of fragment the lexer is accumulating."""
    START = "start"
    SPACE = "space"
    WORD = "word"
    COMMENT_LINE = "comment_line"
    COMMENT_TAIL = "comment_tail"


def encode(text: str) -> bytes:
    """Encode lexer text back into the exact original bytes."""
    return text.encode(ENCODING, ERRORS)


def is_comment(fragment: str) -> bool:
    """True if the fragment is a folded comment line."""
    return fragment.lstrip().startswith(COMMENT_CHAR)


class Lexer:
    """
    Streaming lexer for netrc files.

    Reads its source in bounded chunks and yields fragments as soon as their
    boundary is known. Every call to tokenize() starts from the beginning of
    a str or bytes source; file objects are read from their current position.
    """

    def __init__(self, source: Source, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size < 1:
            raise ValueError("chunk_size must be positive")
        self.source = source
        self.chunk_size = chunk_size

    def __iter__(self) -> Iterator[str]:
        return self.tokenize()

    def tokenize(self) -> Iterator[str]:
        """
        Lazily split the source into fragments.

        Yields:
            Fragment strings whose concatenation is the source text.
        """
        state = State.START
        current = []

        for chunk in self._chunks():
            for char in chunk:
                if state is State.COMMENT_LINE:
                    current.append(char)
                    if char == "\n":
                        state = State.COMMENT_TAIL
                    continue

                if state is State.SPACE and char == COMMENT_CHAR:
                    # Only whitespace since the boundary: the run joins the comment
                    current.append(char)
                    state = State.COMMENT_LINE
                    continue

                if state is State.WORD and not char.isspace():
                    current.append(char)
                    continue

                if state in (State.SPACE, State.COMMENT_TAIL) and char.isspace():
                    current.append(char)
                    continue

                if current:
                    yield "".join(current)
                    current = []

                current.append(char)
                if char == COMMENT_CHAR:
                    state = State.COMMENT_LINE
                elif char.isspace():
                    state = State.SPACE
                else:
                    state = State.WORD

        if current:
            yield "".join(current)

    def _chunks(self) -> Iterator[str]:
        """Read the source as decoded text chunks."""
        source = self.source
        if isinstance(source, str):
            for start in range(0, len(source), self.chunk_size):
                yield source[start:start + self.chunk_size]
            return

        if isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(source)

        decoder = None
        while True:
            data = source.read(self.chunk_size)
            if not data:
                break
            if isinstance(data, str):
                yield data
                continue
            if decoder is None:
                decoder = codecs.getincrementaldecoder(ENCODING)(ERRORS)
            text = decoder.decode(data)
            if text:
                yield text

        if decoder is not None:
            tail = decoder.decode(b"", final=True)
            if tail:
                yield tail


def tokenize(source: Source, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[str]:
    """
    Tokenize netrc content into fragments.

    Args:
        source: Text, raw bytes, or a readable file object
        chunk_size: Size of each read from the source

    Returns:
        Iterator over fragment strings
    """
    return Lexer(source, chunk_size).tokenize()


def write(fragments: Iterable[str]) -> str:
    """
    Reconstruct netrc content from fragments.

    Args:
        fragments: Fragment strings in document order

    Returns:
        String content that is byte-identical to the original when unedited
    """
    return "".join(fragments)
