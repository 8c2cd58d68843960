"""
Error types raised by netrcedit.

Lookup misses are never errors: unknown machines and keys come back as None.
I/O failures are left as the builtin OSError family.
"""

from typing import Optional


class NetrcError(Exception):
    """Base class for netrcedit errors."""


class NetrcParseError(NetrcError):
    """The file structure could not be grouped into entries."""

    def __init__(self, msg: str, filename: Optional[str] = None, lineno: Optional[int] = None):
        self.msg = msg
        self.filename = filename
        self.lineno = lineno
        super().__init__(msg)

    def __str__(self):
        if self.filename is None and self.lineno is None:
            return self.msg
        location = self.filename or "<netrc>"
        return f"{self.msg} ({location}, line {self.lineno})"


class EncryptionError(NetrcError):
    """The external encryption tool failed or could not be started."""

    def __init__(self, msg: str, returncode: Optional[int] = None, stderr: str = ""):
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(msg)

    def __str__(self):
        message = self.args[0]
        if self.stderr:
            message = f"{message}: {self.stderr.strip()}"
        return message
