"""
Loading and saving netrc files.

Paths ending in .gpg are piped through a Crypter on the way in and out;
everything else is read and written as plain bytes.
"""

import os
from pathlib import Path
from typing import Optional, Union

from .config import ENCRYPTED_SUFFIX, default_crypter
from .gpg import Crypter
from .netrc import Netrc
from .parser import parse


FILE_MODE = 0o600

PathLike = Union[str, Path]


def is_encrypted_path(path: PathLike) -> bool:
    return Path(path).suffix == ENCRYPTED_SUFFIX


def load(path: PathLike, crypter: Optional[Crypter] = None) -> Netrc:
    """
    Load a netrc file.

    Args:
        path: File to read
        crypter: Decrypts .gpg files, defaults to the configured gpg

    Returns:
        Parsed Netrc remembering its path

    Raises:
        OSError: If the file cannot be read
        EncryptionError: If decryption fails
        NetrcParseError: If a machine has no name
    """
    path = str(path)
    if not is_encrypted_path(path):
        with open(path, "rb") as f:
            return parse(f, path)

    with open(path, "rb") as f:
        data = f.read()
    if crypter is None:
        crypter = default_crypter()
    return parse(crypter.decrypt(data), path)


def save(netrc: Netrc, path: PathLike, crypter: Optional[Crypter] = None) -> None:
    """
    Write a netrc document with owner-only permissions.

    Args:
        netrc: Document to render
        path: File to write
        crypter: Encrypts for .gpg files, defaults to the configured gpg

    Raises:
        OSError: If the file cannot be written
        EncryptionError: If encryption fails
    """
    body = netrc.to_bytes()
    if is_encrypted_path(path):
        if crypter is None:
            crypter = default_crypter()
        body = crypter.encrypt(body)

    fd = os.open(str(path), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
    with os.fdopen(fd, "wb") as f:
        f.write(body)
    os.chmod(path, FILE_MODE)
