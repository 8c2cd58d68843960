"""
GnuPG pipe-through for encrypted netrc files.

The core never shells out itself: load/save take any object with
encrypt/decrypt over bytes, and GpgCrypter is the default one.
"""

import subprocess
from typing import List, Protocol

from .errors import EncryptionError


DEFAULT_GPG = "gpg"
DECRYPT_ARGS = ["--batch", "--quiet", "--decrypt"]
ENCRYPT_ARGS = ["--armor", "--batch", "--default-recipient-self", "--encrypt"]


class Crypter(Protocol):
    """Anything that can turn netrc bytes into ciphertext and back."""

    def decrypt(self, data: bytes) -> bytes:
        ...

    def encrypt(self, data: bytes) -> bytes:
        ...


class GpgCrypter:
    """Encrypts and decrypts by piping bytes through the gpg binary."""

    def __init__(self, binary: str = DEFAULT_GPG):
        self.binary = binary

    def decrypt(self, data: bytes) -> bytes:
        return self._run(DECRYPT_ARGS, data)

    def encrypt(self, data: bytes) -> bytes:
        return self._run(ENCRYPT_ARGS, data)

    def _run(self, args: List[str], data: bytes) -> bytes:
        """
        Run gpg with data on stdin and return everything it wrote to stdout.

        Raises:
            EncryptionError: If gpg is missing, the pipe breaks, or gpg exits non-zero
        """
        cmd = [self.binary] + args
        try:
            result = subprocess.run(cmd, input=data, capture_output=True)
        except FileNotFoundError as e:
            raise EncryptionError(f"{self.binary} not found") from e
        except OSError as e:
            raise EncryptionError(f"could not run {self.binary}: {e}") from e

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", "replace")
            raise EncryptionError(
                f"{' '.join(cmd)} exited with status {result.returncode}",
                returncode=result.returncode,
                stderr=stderr,
            )

        return result.stdout
