"""
Environment-driven configuration.

Environment:
    NETRC          path of the credential file
    NETRCEDIT_GPG  gpg executable to use for .gpg files
"""

import os
import sys
from pathlib import Path
from typing import Optional

from .gpg import DEFAULT_GPG, GpgCrypter


NETRC_ENV = "NETRC"
GPG_ENV = "NETRCEDIT_GPG"
ENCRYPTED_SUFFIX = ".gpg"
NETRC_FILES = {
    "default": ".netrc",
    "win32": "_netrc",
}


def default_filename() -> str:
    return NETRC_FILES.get(sys.platform, NETRC_FILES["default"])


def find_netrc_path(path: Optional[str] = None) -> Path:
    """
    Resolve which netrc file to use.

    Priority order:
    - explicit path argument
    - $NETRC
    - ~/.netrc (~/_netrc on Windows), or its .gpg variant when only that exists

    Args:
        path: Explicit path, if the caller has one

    Returns:
        Path to the netrc file (it may not exist yet)
    """
    if path:
        return Path(path).expanduser()

    env_path = os.getenv(NETRC_ENV)
    if env_path:
        return Path(env_path).expanduser()

    home_path = Path.home() / default_filename()
    encrypted = home_path.with_name(home_path.name + ENCRYPTED_SUFFIX)
    if not home_path.exists() and encrypted.exists():
        return encrypted
    return home_path


def gpg_binary() -> str:
    value = os.getenv(GPG_ENV)
    if value is None or not value.strip():
        return DEFAULT_GPG
    return value.strip()


def default_crypter() -> GpgCrypter:
    return GpgCrypter(gpg_binary())
