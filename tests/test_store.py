"""
Tests for loading and saving netrc files.
"""

import os
import stat
import sys

import pytest
from netrcedit.core import store
from netrcedit.core.errors import EncryptionError
from netrcedit.core.store import is_encrypted_path, load, save


CONTENT = b"# creds\nmachine m\n  login l\n  password p\n"


class ReversingCrypter:
    """Stand-in for gpg that reverses the bytes."""

    def __init__(self):
        self.calls = []

    def decrypt(self, data):
        self.calls.append(("decrypt", data))
        return data[::-1]

    def encrypt(self, data):
        self.calls.append(("encrypt", data))
        return data[::-1]


class FailingCrypter:
    def decrypt(self, data):
        raise EncryptionError("gpg exited with status 2", returncode=2, stderr="no secret key")

    def encrypt(self, data):
        raise EncryptionError("gpg exited with status 2", returncode=2)


class TestEncryptedPath:
    def test_gpg_suffix(self):
        assert is_encrypted_path("/home/u/.netrc.gpg")
        assert not is_encrypted_path("/home/u/.netrc")
        assert not is_encrypted_path("/home/u/gpg")


class TestLoad:
    """Test reading files."""

    def test_load_plain(self, tmp_path):
        path = tmp_path / ".netrc"
        path.write_bytes(CONTENT)

        netrc = load(path)

        assert netrc.path == str(path)
        assert netrc.machine("m").get("password") == "p"
        assert netrc.to_bytes() == CONTENT

    def test_load_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load(tmp_path / "missing")

    def test_load_encrypted(self, tmp_path):
        path = tmp_path / ".netrc.gpg"
        path.write_bytes(CONTENT[::-1])
        crypter = ReversingCrypter()

        netrc = load(path, crypter=crypter)

        assert crypter.calls == [("decrypt", CONTENT[::-1])]
        assert netrc.machine("m").get("login") == "l"

    def test_load_encrypted_failure(self, tmp_path):
        path = tmp_path / ".netrc.gpg"
        path.write_bytes(b"garbage")
        with pytest.raises(EncryptionError) as exc_info:
            load(path, crypter=FailingCrypter())
        assert exc_info.value.returncode == 2
        assert "no secret key" in str(exc_info.value)

    def test_load_encrypted_uses_configured_crypter(self, tmp_path, monkeypatch):
        path = tmp_path / ".netrc.gpg"
        path.write_bytes(CONTENT[::-1])
        crypter = ReversingCrypter()
        monkeypatch.setattr(store, "default_crypter", lambda: crypter)

        load(path)

        assert crypter.calls[0][0] == "decrypt"


class TestSave:
    """Test writing files."""

    def test_round_trip_save(self, tmp_path):
        """Saving an unedited document should reproduce the file."""
        path = tmp_path / ".netrc"
        path.write_bytes(CONTENT)

        load(path).save()

        assert path.read_bytes() == CONTENT

    def test_save_edit(self, tmp_path):
        path = tmp_path / ".netrc"
        path.write_bytes(CONTENT)

        netrc = load(path)
        netrc.machine("m").set("password", "p2")
        netrc.save()

        assert path.read_bytes() == CONTENT.replace(b"password p", b"password p2")

    def test_save_to_other_path(self, tmp_path):
        source = tmp_path / "a"
        source.write_bytes(CONTENT)
        target = tmp_path / "b"

        save(load(source), target)

        assert target.read_bytes() == CONTENT

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_save_owner_only(self, tmp_path):
        """Saved files should only be readable by their owner."""
        path = tmp_path / ".netrc"
        path.write_bytes(CONTENT)
        os.chmod(path, 0o644)

        load(path).save()

        assert stat.S_IMODE(os.stat(path).st_mode) == 0o600

    def test_save_encrypted(self, tmp_path):
        path = tmp_path / ".netrc.gpg"
        path.write_bytes(CONTENT[::-1])
        crypter = ReversingCrypter()

        netrc = load(path, crypter=crypter)
        netrc.add_machine("n", "u", "q")
        netrc.save(crypter=crypter)

        expected = CONTENT + b"machine n\n  login u\n  password q\n"
        assert crypter.calls[-1] == ("encrypt", expected)
        assert path.read_bytes() == expected[::-1]

    def test_save_encrypted_failure_leaves_file(self, tmp_path):
        """A failed encryption should not touch the file on disk."""
        path = tmp_path / ".netrc.gpg"
        path.write_bytes(CONTENT[::-1])
        netrc = load(path, crypter=ReversingCrypter())

        with pytest.raises(EncryptionError):
            netrc.save(crypter=FailingCrypter())

        assert path.read_bytes() == CONTENT[::-1]
