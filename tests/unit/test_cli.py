"""Unit tests for blake2kit.cli module."""

import hashlib
import io

import pytest

from blake2kit import cli


class _Stdin:
    def __init__(self, data: bytes) -> None:
        self.buffer = io.BytesIO(data)


class TestHashCommand:
    """Test the hash subcommand."""

    def test_text(self, capsys, clean_env):
        """Test hashing a text argument."""
        assert cli.main(["hash", "--text", "abc"]) == 0
        assert capsys.readouterr().out.strip() == hashlib.blake2b(b"abc", digest_size=32).hexdigest()

    def test_text_upper_blake2s(self, capsys, clean_env):
        """Test variant, length and case options."""
        assert cli.main(["hash", "--text", "abc", "-a", "s", "-l", "16", "--upper"]) == 0
        expected = hashlib.blake2s(b"abc", digest_size=16).hexdigest().upper()
        assert capsys.readouterr().out.strip() == expected

    def test_key_hex(self, capsys, clean_env):
        """Test hex keys."""
        assert cli.main(["hash", "--text", "abc", "--key-hex", "00ff"]) == 0
        expected = hashlib.blake2b(b"abc", digest_size=32, key=b"\x00\xff").hexdigest()
        assert capsys.readouterr().out.strip() == expected

    def test_files_and_tag(self, capsys, clean_env, tmp_path):
        """Test file hashing with BSD-style output."""
        path = tmp_path / "a.txt"
        path.write_bytes(b"hello")
        assert cli.main(["hash", str(path), "--tag", "-l", "64"]) == 0
        expected = hashlib.blake2b(b"hello").hexdigest()
        assert capsys.readouterr().out.strip() == f"BLAKE2b-512 ({path}) = {expected}"

    def test_file_listing(self, capsys, clean_env, tmp_path):
        """Test the default '<hex>  <name>' format."""
        path = tmp_path / "b.bin"
        path.write_bytes(b"\x00" * 200)
        assert cli.main(["hash", "--key", "k", str(path)]) == 0
        expected = hashlib.blake2b(b"\x00" * 200, digest_size=32, key=b"k").hexdigest()
        assert capsys.readouterr().out.strip() == f"{expected}  {path}"

    def test_stdin(self, capsys, clean_env, monkeypatch):
        """Test reading standard input."""
        monkeypatch.setattr(cli.sys, "stdin", _Stdin(b"from stdin"))
        assert cli.main(["hash", "-a", "blake2s"]) == 0
        expected = hashlib.blake2s(b"from stdin").hexdigest()
        assert capsys.readouterr().out.strip() == f"{expected}  -"

    def test_environment_defaults(self, capsys, clean_env):
        """Test environment configuration."""
        clean_env.setenv("BLAKE2KIT_VARIANT", "s")
        clean_env.setenv("BLAKE2KIT_DIGEST_SIZE", "20")
        clean_env.setenv("BLAKE2KIT_HEX_CASE", "upper")
        assert cli.main(["hash", "--text", "abc"]) == 0
        expected = hashlib.blake2s(b"abc", digest_size=20).hexdigest().upper()
        assert capsys.readouterr().out.strip() == expected

    def test_invalid_length(self, capsys, clean_env):
        """Test that out-of-range lengths exit with status 2."""
        assert cli.main(["hash", "--text", "abc", "-l", "0"]) == 2
        assert "output_length" in capsys.readouterr().err

    def test_key_too_long(self, capsys, clean_env):
        """Test that over-long keys exit with status 2."""
        assert cli.main(["hash", "--text", "abc", "-a", "s", "--key", "k" * 33]) == 2
        assert "key length" in capsys.readouterr().err

    def test_missing_file(self, capsys, clean_env, tmp_path):
        """Test that unreadable files exit with status 2."""
        assert cli.main(["hash", str(tmp_path / "nope")]) == 2
        assert "[ERROR]" in capsys.readouterr().err

    def test_bad_key_hex(self, capsys, clean_env):
        """Test malformed hex keys."""
        assert cli.main(["hash", "--text", "abc", "--key-hex", "zz"]) == 2

    def test_usage_error(self, clean_env):
        """Test that argparse rejects unknown algorithms."""
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["hash", "-a", "md5"])
        assert excinfo.value.code == 2


class TestOtherCommands:
    """Test selftest and avalanche subcommands."""

    def test_selftest(self, capsys, clean_env):
        """Test the self-test report."""
        assert cli.main(["selftest"]) == 0
        assert "0 failed" in capsys.readouterr().out

    def test_selftest_without_cross_check(self, capsys, clean_env):
        """Test the self-test without the backend."""
        assert cli.main(["selftest", "--no-cross-check"]) == 0

    def test_avalanche(self, capsys, clean_env):
        """Test the avalanche summary."""
        assert cli.main(["avalanche", "--text", "abc", "-a", "s", "--flips", "16"]) == 0
        out = capsys.readouterr().out
        assert '"flips": 16' in out
        assert '"collisions": 0' in out
