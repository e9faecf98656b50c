"""Tests for the CLI implementation."""

import pytest
from typer.testing import CliRunner

from byteslice.cli import app


class TestCLI:
    """Test the CLI functionality."""

    @pytest.fixture
    def runner(self):
        """CLI test runner."""
        return CliRunner()

    @pytest.fixture
    def data_file(self, tmp_path):
        """Ten-byte file 0..9."""
        path = tmp_path / "ten.bin"
        path.write_bytes(b"0123456789")
        return path

    def test_default_raw_whole_file(self, runner, data_file):
        """No options: raw copy of the whole file."""
        result = runner.invoke(app, [str(data_file)])

        assert result.exit_code == 0
        assert result.stdout_bytes == b"0123456789"

    def test_offset_and_size(self, runner, data_file):
        """--offset/--size select a window."""
        result = runner.invoke(app, ["--offset", "5", "--size", "3", str(data_file)])

        assert result.exit_code == 0
        assert result.stdout_bytes == b"567"

    def test_short_and_alias_options(self, runner, data_file):
        """-o, -l/--length and -f are accepted."""
        result = runner.invoke(app, ["-o", "0x2", "-l", "2", "-f", "hex", str(data_file)])
        assert result.exit_code == 0
        assert result.stdout_bytes == b"3233\n"

        result = runner.invoke(app, ["-o", "8", "--length", "2", str(data_file)])
        assert result.exit_code == 0
        assert result.stdout_bytes == b"89"

    @pytest.mark.parametrize(
        "fmt",
        ["raw", "hex", "dump", "arrayLiteral", "stringLiteral", "cstring", "cstringSafe", "base64", "md5", "sha256"],
    )
    def test_every_format_accepted(self, runner, data_file, fmt):
        """All ten registered names work verbatim."""
        result = runner.invoke(app, ["--format", fmt, str(data_file)])
        assert result.exit_code == 0, result.output
        assert result.stdout_bytes

    def test_cstring_safe_output(self, runner, tmp_path):
        """The documented split example through the CLI."""
        path = tmp_path / "ab61.bin"
        path.write_bytes(b"\xab\x61")

        safe = runner.invoke(app, ["-f", "cstringSafe", str(path)])
        naive = runner.invoke(app, ["-f", "cstring", str(path)])

        assert safe.stdout_bytes == b'"\\xab" "a"\n'
        assert naive.stdout_bytes == b'"\\xab\\x61"\n'

    def test_legacy_printable_flag(self, runner, tmp_path):
        """--legacy-printable lets 0x14..0x1f through unescaped."""
        path = tmp_path / "ctl.bin"
        path.write_bytes(b"\x15")

        default = runner.invoke(app, ["-f", "cstringSafe", str(path)])
        legacy = runner.invoke(app, ["-f", "cstringSafe", "--legacy-printable", str(path)])

        assert default.stdout_bytes == b'"\\x15"\n'
        assert legacy.stdout_bytes == b'"\x15"\n'

    def test_unknown_format(self, runner, data_file):
        """Unknown formats are an error with a distinct prefix."""
        result = runner.invoke(app, ["--format", "nope", str(data_file)])

        assert result.exit_code == 1
        assert "ERROR:" in result.output
        assert 'unsupported format "nope"' in result.output

    def test_no_arguments(self, runner):
        """Zero positional arguments is a usage error."""
        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "expected exactly one argument, got 0" in result.output

    def test_too_many_arguments(self, runner, data_file):
        """More than one positional argument is a usage error."""
        result = runner.invoke(app, [str(data_file), str(data_file)])

        assert result.exit_code == 1
        assert "expected exactly one argument, got 2" in result.output

    def test_malformed_offset(self, runner, data_file):
        """Non-numeric offsets are rejected."""
        result = runner.invoke(app, ["--offset", "ten", str(data_file)])

        assert result.exit_code == 1
        assert "could not parse offset" in result.output

    def test_offset_past_end(self, runner, data_file):
        """Seeking past the end reports the hex offset."""
        result = runner.invoke(app, ["--offset", "0x20", str(data_file)])

        assert result.exit_code == 1
        assert "ERROR: could not seek to offset 0x20" in result.output

    def test_missing_file(self, runner, tmp_path):
        """Missing input files exit non-zero."""
        result = runner.invoke(app, [str(tmp_path / "missing.bin")])

        assert result.exit_code == 1
        assert "could not open file" in result.output

    def test_list_formats(self, runner):
        """--list-formats prints every name and exits cleanly."""
        result = runner.invoke(app, ["--list-formats"])

        assert result.exit_code == 0
        names = [line.split()[0] for line in result.output.strip().splitlines()]
        assert names == [
            "raw", "hex", "dump", "arrayLiteral", "stringLiteral",
            "cstring", "cstringSafe", "base64", "md5", "sha256",
        ]

    def test_help_lists_formats(self, runner):
        """Help text advertises the available formats."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "cstringSafe" in result.output

    def test_dump_two_lines(self, runner, tmp_path):
        """17 bytes dump to two lines."""
        path = tmp_path / "seventeen.bin"
        path.write_bytes(bytes(range(17)))

        result = runner.invoke(app, ["-f", "dump", str(path)])

        assert result.exit_code == 0
        lines = result.stdout_bytes.decode("ascii").splitlines()
        assert len(lines) == 2
        assert lines[1].startswith("00000010  10 ")
        assert lines[1].endswith("|.|")
