from .base import Base
from sortini.cli import ERROR_BANNER, main, normalize_arguments
from pathlib import Path
import io
import logging
import pytest


class Terminal(io.StringIO):
    """Stream that claims to be an interactive terminal."""

    def isatty(self) -> bool:
        return True


def unsorted_ini(path: Path) -> Path:
    base = Base()
    base.add_comment("header comment")
    base.add_section("B")
    base.add_option("z", "1")
    base.add_option("a", "2")
    base.add_section("A")
    base.add_option("y", "3")
    return base.export(path)


def run(*argv: str, stdin: io.StringIO | None = None, stdout: io.StringIO | None = None):
    stdin = Terminal() if stdin is None else stdin
    stdout = Terminal() if stdout is None else stdout
    stderr = io.StringIO()
    code = main(list(argv), stdin=stdin, stdout=stdout, stderr=stderr)
    return code, stdout.getvalue(), stderr.getvalue()


class TestCli:

    def test_usage(self):
        code, out, _ = run()
        assert code == 0
        assert "USAGE" in out

    @pytest.mark.parametrize("flag", ["-?", "/help", "--h"])
    def test_help(self, flag: str):
        code, out, _ = run(flag, "file.ini")
        assert code == 0
        assert "USAGE" in out

    def test_sort_in_place(self, tmp_path: Path):
        path = unsorted_ini(tmp_path)
        code, out, err = run(str(path))
        assert (code, err) == (0, "")
        assert "SUCCESS" in out
        assert path.read_text(encoding="utf-8") == (
            "\n[A]\ny = 3\n\n; header comment\n[B]\na = 2\nz = 1\n"
        )

    def test_output_file(self, tmp_path: Path):
        path = unsorted_ini(tmp_path)
        original = path.read_text(encoding="utf-8")
        output = tmp_path / "sorted.ini"

        code, _, _ = run(str(path), "-o", str(output), "-!expand")

        assert code == 0
        assert path.read_text(encoding="utf-8") == original
        assert output.read_text(encoding="utf-8") == (
            "[A]\ny=3\n; header comment\n[B]\na=2\nz=1\n"
        )

    def test_positional_output_file(self, tmp_path: Path):
        path = unsorted_ini(tmp_path)
        output = tmp_path / "sorted.ini"
        assert run(str(path), str(output))[0] == 0
        assert output.exists()

    def test_flags_are_case_insensitive(self, tmp_path: Path):
        path = unsorted_ini(tmp_path)
        output = tmp_path / "sorted.ini"

        code, _, _ = run(
            "/SECTIONS-DESC", "-!Entries", "!EXPAND", str(path), "-O", str(output)
        )

        assert code == 0
        assert output.read_text(encoding="utf-8") == (
            "; header comment\n[B]\nz=1\na=2\n[A]\ny=3\n"
        )

    def test_later_flags_win(self, tmp_path: Path):
        path = unsorted_ini(tmp_path)
        output = tmp_path / "sorted.ini"
        run(str(path), "-o", str(output), "-!sort", "-sections", "-!expand")
        assert output.read_text(encoding="utf-8") == (
            "[A]\ny=3\n; header comment\n[B]\nz=1\na=2\n"
        )

    def test_stdin_to_stdout(self):
        code, out, _ = run(stdin=io.StringIO("[B]\nk=1\n[A]\n"), stdout=io.StringIO())
        assert code == 0
        assert out == "\n[A]\n\n[B]\nk = 1\n"

    def test_file_to_redirected_stdout(self, tmp_path: Path):
        path = unsorted_ini(tmp_path)
        original = path.read_text(encoding="utf-8")
        code, out, _ = run(str(path), "-!expand", stdout=io.StringIO())
        assert code == 0
        assert out == "[A]\ny=3\n; header comment\n[B]\na=2\nz=1\n"
        assert path.read_text(encoding="utf-8") == original

    def test_missing_file(self, tmp_path: Path):
        output = tmp_path / "out.ini"
        code, _, err = run(str(tmp_path / "missing.ini"), "-o", str(output))
        assert code == 1
        assert ERROR_BANNER in err
        assert output.read_text(encoding="utf-8").startswith(ERROR_BANNER)

    def test_no_file(self):
        code, _, err = run("-expand")
        assert code == 1
        assert ERROR_BANNER in err

    def test_unknown_option(self, tmp_path: Path):
        path = unsorted_ini(tmp_path)
        code, out, _ = run("-bogus", str(path))
        assert code == 0
        assert "Unknown option: bogus" in out

    def test_quiet(self, tmp_path: Path):
        path = unsorted_ini(tmp_path)
        code, out, _ = run("-q", "-bogus", str(path))
        assert (code, out) == (0, "")

    def test_normalize_arguments(self):
        assert normalize_arguments(
            ["-Expand", "/i", "!sort", "/tmp/x.ini", "-o", "/q", "--entries-DESC"]
        ) == ["--expand", "--i", "--not-sort", "/tmp/x.ini", "--o", "/q", "--entries-desc"]

    def test_lone_dash_is_no_flag(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        path = unsorted_ini(tmp_path)
        output = tmp_path / "sorted.ini"

        code, out, _ = run(str(path), str(output), "-", "-!sort", "-!expand")

        assert code == 0
        assert "Unknown option: -" in out
        assert output.read_text(encoding="utf-8") == (
            "; header comment\n[B]\nz=1\na=2\n[A]\ny=3\n"
        )
        assert not (tmp_path / "--not-sort").exists()

    def test_missing_option_value(self, tmp_path: Path):
        path = unsorted_ini(tmp_path)
        original = path.read_text(encoding="utf-8")

        code, out, err = run(str(path), "-o")

        assert code == 1
        assert ERROR_BANNER in err
        assert "SUCCESS" not in out
        assert path.read_text(encoding="utf-8") == original

    def test_verbose_sets_log_level(self, tmp_path: Path):
        path = unsorted_ini(tmp_path)
        run("-v", str(path))
        assert logging.getLogger("sortini").level == logging.DEBUG
        run(str(path))
        assert logging.getLogger("sortini").level == logging.WARNING
