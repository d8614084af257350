"""Integration tests for the chapter-listing CLI command."""

from pathlib import Path

from typer.testing import CliRunner

from bookseg.cli import app


def test_list_chapters_command_lists_title_and_rows(
    tmp_path: Path, paragraph_a: str, paragraph_b: str
) -> None:
    """List-chapters prints the title, a summary row, and one row per chapter."""

    path = tmp_path / "book.txt"
    path.write_text(
        f"Kapitel 1: Anfang\n{paragraph_a}\n\nKapitel 2: Ende\n{paragraph_b}",
        encoding="utf-8",
    )

    result = CliRunner().invoke(app, ["list-chapters", str(path)])

    assert result.exit_code == 0, result.output
    lines = result.stdout.splitlines()
    assert lines[0] == "Title: Generated Book"
    assert lines[1].startswith("Chapters: 2 (")
    assert lines[2] == f"1. Anfang ({len(paragraph_a.split())} words)"
    assert lines[3] == f"2. Ende ({len(paragraph_b.split())} words)"


def test_list_chapters_command_verbose_logs_stages(tmp_path: Path, paragraph_a: str) -> None:
    """Verbose mode logs parser stages."""

    path = tmp_path / "book.txt"
    path.write_text(paragraph_a, encoding="utf-8")

    result = CliRunner().invoke(app, ["list-chapters", str(path), "--verbose"])

    assert result.exit_code == 0, result.output
    assert "stage=fallback event=complete chapters=1" in result.output


def test_list_chapters_command_fails_for_missing_input(tmp_path: Path) -> None:
    """Missing input files are reported with a stage-aware error."""

    result = CliRunner().invoke(app, ["list-chapters", str(tmp_path / "none.txt")])

    assert result.exit_code == 1
    assert "list-chapters failed at stage `input`" in result.output
