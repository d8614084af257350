"""Command-line interface for bookseg.

Responsibilities:
- Expose user-facing commands for parsing generated book text files.
- Convert CLI arguments, YAML config, and environment into `ParseOptions`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from dataclasses import replace
import os
from pathlib import Path
import sys
from typing import Annotated

import typer

from .cli_rendering import echo_book_heading, echo_chapter_list, exit_with_command_error
from .config import BooksegConfig, ConfigLoader
from .errors import BooksegError
from .io.storage import ArtifactStore, dump_json
from .models.datatypes import Book
from .parser import BookParser
from .telemetry.logger import RunLogger
from .text.normalizer import TextNormalizer
from .text.teaser import create_teaser

app = typer.Typer(
    name="bookseg",
    no_args_is_help=True,
    help="Split generated book text into a title and chapters.",
)

InputArgument = Annotated[Path, typer.Argument(help="Path to a UTF-8 book text file.")]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with parser defaults."),
]
PreviewOption = Annotated[
    bool | None,
    typer.Option("--preview/--no-preview", help="Return only the first chapter."),
]
MaxChaptersOption = Annotated[
    int | None,
    typer.Option("--max-chapters", help="Maximum number of chapters (floored at 1)."),
]
MinChapterCharsOption = Annotated[
    int | None,
    typer.Option("--min-chapter-chars", help="Minimum chapter length (floored at 50)."),
]
HeadingDetectionOption = Annotated[
    bool | None,
    typer.Option(
        "--heading-detection/--no-heading-detection",
        help="Also split on numbered headings like `3) Title` or `Part II`.",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log parser stages to stderr."),
]


def _load_config(config_file: Path | None) -> BooksegConfig:
    """Resolve config from environment defaults layered under an optional YAML file."""

    try:
        env_config = ConfigLoader.from_env(os.environ)
    except ValueError as exc:
        raise BooksegError(
            stage="config",
            detail=f"Invalid environment configuration: {exc}",
            hint="Fix or unset the `BOOKSEG_*` environment variables.",
        ) from exc
    if config_file is None:
        return env_config

    try:
        return ConfigLoader.from_yaml(config_file, defaults=env_config)
    except FileNotFoundError as exc:
        raise BooksegError(
            stage="config",
            detail=f"Config file not found: `{config_file}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise BooksegError(
            stage="config",
            detail=f"Invalid config file `{config_file}`: {exc}",
            hint="Fix config keys/values and rerun.",
        ) from exc


def _resolve_config(
    config_file: Path | None,
    preview: bool | None,
    max_chapters: int | None,
    min_chapter_chars: int | None,
    heading_detection: bool | None,
) -> BooksegConfig:
    """Apply explicit CLI flags over file/environment config."""

    config = _load_config(config_file)
    overrides: dict[str, object] = {}
    if preview is not None:
        overrides["preview_mode"] = preview
    if max_chapters is not None:
        overrides["max_chapters"] = max_chapters
    if min_chapter_chars is not None:
        overrides["min_chapter_chars"] = min_chapter_chars
    if heading_detection is not None:
        overrides["enable_heading_detection"] = heading_detection
    return replace(config, **overrides)


def _read_input(input_path: Path) -> str:
    """Read the source text file or raise a stage-scoped error."""

    store = ArtifactStore(Path("."))
    if not store.exists(input_path):
        raise BooksegError(
            stage="input",
            detail=f"Input file not found: `{input_path}`.",
            hint="Pass an existing UTF-8 text file.",
        )
    try:
        return store.load_text(input_path)
    except UnicodeDecodeError as exc:
        raise BooksegError(
            stage="input",
            detail=f"Input file `{input_path}` is not valid UTF-8.",
            hint="Re-encode the file as UTF-8 and rerun.",
        ) from exc
    except OSError as exc:
        raise BooksegError(
            stage="input",
            detail=f"Failed to read input file `{input_path}`: {exc}",
        ) from exc


def _parse_file(
    input_path: Path,
    config_file: Path | None,
    preview: bool | None,
    max_chapters: int | None,
    min_chapter_chars: int | None,
    heading_detection: bool | None,
    run_logger: RunLogger | None,
) -> Book:
    """Load config and input, then run the parser."""

    config = _resolve_config(
        config_file, preview, max_chapters, min_chapter_chars, heading_detection
    )
    text = _read_input(input_path)
    return BookParser(run_logger=run_logger).parse(text, config.to_parse_options())


def _run_logger(verbose: bool) -> RunLogger | None:
    return RunLogger(sink=sys.stderr, level="DEBUG") if verbose else None


@app.command("parse")
def parse_command(
    input_path: InputArgument,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write the book JSON here instead of stdout."),
    ] = None,
    config_file: ConfigOption = None,
    preview: PreviewOption = None,
    max_chapters: MaxChaptersOption = None,
    min_chapter_chars: MinChapterCharsOption = None,
    heading_detection: HeadingDetectionOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Parse a book text file and emit its title and chapters as JSON."""

    run_logger = _run_logger(verbose)
    try:
        book = _parse_file(
            input_path,
            config_file,
            preview,
            max_chapters,
            min_chapter_chars,
            heading_detection,
            run_logger,
        )
        if out is not None:
            try:
                written = ArtifactStore(Path(".")).save_json(out, book.to_dict())
            except OSError as exc:
                raise BooksegError(
                    stage="output",
                    detail=f"Failed to write `{out}`: {exc}",
                    hint="Check that the output directory is writable.",
                ) from exc
    except Exception as exc:
        if run_logger is not None:
            run_logger.log_stage_failure(getattr(exc, "stage", "parse"), type(exc).__name__)
        exit_with_command_error("parse", exc)

    if out is None:
        typer.echo(dump_json(book.to_dict()))
    else:
        typer.echo(f"Book JSON: {written}")


@app.command("list-chapters")
def list_chapters_command(
    input_path: InputArgument,
    config_file: ConfigOption = None,
    preview: PreviewOption = None,
    max_chapters: MaxChaptersOption = None,
    min_chapter_chars: MinChapterCharsOption = None,
    heading_detection: HeadingDetectionOption = None,
    verbose: VerboseOption = False,
) -> None:
    """List the detected book title and chapter titles."""

    run_logger = _run_logger(verbose)
    try:
        book = _parse_file(
            input_path,
            config_file,
            preview,
            max_chapters,
            min_chapter_chars,
            heading_detection,
            run_logger,
        )
    except Exception as exc:
        if run_logger is not None:
            run_logger.log_stage_failure(getattr(exc, "stage", "parse"), type(exc).__name__)
        exit_with_command_error("list-chapters", exc)

    echo_book_heading(book)
    echo_chapter_list(book)


@app.command("teaser")
def teaser_command(input_path: InputArgument) -> None:
    """Print a short teaser of the whole normalized text."""

    try:
        text = _read_input(input_path)
    except Exception as exc:
        exit_with_command_error("teaser", exc)

    typer.echo(create_teaser(TextNormalizer().normalize(text)))


def main() -> None:
    """Run the bookseg CLI."""

    app()


if __name__ == "__main__":
    main()
