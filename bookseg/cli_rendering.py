"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
book summaries, and chapter listing rows.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import BooksegError
from .models.datatypes import Book


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, BooksegError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_book_heading(book: Book) -> None:
    """Print the book title and overall size."""

    typer.echo(f"Title: {book.title}")
    typer.echo(f"Chapters: {len(book.chapters)} ({book.word_count} words)")


def echo_chapter_list(book: Book) -> None:
    """Print compact deterministic chapter rows in book order."""

    for position, chapter in enumerate(book.chapters, start=1):
        typer.echo(f"{position}. {chapter.title} ({chapter.word_count} words)")
