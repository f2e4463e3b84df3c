"""Flashcard export in Anki's plain-text import format."""

import asyncio
import os
import tempfile
from pathlib import Path

import config
from src.logger import get_logger
from src.models import TranslationPair


class FileWriteError(Exception):
    """Raised when the flashcard file cannot be written."""

    pass


def format_flashcard_line(pair: TranslationPair) -> str:
    """Format one flashcard: highlighted phrase, a tab, then the meaning."""
    styled_word = (
        f'<b><span style="{config.FLASHCARD_WORD_STYLE}">{pair.word}</span></b>'
    )
    return f'"{pair.english} {styled_word}"\t{pair.meaning}'


def build_flashcard_content(pairs: list[TranslationPair]) -> str:
    """Build the file content: header lines followed by one line per pair."""
    lines = list(config.FLASHCARD_HEADER_LINES)
    lines.extend(format_flashcard_line(pair) for pair in pairs)
    return "\n".join(lines)


def write_atomic(path: Path, content: str) -> None:
    """
    Write content to path in a single replace.

    Args:
        path: Destination file
        content: Text to write as UTF-8

    Raises:
        FileWriteError: If the file cannot be written
    """
    path = Path(path)
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.replace(tmp_name, path)
    except (OSError, UnicodeError) as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise FileWriteError(f"Could not write {path}: {e}") from e


async def export_flashcards(
    pairs: list[TranslationPair],
    path: Path | None = None,
) -> Path:
    """
    Export translation pairs as a flashcard file.

    Args:
        pairs: Translated phrases
        path: Output path. Defaults to flashcards.txt in the working directory.

    Returns:
        Path of the written file
    """
    if path is None:
        path = Path.cwd() / config.FLASHCARDS_FILENAME

    content = build_flashcard_content(pairs)
    await asyncio.to_thread(write_atomic, path, content)

    get_logger().info(f'\nFlashcards file "{path.name}" has been generated.\n')
    return path
