"""Flashcard pipeline: word processing, translation, summary and export."""

from pathlib import Path
from typing import Protocol

from src.exporter import export_flashcards
from src.logger import get_logger
from src.models import PipelineConfig, TranslationPair
from src.translation import Translator, translate_all
from src.word_processor import PhraseSelector, PhraseSource, process_words


class GenerationBackend(PhraseSource, Translator, Protocol):
    """Everything the pipeline asks of the generation service."""


def format_summary(pairs: list[TranslationPair]) -> str:
    """Render the final summary, one block per translated phrase."""
    return "\n\n".join(
        f"Meaning: {pair.meaning}\nEnglish: {pair.english}\nPortuguese: {pair.portuguese}"
        for pair in pairs
    )


async def run_pipeline(
    pipeline_config: PipelineConfig,
    backend: GenerationBackend,
    selector: PhraseSelector,
    output_path: Path | None = None,
    show_progress: bool = True,
) -> list[TranslationPair]:
    """
    Run the whole pipeline for one configuration.

    Args:
        pipeline_config: Validated run configuration
        backend: Meaning, phrase and translation generator
        selector: Interactive selection prompt
        output_path: Flashcard file path, if exporting. Defaults to the working directory.
        show_progress: Whether to display the translation progress bar

    Returns:
        Translated phrases in selection order
    """
    logger = get_logger()

    # Stage 1: one word at a time
    pending = await process_words(pipeline_config.word_requests(), backend, selector)

    # Stage 2: all translations at once
    pairs = await translate_all(pending, backend, show_progress=show_progress)

    logger.info("\nFinal Output:\n")
    logger.info(format_summary(pairs))

    if pipeline_config.flashcards:
        await export_flashcards(pairs, output_path)

    return pairs
