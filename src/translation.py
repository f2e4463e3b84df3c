"""Concurrent translation of all selected phrases."""

import asyncio
from typing import Protocol

from tqdm import tqdm

from src.logger import get_logger
from src.models import PendingTranslation, TranslationPair


class Translator(Protocol):
    async def translate(self, phrase: str) -> str: ...


async def translate_one(item: PendingTranslation, translator: Translator) -> TranslationPair:
    translation = await translator.translate(item.phrase)
    return TranslationPair(
        word=item.word,
        meaning=item.meaning,
        english=item.phrase,
        portuguese=translation,
    )


async def translate_all(
    pending: list[PendingTranslation],
    translator: Translator,
    show_progress: bool = True,
) -> list[TranslationPair]:
    """
    Translate every pending phrase concurrently.

    All requests start together; results keep the order of the input list,
    whatever order the requests finish in. The first failure cancels the
    requests still in flight and is raised; no results are returned.

    Args:
        pending: Selected phrases from all words
        translator: Translation backend
        show_progress: Whether to display a progress bar

    Returns:
        One TranslationPair per input item, at the same index
    """
    if not pending:
        get_logger().info("No phrases selected, nothing to translate.")
        return []

    get_logger().debug(f"Translating {len(pending)} phrases...")

    with tqdm(total=len(pending), desc="  Translating", disable=not show_progress) as pbar:

        async def translate_and_update(item: PendingTranslation) -> TranslationPair:
            result = await translate_one(item, translator)
            pbar.update(1)
            return result

        tasks = [asyncio.create_task(translate_and_update(item)) for item in pending]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
