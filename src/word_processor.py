"""Sequential per-word generation and phrase selection."""

from typing import Protocol

from src.logger import get_logger
from src.models import (
    MeaningResult,
    PendingTranslation,
    PhraseCandidate,
    SelectionResult,
    WordRequest,
)


class PhraseSource(Protocol):
    async def meaning_of(self, word: str) -> str: ...

    async def generate_phrases(self, word: str, count: int) -> list[str]: ...


class PhraseSelector(Protocol):
    async def select_from(self, word: str, candidates: list[str]) -> list[str]: ...


async def process_word(
    request: WordRequest,
    source: PhraseSource,
    selector: PhraseSelector,
) -> tuple[MeaningResult, SelectionResult]:
    """
    Fetch a meaning, generate phrases and let the user choose among them.

    Args:
        request: The word and how many phrases to generate
        source: Meaning and phrase generator
        selector: Interactive selection prompt

    Returns:
        Tuple of (MeaningResult, SelectionResult)
    """
    logger = get_logger()

    meaning = MeaningResult(word=request.word, meaning=await source.meaning_of(request.word))
    logger.info(f'\nMeaning of "{meaning.word}": {meaning.meaning}\n')

    texts = await source.generate_phrases(request.word, request.num_phrases)
    candidates = [PhraseCandidate(word=request.word, text=t) for t in texts]

    chosen = await selector.select_from(request.word, [c.text for c in candidates])
    selection = SelectionResult(word=request.word, phrases=list(chosen))
    logger.debug(
        f"Selected {len(selection.phrases)}/{len(candidates)} phrases for '{request.word}'"
    )
    return meaning, selection


async def process_words(
    requests: list[WordRequest],
    source: PhraseSource,
    selector: PhraseSelector,
) -> list[PendingTranslation]:
    """
    Process every word in input order and collect the chosen phrases.

    Words are handled one at a time so only one selection prompt is ever
    shown. Repeated words are processed again.

    Args:
        requests: Words to process
        source: Meaning and phrase generator
        selector: Interactive selection prompt

    Returns:
        One PendingTranslation per selected phrase, across all words
    """
    pending: list[PendingTranslation] = []
    total = len(requests)

    for i, request in enumerate(requests):
        get_logger().debug(f"[{i+1}/{total}] Processing: {request.word}")
        meaning, selection = await process_word(request, source, selector)
        pending.extend(
            PendingTranslation(word=request.word, meaning=meaning.meaning, phrase=phrase)
            for phrase in selection.phrases
        )

    return pending
