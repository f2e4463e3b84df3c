"""Interactive phrase selection in the terminal."""

import signal
import threading
from contextlib import contextmanager

import click


def parse_selection(answer: str, count: int) -> list[int] | None:
    """
    Parse a selection answer into zero-based indices.

    Accepts comma or space separated numbers (1-based), ranges like "2-4",
    "all", or a blank answer for no selection.

    Args:
        answer: Raw user input
        count: Number of candidates shown

    Returns:
        Sorted unique indices, or None if the answer is invalid
    """
    answer = answer.strip().lower()
    if not answer:
        return []
    if answer in ("a", "all"):
        return list(range(count))

    indices = set()
    for token in answer.replace(",", " ").split():
        if "-" in token:
            start_str, _, end_str = token.partition("-")
            if not (start_str.isdigit() and end_str.isdigit()):
                return None
            start, end = int(start_str), int(end_str)
            if start > end:
                return None
            numbers = range(start, end + 1)
        elif token.isdigit():
            numbers = [int(token)]
        else:
            return None

        for n in numbers:
            if not 1 <= n <= count:
                return None
            indices.add(n - 1)

    return sorted(indices)


@contextmanager
def _interruptible():
    """Let Ctrl-C raise KeyboardInterrupt while blocked on a read."""
    # asyncio.run only cancels the main task on the first SIGINT, which
    # cannot wake a read that is already blocking the loop thread.
    if threading.current_thread() is not threading.main_thread():
        yield
        return
    previous = signal.signal(signal.SIGINT, signal.default_int_handler)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


class TerminalSelector:
    """Numbered checkbox-style prompt for choosing phrases."""

    def _ask(self, word: str, candidates: list[str]) -> list[str]:
        click.echo(f'Choose phrases for the word "{word}":')
        for i, phrase in enumerate(candidates, start=1):
            click.echo(f"  {i}) {phrase}")

        def to_indices(answer: str) -> list[int]:
            indices = parse_selection(answer, len(candidates))
            if indices is None:
                raise click.BadParameter(
                    f"Please enter numbers between 1 and {len(candidates)}."
                )
            return indices

        indices = click.prompt(
            "Numbers (e.g. 1,3 or 2-4), 'all', or blank for none",
            default="",
            show_default=False,
            value_proc=to_indices,
        )
        return [candidates[i] for i in indices]

    async def select_from(self, word: str, candidates: list[str]) -> list[str]:
        """
        Ask the user which candidates to keep.

        Blocks the event loop until the user answers. Nothing else runs
        while a selection is open.

        Returns:
            Chosen phrases in presentation order

        Raises:
            click.Abort: If the user presses Ctrl-C or input ends
        """
        if not candidates:
            click.echo(f'No phrases were generated for the word "{word}".')
            return []
        with _interruptible():
            return self._ask(word, list(candidates))
