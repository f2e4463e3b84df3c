"""Validation of command-line input before any generation call."""

from collections.abc import Mapping

import config
from src.models import PipelineConfig, ProviderSettings


class ConfigurationError(Exception):
    """Raised when command-line input or the environment is invalid."""

    pass


def parse_words(raw_words: str | None) -> list[str]:
    """Split a comma-separated word list, dropping blank entries."""
    if not raw_words:
        return []
    return [w.strip() for w in raw_words.split(",") if w.strip()]


def parse_num_phrases(raw_num: str | int | None) -> int:
    """
    Parse the requested number of phrases per word.

    Args:
        raw_num: Value from the command line. None means the default.

    Returns:
        A positive phrase count

    Raises:
        ConfigurationError: If the value is non-numeric or not positive
    """
    if raw_num is None:
        return config.DEFAULT_NUM_PHRASES
    if isinstance(raw_num, bool):
        raise ConfigurationError("Please provide a valid number of phrases using the -n flag.")
    try:
        num = int(str(raw_num).strip())
    except ValueError:
        raise ConfigurationError(
            f"Please provide a valid number of phrases using the -n flag (got {raw_num!r})."
        )
    if num <= 0:
        raise ConfigurationError(
            f"Please provide a valid number of phrases using the -n flag (got {num})."
        )
    return num


def resolve_provider(name: str, environ: Mapping[str, str]) -> ProviderSettings:
    """Look up a provider and its credential in the environment."""
    if name not in config.PROVIDERS:
        known = ", ".join(sorted(config.PROVIDERS))
        raise ConfigurationError(f"Unknown provider '{name}'. Choose one of: {known}.")

    provider = config.PROVIDERS[name]
    api_key = environ.get(provider["api_key_env"], "").strip()
    if not api_key:
        raise ConfigurationError(
            f"Please set the {provider['api_key_env']} environment variable."
        )

    return ProviderSettings(
        name=name,
        model=provider["model"],
        base_url=provider["base_url"],
        api_key_env=provider["api_key_env"],
        api_key=api_key,
    )


def validate_config(
    raw_words: str | None,
    raw_num_phrases: str | int | None,
    flashcards: bool,
    environ: Mapping[str, str],
    provider: str = config.DEFAULT_PROVIDER,
) -> PipelineConfig:
    """
    Validate command-line input and build the run configuration.

    Args:
        raw_words: Comma-separated words
        raw_num_phrases: Phrases to generate per word
        flashcards: Whether to export a flashcard file
        environ: Environment holding the provider credential
        provider: Generation provider name

    Returns:
        Immutable PipelineConfig

    Raises:
        ConfigurationError: On an empty word list, a bad phrase count,
            an unknown provider or a missing credential
    """
    words = parse_words(raw_words)
    if not words:
        raise ConfigurationError(
            "No words provided. Please provide a list of words using the -w flag."
        )

    num_phrases = parse_num_phrases(raw_num_phrases)
    provider_settings = resolve_provider(provider, environ)

    return PipelineConfig(
        words=tuple(words),
        num_phrases=num_phrases,
        flashcards=bool(flashcards),
        provider=provider_settings,
    )
