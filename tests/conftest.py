"""Shared fixtures and fake collaborators."""

import asyncio
import logging

import pytest

import config
from src.llm_client import ServiceError
from src.models import PipelineConfig, ProviderSettings


class FakeBackend:
    """Records calls and returns predictable meanings, phrases and translations."""

    def __init__(self, fail_on=None, delays=None):
        self.calls = []
        self.completed = []
        self.fail_on = set(fail_on or [])
        self.delays = delays or {}

    async def meaning_of(self, word):
        self.calls.append(("meaning", word))
        return f"meaning of {word}"

    async def generate_phrases(self, word, count):
        self.calls.append(("phrases", word, count))
        return [f"{word} phrase {i}" for i in range(1, count + 1)]

    async def translate(self, phrase):
        self.calls.append(("translate", phrase))
        await asyncio.sleep(self.delays.get(phrase, 0))
        if phrase in self.fail_on:
            raise ServiceError(f"translation failed for {phrase}")
        self.completed.append(phrase)
        return f"pt: {phrase}"


class FakeSelector:
    """Chooses candidates by index, per word; defaults to the first candidate."""

    def __init__(self, choices=None):
        self.choices = choices or {}
        self.prompts = []

    async def select_from(self, word, candidates):
        self.prompts.append((word, list(candidates)))
        indices = self.choices.get(word, [0])
        return [candidates[i] for i in indices]


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def make_backend():
    return FakeBackend


@pytest.fixture
def make_selector():
    return FakeSelector


@pytest.fixture
def provider_settings():
    return ProviderSettings(
        name="deepseek",
        model="deepseek-chat",
        base_url="https://api.deepseek.test",
        api_key_env="DEEPSEEK_API_KEY",
        api_key="test-key",
    )


@pytest.fixture
def make_config(provider_settings):
    def _make(words=("run", "jump"), num_phrases=2, flashcards=False):
        return PipelineConfig(
            words=tuple(words),
            num_phrases=num_phrases,
            flashcards=flashcards,
            provider=provider_settings,
        )

    return _make


@pytest.fixture(autouse=True)
def isolated_logging(tmp_path, monkeypatch):
    """Keep run logs out of the project and drop handlers bound to captured streams."""
    monkeypatch.setattr(config, "LOGS_DIR", tmp_path / "logs")
    yield
    logger = logging.getLogger("flashcards")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
