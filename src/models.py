"""Pydantic data models for the phrase flashcards pipeline."""

from pydantic import BaseModel, ConfigDict, Field


class WordRequest(BaseModel):
    """A word to process, with the number of phrases to generate for it."""

    model_config = ConfigDict(frozen=True)

    word: str
    num_phrases: int = Field(gt=0)


class MeaningResult(BaseModel):
    """The meaning of a word as returned by the generation backend."""

    model_config = ConfigDict(frozen=True)

    word: str
    meaning: str


class PhraseCandidate(BaseModel):
    """A generated phrase offered for selection."""

    model_config = ConfigDict(frozen=True)

    word: str
    text: str


class SelectionResult(BaseModel):
    """Phrases the user chose for one word, in presentation order."""

    model_config = ConfigDict(frozen=True)

    word: str
    phrases: list[str] = Field(default_factory=list)


class PendingTranslation(BaseModel):
    """A selected phrase awaiting translation."""

    model_config = ConfigDict(frozen=True)

    word: str
    meaning: str
    phrase: str


class TranslationPair(BaseModel):
    """A selected phrase with its translation."""

    model_config = ConfigDict(frozen=True)

    word: str
    meaning: str
    english: str
    portuguese: str


class ProviderSettings(BaseModel):
    """Resolved settings for the generation provider."""

    model_config = ConfigDict(frozen=True)

    name: str
    model: str
    base_url: str
    api_key_env: str
    api_key: str = Field(repr=False)


class PipelineConfig(BaseModel):
    """Validated configuration for one run."""

    model_config = ConfigDict(frozen=True)

    words: tuple[str, ...]
    num_phrases: int = Field(gt=0)
    flashcards: bool = False
    provider: ProviderSettings

    def word_requests(self) -> list[WordRequest]:
        return [WordRequest(word=w, num_phrases=self.num_phrases) for w in self.words]


# Response schemas expected from the generation backend


class MeaningResponse(BaseModel):
    model_config = ConfigDict(strict=True)

    meaning: str


class PhrasesResponse(BaseModel):
    model_config = ConfigDict(strict=True)

    phrases: list[str]


class TranslationResponse(BaseModel):
    model_config = ConfigDict(strict=True)

    translation: str
