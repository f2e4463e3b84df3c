import pytest

import config
from src.validation import (
    ConfigurationError,
    parse_num_phrases,
    parse_words,
    validate_config,
)

ENV = {"DEEPSEEK_API_KEY": "sk-test", "OPENAI_API_KEY": "sk-openai"}


def test_parse_words_splits_and_strips():
    assert parse_words("run, jump ,swim") == ["run", "jump", "swim"]


def test_parse_words_keeps_duplicates_in_order():
    assert parse_words("run,jump,run") == ["run", "jump", "run"]


@pytest.mark.parametrize("raw", [None, "", ",", " , ,"])
def test_parse_words_empty(raw):
    assert parse_words(raw) == []


def test_parse_num_phrases_default():
    assert parse_num_phrases(None) == config.DEFAULT_NUM_PHRASES


@pytest.mark.parametrize("raw, expected", [("3", 3), (" 7 ", 7), (2, 2)])
def test_parse_num_phrases_valid(raw, expected):
    assert parse_num_phrases(raw) == expected


@pytest.mark.parametrize("raw", ["0", "-2", "abc", "2.5", "", 0, True])
def test_parse_num_phrases_invalid(raw):
    with pytest.raises(ConfigurationError):
        parse_num_phrases(raw)


def test_validate_config_success():
    cfg = validate_config("run,jump", "2", True, ENV)

    assert cfg.words == ("run", "jump")
    assert cfg.num_phrases == 2
    assert cfg.flashcards is True
    assert cfg.provider.name == "deepseek"
    assert cfg.provider.model == "deepseek-chat"
    assert cfg.provider.api_key == "sk-test"


def test_validate_config_openai_provider():
    cfg = validate_config("run", None, False, ENV, provider="openai")

    assert cfg.provider.model == "gpt-3.5-turbo"
    assert cfg.provider.api_key == "sk-openai"
    assert cfg.num_phrases == 5


def test_validate_config_is_immutable():
    cfg = validate_config("run", "1", False, ENV)

    with pytest.raises(Exception):
        cfg.num_phrases = 3


def test_word_requests_follow_input_order():
    cfg = validate_config("run,jump,run", "4", False, ENV)

    requests = cfg.word_requests()
    assert [r.word for r in requests] == ["run", "jump", "run"]
    assert all(r.num_phrases == 4 for r in requests)


def test_validate_config_empty_words():
    with pytest.raises(ConfigurationError, match="No words provided"):
        validate_config(None, "2", False, ENV)


def test_validate_config_missing_credential():
    with pytest.raises(ConfigurationError, match="DEEPSEEK_API_KEY"):
        validate_config("run", "2", False, {"OPENAI_API_KEY": "sk-openai"})


def test_validate_config_blank_credential():
    with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
        validate_config("run", "2", False, {"OPENAI_API_KEY": "  "}, provider="openai")


def test_validate_config_unknown_provider():
    with pytest.raises(ConfigurationError, match="Unknown provider"):
        validate_config("run", "2", False, ENV, provider="nope")


def test_provider_repr_hides_key():
    cfg = validate_config("run", "2", False, ENV)

    assert "sk-test" not in repr(cfg)
