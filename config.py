"""Configuration settings for the phrase flashcards pipeline."""

from pathlib import Path

# Base paths
PROJECT_ROOT = Path(__file__).parent
LOGS_DIR = PROJECT_ROOT / "logs"
DOTENV_PATH = PROJECT_ROOT / ".env"

# Output files
FLASHCARDS_FILENAME = "flashcards.txt"

# Anki plain-text import headers
FLASHCARD_HEADER_LINES = (
    "#separator:tab",
    "#html:true",
    "#tags column:3",
)
FLASHCARD_WORD_STYLE = "color: rgb(0, 0, 255);"

# Generation providers (OpenAI-compatible chat completion APIs)
PROVIDERS = {
    "deepseek": {
        "model": "deepseek-chat",
        "base_url": "https://api.deepseek.com",
        "api_key_env": "DEEPSEEK_API_KEY",
    },
    "openai": {
        "model": "gpt-3.5-turbo",
        "base_url": "https://api.openai.com/v1",
        "api_key_env": "OPENAI_API_KEY",
    },
}
DEFAULT_PROVIDER = "deepseek"
PROVIDER_ENV = "FLASHCARDS_PROVIDER"

# No timeout on generation calls; a stalled provider blocks the run
LLM_TIMEOUT = None

# Processing settings
DEFAULT_NUM_PHRASES = 5
TARGET_LANGUAGE = "Portuguese"

# Prompt templates
MEANING_PROMPT = (
    'Provide the meaning of the word "{word}" in English.\n'
    'Respond with a JSON object of the form {{"meaning": "..."}}.'
)
PHRASES_PROMPT = (
    "Generate {count} natural, contextually relevant phrases that native English "
    "speakers might use in daily life, incorporating the word \"{word}\" in a "
    "meaningful way.\n"
    'Respond with a JSON object of the form {{"phrases": ["...", "..."]}}.'
)
TRANSLATION_PROMPT = (
    "Translate the following phrase into natural, idiomatic {language} that a "
    'native speaker would use: "{phrase}"\n'
    'Respond with a JSON object of the form {{"translation": "..."}}.'
)
