#!/usr/bin/env python3
"""Phrase Flashcards - build bilingual flashcards from example phrases."""

import argparse
import asyncio
import os
import sys
from pathlib import Path

import click
from dotenv import load_dotenv

import config
from src.exporter import FileWriteError
from src.llm_client import LLMClient, ServiceError
from src.logger import setup_logger
from src.models import PipelineConfig, TranslationPair
from src.pipeline import run_pipeline
from src.selector import TerminalSelector
from src.validation import ConfigurationError, validate_config


def load_environment() -> None:
    """Load .env files without overriding variables already set."""
    load_dotenv(config.DOTENV_PATH)
    load_dotenv(Path.cwd() / ".env")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate example phrases for words, pick the useful ones and translate them to "
        f"{config.TARGET_LANGUAGE}.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Five phrases per word, summary only
  python main.py -w run,jump

  # Two phrases per word and an Anki import file
  python main.py -w run,jump -n 2 -f
        """,
    )

    parser.add_argument(
        "-w",
        "--words",
        type=str,
        help="Comma-separated list of words, e.g. 'run,jump'",
    )
    parser.add_argument(
        "-n",
        "--numPhrases",
        dest="num_phrases",
        type=str,
        default=None,
        help=f"Number of phrases to generate per word (default: {config.DEFAULT_NUM_PHRASES})",
    )
    parser.add_argument(
        "-f",
        "--flashcards",
        action="store_true",
        help=f"Write {config.FLASHCARDS_FILENAME} in the current directory",
    )
    parser.add_argument(
        "--provider",
        choices=sorted(config.PROVIDERS),
        default=os.environ.get(config.PROVIDER_ENV, config.DEFAULT_PROVIDER),
        help="Generation provider (default: $%s or %s)" % (config.PROVIDER_ENV, config.DEFAULT_PROVIDER),
    )
    return parser


async def run(pipeline_config: PipelineConfig) -> list[TranslationPair]:
    async with LLMClient(pipeline_config.provider) as client:
        return await run_pipeline(pipeline_config, client, TerminalSelector())


def main(argv: list[str] | None = None) -> None:
    load_environment()
    args = build_parser().parse_args(argv)

    logger = setup_logger()

    try:
        pipeline_config = validate_config(
            raw_words=args.words,
            raw_num_phrases=args.num_phrases,
            flashcards=args.flashcards,
            environ=os.environ,
            provider=args.provider,
        )
    except ConfigurationError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    logger.debug(
        f"Words: {', '.join(pipeline_config.words)} | phrases per word: {pipeline_config.num_phrases} "
        f"| provider: {pipeline_config.provider.name} | flashcards: {pipeline_config.flashcards}"
    )

    try:
        asyncio.run(run(pipeline_config))
    except (ServiceError, FileWriteError) as e:
        logger.error(f"Error: {e}")
        sys.exit(1)
    except (KeyboardInterrupt, EOFError, click.Abort):
        logger.warning("\nInterrupted by user.")
        sys.exit(1)
    except Exception as e:
        logger.error(f"An error occurred: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
