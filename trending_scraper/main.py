"""Command-line entry point.

Usage:
    github-trending <language>

Fetches https://github.com/trending/<language> and prints the ranked
repositories. Fetch failures are reported as messages, not tracebacks.
"""

import argparse
import asyncio
import sys

from pydantic import ValidationError

from trending_scraper.cli_helpers import display_repositories
from trending_scraper.errors import FetchError, LanguageNotFoundError
from trending_scraper.integrations.extractor import extract_repositories
from trending_scraper.integrations.github_trending_client import fetch_trending_page
from trending_scraper.models import Repository
from trending_scraper.utils.logging_config import get_logger, setup_logging

PROG = "github-trending"
USAGE = f"Usage: {PROG} <language>"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    The language is optional at the argparse level so that a missing
    language gets this tool's own message and exit status.

    Returns:
        Parser with a single ``language`` positional
    """
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Show the repositories trending on GitHub for a language.",
    )
    parser.add_argument(
        "language",
        nargs="?",
        help="Programming language, e.g. python or javascript",
    )
    return parser


def describe_config_error(error: ValidationError) -> str:
    """Summarize a settings ValidationError on one line.

    Args:
        error: Error raised while loading Settings

    Returns:
        e.g. ``TRENDING_REQUEST_TIMEOUT: Input should be greater than 0``
    """
    problems = []
    for err in error.errors():
        field = ".".join(str(part) for part in err["loc"])
        problems.append(f"TRENDING_{field}: {err['msg']}")
    return "; ".join(problems)


async def fetch_trending_repositories(language: str) -> list[Repository]:
    """Fetch the trending page for a language and extract its repositories.

    Args:
        language: Language identifier, already lower-cased

    Returns:
        Repository records in page order

    Raises:
        LanguageNotFoundError: If GitHub does not know the language
        FetchError: If the page could not be downloaded
    """
    markup = await fetch_trending_page(language)
    return extract_repositories(markup)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Command-line arguments, defaults to sys.argv[1:]

    Returns:
        Process exit status: 1 when no language is given, 2 when the
        TRENDING_* configuration is invalid, 0 otherwise
    """
    args = build_parser().parse_args(argv)

    if not args.language or not args.language.strip():
        print("Error: please specify a language.", file=sys.stderr)
        print(USAGE)
        return 1

    try:
        setup_logging()
    except ValidationError as e:
        print(f"Error: invalid configuration: {describe_config_error(e)}", file=sys.stderr)
        return 2
    logger = get_logger(__name__)

    language = args.language.strip().lower()
    print(f"Fetching trending repositories for '{language}'...")

    try:
        repos = asyncio.run(fetch_trending_repositories(language))
    except LanguageNotFoundError as e:
        logger.info(f"Trending page not found for {e.language!r}")
        print(
            f'Error: language "{language}" was not found on GitHub Trending.',
            file=sys.stderr,
        )
        return 0
    except FetchError as e:
        logger.info(f"Fetch failed (status={e.status_code}): {e}")
        print(f"Error fetching the page: {e}", file=sys.stderr)
        return 0

    display_repositories(repos)
    return 0


if __name__ == "__main__":
    sys.exit(main())
