"""GitHub Trending HTML extraction.

Pure data transformation: turns the trending page markup into
Repository records, in page order.

The page layout belongs to GitHub and changes without notice, so a missing
element yields an empty field instead of an error.
"""

import logging
import re

from bs4 import BeautifulSoup, Tag

from trending_scraper.models import Repository

logger = logging.getLogger(__name__)

GITHUB_ORIGIN = "https://github.com"

ROW_SELECTOR = "article.Box-row"
TITLE_SELECTOR = "h2 > a"
DESCRIPTION_SELECTOR = "p.col-9"
STARS_SELECTOR = 'a[href$="/stargazers"]'

_WHITESPACE = re.compile(r"\s+")


def _text(row: Tag, selector: str) -> str:
    element = row.select_one(selector)
    return element.get_text().strip() if element else ""


def _parse_row(row: Tag) -> Repository | None:
    """Build a record from one row, or None if it has no usable title."""
    title = row.select_one(TITLE_SELECTOR)
    if title is None:
        return None

    # "owner /\n   name" -> "owner/name"
    name = _WHITESPACE.sub("", title.get_text())
    if not name:
        return None

    return Repository(
        name=name,
        url=f"{GITHUB_ORIGIN}{title.get('href', '')}",
        description=_text(row, DESCRIPTION_SELECTOR),
        stars=_text(row, STARS_SELECTOR),
    )


def extract_repositories(markup: str) -> list[Repository]:
    """Extract trending repositories from the page HTML.

    Args:
        markup: Raw HTML of a GitHub Trending page

    Returns:
        Repository records in the order they appear on the page.
        Rows without a resolvable title are skipped.
    """
    soup = BeautifulSoup(markup, "html.parser")
    rows = soup.select(ROW_SELECTOR)

    repos = []
    for row in rows:
        repo = _parse_row(row)
        if repo is not None:
            repos.append(repo)

    logger.debug(
        f"Extracted {len(repos)} repositories from {len(rows)} rows "
        f"({len(rows) - len(repos)} skipped)"
    )
    return repos
