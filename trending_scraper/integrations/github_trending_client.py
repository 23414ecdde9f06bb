"""GitHub Trending page client.

Downloads the raw HTML of the trending page for a single language.
"""

import logging
from urllib.parse import quote

import httpx

from trending_scraper.errors import FetchError, LanguageNotFoundError
from trending_scraper.utils.config import get_settings

logger = logging.getLogger(__name__)

TRENDING_URL_TEMPLATE = "https://github.com/trending/{language}"


async def fetch_trending_page(language: str) -> str:
    """Download the GitHub Trending page for a language.

    Args:
        language: Programming language filter, already lower-cased
            (e.g. 'python', 'javascript')

    Returns:
        Raw HTML of the trending page

    Raises:
        ValueError: If language is empty
        LanguageNotFoundError: If GitHub responds with 404
        FetchError: If the request fails for any other reason
    """
    if not language or not language.strip():
        raise ValueError("Language cannot be empty")

    settings = get_settings()
    # "c#" and "c++" must reach GitHub as one path segment
    url = TRENDING_URL_TEMPLATE.format(language=quote(language, safe=""))
    logger.info(f"Fetching trending page: {url}")

    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(
                url,
                headers={"User-Agent": settings.USER_AGENT},
                timeout=settings.REQUEST_TIMEOUT,
            )
            if response.status_code == 404:
                raise LanguageNotFoundError(language, url=url)
            response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise FetchError(
            str(e),
            language,
            status_code=e.response.status_code,
            url=url,
        ) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise FetchError(str(e) or type(e).__name__, language, url=url) from e

    logger.debug(f"Received {len(response.text)} characters from {url}")
    return response.text
