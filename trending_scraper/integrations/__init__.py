"""Clients and parsers for the GitHub Trending page."""

from trending_scraper.integrations.extractor import extract_repositories
from trending_scraper.integrations.github_trending_client import fetch_trending_page

__all__ = [
    "extract_repositories",
    "fetch_trending_page",
]
