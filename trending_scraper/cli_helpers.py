"""CLI helper functions for displaying trending repositories.

Output is meant for a human at a terminal; the ANSI colors are cosmetic and
the layout is not a stable machine-readable format.
"""

from trending_scraper.models import Repository

NO_DESCRIPTION = "No description."


class Colors:
    """ANSI escape codes used by the listing."""

    RESET = "\x1b[0m"
    BRIGHT = "\x1b[1m"
    CYAN = "\x1b[36m"
    YELLOW = "\x1b[33m"
    GREEN = "\x1b[32m"


def display_repositories(repos: list[Repository]) -> None:
    """Print a numbered listing of trending repositories.

    Args:
        repos: Records from extract_repositories, in page order

    Example Output:
        --- Top 2 Trending Repositories ---

        1. octocat/hello-world
           ★ 1,234 stars
           My first repository
           https://github.com/octocat/hello-world
    """
    if not repos:
        print("No repositories found.")
        return

    print(f"\n--- Top {len(repos)} Trending Repositories ---\n")

    for idx, repo in enumerate(repos, start=1):
        print(f"{Colors.BRIGHT}{idx}. {Colors.CYAN}{repo.name}{Colors.RESET}")
        print(f"   {Colors.YELLOW}★ {repo.stars} stars{Colors.RESET}")
        print(f"   {repo.description or NO_DESCRIPTION}")
        print(f"   {Colors.GREEN}{repo.url}{Colors.RESET}\n")
