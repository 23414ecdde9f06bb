"""Repository record scraped from the trending page."""

from pydantic import BaseModel, ConfigDict


class Repository(BaseModel):
    """One ranked entry of the GitHub Trending page.

    Attributes:
        name: ``owner/name`` with every whitespace character removed
        url: Absolute URL of the repository
        description: Description text, empty when the row has none
        stars: Star count exactly as rendered on the page (e.g. ``"12,345"``)
    """

    model_config = ConfigDict(frozen=True)

    name: str
    url: str
    description: str = ""
    stars: str = ""
