"""Exceptions raised while fetching the GitHub Trending page.

The CLI catches every one of these and turns it into a terminal message,
so none of them should ever surface as a traceback.
"""

import time
from typing import Optional


class TrendingError(Exception):
    """Base exception for trending page errors."""

    def __init__(self, message: str, language: Optional[str] = None, **context):
        """Initialize trending error with context.

        Args:
            message: Error message
            language: Language whose trending page was requested
            **context: Additional context information
        """
        super().__init__(message)
        self.language = language
        self.context = context
        self.timestamp = time.time()


class LanguageNotFoundError(TrendingError):
    """GitHub answered 404: the language is not a known trending filter."""

    def __init__(self, language: str, **context):
        super().__init__(
            f'Language "{language}" was not found on GitHub Trending.',
            language,
            **context,
        )


class FetchError(TrendingError):
    """Any other failure: transport error, timeout or non-2xx status."""

    def __init__(
        self,
        message: str,
        language: Optional[str] = None,
        status_code: Optional[int] = None,
        **context,
    ):
        """Initialize fetch error.

        Args:
            message: Underlying error message
            language: Language whose trending page was requested
            status_code: HTTP status code if a response was received
            **context: Additional context
        """
        super().__init__(message, language, **context)
        self.status_code = status_code
