"""Exceptions raised while fetching and extracting a page."""


class ExtractionError(Exception):
    """Base class for anything that stops an extraction."""


class MissingURLError(ExtractionError):
    def __init__(self, message: str = "Please provide a valid URL"):
        super().__init__(message)


class InvalidURLError(ExtractionError):
    pass


class FetchError(ExtractionError):
    """The page could not be downloaded or rendered."""
