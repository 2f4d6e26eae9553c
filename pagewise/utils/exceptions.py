class PagewiseError(Exception):
    """Base exception for all Pagewise errors."""


class InvalidSearchOptions(PagewiseError):
    """Raised when repository search criteria reference unknown columns or directions."""
