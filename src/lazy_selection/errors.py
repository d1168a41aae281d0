"""Exception types raised by lazy-selection."""


class LazySelectionError(Exception):
    """Base class for lazy-selection errors."""


class PageUnavailableError(LazySelectionError):
    """A page could not be fetched or parsed.

    The selection state is never touched when this is raised.
    """

    def __init__(self, page_index: int, reason: str) -> None:
        super().__init__(f"Page {page_index} unavailable: {reason}")
        self.page_index = page_index
        self.reason = reason
