"""lazy-selection: cross-page record selection over a lazily paginated collection."""

from ._version import __version__
from .config import Settings
from .errors import LazySelectionError, PageUnavailableError
from .core import (
    SelectionModel,
    Membership,
    AutoFillEngine,
    VisibilityProjector,
    HeaderState,
    Record,
    Page,
)
from .source import ArtworkClient, FrameCollectionSource


def browse(source=None, settings=None, port=0, show=True):
    """Launch the record browser in a web page.

    Parameters
    ----------
    source : CollectionSource, optional
        Where pages come from. Defaults to an ArtworkClient.
    settings : Settings, optional
        Defaults to ``Settings.from_env()``.
    port : int
        Port number. 0 = auto-assign.
    show : bool
        Whether to open the browser automatically.
    """
    from .logging_config import setup_logging
    from .browser.app import BrowserApp
    from .browser.state import BrowserState

    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)
    if source is None:
        source = ArtworkClient(settings)

    app = BrowserApp(BrowserState(source, settings=settings))
    app.serve(port=port, show=show)


__all__ = [
    "__version__",
    "browse",
    "Settings",
    "LazySelectionError",
    "PageUnavailableError",
    "SelectionModel",
    "Membership",
    "AutoFillEngine",
    "VisibilityProjector",
    "HeaderState",
    "Record",
    "Page",
    "ArtworkClient",
    "FrameCollectionSource",
]
