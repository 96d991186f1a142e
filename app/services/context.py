"""Page context: where the generator can learn the address of the current page.

Server-side callers normally know the page URL and pass it explicitly.  A
context is only consulted when neither the page data nor the options carry a
URL, e.g. when meta tags are produced on behalf of a page that is already
being displayed.
"""

from typing import Optional, Protocol


class PageContext(Protocol):
    def current_url(self) -> Optional[str]:
        """Return the address of the page being rendered, if known."""
        ...


class StaticPageContext:
    """A context that always reports the same page address."""

    def __init__(self, url: Optional[str] = None) -> None:
        self._url = url

    def current_url(self) -> Optional[str]:
        return self._url
