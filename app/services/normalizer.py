"""Value normalisation for meta content: image URLs, keywords, page URLs."""

from typing import List, Optional, Union

from app.services.context import PageContext


def resolve_image_url(image: str, base_url: str = "") -> str:
    """Return an absolute URL for *image*.

    Images that already start with ``http`` are returned untouched; anything
    else is joined onto *base_url* (trailing slash removed) with exactly one
    ``/`` between the two parts.
    """
    if image.startswith("http"):
        return image
    base = base_url[:-1] if base_url.endswith("/") else base_url
    separator = "" if image.startswith("/") else "/"
    return f"{base}{separator}{image}"


def join_keywords(keywords: Union[str, List[str]]) -> str:
    """Return the ``keywords`` meta content, or an empty string when unset.

    Only the branch matching the runtime type of *keywords* applies: a string
    is used verbatim when it holds non-whitespace text, a list is joined with
    commas when it is non-empty.
    """
    if isinstance(keywords, str):
        return keywords if keywords.strip() else ""
    if isinstance(keywords, list) and keywords:
        return ",".join(keywords)
    return ""


def resolve_page_url(
    page_url: str,
    option_url: str = "",
    context: Optional[PageContext] = None,
) -> str:
    """Pick the canonical page URL: page data first, then options, then context."""
    url = page_url or option_url
    if not url and context is not None:
        url = context.current_url() or ""
    return url
