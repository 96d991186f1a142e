"""Projection of meta descriptors into HTML ``<meta>`` elements."""

from typing import List

from bs4 import BeautifulSoup, Tag

from app.models.seo import MetaDescriptor

# Descriptor keys that differ from their HTML attribute name
_ATTRIBUTE_NAMES = {"itemProp": "itemprop"}


def _to_tag(soup: BeautifulSoup, meta: MetaDescriptor) -> Tag:
    tag = soup.new_tag("meta")
    for key, value in meta.items():
        # Nested values produced by dotted custom keys have no attribute form
        if isinstance(value, (dict, list)) or value is None:
            continue
        tag[_ATTRIBUTE_NAMES.get(key, key)] = str(value)
    return tag


def render_meta_tags(metas: List[MetaDescriptor]) -> str:
    """Return *metas* as ``<meta>`` markup, one element per line."""
    soup = BeautifulSoup("", "lxml")
    return "\n".join(str(_to_tag(soup, meta)) for meta in metas)
