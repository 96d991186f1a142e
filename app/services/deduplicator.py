"""Duplicate removal for generated meta descriptor lists.

Site-level and page-level custom meta frequently repeat entries that the
generator already produced (or each other).  Descriptors are plain mappings
and therefore unhashable, so duplicates are detected by structural equality
rather than through a set.
"""

from typing import List

from app.models.seo import MetaDescriptor


def unique_meta(metas: List[MetaDescriptor]) -> List[MetaDescriptor]:
    """Return *metas* without structural duplicates.

    Two descriptors are duplicates when they compare equal key-by-key
    (nested values included).  The first occurrence wins and the relative
    order of the survivors is preserved.
    """
    unique: List[MetaDescriptor] = []
    for meta in metas:
        if not any(meta == kept for kept in unique):
            unique.append(meta)
    return unique
