"""Meta tag generation.

Builds the list of meta descriptors for a page from four layers, each one
overriding the previous:

1. site-wide SEO defaults (:class:`~app.models.seo.SiteConfig`)
2. page data (:class:`~app.models.seo.SeoData`)
3. site-wide custom meta (``SiteConfig.meta``)
4. page-level custom meta (``SeoData.meta``)

Every descriptor is a mapping identified by one of ``name``, ``itemProp`` or
``property`` and carrying a ``content`` value, ready to be projected into a
``<meta>`` element.
"""

import copy
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from app.config import get_site_config
from app.models.seo import MetaDescriptor, SeoData, SiteConfig
from app.services.context import PageContext
from app.services.deduplicator import unique_meta
from app.services.normalizer import join_keywords, resolve_image_url, resolve_page_url
from app.services.sanitizer import trim_till_last_sentence

logger = logging.getLogger(__name__)

# Keys that identify a descriptor, in lookup priority order
META_KEYS = ("name", "itemProp", "property")

# Maximum lengths of the ``description`` and ``twitter:description`` content
_DESCRIPTION_LENGTH = 155
_TWITTER_DESCRIPTION_LENGTH = 200


@dataclass(frozen=True)
class MetaOptions:
    base_url: str = ""
    url: str = ""


def get_meta_key(meta: Mapping[str, Any]) -> Optional[str]:
    """Return the first identifying key with a truthy value on *meta*, or None."""
    for key in META_KEYS:
        if meta.get(key):
            return key
    return None


def _set_path(target: Dict[str, Any], path: str, value: Any) -> None:
    """Assign *value* at a dotted *path*, creating nested mappings as needed."""
    *parents, leaf = path.split(".")
    node = target
    for part in parents:
        child = node.get(part)
        if not isinstance(child, dict):
            child = {}
            node[part] = child
        node = child
    node[leaf] = value


def add_update_meta(
    source: List[MetaDescriptor],
    custom_metas: List[MetaDescriptor],
) -> None:
    """Merge *custom_metas* into *source* in place.

    A custom entry whose identifying key matches an existing descriptor
    updates that descriptor field by field.  Entries without an identifying
    key, or without a match, are appended as they are (site verification
    tags and similar).
    """
    for meta in custom_metas:
        meta_key = get_meta_key(meta)
        existing = None
        if meta_key:
            existing = next(
                (item for item in source if item.get(meta_key) == meta[meta_key]),
                None,
            )

        if existing is None:
            source.append(copy.deepcopy(meta))
            continue

        for key, value in meta.items():
            _set_path(existing, key, copy.deepcopy(value))


def _detail_items(value: Any) -> Optional[List[tuple]]:
    """Return ``(sub_key, sub_value)`` pairs for a mapping or sequence detail."""
    if isinstance(value, Mapping):
        return [(str(sub_key), sub_value) for sub_key, sub_value in value.items()]
    if isinstance(value, (list, tuple)):
        return [(str(index), item) for index, item in enumerate(value)]
    return None


def _type_detail_metas(seo_type: str, type_details: Mapping[str, Any]) -> List[MetaDescriptor]:
    """Emit ``{type}:{key}`` tags with matching ``twitter:data``/``label`` pairs.

    Mapping and list values are walked one level deep, list items keyed by
    their index.  Only non-empty strings become tags; numbers, booleans and
    deeper collections are skipped.
    """
    metas: List[MetaDescriptor] = []
    counter = 1

    def emit(prop: str, label: str, content: str) -> None:
        nonlocal counter
        metas.append({"property": prop, "content": content})
        metas.append({"name": f"twitter:data{counter}", "content": content})
        metas.append({"name": f"twitter:label{counter}", "content": label})
        counter += 1

    for key, value in type_details.items():
        items = _detail_items(value)
        if items is None:
            if isinstance(value, str) and value:
                emit(f"{seo_type}:{key}", key, value)
            continue
        for sub_key, sub_value in items:
            if isinstance(sub_value, str) and sub_value:
                emit(f"{seo_type}:{key}:{sub_key}", sub_key, sub_value)

    return metas


class MetaGenerator:
    """Generates page meta descriptors on top of a fixed site configuration."""

    def __init__(self, config: Optional[SiteConfig] = None, context: Optional[PageContext] = None) -> None:
        self.config = config or SiteConfig()
        self.context = context

    def merge(self, data: Union[SeoData, Mapping[str, Any], None]) -> SeoData:
        """Overlay the fields set on *data* onto the site defaults.

        Merging is shallow: a page that sets ``twitter`` replaces the whole
        site ``twitter`` block rather than individual sub-fields.
        """
        if data is None:
            data = SeoData()
        elif not isinstance(data, SeoData):
            data = SeoData.model_validate(data)

        merged = self.config.schema_defaults().model_dump()
        merged.update(data.model_dump(include=data.model_fields_set))
        return SeoData.model_validate(merged)

    def generate(
        self,
        data: Union[SeoData, Mapping[str, Any], None] = None,
        options: Optional[MetaOptions] = None,
    ) -> List[MetaDescriptor]:
        """Return the deduplicated meta descriptor list for one page."""
        options = options or MetaOptions()
        seo = self.merge(data)
        metas: List[MetaDescriptor] = []

        # Title
        metas.append({"name": "title", "content": seo.title})
        metas.append({"name": "twitter:title", "content": seo.title})
        metas.append({"property": "og:title", "content": seo.title})

        keywords = join_keywords(seo.keywords)
        if keywords:
            metas.append({"name": "keywords", "content": keywords})

        # Twitter site & author
        if seo.twitter.site:
            metas.append({"name": "twitter:site", "content": seo.twitter.site})
        if seo.twitter.creator:
            metas.append({"name": "twitter:creator", "content": seo.twitter.creator})

        if seo.facebook.admins:
            metas.append({"property": "fb:admins", "content": ",".join(seo.facebook.admins)})

        # Description
        metas.append({
            "name": "description",
            "content": trim_till_last_sentence(seo.description, _DESCRIPTION_LENGTH),
        })
        metas.append({
            "name": "twitter:description",
            "content": trim_till_last_sentence(seo.description, _TWITTER_DESCRIPTION_LENGTH),
        })
        metas.append({"property": "og:description", "content": seo.description})

        if seo.site_name:
            metas.append({"property": "og:site_name", "content": seo.site_name})

        # Primary image
        has_image = bool(seo.image)
        if has_image:
            image_url = resolve_image_url(seo.image, options.base_url)
            metas.append({"itemProp": "image", "content": image_url})
            metas.append({"name": "twitter:image:src", "content": image_url})
            metas.append({"property": "og:image", "content": image_url})

        metas.append({
            "name": "twitter:card",
            "content": "summary_large_image" if has_image else "summary",
        })

        # Type: article/product/music/video and its details
        metas.append({"property": "og:type", "content": seo.type})
        metas.extend(_type_detail_metas(seo.type, seo.type_details))

        url = resolve_page_url(seo.url, options.url, self.context)
        if url.strip():
            metas.append({"property": "og:url", "content": url})

        add_update_meta(metas, self.config.meta)
        add_update_meta(metas, seo.meta)

        metas = unique_meta(metas)
        logger.debug("Generated %d meta descriptors", len(metas), extra={"url": url})
        return metas


def generate_meta(
    data: Union[SeoData, Mapping[str, Any], None] = None,
    options: Optional[MetaOptions] = None,
    *,
    config: Optional[SiteConfig] = None,
    context: Optional[PageContext] = None,
) -> List[MetaDescriptor]:
    """Return the meta descriptors for a page.

    Uses the process-wide site configuration unless *config* is given.
    """
    if config is None:
        config = get_site_config()
    return MetaGenerator(config, context).generate(data, options)
