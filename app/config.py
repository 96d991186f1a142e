"""Site-wide SEO configuration.

The configuration lives in a TOML file whose ``[seo]`` table mirrors
:class:`~app.models.seo.SiteConfig`::

    [seo]
    title = "My Site"
    site_name = "My Site"
    keywords = ["news", "sports"]

    [seo.twitter]
    site = "@mysite"

    [[seo.meta]]
    name = "google-site-verification"
    content = "abc123"

The file path defaults to ``seo.toml`` in the working directory and can be
overridden with the ``SEO_CONFIG_PATH`` environment variable.
"""

import logging
import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from app.models.seo import SiteConfig

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "SEO_CONFIG_PATH"
DEFAULT_CONFIG_PATH = "seo.toml"


def load_site_config(path: Optional[Union[str, Path]] = None) -> SiteConfig:
    """Load the site configuration from *path* (or the configured location).

    Raises:
        FileNotFoundError: when an explicitly configured file does not exist.
        ValueError: when the ``[seo]`` table does not describe a valid config.
    """
    explicit = path is not None or CONFIG_PATH_ENV in os.environ
    path = Path(path or os.environ.get(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH))

    if not path.exists():
        if explicit:
            raise FileNotFoundError(f"Missing SEO config file: {path}")
        logger.info("No SEO config file at %s – using built-in defaults", path)
        return SiteConfig()

    with path.open("rb") as f:
        raw = tomllib.load(f)

    try:
        config = SiteConfig.model_validate(raw.get("seo", {}))
    except ValidationError as exc:
        raise ValueError(f"Invalid SEO config in {path}: {exc}") from exc

    logger.info("Loaded SEO config", extra={"path": str(path), "custom_meta": len(config.meta)})
    return config


@lru_cache(maxsize=1)
def get_site_config() -> SiteConfig:
    """Return the process-wide site configuration, loading it on first use."""
    return load_site_config()
