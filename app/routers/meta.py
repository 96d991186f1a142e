import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import get_site_config
from app.models.request import MetaRequest
from app.models.response import MetaResponse
from app.models.seo import MetaDescriptor, SiteConfig
from app.services.meta import MetaGenerator, MetaOptions
from app.services.renderer import render_meta_tags

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter(prefix="/meta", tags=["Meta"])


def site_config() -> SiteConfig:
    """Resolve the site configuration, surfacing load errors as HTTP 500."""
    try:
        return get_site_config()
    except (FileNotFoundError, ValueError) as exc:
        logger.error("Could not load SEO config: %s", exc)
        raise HTTPException(status_code=500, detail="SEO configuration is unavailable.")


@router.post("", response_model=MetaResponse, summary="Generate meta tags for a page")
@limiter.limit("30/minute")
async def generate(
    request: Request,
    body: MetaRequest,
    config: SiteConfig = Depends(site_config),
) -> MetaResponse:
    """Merge the page's SEO data with the site defaults and return the meta list."""
    metas = _generate(body, config)
    return MetaResponse(meta=metas, count=len(metas))


@router.post(
    "/html",
    response_model=MetaResponse,
    summary="Generate meta tags and render them as HTML",
    description=(
        "Same as `POST /meta`, but also returns the descriptors rendered as "
        "`<meta>` elements, ready to be placed inside a page's `<head>`."
    ),
)
@limiter.limit("30/minute")
async def generate_html(
    request: Request,
    body: MetaRequest,
    config: SiteConfig = Depends(site_config),
) -> MetaResponse:
    metas = _generate(body, config)
    return MetaResponse(meta=metas, count=len(metas), html=render_meta_tags(metas))


def _generate(body: MetaRequest, config: SiteConfig) -> List[MetaDescriptor]:
    logger.info(
        "Meta request received",
        extra={"title": body.data.title, "url": body.data.url or body.url},
    )
    options = MetaOptions(base_url=body.base_url, url=body.url)
    return MetaGenerator(config).generate(body.data, options)
