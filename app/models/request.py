from pydantic import BaseModel, Field

from app.models.seo import SeoData


class MetaRequest(BaseModel):
    data: SeoData = Field(default_factory=SeoData)
    """Page-level SEO data; fields left out inherit the site defaults."""

    base_url: str = Field(
        default="",
        description="Site origin used to absolutise relative image paths.",
    )
    url: str = Field(
        default="",
        description="Page URL used for og:url when the page data carries none.",
    )
