from typing import Any, Dict, List, Union

from pydantic import BaseModel, Field, model_validator

# A single meta descriptor, e.g. {"name": "title", "content": "..."}.
# Kept as a plain mapping so custom entries can carry arbitrary keys.
MetaDescriptor = Dict[str, Any]


def _default_type_details() -> Dict[str, Any]:
    return {"section": "", "published_time": "", "modified_time": ""}


class TwitterSettings(BaseModel):
    site: str = ""
    creator: str = ""


class FacebookSettings(BaseModel):
    admins: List[str] = Field(default_factory=list)


class SeoSchema(BaseModel):
    """Recognised SEO fields and their built-in fallbacks."""

    title: str = ""
    description: str = ""
    keywords: Union[str, List[str]] = Field(default_factory=list)
    image: str = ""
    site_name: str = ""
    twitter: TwitterSettings = Field(default_factory=TwitterSettings)
    facebook: FacebookSettings = Field(default_factory=FacebookSettings)
    type: str = "article"  # article/product/music/video
    type_details: Dict[str, Any] = Field(default_factory=_default_type_details)
    """Open Graph type details, e.g. ``section`` or ``published_time``.

    Values may be plain strings or one level of nested mappings; nested
    entries are emitted as ``{type}:{key}:{sub_key}``.
    """


class SeoData(SeoSchema):
    """Page-level SEO data overlaying the site defaults.

    Only fields explicitly set on the instance override the defaults; a field
    given as ``null`` counts as not set.
    """

    url: str = ""
    meta: List[MetaDescriptor] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _drop_null_fields(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class SiteConfig(SeoSchema):
    """Site-wide SEO configuration: schema defaults plus custom meta overrides."""

    model_config = {"frozen": True}

    meta: List[MetaDescriptor] = Field(default_factory=list)

    def schema_defaults(self) -> SeoSchema:
        return SeoSchema.model_validate(self.model_dump(exclude={"meta"}))
