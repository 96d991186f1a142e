from typing import List, Optional

from pydantic import BaseModel

from app.models.seo import MetaDescriptor


class MetaResponse(BaseModel):
    meta: List[MetaDescriptor]
    count: int
    html: Optional[str] = None
    """Rendered ``<meta>`` markup, only set by ``POST /meta/html``."""
