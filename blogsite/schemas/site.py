from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, Field

from blogsite.schemas.search import SearchRecord


class RouteKind(str, Enum):
    LISTING = "listing"
    POST = "post"
    CATEGORY = "category"


class Route(BaseModel):
    path: str
    kind: RouteKind
    context: Dict[str, Any] = Field(default_factory=dict)


class SiteManifest(BaseModel):
    routes: List[Route] = Field(default_factory=list)
    searchIndex: List[SearchRecord] = Field(default_factory=list)
