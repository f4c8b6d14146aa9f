from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class SearchRecord(BaseModel):
    path: str
    title: str
    description: str
    isDraft: bool = False


class SearchState(str, Enum):
    HIDDEN = "hidden"  # empty query, nothing to show
    PROMPT = "prompt"  # query too short to run
    RESULTS = "results"
    NO_RESULTS = "no_results"


class SearchResult(BaseModel):
    query: str
    state: SearchState
    message: Optional[str] = None
    results: List[SearchRecord] = Field(default_factory=list)
