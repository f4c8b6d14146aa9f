from typing import List

from fastapi import APIRouter, Depends, Query

from blogsite import dependencies as deps
from blogsite.schemas.search import SearchRecord, SearchResult
from blogsite.services.search_service import search

router = APIRouter()


@router.get("/search", response_model=SearchResult)
def search_posts(
    q: str = Query(default="", description="Raw search box input"),
    records: List[SearchRecord] = Depends(deps.get_search_index),
):
    """Filter the built search index by title and description."""
    return search(records, q)
