import logging
from typing import Iterable, List, Optional

from blogsite.schemas.search import SearchRecord, SearchResult, SearchState

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 3
PROMPT_MESSAGE = f"Please insert at least {MIN_QUERY_LENGTH} characters"


def search(records: Optional[Iterable[SearchRecord]], query: str) -> SearchResult:
    """
    Filter the pre-built search index for a raw query.

    Nothing is shown for an empty query and short queries only get a prompt.
    From three characters on, a record matches when the query is a
    case-insensitive substring of its title or its description. Drafts never
    match. Results keep the index order (newest first).
    """
    query = query or ""
    if len(query) == 0:
        return SearchResult(query=query, state=SearchState.HIDDEN)
    if len(query) < MIN_QUERY_LENGTH:
        return SearchResult(query=query, state=SearchState.PROMPT, message=PROMPT_MESSAGE)

    results = filter_records(records or [], query)
    if not results:
        return SearchResult(
            query=query,
            state=SearchState.NO_RESULTS,
            message=f"No results for {query}",
        )

    logger.debug(f"Search '{query}' matched {len(results)} records")
    return SearchResult(query=query, state=SearchState.RESULTS, results=results)


def filter_records(records: Iterable[SearchRecord], query: str) -> List[SearchRecord]:
    needle = query.lower()
    return [
        record
        for record in records
        if not record.isDraft
        and (needle in record.title.lower() or needle in record.description.lower())
    ]
