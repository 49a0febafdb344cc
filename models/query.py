"""Query text normalization shared by every tier."""

from orchestrator.errors import QueryValidationError


def normalize_query(query: str | None) -> str:
    """
    Normalize query text into the key used by the resolver cache and the store.

    Two queries are the same query iff their normalized forms are equal.

    Raises:
        QueryValidationError: If the query is missing or blank after trimming
    """
    if query is None or not isinstance(query, str):
        raise QueryValidationError("query is required")
    normalized = query.strip().lower()
    if not normalized:
        raise QueryValidationError("query must not be empty")
    return normalized
