"""
Use case: List records of a resource.

Input: ListQuery (filter, select, sort, page, limit)
Output: ListResult
Side effects: None (read-only query).
Failure cases: None beyond store errors; an empty page is a valid result.
"""

import logging

from devcamper.application.resources.dtos import ListQuery, ListResult, PageLink
from devcamper.domain.ports import DocumentStore

logger = logging.getLogger(__name__)


class ListResourcesUseCase:
    """Orchestrates listing a page of records.

    Fetches one record past the page size so the presence of a next page
    is known without a separate count query.
    """

    def __init__(self, store: DocumentStore, resource: str) -> None:
        self._store = store
        self._resource = resource

    def execute(self, query: ListQuery) -> ListResult:
        """Run the list use case.

        Args:
            query: Filter, projection, sort and pagination parameters.

        Returns:
            The requested page plus links to neighbouring pages.
        """
        logger.info(
            "Listing %s: filter=%s, page=%d, limit=%d",
            self._resource,
            dict(query.filter),
            query.page,
            query.limit,
        )

        skip = (query.page - 1) * query.limit
        records = self._store.find(
            query.filter,
            projection=query.select,
            sort=query.sort,
            skip=skip,
            limit=query.limit + 1,
        )

        has_next = len(records) > query.limit
        return ListResult(
            records=records[: query.limit],
            next_page=PageLink(query.page + 1, query.limit) if has_next else None,
            prev_page=PageLink(query.page - 1, query.limit) if skip > 0 else None,
        )
