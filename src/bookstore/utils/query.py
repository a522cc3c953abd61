"""Helpers shared by the read-side repository methods.

Filtering, ordering and paging are handed to the provider through the
repository's query, so totals always reflect every matching row.
"""

import math
from dataclasses import dataclass, field

from protean.utils.query import Q

DEFAULT_PAGE_SIZE = 20

NEWEST_FIRST = "-created_at"


@dataclass
class Page:
    items: list = field(default_factory=list)
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE
    total: int = 0

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0


def fetch_all(query, order_by=NEWEST_FIRST) -> list:
    """Every row matching `query`, newest first."""
    # `limit(None)` has to come last: cloning the query restores the default limit
    return query.order_by(order_by).limit(None).all().items


def count(query) -> int:
    return query.limit(1).all().total


def paginate(query, page=1, limit=DEFAULT_PAGE_SIZE, order_by=NEWEST_FIRST) -> Page:
    """Fetch one page of `query`. Non-positive page or limit fall back to the defaults."""
    page = page if page and page > 0 else 1
    limit = limit if limit and limit > 0 else DEFAULT_PAGE_SIZE
    results = query.order_by(order_by).offset((page - 1) * limit).limit(limit).all()
    return Page(items=list(results.items), page=page, limit=limit, total=results.total)


def matching_any(term: str, *fields: str) -> Q:
    """Criteria matching rows where any of `fields` contains `term`, ignoring case."""
    criteria = Q()
    for name in fields:
        criteria = criteria | Q(**{f"{name}__icontains": term})
    return criteria
