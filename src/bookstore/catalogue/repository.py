"""Repository for the Book aggregate."""

from bookstore.catalogue.book import Book
from bookstore.domain import bookstore
from bookstore.utils.query import fetch_all, matching_any, paginate


@bookstore.repository(part_of=Book)
class BookRepository:
    """Catalogue queries on top of the standard CRUD operations."""

    def newest(self) -> list[Book]:
        return fetch_all(self._dao.query)

    def featured(self) -> list[Book]:
        return fetch_all(self._dao.query.filter(featured=True))

    def new_arrivals(self) -> list[Book]:
        return fetch_all(self._dao.query.filter(new_arrival=True))

    def in_category(self, category: str) -> list[Book]:
        return fetch_all(self._dao.query.filter(category=category))

    def search(self, term: str) -> list[Book]:
        """Books whose title, author or category contains `term`."""
        return fetch_all(self._dao.query.filter(matching_any(term, "title", "author", "category")))

    def browse(
        self,
        page=1,
        limit=20,
        title=None,
        author=None,
        categories=None,
        min_price=None,
        max_price=None,
        search=None,
    ):
        """Filtered, paginated catalogue listing. Every given filter must match."""
        query = self._dao.query

        if title:
            query = query.filter(title__icontains=title)
        if author:
            query = query.filter(author__icontains=author)
        if categories:
            query = query.filter(category__in=list(categories))
        if min_price is not None:
            query = query.filter(price__gte=min_price)
        if max_price is not None:
            query = query.filter(price__lte=max_price)
        if search:
            query = query.filter(matching_any(search, "title", "author"))

        return paginate(query, page=page, limit=limit)
