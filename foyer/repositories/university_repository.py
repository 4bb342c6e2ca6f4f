"""
Persistence access for university records.
"""

from sqlalchemy.orm import Session

from foyer.models import University
from foyer.repositories.filters import apply_filters, apply_search, apply_sort


class UniversityRepository:
    """
    Builds and runs queries against the ``university`` table.

    The repository never commits; transaction boundaries belong to the
    service layer.
    """

    def __init__(self, db: Session):
        self.db = db
        self.model = University

    def add(self, university: University) -> University:
        """
        Stage a new record and flush so the store assigns its identifier.

        Args:
            university: Transient instance to insert

        Returns:
            The same instance, now carrying its ``id``
        """
        self.db.add(university)
        self.db.flush()
        return university

    def get(self, university_id: int, include_deleted: bool = False) -> University | None:
        query = self.db.query(University).filter(University.id == university_id)
        if not include_deleted:
            query = query.filter(University.is_deleted == False)  # noqa: E712
        return query.first()

    def find_by_name(self, name: str) -> list[University]:
        return (
            self.db.query(University)
            .filter(University.name == name, University.is_deleted == False)  # noqa: E712
            .order_by(University.id.asc())
            .all()
        )

    def list(
        self,
        params: dict | None = None,
        offset: int = 0,
        limit: int = 20,
        sort_by: str | None = None,
        sort_dir: str | None = None,
        only_deleted: bool = False,
        q: str | None = None,
    ) -> tuple[list[University], int]:
        """
        Filter, search, sort and page university records.

        Args:
            params: Column name -> raw value equality filters
            offset: Number of matching rows to skip
            limit: Maximum number of rows to return
            sort_by: Comma separated column names
            sort_dir: Comma separated ``asc``/``desc`` matching ``sort_by``
            only_deleted: Return soft-deleted rows instead of live ones
            q: Substring searched across every string column

        Returns:
            The page of records and the total number of matches
        """
        query = self.db.query(University)
        query = apply_filters(query, University, params or {}, only_deleted)
        query = apply_search(query, University, q)
        total = query.count()
        if sort_by:
            query = apply_sort(query, University, sort_by, sort_dir)
        else:
            query = query.order_by(University.id.asc())
        items = query.offset(offset).limit(limit).all()
        return items, total
