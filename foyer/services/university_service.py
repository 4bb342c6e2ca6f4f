"""
University lifecycle: create, read, update, soft delete and restore.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from foyer.exceptions import DatabaseError, InvalidOperationError, UniversityNotFoundError
from foyer.models import University
from foyer.repositories.university_repository import UniversityRepository
from foyer.schemas.university import UniversityCreate, UniversityUpdate

logger = logging.getLogger(__name__)


class UniversityService:
    """Owns the transaction for every write on university records."""

    def __init__(self, db: Session):
        self.db = db
        self.repository = UniversityRepository(db)

    def _persist(self, operation: str, university: University, new: bool = False) -> University:
        try:
            if new:
                self.repository.add(university)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("University %s failed: %s", operation, exc)
            raise DatabaseError(operation, f"Failed to {operation} university") from exc
        self.db.refresh(university)
        return university

    def create(self, payload: UniversityCreate) -> University:
        university = self._persist("create", University.from_payload(payload), new=True)
        logger.info("Created university %s (%s)", university.id, university.name)
        return university

    def get(self, university_id: int) -> University:
        university = self.repository.get(university_id)
        if university is None:
            raise UniversityNotFoundError(university_id)
        return university

    def find_by_name(self, name: str) -> list[University]:
        return self.repository.find_by_name(name)

    def list(self, **kwargs) -> tuple[list[University], int]:
        return self.repository.list(**kwargs)

    def update(self, university_id: int, payload: UniversityUpdate) -> University:
        data = payload.model_dump(exclude_unset=True)

        university = self.repository.get(university_id, include_deleted=True)
        if university is None:
            raise UniversityNotFoundError(university_id)

        if university.is_deleted:
            if data.keys() != {"is_deleted"} or data.get("is_deleted") is not False:
                raise InvalidOperationError("Only restore is allowed")
            university.is_deleted = False
            logger.info("Restoring university %s", university_id)
        else:
            if "is_deleted" in data:
                raise InvalidOperationError("Use DELETE to remove records")
            for key, value in data.items():
                setattr(university, key, value)

        return self._persist("update", university)

    def delete(self, university_id: int) -> University:
        university = self.repository.get(university_id)
        if university is None:
            raise UniversityNotFoundError(university_id)

        university.is_deleted = True
        university = self._persist("delete", university)
        logger.info("Soft-deleted university %s", university_id)
        return university
