from fastapi import Depends
from sqlalchemy.orm import Session

from foyer.db.session import get_db
from foyer.services.university_service import UniversityService


def get_university_service(db: Session = Depends(get_db)) -> UniversityService:
    return UniversityService(db)
