from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, validates

from foyer.db.base import Base
from foyer.exceptions import ImmutableFieldError
from foyer.models.mixins import AuditMixin

if TYPE_CHECKING:
    from foyer.schemas.university import UniversityCreate

# SQLite only autoincrements INTEGER PRIMARY KEY columns.
IdentityKey = BigInteger().with_variant(Integer, "sqlite")


class University(AuditMixin, Base):
    __tablename__ = "university"

    id: Mapped[int] = mapped_column(IdentityKey, primary_key=True, autoincrement=True, index=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)

    @validates("id")
    def _validate_id(self, key: str, value):
        current = self.__dict__.get("id")
        if current is not None and value != current:
            raise ImmutableFieldError(key, current, value)
        return value

    @classmethod
    def from_payload(cls, payload: "UniversityCreate") -> "University":
        return cls(**payload.model_dump())

    def __repr__(self) -> str:
        return f"<University(id={self.id}, name={self.name!r}, address={self.address!r})>"
