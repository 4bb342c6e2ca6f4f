from pydantic import BaseModel


class UniversityCreate(BaseModel):
    name: str | None = None
    address: str | None = None


class UniversityUpdate(BaseModel):
    name: str | None = None
    address: str | None = None
    is_deleted: bool | None = None


class UniversityOut(BaseModel):
    id: int
    name: str | None = None
    address: str | None = None
    is_deleted: bool

    class Config:
        from_attributes = True
