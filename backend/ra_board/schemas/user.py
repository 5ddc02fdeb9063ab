from pydantic import BaseModel

from ra_board.models.user import UserRole


class UserResponse(BaseModel):
    id: str
    name: str
    role: UserRole
    department: str | None
    bio: str | None
    student_id: str | None


class CatalogResponse(BaseModel):
    topics: list[str]
    skills: list[str]
    schools: list[str]
