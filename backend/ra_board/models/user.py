from enum import Enum

from pydantic import BaseModel, ConfigDict


class UserRole(str, Enum):
    GUEST = "GUEST"
    STUDENT = "STUDENT"
    PROFESSOR = "PROFESSOR"


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    role: UserRole
    department: str | None = None
    bio: str | None = None
    student_id: str | None = None  # school-issued, students only
