from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostingStatus(str, Enum):
    OPEN = "OPEN"
    COMPETITIVE = "COMPETITIVE"
    CLOSED = "CLOSED"


class School(str, Enum):
    SDS = "SDS"  # Data Science
    SSE = "SSE"  # Science and Engineering
    SME = "SME"  # Management and Economics
    HSS = "HSS"  # Humanities and Social Science
    LHS = "LHS"  # Life and Health Sciences
    MED = "MED"  # Medicine
    MUS = "MUS"  # Music
    SAI = "SAI"  # Artificial Intelligence


# OPEN and COMPETITIVE may swap freely; CLOSED is final.
POSTING_TRANSITIONS: dict[PostingStatus, frozenset[PostingStatus]] = {
    PostingStatus.OPEN: frozenset({PostingStatus.COMPETITIVE, PostingStatus.CLOSED}),
    PostingStatus.COMPETITIVE: frozenset({PostingStatus.OPEN, PostingStatus.CLOSED}),
    PostingStatus.CLOSED: frozenset(),
}


class JobPosting(BaseModel):
    """An RA position as listed on the board.

    Tags behave as sets for filtering but keep their first-seen order so
    cards render them the way the professor typed them.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = Field(min_length=1)
    professor_id: str
    professor_name: str
    school: School
    lab_name: str | None = None
    status: PostingStatus = PostingStatus.OPEN
    topic_tags: tuple[str, ...] = ()
    skill_tags: tuple[str, ...] = ()
    description: str = ""
    requirements: str = ""
    subsidy: str = ""
    headcount: int = Field(1, gt=0)
    views: int = Field(0, ge=0)
    posted_date: date
    deadline: date | None = None

    @field_validator("topic_tags", "skill_tags")
    @classmethod
    def _dedupe_tags(cls, tags: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(dict.fromkeys(t.strip() for t in tags if t.strip()))

    @property
    def accepts_applications(self) -> bool:
        return self.status is not PostingStatus.CLOSED
