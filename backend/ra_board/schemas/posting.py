from datetime import date

from pydantic import BaseModel, Field

from ra_board.models.posting import PostingStatus, School


class PostingCreate(BaseModel):
    title: str = Field(min_length=1)
    school: School
    lab_name: str | None = None
    status: PostingStatus = PostingStatus.OPEN
    topic_tags: list[str] = []
    skill_tags: list[str] = []
    description: str = ""
    requirements: str = ""
    subsidy: str = ""
    headcount: int = Field(1, gt=0)
    deadline: date | None = None


class PostingUpdate(BaseModel):
    title: str | None = None
    school: School | None = None
    lab_name: str | None = None
    status: PostingStatus | None = None
    topic_tags: list[str] | None = None
    skill_tags: list[str] | None = None
    description: str | None = None
    requirements: str | None = None
    subsidy: str | None = None
    headcount: int | None = Field(None, gt=0)
    deadline: date | None = None


class PostingResponse(BaseModel):
    id: str
    title: str
    professor_id: str
    professor_name: str
    school: School
    lab_name: str | None
    status: PostingStatus
    topic_tags: list[str]
    skill_tags: list[str]
    description: str
    requirements: str
    subsidy: str
    headcount: int
    views: int
    posted_date: date
    deadline: date | None
    applicant_count: int = 0


class PostingListResponse(BaseModel):
    postings: list[PostingResponse]
    total: int
