from fastapi import APIRouter, Depends, Query

from ra_board.config import settings
from ra_board.dependencies import require_professor, require_student
from ra_board.models.posting import JobPosting, PostingStatus, School
from ra_board.models.query import FilterSpec, SortMode
from ra_board.models.user import User
from ra_board.routers.applications import application_to_response
from ra_board.schemas.application import ApplicationCreate, ApplicationResponse
from ra_board.schemas.posting import (
    PostingCreate,
    PostingListResponse,
    PostingResponse,
    PostingUpdate,
)
from ra_board.services.application_service import submit_application
from ra_board.services.board_store import board_store
from ra_board.services.lifecycle_service import applications_for_posting
from ra_board.services.posting_service import (
    close_posting,
    create_posting,
    get_posting,
    postings_for_professor,
    record_view,
    update_posting,
)
from ra_board.services.query_service import filter_and_sort

router = APIRouter(prefix="/postings", tags=["postings"])


def posting_to_response(posting: JobPosting) -> PostingResponse:
    applicant_count = sum(1 for _ in applications_for_posting(board_store.applications, posting.id))
    return PostingResponse(
        id=posting.id,
        title=posting.title,
        professor_id=posting.professor_id,
        professor_name=posting.professor_name,
        school=posting.school,
        lab_name=posting.lab_name,
        status=posting.status,
        topic_tags=list(posting.topic_tags),
        skill_tags=list(posting.skill_tags),
        description=posting.description,
        requirements=posting.requirements,
        subsidy=posting.subsidy,
        headcount=posting.headcount,
        views=posting.views,
        posted_date=posting.posted_date,
        deadline=posting.deadline,
        applicant_count=applicant_count,
    )


def _list_response(postings: list[JobPosting]) -> PostingListResponse:
    return PostingListResponse(
        postings=[posting_to_response(p) for p in postings],
        total=len(postings),
    )


@router.get("", response_model=PostingListResponse)
async def search_postings(
    q: str = "",
    status: list[PostingStatus] = Query(default=[]),
    school: list[School] = Query(default=[]),
    topic: list[str] = Query(default=[]),
    skill: list[str] = Query(default=[]),
    sort: SortMode = SortMode.RELEVANT,
):
    spec = FilterSpec(
        query=q,
        status=frozenset(status),
        schools=frozenset(school),
        topics=frozenset(topic),
        skills=frozenset(skill),
        sort=sort,
    )
    return _list_response(filter_and_sort(board_store.postings, spec))


@router.post("", response_model=PostingResponse, status_code=201)
async def post_position(req: PostingCreate, user: User = Depends(require_professor)):
    board_store.postings, posting = create_posting(
        board_store.postings, user, **req.model_dump()
    )
    return posting_to_response(posting)


@router.get("/mine", response_model=PostingListResponse)
async def my_postings(user: User = Depends(require_professor)):
    return _list_response(list(postings_for_professor(board_store.postings, user.id)))


@router.get("/{post_id}", response_model=PostingResponse)
async def get_posting_detail(post_id: str):
    board_store.postings, posting = record_view(board_store.postings, post_id)
    return posting_to_response(posting)


@router.put("/{post_id}", response_model=PostingResponse)
async def edit_posting(post_id: str, req: PostingUpdate, user: User = Depends(require_professor)):
    board_store.postings, posting = update_posting(
        board_store.postings, post_id, req.model_dump(exclude_unset=True)
    )
    return posting_to_response(posting)


@router.post("/{post_id}/close", response_model=PostingResponse)
async def close_position(post_id: str, user: User = Depends(require_professor)):
    board_store.postings, posting = close_posting(board_store.postings, post_id)
    return posting_to_response(posting)


@router.post("/{post_id}/applications", response_model=ApplicationResponse, status_code=201)
async def apply_to_posting(post_id: str, req: ApplicationCreate, user: User = Depends(require_student)):
    posting = get_posting(board_store.postings, post_id)
    board_store.applications, application = submit_application(
        board_store.applications,
        posting,
        user,
        req.resume_link,
        req.statement,
        max_statement_chars=settings.statement_max_chars,
    )
    return application_to_response(application)


@router.get("/{post_id}/applications", response_model=list[ApplicationResponse])
async def list_applicants(
    post_id: str,
    include_rejected: bool = True,
    user: User = Depends(require_professor),
):
    get_posting(board_store.postings, post_id)
    return [
        application_to_response(a)
        for a in applications_for_posting(board_store.applications, post_id, include_rejected)
    ]
