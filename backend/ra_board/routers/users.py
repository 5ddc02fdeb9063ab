from fastapi import APIRouter, Depends

from ra_board.dependencies import current_user, require_student
from ra_board.models.posting import School
from ra_board.models.user import User
from ra_board.routers.postings import posting_to_response
from ra_board.schemas.posting import PostingListResponse
from ra_board.schemas.user import CatalogResponse, UserResponse
from ra_board.services.board_store import board_store
from ra_board.services.demo_data import AVAILABLE_SKILLS, AVAILABLE_TOPICS
from ra_board.services.saved_service import save_posting, saved_postings, unsave_posting

router = APIRouter(tags=["users"])


def _user_to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        role=user.role,
        department=user.department,
        bio=user.bio,
        student_id=user.student_id,
    )


def _saved_response(student_id: str) -> PostingListResponse:
    postings = saved_postings(board_store.saved, board_store.postings, student_id)
    return PostingListResponse(postings=[posting_to_response(p) for p in postings], total=len(postings))


@router.get("/users", response_model=list[UserResponse])
async def list_users():
    """Canned accounts for the mock login picker."""
    return [_user_to_response(u) for u in board_store.users.values()]


@router.get("/users/me", response_model=UserResponse)
async def whoami(user: User = Depends(current_user)):
    return _user_to_response(user)


@router.get("/users/me/saved", response_model=PostingListResponse)
async def list_saved(user: User = Depends(require_student)):
    return _saved_response(user.id)


@router.put("/users/me/saved/{post_id}", response_model=PostingListResponse)
async def save_position(post_id: str, user: User = Depends(require_student)):
    board_store.saved = save_posting(board_store.saved, board_store.postings, user.id, post_id)
    return _saved_response(user.id)


@router.delete("/users/me/saved/{post_id}", response_model=PostingListResponse)
async def unsave_position(post_id: str, user: User = Depends(require_student)):
    board_store.saved = unsave_posting(board_store.saved, user.id, post_id)
    return _saved_response(user.id)


@router.get("/catalog", response_model=CatalogResponse)
async def catalog():
    return CatalogResponse(
        topics=AVAILABLE_TOPICS,
        skills=AVAILABLE_SKILLS,
        schools=[s.value for s in School],
    )
