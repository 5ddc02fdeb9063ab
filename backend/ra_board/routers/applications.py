from fastapi import APIRouter, Depends

from ra_board.config import settings
from ra_board.dependencies import require_professor, require_student
from ra_board.errors import NotFoundError
from ra_board.models.application import Application
from ra_board.models.user import User
from ra_board.schemas.application import (
    ApplicationResponse,
    RejectionConfirm,
    StatusChangeRequest,
    StatusChangeResponse,
)
from ra_board.services.board_store import board_store
from ra_board.services.lifecycle_service import (
    applications_for_student,
    cancel_rejection,
    confirm_rejection,
    find_application,
    request_status_change,
)

router = APIRouter(prefix="/applications", tags=["applications"])


def application_to_response(app: Application) -> ApplicationResponse:
    return ApplicationResponse(
        id=app.id,
        post_id=app.post_id,
        student_id=app.student_id,
        student_name=app.student_name,
        student_school_id=app.student_school_id,
        resume_link=app.resume_link,
        statement=app.statement,
        status=app.status,
        rejection_reason=app.rejection_reason,
        applied_date=app.applied_date,
        rejection_pending=app.id in board_store.rejection_drafts,
    )


@router.get("/mine", response_model=list[ApplicationResponse])
async def my_applications(user: User = Depends(require_student)):
    return [application_to_response(a) for a in applications_for_student(board_store.applications, user.id)]


@router.post("/{app_id}/status", response_model=StatusChangeResponse)
async def change_status(app_id: str, req: StatusChangeRequest, user: User = Depends(require_professor)):
    result = request_status_change(
        board_store.applications,
        app_id,
        req.status,
        req.reason,
        allow_reopen=settings.allow_reopen,
    )
    board_store.applications = result.applications
    if result.pending_reason:
        board_store.rejection_drafts[app_id] = result.draft
    else:
        board_store.rejection_drafts.pop(app_id, None)
    return StatusChangeResponse(
        application=application_to_response(result.application),
        pending_reason=result.pending_reason,
    )


@router.post("/{app_id}/rejection", response_model=ApplicationResponse)
async def confirm_pending_rejection(app_id: str, req: RejectionConfirm, user: User = Depends(require_professor)):
    draft = board_store.rejection_drafts.get(app_id)
    if draft is None:
        raise NotFoundError(f"No pending rejection for application {app_id!r}")
    result = confirm_rejection(board_store.applications, draft, req.reason)
    board_store.applications = result.applications
    board_store.rejection_drafts.pop(app_id, None)
    return application_to_response(result.application)


@router.delete("/{app_id}/rejection", response_model=ApplicationResponse)
async def cancel_pending_rejection(app_id: str, user: User = Depends(require_professor)):
    board_store.rejection_drafts = cancel_rejection(board_store.rejection_drafts, app_id)
    return application_to_response(find_application(board_store.applications, app_id))
