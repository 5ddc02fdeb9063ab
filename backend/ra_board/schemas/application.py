from datetime import date

from pydantic import BaseModel

from ra_board.models.application import ApplicationStatus


class ApplicationCreate(BaseModel):
    resume_link: str
    statement: str = ""


class StatusChangeRequest(BaseModel):
    status: ApplicationStatus
    reason: str | None = None


class RejectionConfirm(BaseModel):
    reason: str


class ApplicationResponse(BaseModel):
    id: str
    post_id: str
    student_id: str
    student_name: str
    student_school_id: str
    resume_link: str
    statement: str
    status: ApplicationStatus
    rejection_reason: str | None
    applied_date: date
    rejection_pending: bool = False


class StatusChangeResponse(BaseModel):
    application: ApplicationResponse
    # True when a rejection was requested without a reason and is now
    # waiting on POST /applications/{id}/rejection.
    pending_reason: bool = False
