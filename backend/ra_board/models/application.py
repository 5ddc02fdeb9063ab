from datetime import date, datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


STATEMENT_MAX_CHARS = 500


class ApplicationStatus(str, Enum):
    SUBMITTED = "SUBMITTED"
    VIEWED = "VIEWED"
    INTERVIEW = "INTERVIEW"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


TERMINAL_STATUSES = frozenset({ApplicationStatus.ACCEPTED, ApplicationStatus.REJECTED})

# Forward moves only; skipping a stage is allowed.
APPLICATION_TRANSITIONS: dict[ApplicationStatus, frozenset[ApplicationStatus]] = {
    ApplicationStatus.SUBMITTED: frozenset({
        ApplicationStatus.VIEWED,
        ApplicationStatus.INTERVIEW,
        ApplicationStatus.ACCEPTED,
        ApplicationStatus.REJECTED,
    }),
    ApplicationStatus.VIEWED: frozenset({
        ApplicationStatus.INTERVIEW,
        ApplicationStatus.ACCEPTED,
        ApplicationStatus.REJECTED,
    }),
    ApplicationStatus.INTERVIEW: frozenset({
        ApplicationStatus.ACCEPTED,
        ApplicationStatus.REJECTED,
    }),
    ApplicationStatus.ACCEPTED: frozenset(),
    ApplicationStatus.REJECTED: frozenset(),
}

# Only consulted when reopening is switched on.
REOPEN_TRANSITIONS: dict[ApplicationStatus, frozenset[ApplicationStatus]] = {
    ApplicationStatus.REJECTED: frozenset({
        ApplicationStatus.SUBMITTED,
        ApplicationStatus.VIEWED,
        ApplicationStatus.INTERVIEW,
    }),
}


class Application(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    post_id: str
    student_id: str
    student_name: str
    student_school_id: str = "N/A"
    resume_link: str
    statement: str = Field("", max_length=STATEMENT_MAX_CHARS)
    status: ApplicationStatus = ApplicationStatus.SUBMITTED
    rejection_reason: str | None = None
    applied_date: date

    @model_validator(mode="after")
    def _reason_only_when_rejected(self):
        rejected = self.status is ApplicationStatus.REJECTED
        if rejected != (self.rejection_reason is not None):
            raise ValueError("rejection_reason must be set exactly when status is REJECTED")
        return self


class RejectionDraft(BaseModel):
    """A professor's declared intent to reject, waiting for a reason."""

    model_config = ConfigDict(frozen=True)

    application_id: str
    opened_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
