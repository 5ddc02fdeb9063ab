import logging
import uuid
from collections.abc import Iterable
from datetime import date

from pydantic import HttpUrl, TypeAdapter, ValidationError

from ra_board.errors import BoardValidationError, InvalidTransitionError
from ra_board.models.application import STATEMENT_MAX_CHARS, Application, ApplicationStatus
from ra_board.models.posting import JobPosting
from ra_board.models.user import User

logger = logging.getLogger(__name__)

_url_adapter = TypeAdapter(HttpUrl)


def validate_resume_link(resume_link: str) -> str:
    """Accept http(s) URLs only; the link is kept exactly as typed."""
    try:
        _url_adapter.validate_python(resume_link.strip())
    except ValidationError as exc:
        raise BoardValidationError(f"Resume link is not a valid URL: {resume_link!r}") from exc
    return resume_link


def validate_statement(statement: str, max_chars: int = STATEMENT_MAX_CHARS) -> str:
    if len(statement) > max_chars:
        raise BoardValidationError(
            f"Statement is {len(statement)} characters; the limit is {max_chars}"
        )
    return statement


def submit_application(
    applications: Iterable[Application],
    posting: JobPosting,
    student: User,
    resume_link: str,
    statement: str = "",
    *,
    max_statement_chars: int = STATEMENT_MAX_CHARS,
    applied_date: date | None = None,
) -> tuple[list[Application], Application]:
    if not posting.accepts_applications:
        raise InvalidTransitionError(f"Posting {posting.id!r} is closed to new applications")
    validate_resume_link(resume_link)
    validate_statement(statement, max_statement_chars)

    application = Application(
        id=str(uuid.uuid4()),
        post_id=posting.id,
        student_id=student.id,
        student_name=student.name,
        student_school_id=student.student_id or "N/A",
        resume_link=resume_link,
        statement=statement,
        status=ApplicationStatus.SUBMITTED,
        applied_date=applied_date or date.today(),
    )
    logger.info("Student %s applied to posting %s", student.id, posting.id)
    return [*applications, application], application
