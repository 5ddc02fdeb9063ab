import logging
import uuid
from collections.abc import Iterable, Iterator, Mapping
from datetime import date
from typing import Any

from pydantic import ValidationError

from ra_board.errors import BoardValidationError, InvalidTransitionError, NotFoundError
from ra_board.models.posting import POSTING_TRANSITIONS, JobPosting, PostingStatus
from ra_board.models.user import User

logger = logging.getLogger(__name__)

# Fields a professor may edit after posting.
EDITABLE_FIELDS = frozenset({
    "title", "school", "lab_name", "status", "topic_tags", "skill_tags",
    "description", "requirements", "subsidy", "headcount", "deadline",
})


def get_posting(postings: Iterable[JobPosting], post_id: str) -> JobPosting:
    for posting in postings:
        if posting.id == post_id:
            return posting
    raise NotFoundError(f"Posting {post_id!r} not found")


def postings_for_professor(postings: Iterable[JobPosting], professor_id: str) -> Iterator[JobPosting]:
    return (p for p in postings if p.professor_id == professor_id)


def _replace(postings: Iterable[JobPosting], updated: JobPosting) -> list[JobPosting]:
    return [updated if p.id == updated.id else p for p in postings]


def _validated(data: dict[str, Any]) -> JobPosting:
    try:
        return JobPosting.model_validate(data)
    except ValidationError as exc:
        raise BoardValidationError(str(exc)) from exc


def create_posting(
    postings: Iterable[JobPosting],
    professor: User,
    *,
    posted_date: date | None = None,
    **fields: Any,
) -> tuple[list[JobPosting], JobPosting]:
    unknown = set(fields) - EDITABLE_FIELDS
    if unknown:
        raise BoardValidationError(f"Unknown posting fields: {sorted(unknown)}")
    if fields.get("status") == PostingStatus.CLOSED:
        raise InvalidTransitionError("A new posting cannot start out CLOSED")

    posting = _validated({
        **fields,
        "id": str(uuid.uuid4()),
        "professor_id": professor.id,
        "professor_name": professor.name,
        "views": 0,
        "posted_date": posted_date or date.today(),
    })
    logger.info("Professor %s posted %s (%s)", professor.id, posting.id, posting.title)
    return [*postings, posting], posting


def update_posting(
    postings: Iterable[JobPosting], post_id: str, changes: Mapping[str, Any]
) -> tuple[list[JobPosting], JobPosting]:
    postings = list(postings)
    current = get_posting(postings, post_id)

    unknown = set(changes) - EDITABLE_FIELDS
    if unknown:
        raise BoardValidationError(f"Fields cannot be edited: {sorted(unknown)}")

    new_status = changes.get("status")
    if new_status is not None and PostingStatus(new_status) is not current.status:
        if PostingStatus(new_status) not in POSTING_TRANSITIONS[current.status]:
            raise InvalidTransitionError(
                f"Cannot move a posting from {current.status.value} to {PostingStatus(new_status).value}"
            )

    updated = _validated({**current.model_dump(), **changes})
    logger.info("Posting %s updated: %s", post_id, ", ".join(sorted(changes)) or "no changes")
    return _replace(postings, updated), updated


def close_posting(postings: Iterable[JobPosting], post_id: str) -> tuple[list[JobPosting], JobPosting]:
    postings = list(postings)
    current = get_posting(postings, post_id)
    if current.status is PostingStatus.CLOSED:
        raise InvalidTransitionError(f"Posting {post_id!r} is already closed")
    return update_posting(postings, post_id, {"status": PostingStatus.CLOSED})


def record_view(postings: Iterable[JobPosting], post_id: str) -> tuple[list[JobPosting], JobPosting]:
    postings = list(postings)
    current = get_posting(postings, post_id)
    updated = current.model_copy(update={"views": current.views + 1})
    return _replace(postings, updated), updated
