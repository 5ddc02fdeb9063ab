"""
Application lifecycle tracker.

Status changes run through the transition tables in
``ra_board.models.application``. Rejection is two-phase: asking for
REJECTED without a reason only opens a ``RejectionDraft``; the status
moves once ``confirm_rejection`` receives a non-blank reason.

All functions are copy-on-write. They take the current collection and hand
back a new list in which exactly one record was replaced.
"""
import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import NamedTuple

from ra_board.errors import BoardValidationError, InvalidTransitionError, NotFoundError
from ra_board.models.application import (
    APPLICATION_TRANSITIONS,
    REOPEN_TRANSITIONS,
    Application,
    ApplicationStatus,
    RejectionDraft,
)

logger = logging.getLogger(__name__)


class StatusChangeResult(NamedTuple):
    applications: list[Application]
    application: Application
    draft: RejectionDraft | None = None

    @property
    def pending_reason(self) -> bool:
        return self.draft is not None


def _has_text(reason: str | None) -> bool:
    return reason is not None and reason.strip() != ""


def find_application(applications: Iterable[Application], app_id: str) -> Application:
    for app in applications:
        if app.id == app_id:
            return app
    raise NotFoundError(f"Application {app_id!r} not found")


def allowed_transitions(
    status: ApplicationStatus, allow_reopen: bool = False
) -> frozenset[ApplicationStatus]:
    allowed = APPLICATION_TRANSITIONS[status]
    if allow_reopen:
        allowed = allowed | REOPEN_TRANSITIONS.get(status, frozenset())
    return allowed


def check_transition(
    current: ApplicationStatus, target: ApplicationStatus, allow_reopen: bool = False
) -> None:
    if target not in allowed_transitions(current, allow_reopen):
        raise InvalidTransitionError(
            f"Cannot move an application from {current.value} to {target.value}"
        )


def _commit(
    applications: Iterable[Application],
    app: Application,
    status: ApplicationStatus,
    reason: str | None,
) -> StatusChangeResult:
    updated = app.model_copy(update={"status": status, "rejection_reason": reason})
    new_collection = [updated if a.id == app.id else a for a in applications]
    logger.info("Application %s moved %s -> %s", app.id, app.status.value, status.value)
    return StatusChangeResult(new_collection, updated)


def request_status_change(
    applications: Iterable[Application],
    app_id: str,
    new_status: ApplicationStatus,
    reason: str | None = None,
    *,
    allow_reopen: bool = False,
) -> StatusChangeResult:
    applications = list(applications)
    app = find_application(applications, app_id)
    check_transition(app.status, new_status, allow_reopen)

    if new_status is ApplicationStatus.REJECTED:
        if not _has_text(reason):
            logger.info("Rejection of application %s waiting for a reason", app.id)
            return StatusChangeResult(applications, app, RejectionDraft(application_id=app.id))
        return _commit(applications, app, new_status, reason)

    # Any non-rejected status drops a stale reason.
    return _commit(applications, app, new_status, None)


def confirm_rejection(
    applications: Iterable[Application],
    draft: RejectionDraft,
    reason: str | None,
) -> StatusChangeResult:
    """Commit a pending rejection. The reason is stored verbatim."""
    if not _has_text(reason):
        raise BoardValidationError("A rejection reason is required")
    applications = list(applications)
    app = find_application(applications, draft.application_id)
    # The record may have moved on since the draft was opened.
    check_transition(app.status, ApplicationStatus.REJECTED)
    return _commit(applications, app, ApplicationStatus.REJECTED, reason)


def cancel_rejection(drafts: Mapping[str, RejectionDraft], app_id: str) -> dict[str, RejectionDraft]:
    if app_id not in drafts:
        raise NotFoundError(f"No pending rejection for application {app_id!r}")
    logger.info("Rejection of application %s cancelled", app_id)
    return {key: draft for key, draft in drafts.items() if key != app_id}


def applications_for_student(
    applications: Iterable[Application], student_id: str
) -> Iterator[Application]:
    return (app for app in applications if app.student_id == student_id)


def applications_for_posting(
    applications: Iterable[Application], post_id: str, include_rejected: bool = True
) -> Iterator[Application]:
    """Applicants to one posting in stored order.

    With ``include_rejected`` off, REJECTED records are hidden from the view
    only; the collection itself keeps them.
    """
    return (
        app for app in applications
        if app.post_id == post_id
        and (include_rejected or app.status is not ApplicationStatus.REJECTED)
    )
