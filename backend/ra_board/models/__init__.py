from ra_board.models.user import User, UserRole
from ra_board.models.posting import JobPosting, PostingStatus, School
from ra_board.models.application import Application, ApplicationStatus, RejectionDraft
from ra_board.models.query import FilterSpec, SortMode

__all__ = [
    "User", "UserRole",
    "JobPosting", "PostingStatus", "School",
    "Application", "ApplicationStatus", "RejectionDraft",
    "FilterSpec", "SortMode",
]
