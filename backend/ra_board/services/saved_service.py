"""Students' saved (bookmarked) positions, kept in the order they were saved."""
from collections.abc import Iterable, Mapping

from ra_board.errors import NotFoundError
from ra_board.models.posting import JobPosting
from ra_board.services.posting_service import get_posting


def save_posting(
    saved: Mapping[str, tuple[str, ...]],
    postings: Iterable[JobPosting],
    student_id: str,
    post_id: str,
) -> dict[str, tuple[str, ...]]:
    get_posting(postings, post_id)
    current = saved.get(student_id, ())
    if post_id in current:
        return dict(saved)
    return {**saved, student_id: (*current, post_id)}


def unsave_posting(
    saved: Mapping[str, tuple[str, ...]], student_id: str, post_id: str
) -> dict[str, tuple[str, ...]]:
    current = saved.get(student_id, ())
    if post_id not in current:
        raise NotFoundError(f"Posting {post_id!r} is not in the saved list")
    return {**saved, student_id: tuple(pid for pid in current if pid != post_id)}


def saved_postings(
    saved: Mapping[str, tuple[str, ...]], postings: Iterable[JobPosting], student_id: str
) -> list[JobPosting]:
    by_id = {p.id: p for p in postings}
    return [by_id[pid] for pid in saved.get(student_id, ()) if pid in by_id]
