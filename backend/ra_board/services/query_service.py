"""
Listing query engine.

Narrows an in-memory collection of postings by search text and sidebar
facets, then orders what is left for display. Everything here is pure:
the caller's collection is never touched and a fresh list comes back.
"""
import logging
from collections.abc import Iterable

from ra_board.models.posting import JobPosting, PostingStatus
from ra_board.models.query import FilterSpec, SortMode

logger = logging.getLogger(__name__)


def matches_query(posting: JobPosting, query: str) -> bool:
    """Case-insensitive substring match on title, professor name or any topic tag."""
    if not query.strip():
        return True
    q = query.lower()
    return (
        q in posting.title.lower()
        or q in posting.professor_name.lower()
        or any(q in tag.lower() for tag in posting.topic_tags)
    )


def _accepts(selected: frozenset, value) -> bool:
    return not selected or value in selected


def _overlaps(selected: frozenset[str], tags: Iterable[str]) -> bool:
    # OR semantics: one shared tag is enough.
    return not selected or any(tag in selected for tag in tags)


def matches_filters(posting: JobPosting, spec: FilterSpec) -> bool:
    return (
        matches_query(posting, spec.query)
        and _accepts(spec.status, posting.status)
        and _accepts(spec.schools, posting.school)
        and _overlaps(spec.topics, posting.topic_tags)
        and _overlaps(spec.skills, posting.skill_tags)
    )


def sort_postings(postings: list[JobPosting], mode: SortMode) -> list[JobPosting]:
    """Stable sort; ties keep their incoming order."""
    if mode is SortMode.NEWEST:
        return sorted(postings, key=lambda p: p.posted_date, reverse=True)
    if mode is SortMode.POPULAR:
        return sorted(postings, key=lambda p: p.views, reverse=True)
    # RELEVANT is a status bucket, not a text score: OPEN first, nothing else reordered.
    return sorted(postings, key=lambda p: p.status is not PostingStatus.OPEN)


def filter_and_sort(postings: Iterable[JobPosting], spec: FilterSpec | None = None) -> list[JobPosting]:
    spec = spec or FilterSpec()
    visible = [p for p in postings if matches_filters(p, spec)]
    logger.debug("Listing query %r matched %d postings", spec.query, len(visible))
    return sort_postings(visible, spec.sort)
