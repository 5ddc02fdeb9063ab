from enum import Enum

from pydantic import BaseModel, ConfigDict

from ra_board.models.posting import PostingStatus, School


class SortMode(str, Enum):
    RELEVANT = "RELEVANT"
    NEWEST = "NEWEST"
    POPULAR = "POPULAR"


class FilterSpec(BaseModel):
    """Search box text, sidebar facets and sort order for one listing query.

    An empty facet set means the facet is inactive.
    """

    model_config = ConfigDict(frozen=True)

    query: str = ""
    status: frozenset[PostingStatus] = frozenset()
    schools: frozenset[School] = frozenset()
    topics: frozenset[str] = frozenset()
    skills: frozenset[str] = frozenset()
    sort: SortMode = SortMode.RELEVANT
