from datetime import date

from factories import make_posting

from ra_board.models.posting import PostingStatus, School
from ra_board.models.query import FilterSpec, SortMode
from ra_board.services.demo_data import DEMO_POSTINGS
from ra_board.services.query_service import filter_and_sort, matches_query


def _ids(postings):
    return [p.id for p in postings]


class TestTextMatch:
    def test_empty_query_matches_everything(self):
        assert matches_query(make_posting(), "")
        assert matches_query(make_posting(), "   ")

    def test_padded_query_is_matched_as_typed(self):
        posting = make_posting(title="Vision Systems", professor_name="Dr X", topic_tags=("CV",))
        assert not matches_query(posting, " vision")
        assert matches_query(make_posting(title="Robot Vision Systems"), " vision")

    def test_matches_title_case_insensitively(self):
        posting = make_posting(title="Computer Vision for Autonomous Driving")
        assert matches_query(posting, "vision")
        assert matches_query(posting, "AUTONOMOUS")

    def test_matches_professor_name(self):
        assert matches_query(make_posting(professor_name="Dr. John Nash"), "nash")

    def test_matches_topic_tag_substring(self):
        assert matches_query(make_posting(topic_tags=("Bioinformatics",)), "informatics")

    def test_does_not_search_skills_or_description(self):
        posting = make_posting(title="Lab RA", skill_tags=("PyTorch",), description="PyTorch heavy")
        assert not matches_query(posting, "pytorch")


class TestFilters:
    def test_default_spec_keeps_every_posting(self):
        result = filter_and_sort(DEMO_POSTINGS, FilterSpec())
        assert sorted(_ids(result)) == sorted(_ids(DEMO_POSTINGS))

    def test_empty_input(self):
        assert filter_and_sort([], FilterSpec(query="anything")) == []

    def test_status_filter_excludes_other_statuses(self):
        spec = FilterSpec(status={PostingStatus.OPEN, PostingStatus.COMPETITIVE})
        result = filter_and_sort(DEMO_POSTINGS, spec)
        assert result
        assert all(p.status is not PostingStatus.CLOSED for p in result)

    def test_open_filter_with_newest_sort(self):
        postings = [
            make_posting("open", status=PostingStatus.OPEN, posted_date=date(2023, 10, 28)),
            make_posting("closed", status=PostingStatus.CLOSED, posted_date=date(2023, 10, 20)),
        ]
        spec = FilterSpec(status={PostingStatus.OPEN}, sort=SortMode.NEWEST)
        assert _ids(filter_and_sort(postings, spec)) == ["open"]

    def test_school_filter(self):
        result = filter_and_sort(DEMO_POSTINGS, FilterSpec(schools={School.SDS}))
        assert _ids(result) == ["1", "4"]

    def test_topic_filter_uses_or_semantics(self):
        postings = [
            make_posting("cv", topic_tags=("CV",)),
            make_posting("nlp", topic_tags=("NLP", "Ethics")),
        ]
        result = filter_and_sort(postings, FilterSpec(topics={"NLP", "RL"}))
        assert _ids(result) == ["nlp"]

    def test_skill_filter_uses_or_semantics(self):
        result = filter_and_sort(DEMO_POSTINGS, FilterSpec(skills={"CUDA", "TensorFlow"}))
        assert sorted(_ids(result)) == ["2", "4"]

    def test_filters_combine_with_and(self):
        spec = FilterSpec(query="turing", skills={"PyTorch"})
        assert _ids(filter_and_sort(DEMO_POSTINGS, spec)) == ["1"]

    def test_query_matching_nothing(self):
        assert filter_and_sort(DEMO_POSTINGS, FilterSpec(query="xyz-no-such-thing")) == []

    def test_input_is_not_mutated(self):
        postings = list(DEMO_POSTINGS)
        filter_and_sort(postings, FilterSpec(sort=SortMode.POPULAR))
        assert postings == list(DEMO_POSTINGS)


class TestSorting:
    def test_relevant_puts_open_first_and_keeps_order(self):
        result = filter_and_sort(DEMO_POSTINGS, FilterSpec())
        assert _ids(result) == ["1", "4", "2", "3"]

    def test_newest_descending_and_stable(self):
        postings = [
            make_posting("old", posted_date=date(2023, 9, 1)),
            make_posting("tie-a", posted_date=date(2023, 10, 5)),
            make_posting("new", posted_date=date(2023, 11, 1)),
            make_posting("tie-b", posted_date=date(2023, 10, 5)),
        ]
        result = filter_and_sort(postings, FilterSpec(sort=SortMode.NEWEST))
        assert _ids(result) == ["new", "tie-a", "tie-b", "old"]

    def test_popular_descending_and_stable(self):
        postings = [
            make_posting("a", views=10),
            make_posting("b", views=50),
            make_posting("c", views=10),
        ]
        result = filter_and_sort(postings, FilterSpec(sort=SortMode.POPULAR))
        assert _ids(result) == ["b", "a", "c"]
