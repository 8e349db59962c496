# tests/test_directory_state.py
import pytest
from pydantic import ValidationError

from company_directory.domain.company import ALL, CompanyRecord, FilterCriteria
from company_directory.domain.directory import DirectoryState
from tests.factories import make_companies


@pytest.fixture
def state(scenario_companies):
    directory = DirectoryState()
    directory.load(scenario_companies)
    return directory


def ids(records):
    return [c.id for c in records]


def test_load_sorts_by_id():
    directory = DirectoryState()
    directory.load(list(reversed(make_companies(5))))

    assert ids(directory.companies) == [1, 2, 3, 4, 5]
    assert ids(directory.filtered) == [1, 2, 3, 4, 5]
    assert directory.current_page == 1


def test_new_state_is_empty():
    directory = DirectoryState()

    assert directory.filtered == []
    assert directory.page_window() == []
    assert directory.total_pages == 0
    assert directory.current_page == 1
    assert directory.criteria == FilterCriteria()


def test_filter_walkthrough(state):
    """Name, then industry, then location narrow the list conjunctively."""
    state.set_name_query("acme")
    assert ids(state.filtered) == [1, 3]

    state.set_industry("Software")
    assert ids(state.filtered) == [1, 3]

    state.set_location("Delhi")
    assert ids(state.filtered) == [3]
    assert state.criteria == FilterCriteria(name_query="acme", location="Delhi", industry="Software")


def test_name_query_is_case_insensitive(state):
    state.set_name_query("ACME2")
    assert ids(state.filtered) == [3]


@pytest.mark.parametrize("query", ["", "   "])
def test_blank_name_query_is_identity(state, query):
    state.set_name_query(query)
    assert ids(state.filtered) == [1, 2, 3]


def test_name_query_is_matched_untrimmed(state):
    state.set_name_query(" acme")
    assert state.filtered == []


def test_all_is_identity_for_selects(state):
    state.set_filter(FilterCriteria(location="Pune", industry="Fintech"))
    assert ids(state.filtered) == [2]

    state.set_filter(FilterCriteria(location=ALL, industry=ALL))
    assert ids(state.filtered) == [1, 2, 3]


def test_unknown_location_yields_no_results(state):
    state.set_location("Atlantis")

    assert state.filtered == []
    assert state.page_window() == []
    assert state.total_pages == 0
    assert state.current_page == 1


@pytest.mark.parametrize(
    "criteria",
    [
        FilterCriteria(),
        FilterCriteria(name_query="company 1"),
        FilterCriteria(location="Pune"),
        FilterCriteria(industry="Fintech", location="Chennai"),
        FilterCriteria(name_query="2", industry="Software"),
    ],
)
def test_filtered_is_ordered_subset(criteria):
    directory = DirectoryState()
    records = make_companies(40)
    directory.load(records)

    directory.set_filter(criteria)

    assert set(directory.filtered) <= set(records)
    assert ids(directory.filtered) == sorted(ids(directory.filtered))
    assert all(criteria.matches(c) for c in directory.filtered)


def test_set_filter_is_idempotent():
    directory = DirectoryState()
    directory.load(make_companies(40))
    criteria = FilterCriteria(name_query="1", location="Mumbai")

    directory.set_filter(criteria)
    first = directory.filtered
    directory.set_filter(criteria)

    assert directory.filtered == first


@pytest.mark.parametrize(
    "mutate",
    [
        lambda d: d.set_name_query("company"),
        lambda d: d.set_location("Pune"),
        lambda d: d.set_industry("Software"),
        lambda d: d.set_filter(FilterCriteria()),
        lambda d: d.load(make_companies(30)),
    ],
)
def test_every_mutation_resets_page(mutate):
    directory = DirectoryState()
    directory.load(make_companies(25))
    directory.set_page(3)

    mutate(directory)

    assert directory.current_page == 1


def test_pagination_of_25_records():
    directory = DirectoryState()
    directory.load(make_companies(25))

    assert directory.total_pages == 3
    assert ids(directory.page_window()) == list(range(1, 11))

    directory.set_page(2)
    assert ids(directory.page_window()) == list(range(11, 21))

    directory.set_page(3)
    assert ids(directory.page_window()) == [21, 22, 23, 24, 25]
    assert directory.has_previous
    assert not directory.has_next


@pytest.mark.parametrize("count", [0, 1, 9, 10, 11, 20, 37])
def test_window_never_exceeds_page_size(count):
    directory = DirectoryState()
    directory.load(make_companies(count))

    for page in range(1, directory.total_pages + 1):
        directory.set_page(page)
        window = directory.page_window()
        assert len(window) <= directory.items_per_page
        if page < directory.total_pages:
            assert len(window) == directory.items_per_page


def test_page_past_the_end_is_empty():
    directory = DirectoryState()
    directory.load(make_companies(5))

    directory.set_page(4)

    assert directory.page_window() == []


def test_custom_page_size():
    directory = DirectoryState(items_per_page=4)
    directory.load(make_companies(10))

    assert directory.total_pages == 3
    directory.set_page(3)
    assert ids(directory.page_window()) == [9, 10]


def test_records_are_immutable():
    company = CompanyRecord(id=1, name="Acme", location="Pune", industry="Software")

    with pytest.raises(ValidationError):
        company.name = "Other"


@pytest.mark.parametrize("size", [0, -1])
def test_page_size_must_be_positive(size):
    with pytest.raises(ValueError):
        DirectoryState(items_per_page=size)
