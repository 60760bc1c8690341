from user_directory.ui.cardview.controllers.option_index import FilterIndexBuilder
from user_directory.ui.cardview.models.criteria import FilterOptionSet


def test_distinct_sorted_cities_and_companies(users):
    options = FilterIndexBuilder().build_options(users)

    assert options.cities == ("Gwenborough", "McKenziehaven", "South Elvis", "Wisokyburgh")
    assert options.companies == (
        "Deckow-Crist",
        "Robel-Corkery",
        "Romaguera-Crona",
        "Romaguera-Jacobson",
    )


def test_no_duplicates_and_ascending(users):
    options = FilterIndexBuilder().build_options(list(users) * 3)

    for values in (options.cities, options.companies):
        assert len(values) == len(set(values))
        assert list(values) == sorted(values)


def test_no_all_sentinel(users):
    options = FilterIndexBuilder().build_options(users)
    assert "All Cities" not in options.cities
    assert "All Companies" not in options.companies


def test_empty_collection_gives_empty_sets():
    assert FilterIndexBuilder().build_options([]) == FilterOptionSet()
