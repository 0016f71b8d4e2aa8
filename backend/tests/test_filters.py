"""Query filter engine tests."""
import pytest

from bookstore.core.exceptions import ErrorKind, Failure
from bookstore.services.filters import (
    FilterCriteria,
    count_matching,
    filter_books,
    list_matching,
    title_sort_key,
)
from bookstore.storage import BookStore


def ids(books):
    return sorted(b.id for b in books)


def test_no_criteria_matches_everything(seeded_store: BookStore):
    assert ids(filter_books(seeded_store.all(), FilterCriteria())) == [1, 2, 3, 4]


def test_author_is_case_insensitive_exact(seeded_store: BookStore):
    books = seeded_store.all()
    assert ids(filter_books(books, FilterCriteria(author="frank HERBERT"))) == [1]
    assert filter_books(books, FilterCriteria(author="Herbert")) == []


def test_numeric_bounds_are_inclusive(seeded_store: BookStore):
    books = seeded_store.all()
    assert ids(filter_books(books, FilterCriteria(price_at_least=20))) == [1, 3]
    assert ids(filter_books(books, FilterCriteria(price_at_most=15))) == [2, 4]
    assert ids(filter_books(books, FilterCriteria(year_at_least=1982))) == [2, 3]
    assert ids(filter_books(books, FilterCriteria(year_at_most=1965))) == [1, 4]


def test_criteria_combine_with_and(seeded_store: BookStore):
    criteria = FilterCriteria(price_at_least=10, year_at_most=1990, genres=("SCI_FI",))
    assert ids(filter_books(seeded_store.all(), criteria)) == [1, 2]
    criteria = FilterCriteria(price_at_least=16, price_at_most=30, genres=("SCI_FI",))
    assert ids(filter_books(seeded_store.all(), criteria)) == [1]


def test_genres_match_any_listed(seeded_store: BookStore):
    criteria = FilterCriteria(genres=("HISTORY", "MANGA"))
    assert ids(filter_books(seeded_store.all(), criteria)) == [2, 4]


def test_unknown_genre_fails_whole_query(seeded_store: BookStore):
    result = filter_books(seeded_store.all(), FilterCriteria(genres=("SCI_FI", "POETRY")))
    assert isinstance(result, Failure)
    assert result.kind == ErrorKind.INVALID_GENRE
    assert result.message == "Invalid genre provided"


def test_genre_tags_are_case_sensitive(seeded_store: BookStore):
    result = filter_books(seeded_store.all(), FilterCriteria(genres=("sci_fi",)))
    assert isinstance(result, Failure)


def test_from_query_parses_bounds():
    criteria = FilterCriteria.from_query(
        {
            "author": "Herbert",
            "price-bigger-than": "10",
            "price-less-than": " 30 ",
            "year-bigger-than": "0",
            "year-less-than": "2000",
            "genres": "SCI_FI,NOVEL",
        }
    )
    assert criteria == FilterCriteria(
        author="Herbert",
        price_at_least=10,
        price_at_most=30,
        year_at_least=0,
        year_at_most=2000,
        genres=("SCI_FI", "NOVEL"),
    )


def test_from_query_keeps_genre_tags_verbatim(seeded_store: BookStore):
    criteria = FilterCriteria.from_query({"genres": "SCI_FI, NOVEL"})
    assert criteria.genres == ("SCI_FI", " NOVEL")
    result = filter_books(seeded_store.all(), criteria)
    assert isinstance(result, Failure)
    assert result.kind == ErrorKind.INVALID_GENRE


@pytest.mark.parametrize("raw", [None, "", "abc", "12abc", "1.5", "9" * 5000])
def test_from_query_treats_bad_bounds_as_absent(raw):
    criteria = FilterCriteria.from_query({"price-bigger-than": raw, "author": ""})
    assert criteria == FilterCriteria()


def test_from_query_empty_genres_is_absent():
    assert FilterCriteria.from_query({"genres": ""}).genres is None


def test_listing_sorts_by_title_ignoring_case_and_accents(seeded_store: BookStore):
    seeded_store.insert("eclipse", "Someone", 2001, 5, [])
    books = list_matching(seeded_store.all(), FilterCriteria())
    assert [b.title for b in books] == ["akira", "Clean Code", "Dune", "eclipse", "Émile"]


def test_listing_propagates_genre_failure(seeded_store: BookStore):
    result = list_matching(seeded_store.all(), FilterCriteria(genres=("NOPE",)))
    assert isinstance(result, Failure)


def test_counting(seeded_store: BookStore):
    assert count_matching(seeded_store.all(), FilterCriteria()) == 4
    assert count_matching(seeded_store.all(), FilterCriteria(genres=("SCI_FI",))) == 2
    assert count_matching([], FilterCriteria(price_at_least=1)) == 0
    assert isinstance(count_matching([], FilterCriteria(genres=("X",))), Failure)


def test_title_sort_key():
    assert title_sort_key("Émile") == title_sort_key("emile")
    assert title_sort_key("ÅNGSTRÖM") == "angstrom"
