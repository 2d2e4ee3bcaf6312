import math

import numpy as np
import pytest

from search_server.document import Document, DocumentStatus, print_document
from search_server.errors import InvalidArgumentError, OutOfRangeError
from search_server.filters import PredicateFilter, StatusFilter
from search_server.search_server import SearchServer


class TestConstruction:
    def test_stop_words_from_text_and_collection_agree(self):
        from_text = SearchServer("  in  the in ")
        from_list = SearchServer(["in", "the", "", "in"])
        assert from_text.stop_words == from_list.stop_words == {"in", "the"}

    @pytest.mark.parametrize("stop_words", ["in th\x12e", ["in", "t\x00he"]])
    def test_invalid_stop_words(self, stop_words):
        with pytest.raises(InvalidArgumentError):
            SearchServer(stop_words)

    def test_stop_words_are_not_indexed(self):
        server = SearchServer("in the")
        server.add_document(42, "cat in the city", DocumentStatus.ACTUAL, [1, 2, 3])
        assert server.find_top_documents("in") == []
        assert [d.id for d in server.find_top_documents("city")] == [42]


def test_worked_example_red(station_server):
    results = station_server.find_top_documents("red")

    assert [document.id for document in results] == [2, 3]
    idf = math.log(3 / 2)
    assert results[0].relevance == pytest.approx(idf / 4)
    assert results[1].relevance == pytest.approx(idf / 8)
    assert [document.rating for document in results] == [3, 1]


def test_ranking_is_reproducible(station_server):
    first = station_server.find_top_documents("white red long cat")
    second = station_server.find_top_documents("white red long cat")
    assert first == second


def test_ranking_ties_broken_by_rating(pets_server):
    results = pets_server.find_top_documents("fluffy groomed cat")

    assert [document.id for document in results] == [1, 0, 2]
    assert results[0].relevance == pytest.approx(0.5 * math.log(4) + 0.25 * math.log(2))
    assert np.isclose(results[1].relevance, results[2].relevance)
    assert results[1].rating > results[2].rating


@pytest.mark.parametrize(
    "document_filter, expected_ids",
    [
        (None, [1, 0, 2]),
        (DocumentStatus.ACTUAL, [1, 0, 2]),
        (DocumentStatus.BANNED, [3]),
        (DocumentStatus.REMOVED, []),
        (lambda document_id, status, rating: document_id % 2 == 0, [0, 2]),
        (StatusFilter(DocumentStatus.BANNED), [3]),
        (PredicateFilter(lambda document_id, status, rating: rating > 4), [1, 3]),
    ],
)
def test_find_top_documents_filters(pets_server, document_filter, expected_ids):
    results = pets_server.find_top_documents("fluffy groomed cat", document_filter)
    assert [document.id for document in results] == expected_ids


def test_minus_word_excludes_matching_documents(pets_server):
    results = pets_server.find_top_documents("fluffy groomed cat -tail")
    assert 1 not in [document.id for document in results]
    assert [document.id for document in results] == [0, 2]


def test_unindexed_words_are_ignored(pets_server):
    assert pets_server.find_top_documents("parrot -rabbit") == []


def test_results_are_capped_and_sorted():
    server = SearchServer()
    for document_id in range(8):
        filler = " ".join(f"w{document_id}_{i}" for i in range(document_id))
        server.add_document(document_id, f"cat {filler}", DocumentStatus.ACTUAL, [document_id])
    server.add_document(100, "dog", DocumentStatus.ACTUAL, [])

    results = server.find_top_documents("cat")

    assert len(results) == 5
    assert [document.id for document in results] == [0, 1, 2, 3, 4]
    relevances = [document.relevance for document in results]
    assert relevances == sorted(relevances, reverse=True)


def test_result_limit_is_configurable():
    server = SearchServer(max_result_document_count=2)
    for document_id in range(4):
        server.add_document(document_id, "cat", DocumentStatus.ACTUAL, [document_id])
    server.add_document(4, "dog", DocumentStatus.ACTUAL, [])

    # every cat document scores ln(5/4), so ratings decide the order
    results = server.find_top_documents("cat")
    assert [document.id for document in results] == [3, 2]


@pytest.mark.parametrize("raw_query", ["", "cat --dog", "cat -", "c\x12at"])
def test_find_top_documents_invalid_query(pets_server, raw_query):
    with pytest.raises(InvalidArgumentError):
        pets_server.find_top_documents(raw_query)


def test_document_rendering():
    document = Document(2, 0.101366, 3)
    assert str(document) == "{ document_id = 2, relevance = 0.101366, rating = 3 }"


class TestMatchDocument:
    def test_matched_words_in_sorted_order(self, pets_server):
        words, status = pets_server.match_document("tail fluffy cat dog", 1)
        assert words == ["cat", "fluffy", "tail"]
        assert status is DocumentStatus.ACTUAL

    def test_status_is_returned(self, pets_server):
        assert pets_server.match_document("groomed", 3) == (["groomed"], DocumentStatus.BANNED)

    def test_minus_word_clears_matches(self, pets_server):
        words, status = pets_server.match_document("fluffy cat -tail", 1)
        assert words == []
        assert status is DocumentStatus.ACTUAL

    def test_minus_word_absent_from_document(self, pets_server):
        words, _ = pets_server.match_document("fluffy cat -collar", 1)
        assert words == ["cat", "fluffy"]

    def test_negative_id(self, pets_server):
        with pytest.raises(InvalidArgumentError):
            pets_server.match_document("cat", -1)

    @pytest.mark.parametrize("raw_query", ["", "--cat", "cat -"])
    def test_invalid_query(self, pets_server, raw_query):
        with pytest.raises(InvalidArgumentError):
            pets_server.match_document(raw_query, 1)

    def test_unknown_document(self, pets_server):
        with pytest.raises(OutOfRangeError):
            pets_server.match_document("cat", 17)


def test_relevances_within_epsilon_are_tied():
    """A slightly lower relevance still wins when the gap is below 1e-6 and its rating is higher."""
    server = SearchServer()
    higher = Document(0, 0.5 + 5e-7, 1)
    lower = Document(1, 0.5, 9)
    assert server._compare(higher, lower) > 0
    assert server._compare(lower, higher) < 0

    far_apart = Document(0, 0.5 + 1e-3, 1)
    assert server._compare(far_apart, lower) < 0


def test_near_tie_ordering_in_results():
    server = SearchServer(relevance_epsilon=0.25)
    server.add_document(0, "cat", DocumentStatus.ACTUAL, [1])
    server.add_document(1, "cat dog", DocumentStatus.ACTUAL, [9])
    server.add_document(2, "bird", DocumentStatus.ACTUAL, [])

    # relevances ln(3/2) and ln(3/2) / 2 are closer than the tolerance
    results = server.find_top_documents("cat")
    assert results[0].relevance < results[1].relevance
    assert [document.id for document in results] == [1, 0]

    server.relevance_epsilon = 1e-6
    assert [document.id for document in server.find_top_documents("cat")] == [0, 1]


def test_print_document(capsys):
    print_document(Document(3, 0.25, -1))
    assert capsys.readouterr().out == "{ document_id = 3, relevance = 0.25, rating = -1 }\n"
