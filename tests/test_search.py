from littlesearch.posting import Occurrence
from littlesearch.search import TOP_K, top_k_search


def occs(*pairs):
    return [Occurrence(doc, freq) for doc, freq in pairs]


def test_ties_favor_first_keyword():
    cat = occs(("d1", 4), ("d2", 2))
    dog = occs(("d3", 4), ("d4", 2))
    assert top_k_search(cat, dog) == ["d1", "d3", "d2", "d4"]
    assert top_k_search(dog, cat) == ["d3", "d1", "d4", "d2"]


def test_higher_frequency_first():
    a = occs(("a1", 9), ("a2", 1))
    b = occs(("b1", 5), ("b2", 3))
    assert top_k_search(a, b) == ["a1", "b1", "b2", "a2"]


def test_documents_are_distinct():
    a = occs(("d1", 3))
    b = occs(("d1", 5), ("d2", 1))
    assert top_k_search(a, b) == ["d1", "d2"]
    assert top_k_search(a, a) == ["d1"]


def test_at_most_five_results():
    a = occs(*[(f"a{i}", 20 - i) for i in range(8)])
    b = occs(*[(f"b{i}", 20 - i) for i in range(8)])
    result = top_k_search(a, b)
    assert len(result) == TOP_K == 5
    assert result == ["a0", "b0", "a1", "b1", "a2"]


def test_each_list_cut_before_merge():
    a = occs(*[(f"a{i}", 10 - i) for i in range(7)])
    assert top_k_search(a, []) == ["a0", "a1", "a2", "a3", "a4"]
    assert top_k_search([], a) == ["a0", "a1", "a2", "a3", "a4"]


def test_one_side_empty():
    assert top_k_search([], occs(("d1", 3))) == ["d1"]
    assert top_k_search([], []) == []


def test_custom_k():
    a = occs(("d1", 3), ("d2", 2), ("d3", 1))
    assert top_k_search(a, [], k=2) == ["d1", "d2"]
