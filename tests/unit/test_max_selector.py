import pytest

from filescout.services.max_selector import MaxResult, select_max


def test_returns_item_with_highest_score():
    words = ["pear", "fig", "banana", "kiwi"]
    res = select_max(words, len)
    assert res == MaxResult("banana", 6)


def test_ties_go_to_first_seen():
    items = [("a", 3), ("b", 7), ("c", 7), ("d", 1)]
    res = select_max(items, lambda t: t[1])
    assert res is not None
    assert res.item == ("b", 7)


def test_empty_input_is_absent():
    assert select_max([], lambda x: 1 / 0) is None


def test_none_item_is_distinguishable_from_absent():
    res = select_max([None], lambda _x: 0)
    assert res is not None
    assert res.item is None


def test_scores_each_item_once_in_order():
    calls = []

    def score(x):
        calls.append(x)
        return -abs(x - 5)

    res = select_max(iter([1, 9, 5, 4, 6]), score)
    assert res.item == 5
    assert calls == [1, 9, 5, 4, 6]


def test_scoring_failure_propagates():
    def score(x):
        if x == "bad":
            raise ValueError("cannot score")
        return 1.0

    with pytest.raises(ValueError, match="cannot score"):
        select_max(["ok", "bad", "ok"], score)
