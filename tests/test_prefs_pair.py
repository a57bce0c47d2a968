import pytest

from releval.prefs import ResultsPrefs
from releval.prefs_pair import prefs_pair, prefs_pair_imp, prefs_pair_ret


def _rp(counts, num_judged_ret):
    return ResultsPrefs(
        num_judged=len(counts), num_judged_ret=num_judged_ret, pref_counts=counts
    )


def _transpose(counts):
    return [list(row) for row in zip(*counts)]


@pytest.mark.parametrize("measure", [prefs_pair, prefs_pair_imp, prefs_pair_ret])
def test_no_judged_documents_scores_zero(measure):
    assert measure(ResultsPrefs()) == 0.0


def test_documented_three_of_five_example():
    # Three users prefer doc 0 to doc 1, two prefer doc 1 to doc 0.
    rp = _rp([[0, 3], [2, 0]], num_judged_ret=2)
    assert prefs_pair_ret(rp) == pytest.approx(0.6)


@pytest.mark.parametrize("measure", [prefs_pair, prefs_pair_imp, prefs_pair_ret])
def test_all_preferences_fulfilled_scores_one(measure):
    counts = [[0, 1, 2], [0, 0, 1], [0, 0, 0]]
    assert measure(_rp(counts, num_judged_ret=3)) == pytest.approx(1.0)


def test_all_retrieved_makes_variants_agree():
    counts = [[0, 2, 1], [1, 0, 0], [3, 1, 0]]
    rp = _rp(counts, num_judged_ret=3)
    assert prefs_pair(rp) == pytest.approx(prefs_pair_imp(rp))
    assert prefs_pair_imp(rp) == pytest.approx(prefs_pair_ret(rp))


def test_reversed_preferences_complement():
    counts = [[0, 2, 1], [1, 0, 4], [3, 1, 0]]
    forward = prefs_pair_ret(_rp(counts, num_judged_ret=3))
    backward = prefs_pair_ret(_rp(_transpose(counts), num_judged_ret=3))
    assert forward + backward == pytest.approx(1.0)


def test_unretrieved_pairs_only_lower_prefs_pair():
    counts = [
        [0, 1, 1, 1],
        [0, 0, 1, 1],
        [0, 0, 0, 1],
        [0, 0, 0, 0],
    ]
    rp = _rp(counts, num_judged_ret=2)
    assert prefs_pair_imp(rp) == pytest.approx(1.0)
    assert prefs_pair(rp) < prefs_pair_imp(rp)
    # One of the six pairs has neither document retrieved.
    assert prefs_pair(rp) == pytest.approx(prefs_pair_imp(rp) * 5 / 6)


def test_ret_ignores_implied_pairs():
    counts = [[0, 1, 0], [0, 0, 0], [1, 1, 0]]
    rp = _rp(counts, num_judged_ret=2)
    assert prefs_pair_ret(rp) == pytest.approx(1.0)
    assert prefs_pair_imp(rp) < prefs_pair_ret(rp)


def test_pairs_without_preferences_are_ignored():
    with_extra = _rp([[0, 3, 0], [2, 0, 0], [0, 0, 0]], num_judged_ret=3)
    without = _rp([[0, 3], [2, 0]], num_judged_ret=2)
    assert prefs_pair(with_extra) == pytest.approx(prefs_pair(without))