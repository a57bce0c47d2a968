import pytest

from releval.ndcg import Gains, RelGain, ndcg, ndcg_cut, setup_gains
from releval.ranking import RankedRels


def make(results, rel_levels, num_rel, num_rel_ret):
    return RankedRels(
        results_rel_list=tuple(results),
        rel_levels=tuple(rel_levels),
        num_rel=num_rel,
        num_rel_ret=num_rel_ret,
    )


GRADED = make([2, 1, 0], [1, 1, 1], 2, 2)
REVERSED = make([0, 1, 2], [1, 1, 1], 2, 2)


def test_setup_gains_defaults_to_level_values():
    gains = setup_gains(GRADED)
    assert [rg.rel_level for rg in gains.rel_gains] == [0, 1, 2]
    assert [rg.gain for rg in gains.rel_gains] == [0.0, 1.0, 2.0]
    assert [rg.num_at_level for rg in gains.rel_gains] == [1, 1, 1]


def test_setup_gains_params_override_and_sort_by_gain():
    gains = setup_gains(GRADED, {"1": 3.5, "2": 0.5})
    assert [rg.rel_level for rg in gains.rel_gains] == [0, 2, 1]
    assert gains.gain(1) == 3.5
    assert gains.gain(2) == 0.5
    assert gains.gain(0) == 0.0


def test_setup_gains_param_for_absent_level_has_no_docs():
    gains = setup_gains(GRADED, [("4", 7.0)])
    level4 = next(rg for rg in gains.rel_gains if rg.rel_level == 4)
    assert level4 == RelGain(rel_level=4, gain=7.0, num_at_level=0)
    assert gains.total_num_at_levels == 3


def test_gains_unknown_level_is_zero():
    gains = Gains((RelGain(1, 2.0, 1),))
    assert gains.gain(9) == 0.0
    assert list(gains.ideal_gains()) == [2.0]


def test_ndcg_perfect_ranking_is_one():
    assert ndcg(GRADED) == pytest.approx(1.0)


def test_ndcg_reversed_ranking_is_lower():
    assert 0.0 < ndcg(REVERSED) < ndcg(GRADED)


def test_ndcg_nothing_relevant_retrieved_is_zero():
    rr = make([0, 0], [2, 1], 1, 0)
    assert ndcg(rr) == 0.0


def test_ndcg_zero_ideal_gain_is_zero():
    rr = make([1], [0, 1], 1, 1)
    assert ndcg(rr, {1: 0.0}) == 0.0


def test_ndcg_gain_params_change_score():
    assert ndcg(REVERSED, {"1": 10.0}) != pytest.approx(ndcg(REVERSED))
    assert 0.0 < ndcg(REVERSED, {"1": 10.0}) <= 1.0


def test_ndcg_cut_perfect_ranking_is_one_everywhere():
    values = ndcg_cut(GRADED, [1, 2, 5])
    assert values == pytest.approx([1.0, 1.0, 1.0])


def test_ndcg_cut_large_cutoff_matches_ndcg():
    values = ndcg_cut(REVERSED, [1, 1000])
    assert values[0] == 0.0
    assert values[1] == pytest.approx(ndcg(REVERSED))


def test_ndcg_cut_no_ideal_gives_raw_dcg():
    rr = make([1], [1], 0, 0)
    assert ndcg_cut(rr, [1]) == pytest.approx([1.0])


def test_ndcg_cut_is_within_unit_interval():
    rr = make([0, 2, 1, 0, 1], [3, 2, 1], 3, 3)
    assert all(0.0 <= v <= 1.0 for v in ndcg_cut(rr, [1, 2, 3, 4, 5, 10]))


@pytest.mark.parametrize("cutoffs", [[0, 5], [-1], [5, 5]])
def test_ndcg_cut_rejects_bad_cutoffs(cutoffs):
    with pytest.raises(ValueError):
        ndcg_cut(GRADED, cutoffs)