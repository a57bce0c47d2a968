import pytest

from releval.interpolated import (
    eleven_point_average,
    iprec_at_recall,
    rprec_mult_avgjg,
)
from releval.precision import precision_at, rprec_mult
from releval.ranking import RankedRels

ELEVEN = [0.0, 0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0]
MULTIPLES = [0.2, 0.4, 0.6, 0.8, 1.0, 1.2, 1.4, 1.6, 1.8, 2.0]


def make_rr(rels, num_rel, level=1):
    return RankedRels(
        results_rel_list=tuple(rels),
        num_rel=num_rel,
        num_rel_ret=sum(1 for rel in rels if rel >= level),
    )


MIXED = make_rr([0, 1, 0, 1, 1, 0, 0, 1, 0, 0], 6)


def test_perfect_ranking_scores_one_everywhere():
    rr = make_rr([1, 1, 1, 0, 0], 3)
    assert iprec_at_recall(rr, ELEVEN) == [1.0] * len(ELEVEN)


def test_nothing_relevant_retrieved_scores_zero():
    rr = make_rr([0, 0, 0], 2)
    assert iprec_at_recall(rr, ELEVEN) == [0.0] * len(ELEVEN)
    assert eleven_point_average(rr, ELEVEN) == 0.0


def test_interpolated_precision_is_non_increasing():
    values = iprec_at_recall(MIXED, ELEVEN)
    assert all(a >= b for a, b in zip(values, values[1:]))


def test_recall_zero_is_best_precision_over_all_ranks():
    values = iprec_at_recall(MIXED, [0.0])
    best = max(precision_at(MIXED, [k])[0] for k in range(1, MIXED.num_ret + 1))
    assert values[0] == pytest.approx(best)


def test_eleven_point_average_is_mean_of_interpolated_values():
    values = iprec_at_recall(MIXED, ELEVEN)
    assert eleven_point_average(MIXED, ELEVEN) == pytest.approx(sum(values) / len(values))


def test_eleven_point_average_requires_recall_points():
    with pytest.raises(ValueError):
        eleven_point_average(MIXED, [])


def test_unreachable_recall_points_score_zero_in_average():
    values = iprec_at_recall(MIXED, [1.0])
    assert values == [0.0]


def test_rprec_mult_avgjg_single_group_matches_rprec_mult():
    result = rprec_mult_avgjg([MIXED], MULTIPLES)
    assert result == pytest.approx(rprec_mult(MIXED, MULTIPLES))


def test_rprec_mult_avgjg_identical_groups_match_single():
    single = rprec_mult_avgjg([MIXED], MULTIPLES)
    double = rprec_mult_avgjg([MIXED, MIXED], MULTIPLES)
    assert double == pytest.approx(single)


def test_rprec_mult_avgjg_averages_groups():
    other = make_rr([1, 1, 0, 0, 1, 0], 4)
    combined = rprec_mult_avgjg([MIXED, other], MULTIPLES)
    first = rprec_mult_avgjg([MIXED], MULTIPLES)
    second = rprec_mult_avgjg([other], MULTIPLES)
    assert combined == pytest.approx([(a + b) / 2 for a, b in zip(first, second)])


def test_rprec_mult_avgjg_beyond_ranking_fills_with_nonrelevant():
    rr = make_rr([1, 0, 1], 3)
    result = rprec_mult_avgjg([rr], [2.0])
    assert result == pytest.approx(precision_at(rr, [6]))