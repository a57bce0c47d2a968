import math

import pytest

from releval.ndcg_rel import ndcg_rel
from releval.ranking import RankedRels


def test_perfect_binary_ranking_scores_one():
    rr = RankedRels(results_rel_list=(1, 1, 0), rel_levels=(1, 2), num_rel=2, num_rel_ret=2)
    assert ndcg_rel(rr) == pytest.approx(1.0)


def test_perfect_graded_ranking_scores_one():
    rr = RankedRels(results_rel_list=(2, 1, 0), rel_levels=(1, 1, 1), num_rel=2, num_rel_ret=2)
    assert ndcg_rel(rr) == pytest.approx(1.0)


def test_no_relevant_retrieved_scores_zero():
    rr = RankedRels(results_rel_list=(0, 0, 0), rel_levels=(3, 2), num_rel=2, num_rel_ret=0)
    assert ndcg_rel(rr) == 0.0


def test_empty_ranking_scores_zero():
    rr = RankedRels(results_rel_list=(), rel_levels=(0, 2), num_rel=2, num_rel_ret=0)
    assert ndcg_rel(rr) == 0.0


def test_relevant_doc_at_second_rank():
    rr = RankedRels(results_rel_list=(0, 1), rel_levels=(1, 1), num_rel=1, num_rel_ret=1)
    assert ndcg_rel(rr) == pytest.approx(1.0 / math.log2(3))


def test_unretrieved_relevant_doc_uses_final_dcg():
    rr = RankedRels(results_rel_list=(1,), rel_levels=(0, 2), num_rel=2, num_rel_ret=1)
    full_ideal = 1.0 + 1.0 / math.log2(3)
    assert ndcg_rel(rr) == pytest.approx((1.0 + 1.0 / full_ideal) / 2)


def test_worse_ranking_scores_lower():
    good = RankedRels(results_rel_list=(1, 0, 0), rel_levels=(2, 1), num_rel=1, num_rel_ret=1)
    bad = RankedRels(results_rel_list=(0, 0, 1), rel_levels=(2, 1), num_rel=1, num_rel_ret=1)
    assert ndcg_rel(bad) < ndcg_rel(good)


def test_zero_gain_override_gives_zero():
    rr = RankedRels(results_rel_list=(1,), rel_levels=(0, 1), num_rel=1, num_rel_ret=1)
    assert ndcg_rel(rr, {1: 0.0}) == 0.0


def test_gain_override_keeps_perfect_ranking_at_one():
    rr = RankedRels(results_rel_list=(2, 1), rel_levels=(0, 1, 1), num_rel=2, num_rel_ret=2)
    assert ndcg_rel(rr, {"1": 3.0, "2": 9.0}) == pytest.approx(1.0)