"""nDCG averaged over the relevant documents of a topic."""

from __future__ import annotations

import math

from .ndcg import GainParams, setup_gains
from .ranking import RankedRels


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division with IEEE results for a zero denominator."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


def ndcg_rel(rr: RankedRels, gain_params: GainParams = None) -> float:
    """nDCG taken at each relevant document and averaged over them.

    A document is relevant when its gain is positive. A relevant document
    that was not retrieved scores the DCG at the end of the ranking divided
    by the full ideal DCG. Returns 0 when the sum of the scores is not
    positive.
    """
    gains = setup_gains(rr, gain_params)
    ideal = list(gains.ideal_gains())

    results_dcg = 0.0
    ideal_dcg = 0.0
    total = 0.0
    num_rel_ret = 0

    for index, rel in enumerate(rr.results_rel_list):
        discount = math.log2(index + 2)
        results_gain = gains.gain(rel)
        if results_gain != 0:
            results_dcg += results_gain / discount
        if index < len(ideal):
            ideal_dcg += ideal[index] / discount
        if results_gain > 0:
            total += _divide(results_dcg, ideal_dcg)
            num_rel_ret += 1

    for index in range(rr.num_ret, len(ideal)):
        ideal_dcg += ideal[index] / math.log2(index + 2)

    num_rel = len(ideal)
    total += _divide(float(num_rel - num_rel_ret) * results_dcg, ideal_dcg)
    if total > 0.0:
        return _divide(total, float(num_rel))
    return 0.0