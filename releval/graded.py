"""Graded-relevance measures: nDCG with rank-1 discounting, G and R-level nDCG."""

from __future__ import annotations

import math
import struct

from .ndcg import GainParams, Gains, setup_gains
from .ranking import RankedRels

_MIN_COST = 1.0


def _to_float32(value: float) -> float:
    """Round a double to single precision, as the ideal ndcg_p discount does."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division with IEEE results for a zero denominator."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


class _IdealCursor:
    """Walks down the gain levels of the ideal ranking one document at a time."""

    def __init__(self, gains: Gains) -> None:
        self._levels = gains.rel_gains
        self._cur = len(self._levels) - 1
        self._count = 0
        self.gain = self._levels[self._cur].gain if self._cur >= 0 else 0.0

    def advance(self) -> float:
        """Move to the next ideal document and return its gain (0 when exhausted)."""
        self._count += 1
        while self._cur >= 0 and self._count > self._levels[self._cur].num_at_level:
            self._count = 1
            self._cur -= 1
            self.gain = self._levels[self._cur].gain if self._cur >= 0 else 0.0
        return self.gain


def ndcg_p(rr: RankedRels, gain_params: GainParams = None) -> float:
    """nDCG where the document at rank r > 1 is discounted by log2(r - 1).

    The first two ranks are undiscounted. Returns 0 when no relevant
    document was retrieved.
    """
    gains = setup_gains(rr, gain_params)

    results_dcg = 0.0
    for index, rel in enumerate(rr.results_rel_list):
        gain = gains.gain(rel)
        if gain != 0:
            results_dcg += gain / math.log2(index + 1) if index > 0 else gain

    ideal_dcg = 0.0
    for index, gain in enumerate(gains.ideal_gains()):
        if index == 0:
            ideal_dcg += gain
        else:
            ideal_dcg += gain / _to_float32(math.log2(index + 1))

    if rr.num_rel_ret > 0:
        return _divide(results_dcg, ideal_dcg)
    return 0.0


def g_measure(rr: RankedRels, gain_params: GainParams = None) -> float:
    """Normalized gain G.

    A document retrieved at rank i contributes
    gain / log2(2 + ideal_cost(i) - results_gain(i)), where the ideal cost
    charges each position at least 1. The sum is normalized by the total
    ideal gain.
    """
    gains = setup_gains(rr, gain_params)
    cursor = _IdealCursor(gains)
    rels = rr.results_rel_list

    results_g = 0.0
    sum_results = 0.0
    sum_ideal = 0.0
    sum_cost = 0.0

    index = 0
    while index < len(rels) and cursor.gain > 0.0:
        results_gain = gains.gain(rels[index])
        sum_results += results_gain
        ideal_gain = cursor.advance()
        if ideal_gain > 0.0:
            sum_ideal += ideal_gain
        sum_cost += max(ideal_gain, _MIN_COST)
        if results_gain != 0:
            results_g += results_gain / math.log2(2 + sum_cost - sum_results)
        index += 1

    for rel in rels[index:]:
        results_gain = gains.gain(rel)
        sum_results += results_gain
        sum_cost += _MIN_COST
        if results_gain != 0:
            results_g += results_gain / math.log2(2 + sum_cost - sum_results)

    while cursor.gain > 0.0:
        ideal_gain = cursor.advance()
        if ideal_gain > 0.0:
            sum_ideal += ideal_gain

    return results_g / sum_ideal if sum_ideal > 0.0 else 0.0


def rndcg(rr: RankedRels, gain_params: GainParams = None) -> float:
    """nDCG averaged at the points where the ideal gain level changes.

    A final point is taken at the end of the retrieved list when it extends
    past the last positive ideal gain. Returns 0 for a topic with no
    relevant documents, and NaN when no averaging point exists.
    """
    gains = setup_gains(rr, gain_params)
    if rr.num_rel == 0:
        return 0.0

    cursor = _IdealCursor(gains)
    rels = rr.results_rel_list
    results_dcg = 0.0
    ideal_dcg = 0.0
    total = 0.0
    num_changed = 0
    old_ideal_gain = cursor.gain

    index = 0
    while index < len(rels) and cursor.gain > 0.0:
        results_gain = gains.gain(rels[index])
        ideal_gain = cursor.advance()
        if old_ideal_gain != ideal_gain:
            if ideal_dcg > 0.0:
                total += results_dcg / ideal_dcg
                num_changed += 1
            old_ideal_gain = ideal_gain
        if results_gain != 0:
            results_dcg += results_gain / math.log2(index + 2)
        if ideal_gain > 0.0:
            ideal_dcg += ideal_gain / math.log2(index + 2)
        index += 1

    if index < len(rels):
        for offset, rel in enumerate(rels[index:], start=index):
            results_gain = gains.gain(rel)
            if results_gain != 0:
                results_dcg += results_gain / math.log2(offset + 2)
        index = len(rels)
        if ideal_dcg > 0.0:
            total += results_dcg / ideal_dcg
            num_changed += 1

    while cursor.gain > 0.0:
        ideal_gain = cursor.advance()
        if old_ideal_gain != ideal_gain:
            if ideal_dcg > 0.0:
                total += results_dcg / ideal_dcg
                num_changed += 1
            old_ideal_gain = ideal_gain
        if ideal_gain > 0.0:
            ideal_dcg += ideal_gain / math.log2(index + 2)
        index += 1

    return _divide(total, float(num_changed))