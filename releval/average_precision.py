"""Average precision and related measures over a ranked list."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .ranking import RankedRels

MIN_GEO_MEAN = 0.00001
"""Lower bound applied to a score before taking its logarithm."""


def _ap_sum(rr: RankedRels, relevance_level: int) -> tuple[float, int]:
    total = 0.0
    rel_so_far = 0
    for rank, rel in enumerate(rr.results_rel_list, start=1):
        if rel >= relevance_level:
            rel_so_far += 1
            total += rel_so_far / rank
    return total, rel_so_far


def average_precision(rr: RankedRels, relevance_level: int = 1) -> float:
    """Precision after each relevant document, averaged over all relevant docs."""
    total, rel_so_far = _ap_sum(rr, relevance_level)
    return total / rr.num_rel if rel_so_far else 0.0


def average_precision_avgjg(
    jgs: Sequence[RankedRels], relevance_level: int = 1
) -> float:
    """Average precision, averaged over judgment groups."""
    value = sum(average_precision(jg, relevance_level) for jg in jgs)
    if len(jgs) > 1:
        value /= len(jgs)
    return value


def map_at_cutoffs(
    rr: RankedRels, cutoffs: Sequence[int], relevance_level: int = 1
) -> list[float]:
    """Average precision computed over the first cutoff documents only."""
    cutoffs = list(cutoffs)
    if any(cutoff <= 0 for cutoff in cutoffs):
        raise ValueError("cutoffs must be positive")
    if len(set(cutoffs)) != len(cutoffs):
        raise ValueError("cutoffs must not contain duplicates")
    if rr.num_rel == 0:
        return [0.0] * len(cutoffs)

    values: list[float] = []
    total = 0.0
    rel_so_far = 0
    for index, rel in enumerate(rr.results_rel_list):
        if len(values) < len(cutoffs) and index == cutoffs[len(values)]:
            values.append(total / rr.num_rel)
            if len(values) == len(cutoffs):
                break
        if rel >= relevance_level:
            rel_so_far += 1
            total += rel_so_far / (index + 1)
    values.extend(total / rr.num_rel for _ in range(len(cutoffs) - len(values)))
    return values


def log_average_precision(rr: RankedRels, relevance_level: int = 1) -> float:
    """Natural log of average precision, floored at MIN_GEO_MEAN.

    Averaging these values and exponentiating gives the geometric mean.
    """
    total, rel_so_far = _ap_sum(rr, relevance_level)
    if rel_so_far:
        total /= rr.num_rel
    return math.log(max(total, MIN_GEO_MEAN))


def binary_g(rr: RankedRels, relevance_level: int = 1) -> float:
    """Average over relevant docs of 1 / log2(2 + non-relevant docs ranked above)."""
    total = 0.0
    rel_so_far = 0
    for index, rel in enumerate(rr.results_rel_list):
        if rel >= relevance_level:
            rel_so_far += 1
            total += 1.0 / math.log2(3 + index - rel_so_far)
    return total / rr.num_rel if rel_so_far else 0.0