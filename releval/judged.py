"""Measures that use only judged documents: bpref and inferred AP."""

from __future__ import annotations

import math

from .average_precision import MIN_GEO_MEAN
from .ranking import RankedRels

RELVALUE_NONPOOL = -1
"""Relevance value of a retrieved document that is outside the judgment pool."""

RELVALUE_UNJUDGED = -2
"""Relevance value of a retrieved document in the pool that was not judged."""

INFAP_EPSILON = 0.00001
"""Smoothing constant used by inferred AP."""


def bpref(rr: RankedRels, relevance_level: int = 1) -> float:
    """Binary preference: fraction of top-R non-relevant docs ranked below each relevant doc."""
    num_nonrel = sum(rr.rel_levels[:relevance_level])
    nonrel_so_far = 0
    total = 0.0
    for rel in rr.results_rel_list:
        if rel in (RELVALUE_NONPOOL, RELVALUE_UNJUDGED):
            continue
        if 0 <= rel < relevance_level:
            nonrel_so_far += 1
        elif nonrel_so_far > 0:
            total += 1.0 - (
                min(nonrel_so_far, rr.num_rel) / min(num_nonrel, rr.num_rel)
            )
        else:
            total += 1.0
    if rr.num_rel:
        total /= rr.num_rel
    return total


def log_bpref(rr: RankedRels, relevance_level: int = 1) -> float:
    """Natural log of bpref, floored at MIN_GEO_MEAN, for geometric averaging."""
    return math.log(max(bpref(rr, relevance_level), MIN_GEO_MEAN))


def inferred_ap(
    rr: RankedRels, relevance_level: int = 1, epsilon: float = INFAP_EPSILON
) -> float:
    """Inferred average precision for a sampled judgment pool.

    Documents outside the pool count as non-relevant; documents in the pool
    but unjudged are assumed relevant in the proportion of the judged ones.
    """
    nonrel_so_far = 0
    rel_so_far = 0
    pool_unjudged_so_far = 0
    inf_ap = 0.0
    for rank, rel in enumerate(rr.results_rel_list):
        if rel == RELVALUE_NONPOOL:
            continue
        if rel == RELVALUE_UNJUDGED:
            pool_unjudged_so_far += 1
            continue
        if 0 <= rel < relevance_level:
            nonrel_so_far += 1
            continue
        rel_so_far += 1
        if rank == 0:
            inf_ap += 1.0
        else:
            fj = float(rank)
            above = rel_so_far - 1 + nonrel_so_far + pool_unjudged_so_far
            inf_ap += 1.0 / (fj + 1.0) + (fj / (fj + 1.0)) * (above / fj) * (
                (rel_so_far - 1 + epsilon)
                / (rel_so_far - 1 + nonrel_so_far + 2 * epsilon)
            )
    if rr.num_rel:
        inf_ap /= rr.num_rel
    return inf_ap