"""Interpolated precision at recall points and precision at multiples of R."""

from __future__ import annotations

from collections.abc import Sequence

from .ranking import RankedRels


def _interpolated_precisions(
    rr: RankedRels, recall_points: Sequence[float], relevance_level: int
) -> list[float]:
    """Interpolated precision at each recall point.

    The precision interpolated at rank X is the highest precision at any
    rank at or after X. Recall points that cannot be reached score 0.
    """
    cutoffs = [int(point * rr.num_rel + 0.9) for point in recall_points]
    values = [0.0] * len(cutoffs)

    current = len(cutoffs) - 1
    while current >= 0 and cutoffs[current] > rr.num_rel_ret:
        current -= 1

    int_precis = rr.num_rel_ret / rr.num_ret if rr.num_ret else 0.0
    rel_so_far = rr.num_rel_ret
    for rank in range(rr.num_ret, 0, -1):
        if rel_so_far <= 0:
            break
        int_precis = max(int_precis, rel_so_far / rank)
        if rr.results_rel_list[rank - 1] >= relevance_level:
            while current >= 0 and rel_so_far == cutoffs[current]:
                values[current] = int_precis
                current -= 1
            rel_so_far -= 1

    while current >= 0:
        values[current] = int_precis
        current -= 1
    return values


def iprec_at_recall(
    rr: RankedRels, recall_points: Sequence[float], relevance_level: int = 1
) -> list[float]:
    """Interpolated precision at each of the given recall points."""
    return _interpolated_precisions(rr, list(recall_points), relevance_level)


def eleven_point_average(
    rr: RankedRels, recall_points: Sequence[float], relevance_level: int = 1
) -> float:
    """Interpolated precision averaged over the given recall points."""
    recall_points = list(recall_points)
    if not recall_points:
        raise ValueError("no recall points given")
    values = _interpolated_precisions(rr, recall_points, relevance_level)
    return sum(reversed(values)) / len(recall_points)


def _rprec_mult_single(
    rr: RankedRels, multiples: Sequence[float], relevance_level: int
) -> list[float]:
    cutoffs = [int(multiple * rr.num_rel + 0.9) for multiple in multiples]
    values = [0.0] * len(cutoffs)

    current = len(cutoffs) - 1
    while current >= 0 and cutoffs[current] > rr.num_ret:
        values[current] = rr.num_rel_ret / cutoffs[current]
        current -= 1

    rel_so_far = rr.num_rel_ret
    for rank in range(rr.num_ret, 0, -1):
        if rel_so_far <= 0:
            break
        precis = rel_so_far / rank
        while current >= 0 and rank == cutoffs[current]:
            values[current] = precis
            current -= 1
        if rr.results_rel_list[rank - 1] >= relevance_level:
            rel_so_far -= 1
    return values


def rprec_mult_avgjg(
    jgs: Sequence[RankedRels], multiples: Sequence[float], relevance_level: int = 1
) -> list[float]:
    """Precision at multiples of R, averaged over judgment groups."""
    multiples = list(multiples)
    totals = [0.0] * len(multiples)
    for jg in jgs:
        for index, value in enumerate(_rprec_mult_single(jg, multiples, relevance_level)):
            totals[index] += value
    if len(jgs) > 1:
        totals = [total / len(jgs) for total in totals]
    return totals