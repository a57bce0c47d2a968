"""Precision at document cutoffs and at multiples of the number of relevant docs."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate

from .ranking import RankedRels


def _check_cutoffs(cutoffs: Sequence[int]) -> None:
    if any(cutoff <= 0 for cutoff in cutoffs):
        raise ValueError("cutoffs must be positive")
    if len(set(cutoffs)) != len(cutoffs):
        raise ValueError("cutoffs must not contain duplicates")


def _rel_prefix(rr: RankedRels, relevance_level: int) -> list[int]:
    """Number of relevant documents among the first k, for k = 0..num_ret."""
    flags = (1 if rel >= relevance_level else 0 for rel in rr.results_rel_list)
    return [0, *accumulate(flags)]


def _precision_values(
    rr: RankedRels, cutoffs: Sequence[int], relevance_level: int
) -> list[float]:
    prefix = _rel_prefix(rr, relevance_level)
    last = len(prefix) - 1
    return [prefix[min(cutoff, last)] / cutoff for cutoff in cutoffs]


def precision_at(
    rr: RankedRels, cutoffs: Sequence[int], relevance_level: int = 1
) -> list[float]:
    """Precision after each cutoff number of retrieved documents.

    Missing documents beyond the end of the ranking count as non-relevant.
    """
    cutoffs = list(cutoffs)
    _check_cutoffs(cutoffs)
    return _precision_values(rr, cutoffs, relevance_level)


def precision_at_avgjg(
    jgs: Sequence[RankedRels], cutoffs: Sequence[int], relevance_level: int = 1
) -> list[float]:
    """Precision at cutoffs, averaged over judgment groups."""
    cutoffs = list(cutoffs)
    _check_cutoffs(cutoffs)
    totals = [0.0] * len(cutoffs)
    for jg in jgs:
        for index, value in enumerate(_precision_values(jg, cutoffs, relevance_level)):
            totals[index] += value
    if len(jgs) > 1:
        totals = [total / len(jgs) for total in totals]
    return totals


def r_precision(rr: RankedRels, relevance_level: int = 1) -> float:
    """Precision after R documents, R being the number of relevant documents."""
    num_to_look_at = min(rr.num_ret, rr.num_rel)
    if num_to_look_at == 0:
        return 0.0
    rel_so_far = sum(
        1 for rel in rr.results_rel_list[:num_to_look_at] if rel >= relevance_level
    )
    return rel_so_far / rr.num_rel


def rprec_mult(
    rr: RankedRels, multiples: Sequence[float], relevance_level: int = 1
) -> list[float]:
    """Precision at the given multiples of the number of relevant documents."""
    prefix = _rel_prefix(rr, relevance_level)
    values = []
    for multiple in multiples:
        cutoff = int(multiple * rr.num_rel + 0.9)
        if cutoff > rr.num_ret:
            values.append(rr.num_rel_ret / cutoff)
        elif cutoff <= 0:
            values.append(0.0)
        else:
            values.append(prefix[cutoff] / cutoff)
    return values