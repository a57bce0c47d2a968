"""Preference measures with the number of non-relevant documents set to R."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import takewhile

from .prefs import EquivalenceClass, JudgmentGroup, ResultsPrefs


def _ratio(ful: int, poss: int) -> float:
    """Floating-point ratio with IEEE results for a zero denominator."""
    if poss:
        return ful / poss
    if ful == 0:
        return math.nan
    return math.copysign(math.inf, ful)


def _average(rp: ResultsPrefs, ratios: Iterable[float]) -> float:
    total = sum(ratios)
    return total / rp.num_jgs if total > 0.0 else 0.0


def _recalc_ecs(
    ecs: Sequence[EquivalenceClass],
    new_nonrel_size: int,
    num_judged_ret: int,
    retrieved_only: bool,
) -> tuple[int, int]:
    """Count preferences using only the first documents of the non-relevant class."""

    def ranks(docid_ranks: Iterable[int]) -> Iterable[int]:
        if retrieved_only:
            return takewhile(lambda rank: rank < num_judged_ret, docid_ranks)
        return docid_ranks

    new_nonrel = ecs[-1].docid_ranks[:new_nonrel_size]
    ful = 0
    poss = 0

    def tally(first: Sequence[int], second: Sequence[int]) -> None:
        nonlocal ful, poss
        for r1 in ranks(first):
            for r2 in ranks(second):
                if r1 < r2 and r1 < num_judged_ret:
                    ful += 1
                else:
                    poss += 1

    for index, ec1 in enumerate(ecs):
        for ec2 in ecs[index + 1 : -1]:
            tally(ec1.docid_ranks, ec2.docid_ranks)
    for ec1 in ecs:
        tally(ec1.docid_ranks, new_nonrel)
    return ful, poss + ful


def _first_discarded_nonrel(rel_array: Sequence[float], limit: int, num_rel: int) -> int:
    """Index of the (num_rel + 1)-th non-relevant document, or limit if none."""
    seen = 0
    for index in range(limit):
        if rel_array[index] == 0.0:
            seen += 1
            if seen == num_rel + 1:
                return index
    return limit


def _kept(rel_array: Sequence[float], limit: int, first_discarded: int) -> list[int]:
    return [
        index
        for index in range(limit)
        if not (index >= first_discarded and rel_array[index] == 0.0)
    ]


def _recalc_array(jg: JudgmentGroup, num_judged_ret: int) -> tuple[int, int]:
    num_judged = jg.num_judged
    first_discarded = _first_discarded_nonrel(jg.rel_array, num_judged, jg.num_rel)
    kept = _kept(jg.rel_array, num_judged, first_discarded)
    a = jg.prefs_array
    ful = 0
    poss = 0
    for i in kept:
        for j in kept:
            if not a[i][j]:
                continue
            if i < num_judged_ret:
                if j < i:
                    poss += 1
                elif j > i:
                    ful += 1
            else:
                poss += 1
    return ful, poss + ful


def _recalc_array_ret(jg: JudgmentGroup, num_judged_ret: int) -> tuple[int, int]:
    limit = min(num_judged_ret, jg.num_judged)
    first_discarded = _first_discarded_nonrel(jg.rel_array, limit, jg.num_rel)
    kept = _kept(jg.rel_array, limit, first_discarded)
    a = jg.prefs_array
    ful = 0
    poss = 0
    for i in kept:
        for j in kept:
            if not a[i][j]:
                continue
            if j < i:
                poss += 1
            elif j > i:
                ful += 1
    return ful, poss + ful


def _rnonrel_ratio(jg: JudgmentGroup, num_judged_ret: int) -> float:
    extra = jg.num_rel - jg.num_nonrel
    if extra >= 0:
        ful = jg.fulfilled + jg.num_rel_ret * extra
        poss = jg.possible + jg.num_rel * extra
    elif jg.num_ecs > 0:
        ful, poss = _recalc_ecs(jg.ecs, jg.num_rel, num_judged_ret, False)
    else:
        ful, poss = _recalc_array(jg, num_judged_ret)
    return _ratio(ful, poss)


def _rnonrel_ret_ratio(jg: JudgmentGroup, num_judged_ret: int) -> float:
    extra = jg.num_rel_ret - jg.num_nonrel_ret
    if extra >= 0:
        ful = jg.num_prefs_fulfilled_ret + jg.num_rel_ret * extra
        poss = jg.num_prefs_possible_ret + jg.num_rel * extra
    elif jg.num_ecs > 0:
        ful, poss = _recalc_ecs(jg.ecs, jg.num_rel_ret, num_judged_ret, True)
    else:
        ful, poss = _recalc_array_ret(jg, num_judged_ret)
    return _ratio(ful, poss)


def prefs_avgjg_rnonrel(rp: ResultsPrefs) -> float:
    """prefs_avgjg with each group's non-relevant documents set to R of them.

    With fewer non-relevant than relevant documents, fulfilled preferences
    are added; with more, only the first R non-relevant documents are kept
    and the preferences recounted.
    """
    return _average(rp, (_rnonrel_ratio(jg, rp.num_judged_ret) for jg in rp.jgs))


def prefs_avgjg_rnonrel_ret(rp: ResultsPrefs) -> float:
    """As prefs_avgjg_rnonrel, counting only pairs with both documents retrieved."""
    return _average(rp, (_rnonrel_ret_ratio(jg, rp.num_judged_ret) for jg in rp.jgs))