"""Preference judgments: per-group counts and the measures built on them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class EquivalenceClass:
    """Documents judged equally good, given by their ranks among judged docs."""

    rel_level: float = 0.0
    docid_ranks: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "docid_ranks", tuple(self.docid_ranks))

    @property
    def num_in_ec(self) -> int:
        """Number of documents in the class."""
        return len(self.docid_ranks)


@dataclass(frozen=True)
class JudgmentGroup:
    """Preference counts for one judgment group (one user's judgments).

    Preferences are given either as equivalence classes ``ecs`` (sorted by
    decreasing relevance, the last holding the non-relevant documents) or as
    a matrix ``prefs_array`` over judged documents, where a true entry at
    [i][j] means doc i is preferred to doc j; ``rel_array`` then holds each
    judged document's relevance.
    """

    num_prefs_fulfilled_ret: int = 0
    num_prefs_possible_ret: int = 0
    num_prefs_fulfilled_imp: int = 0
    num_prefs_possible_imp: int = 0
    num_prefs_possible_notoccur: int = 0
    num_nonrel: int = 0
    num_nonrel_ret: int = 0
    num_rel: int = 0
    num_rel_ret: int = 0
    ecs: tuple[EquivalenceClass, ...] = ()
    prefs_array: Sequence[Sequence[int]] = ()
    rel_array: Sequence[float] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "ecs", tuple(self.ecs))

    @property
    def num_ecs(self) -> int:
        """Number of equivalence classes."""
        return len(self.ecs)

    @property
    def num_judged(self) -> int:
        """Number of judged documents covered by the preference matrix."""
        return len(self.prefs_array)

    @property
    def fulfilled(self) -> int:
        """Preferences fulfilled, including implied ones."""
        return self.num_prefs_fulfilled_ret + self.num_prefs_fulfilled_imp

    @property
    def possible(self) -> int:
        """All preferences, whether or not their documents were retrieved."""
        return (
            self.num_prefs_possible_ret
            + self.num_prefs_possible_imp
            + self.num_prefs_possible_notoccur
        )


@dataclass(frozen=True)
class ResultsPrefs:
    """Preference counts of one ranked list against all judgment groups.

    ``pref_counts[i][j]`` counts the groups preferring judged doc i to j;
    the first ``num_judged_ret`` judged docs are those retrieved.
    """

    jgs: tuple[JudgmentGroup, ...] = ()
    num_judged: int = 0
    num_judged_ret: int = 0
    pref_counts: Sequence[Sequence[int]] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "jgs", tuple(self.jgs))

    @property
    def num_jgs(self) -> int:
        """Number of judgment groups."""
        return len(self.jgs)


def num_prefs_ful(rp: ResultsPrefs) -> int:
    """Preferences fulfilled, counting implied ones, over all groups."""
    return sum(jg.fulfilled for jg in rp.jgs)


def num_prefs_ful_ret(rp: ResultsPrefs) -> int:
    """Preferences fulfilled with both documents retrieved."""
    return sum(jg.num_prefs_fulfilled_ret for jg in rp.jgs)


def num_prefs_poss(rp: ResultsPrefs) -> int:
    """Preferences possible, whether or not documents were retrieved."""
    return sum(jg.possible for jg in rp.jgs)


def _average_ratio(rp: ResultsPrefs, pairs) -> float:
    total = sum(ful / poss for ful, poss in pairs if poss)
    return total / rp.num_jgs if total > 0.0 else 0.0


def prefs_avgjg(rp: ResultsPrefs) -> float:
    """Fulfilled over possible preferences per group, averaged over groups.

    A preference whose documents were both not retrieved counts as failed.
    """
    return _average_ratio(rp, ((jg.fulfilled, jg.possible) for jg in rp.jgs))


def prefs_avgjg_imp(rp: ResultsPrefs) -> float:
    """As prefs_avgjg, but ignoring pairs where neither document was retrieved."""
    return _average_ratio(
        rp,
        (
            (jg.fulfilled, jg.num_prefs_possible_ret + jg.num_prefs_possible_imp)
            for jg in rp.jgs
        ),
    )


def prefs_avgjg_ret(rp: ResultsPrefs) -> float:
    """As prefs_avgjg, counting only pairs with both documents retrieved."""
    return _average_ratio(
        rp,
        ((jg.num_prefs_fulfilled_ret, jg.num_prefs_possible_ret) for jg in rp.jgs),
    )