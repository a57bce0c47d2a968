"""Preference measures averaged over document pairs."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations, product

from .prefs import ResultsPrefs


def _average_pairs(
    rp: ResultsPrefs,
    scored: Iterable[tuple[int, int]],
    unscored: Iterable[tuple[int, int]] = (),
) -> float:
    """Average the preference ratio over the pairs that carry any preference.

    Pairs in ``scored`` contribute counts[i][j] / (counts[i][j] + counts[j][i]);
    pairs in ``unscored`` are counted as pairs but contribute nothing.
    """
    counts = rp.pref_counts
    total = 0.0
    num_pairs = 0
    for i, j in scored:
        forward, backward = counts[i][j], counts[j][i]
        if forward or backward:
            num_pairs += 1
            total += forward / (forward + backward)
    for i, j in unscored:
        if counts[i][j] or counts[j][i]:
            num_pairs += 1
    return total / num_pairs if num_pairs else 0.0


def _retrieved_pairs(rp: ResultsPrefs) -> Iterable[tuple[int, int]]:
    return combinations(range(rp.num_judged_ret), 2)


def _implied_pairs(rp: ResultsPrefs) -> Iterable[tuple[int, int]]:
    return product(range(rp.num_judged_ret), range(rp.num_judged_ret, rp.num_judged))


def _unretrieved_pairs(rp: ResultsPrefs) -> Iterable[tuple[int, int]]:
    return combinations(range(rp.num_judged_ret, rp.num_judged), 2)


def prefs_pair(rp: ResultsPrefs) -> float:
    """Preference ratio per document pair, averaged over pairs.

    Implied preferences (only one document retrieved) count, and a pair with
    neither document retrieved counts as a failure.
    """
    return _average_pairs(
        rp,
        (*_retrieved_pairs(rp), *_implied_pairs(rp)),
        _unretrieved_pairs(rp),
    )


def prefs_pair_imp(rp: ResultsPrefs) -> float:
    """As prefs_pair, but ignoring pairs where neither document was retrieved."""
    return _average_pairs(rp, (*_retrieved_pairs(rp), *_implied_pairs(rp)))


def prefs_pair_ret(rp: ResultsPrefs) -> float:
    """As prefs_pair, counting only pairs with both documents retrieved."""
    return _average_pairs(rp, _retrieved_pairs(rp))