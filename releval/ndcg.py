"""Normalized discounted cumulative gain, whole ranking and at cutoffs."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from itertools import accumulate, repeat, takewhile

from .ranking import RankedRels

GainParams = Mapping[object, float] | Iterable[tuple[object, float]] | None


@dataclass(frozen=True)
class RelGain:
    """A relevance level, its gain and how many judged docs are at it."""

    rel_level: int
    gain: float
    num_at_level: int = 0


@dataclass(frozen=True)
class Gains:
    """Relevance levels with their gains, sorted by increasing gain."""

    rel_gains: tuple[RelGain, ...] = ()

    @property
    def total_num_at_levels(self) -> int:
        """Total number of judged documents over all levels."""
        return sum(rg.num_at_level for rg in self.rel_gains)

    def gain(self, rel_level: int) -> float:
        """Gain for a relevance level; unknown levels have gain 0."""
        for rg in self.rel_gains:
            if rg.rel_level == rel_level:
                return rg.gain
        return 0.0

    def ideal_gains(self) -> Iterator[float]:
        """Gains of the ideal ranking: highest gain first, positive gains only."""
        sequence = (
            g
            for rg in reversed(self.rel_gains)
            for g in repeat(rg.gain, rg.num_at_level)
        )
        return takewhile(lambda g: g > 0.0, sequence)


def _param_items(gain_params: GainParams) -> list[tuple[object, float]]:
    if gain_params is None:
        return []
    if isinstance(gain_params, Mapping):
        return list(gain_params.items())
    return list(gain_params)


def setup_gains(rr: RankedRels, gain_params: GainParams = None) -> Gains:
    """Combine user-given 'rel_level=gain' pairs with the default gains.

    A level that is not given a gain keeps its own value as gain.
    """
    entries = [
        [int(name), float(value), 0] for name, value in _param_items(gain_params)
    ]
    for level, count in enumerate(rr.rel_levels):
        match = next((entry for entry in entries if entry[0] == level), None)
        if match is not None:
            match[2] = count
        else:
            entries.append([level, float(level), count])
    rel_gains = sorted(
        (RelGain(rel_level=lvl, gain=g, num_at_level=n) for lvl, g, n in entries),
        key=lambda rg: rg.gain,
    )
    return Gains(tuple(rel_gains))


def _discount(index: int) -> float:
    """Discount for the document at 0-based position index (rank index + 1)."""
    return math.log2(index + 2)


def ndcg(rr: RankedRels, gain_params: GainParams = None) -> float:
    """Normalized discounted cumulative gain over the whole ranking."""
    gains = setup_gains(rr, gain_params)
    results_dcg = 0.0
    for index, rel in enumerate(rr.results_rel_list):
        gain = gains.gain(rel)
        if gain != 0:
            results_dcg += gain / _discount(index)
    ideal_dcg = sum(g / _discount(index) for index, g in enumerate(gains.ideal_gains()))
    return results_dcg / ideal_dcg if ideal_dcg > 0.0 else 0.0


def _ideal_levels(rr: RankedRels) -> Iterator[int]:
    for level in range(len(rr.rel_levels) - 1, 0, -1):
        yield from repeat(level, rr.rel_levels[level])


def ndcg_cut(rr: RankedRels, cutoffs: Sequence[int]) -> list[float]:
    """nDCG after each cutoff number of documents, with relevance values as gains.

    Where the ideal ranking has no gain the unnormalized DCG is returned.
    """
    cutoffs = list(cutoffs)
    if any(cutoff <= 0 for cutoff in cutoffs):
        raise ValueError("cutoffs must be positive")
    if len(set(cutoffs)) != len(cutoffs):
        raise ValueError("cutoffs must not contain duplicates")

    results_prefix = [
        0.0,
        *accumulate(
            rel / _discount(index) if rel > 0 else 0.0
            for index, rel in enumerate(rr.results_rel_list)
        ),
    ]
    ideal_prefix = [
        0.0,
        *accumulate(level / _discount(index) for index, level in enumerate(_ideal_levels(rr))),
    ]

    values = []
    for cutoff in cutoffs:
        dcg = results_prefix[min(cutoff, len(results_prefix) - 1)]
        ideal = ideal_prefix[min(cutoff, len(ideal_prefix) - 1)]
        values.append(dcg / ideal if ideal > 0.0 else dcg)
    return values