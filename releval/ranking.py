"""Relevance information for one ranked list, and the count measures over it."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class RankedRels:
    """Relevance of each retrieved document for one topic, in rank order.

    ``results_rel_list`` holds the relevance value of the document at each
    rank (negative values mark documents outside the pool or unjudged).
    ``rel_levels`` holds, for each relevance level 0, 1, 2, ..., the number
    of judged documents at that level.
    """

    results_rel_list: tuple[int, ...] = ()
    rel_levels: tuple[int, ...] = ()
    num_rel: int = 0
    num_rel_ret: int = 0
    num_nonpool: int = 0
    num_unjudged_in_pool: int = 0
    _frozen: bool = field(default=True, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "results_rel_list", tuple(self.results_rel_list))
        object.__setattr__(self, "rel_levels", tuple(self.rel_levels))

    @property
    def num_ret(self) -> int:
        """Number of retrieved documents."""
        return len(self.results_rel_list)

    @property
    def num_rel_levels(self) -> int:
        """Number of relevance levels that occur in the judgments."""
        return len(self.rel_levels)


def num_ret(rr: RankedRels) -> int:
    """Number of documents retrieved for the topic."""
    return rr.num_ret


def num_rel(rr: RankedRels) -> int:
    """Number of relevant documents for the topic."""
    return rr.num_rel


def num_rel_ret(rr: RankedRels) -> int:
    """Number of relevant documents retrieved for the topic."""
    return rr.num_rel_ret


def num_nonrel_judged_ret(rr: RankedRels) -> int:
    """Number of judged non-relevant documents retrieved for the topic."""
    return rr.num_ret - rr.num_nonpool - rr.num_unjudged_in_pool - rr.num_rel_ret


def num_q(rr: RankedRels) -> int:
    """Each evaluated topic counts once.

    Raises TypeError if ``rr`` is not the relevance information of a topic.
    """
    if not isinstance(rr, RankedRels):
        raise TypeError(f"expected RankedRels, got {type(rr).__name__}")
    return 1


def average_num_q(num_queries: int, num_qrels_topics: int, average_complete: bool) -> int:
    """Number of topics averaged over.

    When averaging over the complete set of judged topics, the number of
    topics in the judgments is used instead of the number evaluated.
    """
    return num_qrels_topics if average_complete else num_queries


def average_num_rel(topic_rel_values: Iterable[Iterable[int]]) -> int:
    """Total number of relevant documents over all judged topics.

    ``topic_rel_values`` yields, for every topic in the judgments, the
    relevance values of its judged documents (judgments from several groups
    may simply be concatenated). A value above zero counts as relevant.
    """
    return sum(1 for values in topic_rel_values for rel in values if rel > 0)