# releval

Measures for scoring a ranked retrieval run against relevance judgments,
one topic at a time. You describe a topic's ranked list as a `RankedRels`
(or, for preference judgments, a `ResultsPrefs`), call a measure, and get
back that topic's score. The package uses only the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The input for one topic

`releval.ranking.RankedRels` is a frozen dataclass with these fields:

- `results_rel_list`: the relevance value of each retrieved document, in
  rank order. Negative values mark documents without a judgment; the
  measures in `releval.judged` use `RELVALUE_NONPOOL` (-1) for documents
  outside the judgment pool and `RELVALUE_UNJUDGED` (-2) for pooled but
  unjudged ones.
- `rel_levels`: for relevance level 0, 1, 2, ..., the number of judged
  documents at that level.
- `num_rel`, `num_rel_ret`, `num_nonpool`, `num_unjudged_in_pool`: counts
  you supply alongside the list.

`num_ret` and `num_rel_levels` are properties derived from the two
sequences.

```python
from releval.ranking import RankedRels
from releval.precision import precision_at, r_precision
from releval.average_precision import average_precision
from releval.ndcg import ndcg

rr = RankedRels(
    results_rel_list=[1, 0, 2, 0],
    rel_levels=[10, 3, 1],
    num_rel=4,
    num_rel_ret=2,
)

p = precision_at(rr, [5, 10, 20], relevance_level=1)
rprec = r_precision(rr, relevance_level=1)
ap = average_precision(rr, relevance_level=1)
score = ndcg(rr, {1: 3.5, 2: 9.0})
```

A document counts as relevant when its relevance value is at least
`relevance_level` (default 1). Functions that return one value per cutoff
or recall point return a list in the order the cutoffs were given.

## The modules

`releval.ranking`
: `RankedRels` and the counting measures `num_ret`, `num_rel`,
  `num_rel_ret`, `num_nonrel_judged_ret` and `num_q` (always 1; raises
  `TypeError` for anything that is not a `RankedRels`). For summaries over
  topics: `average_num_q(num_queries, num_qrels_topics, average_complete)`
  and `average_num_rel(topic_rel_values)`, which counts every judged value
  above zero.

`releval.precision`
: `precision_at` (precision at document cutoffs; ranks past the end of the
  list count as non-relevant), `precision_at_avgjg` (the same averaged over
  a sequence of `RankedRels`, one per judgment group), `r_precision` and
  `rprec_mult` (precision at multiples of R). `precision_at` and
  `precision_at_avgjg` raise `ValueError` for cutoffs that are not positive
  or that repeat.

`releval.interpolated`
: `iprec_at_recall` (interpolated precision at recall points),
  `eleven_point_average` (their mean; raises `ValueError` when no points
  are given) and `rprec_mult_avgjg`.

`releval.average_precision`
: `average_precision`, `average_precision_avgjg`, `map_at_cutoffs` (raises
  `ValueError` for bad cutoffs), `log_average_precision` (the natural log
  of average precision floored at `MIN_GEO_MEAN`, for geometric means) and
  `binary_g`.

`releval.judged`
: `bpref`, `log_bpref` and `inferred_ap` (smoothing constant
  `INFAP_EPSILON` by default).

`releval.ndcg`
: `ndcg` and `ndcg_cut`. Gains for `ndcg` default to the relevance level;
  a mapping or iterable of `(rel_level, gain)` pairs overrides them.
  `setup_gains` builds the resulting `Gains` table of `RelGain` entries,
  sorted by gain; `Gains.gain(rel_level)` gives 0 for unknown levels.
  `ndcg_cut` uses the relevance values themselves as gains, raises
  `ValueError` for bad cutoffs, and returns the plain DCG at a cutoff where
  the ideal DCG is zero.

`releval.graded`
: `ndcg_p` (rank discount log2(r - 1), first two ranks undiscounted),
  `g_measure` and `rndcg` (nDCG averaged where the ideal gain level
  changes). Where these divide by zero they return `inf` or `nan` rather
  than raising.

`releval.ndcg_rel`
: `ndcg_rel`, nDCG averaged over the relevant documents.

`releval.prefs`
: The preference inputs `EquivalenceClass`, `JudgmentGroup` and
  `ResultsPrefs`, and the measures `num_prefs_ful`, `num_prefs_ful_ret`,
  `num_prefs_poss`, `prefs_avgjg`, `prefs_avgjg_imp` and `prefs_avgjg_ret`.

`releval.prefs_pair`
: `prefs_pair`, `prefs_pair_imp` and `prefs_pair_ret`, averaging the
  preference ratio over document pairs from `ResultsPrefs.pref_counts`.

`releval.prefs_rnonrel`
: `prefs_avgjg_rnonrel` and `prefs_avgjg_rnonrel_ret`, which treat each
  judgment group as having as many non-relevant documents as relevant ones.

## What the package does not do

It has no command-line program and reads no files: it does not parse
judgment or run files, does not build `RankedRels` or `ResultsPrefs` from
them, and does not work out the preference counts in a `JudgmentGroup`.
It does not average scores over topics or print reports; collecting the
per-topic values and combining them is up to the caller.