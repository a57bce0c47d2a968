"""Per-topic retrieval evaluation measures for ranked result lists."""

__version__ = "0.1.0"

__all__ = [
    "average_precision",
    "graded",
    "interpolated",
    "judged",
    "ndcg",
    "ndcg_rel",
    "precision",
    "prefs",
    "prefs_pair",
    "prefs_rnonrel",
    "ranking",
]