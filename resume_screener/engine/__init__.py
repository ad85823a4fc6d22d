# engine package
"""Scoring, ranking, aggregation and export of candidate matches."""

from resume_screener.engine.scoring import ScoreCalculator, candidate_id
from resume_screener.engine.ranking import RankingResult, rank
from resume_screener.engine.aggregation import (
    SCORE_BUCKETS,
    average_score,
    score_histogram,
    skill_frequency,
    summarize,
)
from resume_screener.engine.export import export_filename, parse_csv, to_csv

__all__ = [
    "ScoreCalculator",
    "candidate_id",
    "RankingResult",
    "rank",
    "SCORE_BUCKETS",
    "average_score",
    "score_histogram",
    "skill_frequency",
    "summarize",
    "export_filename",
    "parse_csv",
    "to_csv",
]
