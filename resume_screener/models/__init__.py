# models package
"""Data models for the resume screening system."""

from resume_screener.models.job import JobRequirements
from resume_screener.models.resume import ExtractedResume
from resume_screener.models.match_result import CandidateMatch, QUALIFIED, REJECTED, score_tier
from resume_screener.models.analytics import BatchSummary, ScoreBucket, SkillFrequency

__all__ = [
    "JobRequirements",
    "ExtractedResume",
    "CandidateMatch",
    "QUALIFIED",
    "REJECTED",
    "score_tier",
    "BatchSummary",
    "ScoreBucket",
    "SkillFrequency",
]
