"""Resume screening: scoring, ranking, analytics and export of candidate matches."""

from resume_screener.models import (
    BatchSummary,
    CandidateMatch,
    ExtractedResume,
    JobRequirements,
    ScoreBucket,
    SkillFrequency,
)
from resume_screener.orchestrator import (
    ScreeningOrchestrator,
    ScreeningResult,
    screen_candidates,
)

__all__ = [
    "BatchSummary",
    "CandidateMatch",
    "ExtractedResume",
    "JobRequirements",
    "ScoreBucket",
    "SkillFrequency",
    "ScreeningOrchestrator",
    "ScreeningResult",
    "screen_candidates",
]
