from pydantic import BaseModel
from typing import List, Optional


class SkillFrequency(BaseModel):
    skill: str
    count: int
    percentage: int  # % di candidati del batch che la elencano


class ScoreBucket(BaseModel):
    label: str                      # es. "80-89%"
    lower: Optional[int] = None     # incluso; None = illimitato
    upper: Optional[int] = None     # escluso, tranne il bucket più alto (incluso)
    count: int = 0


class BatchSummary(BaseModel):
    total_candidates: int = 0
    qualified_count: int = 0
    rejected_count: int = 0
    average_score: int = 0
    top_performers: int = 0         # score >= 90
    qualification_rate: float = 0.0
    pool_quality: str = "weak"      # "strong" | "weak"
    insight: str = ""
    score_histogram: List[ScoreBucket] = []
    top_skills: List[SkillFrequency] = []
