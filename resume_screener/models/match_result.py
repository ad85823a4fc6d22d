from pydantic import BaseModel, ConfigDict
from typing import Tuple

QUALIFIED = "Qualified"
REJECTED = "Rejected"


def score_tier(score: int) -> str:
    """Fascia qualitativa dello score (stesse soglie dei colori della dashboard)."""
    if score >= 90:
        return "excellent"
    if score >= 80:
        return "good"
    if score >= 70:
        return "fair"
    return "poor"


class CandidateMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    email: str = ""
    phone: str = ""
    skills: Tuple[str, ...] = ()
    experience: str = ""
    education: str = ""
    file_name: str = ""
    match_score: int = 0  # 0-100
    matched_skills: Tuple[str, ...] = ()
    missing_skills: Tuple[str, ...] = ()
    # Breakdown score per componente (già limitati al loro massimo)
    skill_score: float = 0.0
    experience_score: float = 0.0
    education_score: float = 0.0
    keyword_score: float = 0.0
    experience_years: int = 0

    def is_qualified(self, threshold: int) -> bool:
        return self.match_score >= threshold

    def status(self, threshold: int) -> str:
        return QUALIFIED if self.is_qualified(threshold) else REJECTED

    def score_tier(self) -> str:
        return score_tier(self.match_score)
