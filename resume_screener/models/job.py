from pydantic import BaseModel, Field, field_validator
from typing import List

from resume_screener.services.normalizer import dedupe_skills


class JobRequirements(BaseModel):
    """Requisiti di una posizione, come raccolti dal form del recruiter."""
    title: str = ""
    description: str = ""
    required_skills: List[str] = []
    min_experience_years: int = 0             # <= 0 significa nessun requisito
    education: str = ""                       # solo informativo, non entra nello score
    match_threshold: int = Field(default=70, ge=0, le=100)

    @field_validator("required_skills", mode="before")
    @classmethod
    def _collapse_duplicates(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        for skill in value:
            if not isinstance(skill, str):
                raise ValueError(f"skill non valida: {skill!r} (attesa una stringa)")
        return dedupe_skills(value)
