"""
Ranker
Ordina i match per score e li divide in qualificati/scartati rispetto alla soglia.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

from resume_screener.models.match_result import CandidateMatch


@dataclass
class RankingResult:
    """Batch ordinato per score decrescente, più le due partizioni."""
    ranked: List[CandidateMatch] = field(default_factory=list)
    qualified: List[CandidateMatch] = field(default_factory=list)
    rejected: List[CandidateMatch] = field(default_factory=list)
    threshold: int = 0


def rank(matches: Sequence[CandidateMatch], threshold: int) -> RankingResult:
    # sorted() è stabile: a parità di score resta l'ordine di input
    ranked = sorted(matches or [], key=lambda m: m.match_score, reverse=True)
    return RankingResult(
        ranked=ranked,
        qualified=[m for m in ranked if m.match_score >= threshold],
        rejected=[m for m in ranked if m.match_score < threshold],
        threshold=threshold,
    )
