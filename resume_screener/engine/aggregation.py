"""
Aggregator
Statistiche sul batch di match: frequenza delle skill, distribuzione degli
score, media e sintesi per la dashboard. Nessuna funzione modifica il batch.
"""

from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from resume_screener.models.analytics import BatchSummary, ScoreBucket, SkillFrequency
from resume_screener.models.match_result import CandidateMatch
from resume_screener.services.normalizer import round_half_up

# (label, lower incluso, upper escluso) dal bucket più alto al più basso.
# Il bucket più alto include anche 100.
SCORE_BUCKETS: Tuple[Tuple[str, Optional[int], Optional[int]], ...] = (
    ("90-100%", 90, 100),
    ("80-89%", 80, 90),
    ("70-79%", 70, 80),
    ("60-69%", 60, 70),
    ("Below 60%", None, 60),
)
# Bordi interni per np.digitize: <60 -> 0, [60,70) -> 1, ..., >=90 -> 4
_BUCKET_EDGES = np.array([60, 70, 80, 90])

TOP_PERFORMER_SCORE = 90
STRONG_POOL_RATIO = 0.3

STRONG_POOL_INSIGHT = "High quality candidate pool with strong matches"
WEAK_POOL_INSIGHT = "Consider expanding search criteria or reviewing job requirements"


def skill_frequency(matches: Sequence[CandidateMatch], limit: int = 10) -> List[SkillFrequency]:
    """
    Conta ogni skill elencata dai candidati (non solo quelle richieste dal job).
    Ordine: count decrescente, poi nome skill alfabetico.
    """
    total = len(matches or [])
    if total == 0:
        return []

    counts: Dict[str, int] = {}
    for match in matches:
        for skill in match.skills:
            counts[skill] = counts.get(skill, 0) + 1

    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [
        SkillFrequency(
            skill=skill,
            count=count,
            percentage=round_half_up(count / total * 100),
        )
        for skill, count in ordered[:max(limit, 0)]
    ]


def score_histogram(matches: Sequence[CandidateMatch]) -> List[ScoreBucket]:
    """Cinque bucket fissi che partizionano tutto il dominio degli score."""
    scores = np.array([m.match_score for m in matches or []], dtype=int)
    # bincount è indicizzato dal bucket più basso; SCORE_BUCKETS parte dal più alto
    counts = np.bincount(np.digitize(scores, _BUCKET_EDGES), minlength=len(SCORE_BUCKETS))
    return [
        ScoreBucket(label=label, lower=lower, upper=upper, count=int(count))
        for (label, lower, upper), count in zip(SCORE_BUCKETS, counts[::-1])
    ]


def average_score(matches: Sequence[CandidateMatch]) -> int:
    if not matches:
        return 0
    return round_half_up(sum(m.match_score for m in matches) / len(matches))


def summarize(
    matches: Sequence[CandidateMatch],
    threshold: int,
    top_skills_limit: int = 10,
) -> BatchSummary:
    """Riepilogo del batch come mostrato nella dashboard dei risultati."""
    total = len(matches or [])
    qualified = sum(1 for m in matches or [] if m.match_score >= threshold)
    strong_pool = qualified > total * STRONG_POOL_RATIO

    return BatchSummary(
        total_candidates=total,
        qualified_count=qualified,
        rejected_count=total - qualified,
        average_score=average_score(matches),
        top_performers=sum(1 for m in matches or [] if m.match_score >= TOP_PERFORMER_SCORE),
        qualification_rate=(qualified / total * 100) if total > 0 else 0.0,
        pool_quality="strong" if strong_pool else "weak",
        insight=STRONG_POOL_INSIGHT if strong_pool else WEAK_POOL_INSIGHT,
        score_histogram=score_histogram(matches),
        top_skills=skill_frequency(matches, limit=top_skills_limit),
    )
