"""
Screening Orchestrator
Coordina scoring, ranking, statistiche ed export per un batch di CV.

Responsabilità:
- Calcola un CandidateMatch per ogni CV estratto
- Ordina e classifica il batch rispetto alla soglia del job
- Produce le statistiche e il CSV da scaricare
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from resume_screener.engine.aggregation import summarize
from resume_screener.engine.export import export_filename, to_csv
from resume_screener.engine.ranking import RankingResult, rank
from resume_screener.engine.scoring import ScoreCalculator
from resume_screener.models.analytics import BatchSummary
from resume_screener.models.job import JobRequirements
from resume_screener.models.match_result import CandidateMatch
from resume_screener.models.resume import ExtractedResume
from resume_screener.services.logging_utils import log_section, make_logger


@dataclass
class ScreeningResult:
    """Risultato completo di una valutazione (un job contro il batch corrente)."""
    job: JobRequirements
    matches: List[CandidateMatch] = field(default_factory=list)
    ranking: RankingResult = field(default_factory=RankingResult)
    summary: BatchSummary = field(default_factory=BatchSummary)

    @property
    def threshold(self) -> int:
        return self.job.match_threshold

    @property
    def qualified(self) -> List[CandidateMatch]:
        return self.ranking.qualified

    @property
    def rejected(self) -> List[CandidateMatch]:
        return self.ranking.rejected

    @property
    def export_filename(self) -> str:
        return export_filename(self.job.title)

    def to_csv(self, ranked: bool = True) -> str:
        """CSV del batch, in ordine di ranking o nell'ordine di input."""
        matches = self.ranking.ranked if ranked else self.matches
        return to_csv(matches, self.threshold)


class ScreeningOrchestrator:
    """
    Orchestratore della valutazione di un batch.

    FLUSSO:
    1. ScoreCalculator: un CandidateMatch per CV (anche per CV non estratti)
    2. Ranker: ordinamento stabile e partizione qualified/rejected
    3. Aggregator: media, distribuzione score, frequenza skill
    """

    def __init__(
        self,
        score_calculator: Optional[ScoreCalculator] = None,
        top_skills_limit: int = 10,
        verbose: bool = False
    ):
        self.top_skills_limit = top_skills_limit
        self.verbose = verbose
        self._score_calculator = score_calculator
        self._log = make_logger("Orchestrator", enabled=verbose)

    @property
    def score_calculator(self) -> ScoreCalculator:
        if self._score_calculator is None:
            self._score_calculator = ScoreCalculator(verbose=self.verbose)
        return self._score_calculator

    def run(
        self,
        resumes: Sequence[Optional[ExtractedResume]],
        job: JobRequirements,
    ) -> ScreeningResult:
        log_section(self._log, f"SCREENING: {job.title or 'Job'} ({len(resumes or [])} CV)", width=70, char="=")

        matches = self.score_calculator.score_batch(resumes, job)
        failed = sum(1 for r in resumes or [] if r is None or not r.extraction_ok)
        if failed:
            self._log(f"{failed} CV senza dati estratti (score 0)")

        ranking = rank(matches, job.match_threshold)
        self._log(
            f"Qualified: {len(ranking.qualified)}  Rejected: {len(ranking.rejected)}  "
            f"(soglia {job.match_threshold}%)"
        )

        summary = summarize(matches, job.match_threshold, top_skills_limit=self.top_skills_limit)
        self._log(f"Score medio: {summary.average_score}%  Top performer: {summary.top_performers}")

        return ScreeningResult(job=job, matches=matches, ranking=ranking, summary=summary)


def screen_candidates(
    resumes: Sequence[Optional[ExtractedResume]],
    job: JobRequirements,
    verbose: bool = False,
) -> ScreeningResult:
    """Funzione di convenienza per valutare un batch in una sola chiamata."""
    orchestrator = ScreeningOrchestrator(verbose=verbose)
    return orchestrator.run(resumes, job)
